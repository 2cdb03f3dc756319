"""Sound player contract used by the screens and the ledger."""

from typing import Any, Optional, Protocol


class SoundPlayer(Protocol):
    """Plays sounds by id.

    Unknown ids are silent no-ops: play() returns None and stop()
    ignores handles it does not recognise.
    """

    def play(self, sound_id: str, loop: bool = False) -> Optional[Any]: ...

    def stop(self, sound_id: str, handle: Optional[Any]) -> None: ...
