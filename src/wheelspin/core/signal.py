"""Single-shot completion signal."""

import asyncio
import logging
from typing import Any, Generator, Optional

logger = logging.getLogger(__name__)


class CompletionSignal:
    """An awaitable that resolves exactly once.

    Wraps an asyncio future with an explicit "already resolved" guard:
    a second resolve() is a silent no-op that returns False instead of
    raising InvalidStateError.
    """

    def __init__(self, name: str = "signal"):
        self.name = name
        self._future: Optional[asyncio.Future] = None
        self._resolved = False
        self._value: Any = None

    def _get_future(self) -> asyncio.Future:
        # Created lazily so a signal can be built outside a running loop
        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
            if self._resolved:
                self._future.set_result(self._value)
        return self._future

    @property
    def resolved(self) -> bool:
        """True once resolve() has succeeded."""
        return self._resolved

    def resolve(self, value: Any = None) -> bool:
        """Resolve the signal.

        Returns:
            True on the first call, False for every later call
        """
        if self._resolved:
            logger.debug(f"{self.name}: already resolved, ignoring")
            return False

        self._resolved = True
        self._value = value
        if self._future is not None and not self._future.done():
            self._future.set_result(value)
        return True

    async def wait(self) -> Any:
        """Suspend until resolved and return the resolved value."""
        return await self._get_future()

    def __await__(self) -> Generator[Any, None, Any]:
        return self.wait().__await__()

    def __repr__(self) -> str:
        return f"CompletionSignal({self.name!r}, resolved={self._resolved})"
