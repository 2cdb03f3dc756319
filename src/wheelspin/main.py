"""
Main entry point for WHEELSPIN.

WHEELSPIN_ENV picks the frame-loop owner: "simulator" opens a pygame
window, "headless" ticks on a timer and presses for the player.
"""

import asyncio
import logging
import sys

from wheelspin.audio.engine import AudioEngine
from wheelspin.game import Game
from wheelspin.settings import Settings, get_settings


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


async def run_simulator(settings: Settings) -> None:
    """Run the game in a pygame window."""
    from wheelspin.simulator.window import SimulatorWindow

    audio = AudioEngine()
    audio.init()
    try:
        game = Game(settings=settings, sound_player=audio)
        window = SimulatorWindow(game)
        await window.run()
    finally:
        audio.cleanup()


async def run_headless(settings: Settings) -> None:
    """Run unattended rounds without a window or sound."""
    from wheelspin.simulator.headless import HeadlessRunner

    game = Game(settings=settings)
    runner = HeadlessRunner(game)
    await runner.run(settings.headless_rounds)


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    load_dotenv()
    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("WHEELSPIN starting...")

    try:
        if settings.is_headless:
            logger.info("Running headless")
            asyncio.run(run_headless(settings))
        else:
            logger.info("Running in simulator mode")
            asyncio.run(run_simulator(settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("WHEELSPIN stopped")


if __name__ == "__main__":
    main()
