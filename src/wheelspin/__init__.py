"""
WHEELSPIN - a prize wheel bonus game.

A title screen, a weighted prize wheel, a win celebration and an
animated credit balance, sequenced on asyncio.
"""

__version__ = "0.1.0"
