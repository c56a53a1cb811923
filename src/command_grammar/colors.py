"""
colors.py

PURPOSE: Default display colors and the per-player color order.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
Players are identified visually by position in the roster: player 0 is
always green, player 1 red, and so on, wrapping around for large games.
Renderers and logs must use the same order so a player keeps one color
everywhere.
"""

from rich.color import Color

RED = Color.from_rgb(244, 67, 54)
PINK = Color.from_rgb(233, 30, 99)
PURPLE = Color.from_rgb(156, 39, 176)
DEEP_PURPLE = Color.from_rgb(103, 58, 183)
INDIGO = Color.from_rgb(63, 81, 181)
BLUE = Color.from_rgb(33, 150, 243)
LIGHT_BLUE = Color.from_rgb(3, 169, 244)
CYAN = Color.from_rgb(0, 188, 212)
TEAL = Color.from_rgb(0, 150, 136)
GREEN = Color.from_rgb(76, 175, 80)
LIGHT_GREEN = Color.from_rgb(139, 195, 74)
LIME = Color.from_rgb(205, 220, 57)
YELLOW = Color.from_rgb(255, 235, 59)
AMBER = Color.from_rgb(255, 193, 7)
ORANGE = Color.from_rgb(255, 152, 0)
DEEP_ORANGE = Color.from_rgb(255, 87, 34)
BROWN = Color.from_rgb(121, 85, 72)
GREY = Color.from_rgb(158, 158, 158)
BLUE_GREY = Color.from_rgb(96, 125, 139)
WHITE = Color.from_rgb(255, 255, 255)
BLACK = Color.from_rgb(0, 0, 0)

PLAYER_COLORS: tuple[Color, ...] = (
    GREEN,
    RED,
    BLUE,
    ORANGE,
    PURPLE,
    BROWN,
    BLUE_GREY,
)


def player_color(player: int) -> Color:
    """Color for the player at roster position `player`."""
    return PLAYER_COLORS[player % len(PLAYER_COLORS)]
