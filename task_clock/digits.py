"""
Block-style ASCII art digits for the elapsed clock (7-segment display inspired).
Every glyph is exactly GLYPH_HEIGHT rows of GLYPH_WIDTH columns.
"""

GLYPH_HEIGHT = 5
GLYPH_WIDTH = 5

DIGITS = {
    '0': (
        " ███ ",
        "█   █",
        "█   █",
        "█   █",
        " ███ ",
    ),
    '1': (
        "  █  ",
        " ██  ",
        "  █  ",
        "  █  ",
        " ███ ",
    ),
    '2': (
        " ███ ",
        "    █",
        " ███ ",
        "█    ",
        "█████",
    ),
    '3': (
        "████ ",
        "    █",
        " ███ ",
        "    █",
        "████ ",
    ),
    '4': (
        "█  █ ",
        "█  █ ",
        "█████",
        "   █ ",
        "   █ ",
    ),
    '5': (
        "█████",
        "█    ",
        "████ ",
        "    █",
        "████ ",
    ),
    '6': (
        " ███ ",
        "█    ",
        "████ ",
        "█   █",
        " ███ ",
    ),
    '7': (
        "█████",
        "   █ ",
        "  █  ",
        " █   ",
        " █   ",
    ),
    '8': (
        " ███ ",
        "█   █",
        " ███ ",
        "█   █",
        " ███ ",
    ),
    '9': (
        " ███ ",
        "█   █",
        " ████",
        "    █",
        " ███ ",
    ),
    ':': (
        "     ",
        "  █  ",
        "     ",
        "  █  ",
        "     ",
    ),
}
