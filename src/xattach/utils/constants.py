"""Constants used throughout xattach."""

# Menu markers (same width so option text stays aligned)
HIGHLIGHT_MARKER = "> "
BLANK_MARKER = "  "

# Bare key that cancels a selection (Escape cancels too)
CANCEL_CHAR = "q"

# Seconds to wait after a lone ESC before treating it as the Escape key
ESCAPE_TIMEOUT = 0.025

# Seconds to wait for the terminal to answer a cursor position query
CURSOR_QUERY_TIMEOUT = 2.0

# Default xrandr binary
DEFAULT_XRANDR_COMMAND = "xrandr"


# Attach positions, in menu order
class Position:
    """Position constants for attaching an output."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"


POSITIONS = [Position.LEFT, Position.RIGHT, Position.ABOVE, Position.BELOW]

# Position -> xrandr relative placement flag (without leading dashes)
POSITION_FLAGS = {
    Position.LEFT: "left-of",
    Position.RIGHT: "right-of",
    Position.ABOVE: "above",
    Position.BELOW: "below",
}

DISPLAY_PROMPT = "Select display to attach (arrow keys to move, enter to select, q to quit):"
POSITION_PROMPT = "Select position (arrow keys to move, enter to select, q to quit):"
