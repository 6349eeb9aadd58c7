"""Constants used throughout feedboat."""

# Default Ctrl+<letter> chords for cycling between open dialogs
DEFAULT_CYCLE_NEXT_KEY = "v"
DEFAULT_CYCLE_PREVIOUS_KEY = "g"

# Letters that cannot be cycle keys, with what Ctrl+<letter> already is
RESERVED_CTRL_KEYS = {
    "c": "Ctrl+C quits",
    "h": "Ctrl+H is read as Backspace",
    "i": "Ctrl+I is read as Tab",
    "j": "Ctrl+J is read as Enter",
    "m": "Ctrl+M is read as Enter",
}

# Text typed on the command line that quits the application
QUIT_COMMAND = "quit"

# Prompt painted in front of the command-line editor
COMMAND_PROMPT = ":"

# Fallback terminal size when the real one can't be determined
DEFAULT_TERMINAL_WIDTH = 80
DEFAULT_TERMINAL_HEIGHT = 24

APP_TITLE = "feedboat"


class Band:
    """Names of the rows a frame is split into."""

    TITLE = "title"
    CONTENT = "content"
    HINTS = "hints"
    COMMAND_LINE = "command_line"


class Styles:
    """Rich style strings for the dashboard bands."""

    BAR = "bold yellow on blue"
    ITEM = "green"
    SELECTED = "bold white"
    TEXT = ""
    COMMAND = ""
