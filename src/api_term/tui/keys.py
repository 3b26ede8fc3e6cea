"""Key names the interaction state machine reacts to."""

QUIT = {"q", "ctrl+c"}
INTERRUPT = {"ctrl+c"}
FOCUS_TOGGLE = {"tab", "r"}
DOWN = {"j", "down"}
UP = {"k", "up"}
ENTER = {"enter"}
BACKSPACE = {"backspace"}
HELP_TOGGLE = {"?", "h"}
HELP_CLOSE = HELP_TOGGLE | {"escape"}

EDIT_QUERY_PARAMS = {"i"}
EDIT_BASE_URL = {"b"}
EDIT_HEADERS = {"H"}


def is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


def normalize_key(key: str, character: str | None) -> str:
    """Map a terminal key event to a single key name.

    Printable keys are named by the character they produce ("H", "?", " "),
    everything else by the toolkit's key name ("enter", "ctrl+c").
    """
    if character and is_printable(character):
        return character
    return key
