"""
User interface module for the dungeon crawler.

Reads the keyboard one key at a time with prompt_toolkit and turns each key
into a complete player intent.
"""

from prompt_toolkit import ANSI, PromptSession
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys

from ..core.constants import Intent
from ..core.utils import ccapture

# Keys understood by the game; anything else is ignored.
KEY_INTENTS: dict[str, Intent] = {
    "w": Intent.MOVE_NORTH,
    "a": Intent.MOVE_WEST,
    "s": Intent.MOVE_SOUTH,
    "d": Intent.MOVE_EAST,
    "p": Intent.USE_POTION,
    "e": Intent.DEFEND,
    "h": Intent.HELP,
    "q": Intent.QUIT,
    Keys.Escape.value: Intent.QUIT,
}


def intent_from_key(key: str) -> Intent:
    """
    Maps a pressed key to an intent.

    Args:
        key (str):
            A single character, or a prompt_toolkit key name such as "escape".

    Returns:
        Intent:
            The matching intent, Intent.NONE for unknown keys.

    """
    if len(key) == 1:
        key = key.lower()
    return KEY_INTENTS.get(key, Intent.NONE)


def _single_key_bindings() -> KeyBindings:
    """Key bindings that end the prompt on the first key press."""
    bindings = KeyBindings()

    @bindings.add(Keys.Any)
    def _any(event) -> None:
        event.app.exit(result=event.key_sequence[0].key)

    @bindings.add(Keys.Escape, eager=True)
    def _escape(event) -> None:
        event.app.exit(result=Keys.Escape.value)

    @bindings.add(Keys.ControlC)
    def _interrupt(event) -> None:
        event.app.exit(result=Keys.Escape.value)

    return bindings


class PlayerInterface:
    """
    Command-line interface for reading player intents.

    Every read returns as soon as one key is pressed, so an intent is never
    half composed.
    """

    def __init__(self) -> None:
        """Initialize the PlayerInterface with its prompt session."""
        self.session: PromptSession = PromptSession(erase_when_done=True)
        self.bindings = _single_key_bindings()

    def read_key(self, message: str = "> ") -> str:
        """Blocks until a key is pressed and returns it."""
        key = self.session.prompt(ANSI(message), key_bindings=self.bindings)
        return str(getattr(key, "value", key))

    def read_intent(self) -> Intent:
        """Blocks until a key is pressed and returns its intent."""
        return intent_from_key(self.read_key())

    def wait_for_key(self, content: object = "Press any key to continue...") -> None:
        """Shows rich content (or markup) and waits for any key."""
        self.read_key(ccapture(content) + "\n")
