"""
Command dispatch for Twig.

Translates key symbols into commands and applies them to a TreeStore.
Two-key chords (e.g. "g g") are tracked with an explicit ChordState that is
reset after every key.

Modified: 2026-10-19
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Mapping, Optional, Tuple

from twig.core.exceptions import ConfigurationError
from twig.core.tree_store import TreeStore

logger = logging.getLogger(__name__)


class EditorMode(Enum):
    """Input mode of the editor."""

    TREE = "tree"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Mode"


class Command(Enum):
    """Commands available in tree navigation mode."""

    ADD_CHILD = "add_child"
    ADD_SIBLING = "add_sibling"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    GO_FIRST = "go_first"
    GO_LAST = "go_last"
    DELETE = "delete"
    RENAME = "rename"
    HELP = "help"
    QUIT = "quit"


class ChordState(Enum):
    """Progress through a two-key chord."""

    IDLE = "idle"
    PENDING_FIRST_KEY = "pending_first_key"


KeySequence = Tuple[str, ...]

# Written with spaces between keys: "g g" is a chord, "down" is one key.
DEFAULT_KEYMAP: Dict[Command, str] = {
    Command.ADD_CHILD: "A",
    Command.ADD_SIBLING: "o",
    Command.MOVE_DOWN: "j",
    Command.MOVE_UP: "k",
    Command.GO_FIRST: "g g",
    Command.GO_LAST: "G",
    Command.DELETE: "d d",
    Command.RENAME: "c w",
    Command.HELP: "?",
    Command.QUIT: "q",
}

# Key names that stand for characters the separator syntax cannot hold
KEY_ALIASES = {"space": " "}

# Commands the caller acts on; the dispatcher only reports them.
APP_COMMANDS = frozenset({Command.RENAME, Command.HELP, Command.QUIT})


@dataclass
class DispatchResult:
    """Outcome of feeding one key to the dispatcher."""

    command: Optional[Command] = None
    changed: bool = False

    @property
    def handled(self) -> bool:
        return self.command is not None


def parse_keys(keys: str) -> KeySequence:
    """
    Split a written key sequence into key symbols.

    Args:
        keys: Space-separated key symbols, e.g. "g g" or "down"

    Returns:
        Tuple of key symbols as the app reports them
    """
    return tuple(KEY_ALIASES.get(token, token) for token in keys.split())


def build_keymap(overrides: Optional[Mapping[str, str]] = None) -> Dict[Command, str]:
    """
    Merge user key overrides over the default keymap.

    Args:
        overrides: Mapping of command name (e.g. "add_child") to key sequence

    Returns:
        Complete Command -> key sequence mapping

    Raises:
        ConfigurationError: If a command name is unknown or the result is ambiguous
    """
    keymap = dict(DEFAULT_KEYMAP)
    for name, keys in (overrides or {}).items():
        try:
            command = Command(name)
        except ValueError:
            raise ConfigurationError(f"Unknown command in key bindings: {name!r}") from None
        keymap[command] = str(keys)
    index_bindings(keymap)
    return keymap


def index_bindings(keymap: Mapping[Command, str]) -> Dict[KeySequence, Command]:
    """
    Invert a keymap into key sequence -> Command, rejecting ambiguous maps.

    Raises:
        ConfigurationError: If a sequence is empty or longer than two keys,
            bound twice, or a single-key binding also starts a chord
    """
    bindings: Dict[KeySequence, Command] = {}
    for command, keys in keymap.items():
        sequence = parse_keys(keys)
        if not 1 <= len(sequence) <= 2:
            raise ConfigurationError(
                f"Key sequence for {command.value} must be one or two keys, got {keys!r}"
            )
        if sequence in bindings:
            raise ConfigurationError(
                f"Key {keys!r} bound to both {bindings[sequence].value} and {command.value}"
            )
        bindings[sequence] = command

    prefixes = {sequence[0] for sequence in bindings if len(sequence) == 2}
    clashes = prefixes & {sequence[0] for sequence in bindings if len(sequence) == 1}
    if clashes:
        raise ConfigurationError(
            f"Keys {sorted(clashes)} are bound alone and also start a chord"
        )
    return bindings


class CommandDispatcher:
    """
    Maps key symbols to TreeStore operations.

    Holds no tree state of its own; only the chord state and the key that
    armed it.
    """

    def __init__(self, store: TreeStore, keymap: Optional[Mapping[Command, str]] = None):
        """
        Initialize the dispatcher.

        Args:
            store: TreeStore the commands operate on
            keymap: Command -> key sequence mapping (defaults to DEFAULT_KEYMAP)

        Raises:
            ConfigurationError: If the keymap is ambiguous or malformed
        """
        self.store = store
        self.mode = EditorMode.TREE
        self.chord_state = ChordState.IDLE
        self._pending_key: Optional[str] = None
        self._actions: Dict[Command, Callable[[], object]] = {
            Command.ADD_CHILD: store.add_child_of_selection,
            Command.ADD_SIBLING: store.add_sibling_of_selection,
            Command.MOVE_DOWN: store.move_selection_down,
            Command.MOVE_UP: store.move_selection_up,
            Command.GO_FIRST: store.select_first_overall,
            Command.GO_LAST: store.select_last_overall,
            Command.DELETE: store.delete_selection,
        }

        self.bindings = index_bindings(keymap or DEFAULT_KEYMAP)
        self._chord_prefixes = {sequence[0] for sequence in self.bindings if len(sequence) == 2}

    @property
    def pending_key(self) -> Optional[str]:
        """The first key of a chord in progress, if any."""
        return self._pending_key

    def dispatch(self, key: str) -> DispatchResult:
        """
        Feed one key symbol.

        Args:
            key: Printable character or key name (e.g. "j", "G", "escape")

        Returns:
            DispatchResult naming the command that fired, if any
        """
        if self.chord_state is ChordState.PENDING_FIRST_KEY:
            sequence = (self._pending_key, key)
            self._reset_chord()
            command = self.bindings.get(sequence)
            if command is None:
                logger.debug(f"Chord {sequence!r} not bound, dropped")
                return DispatchResult()
            return self._run(command)

        if key in self._chord_prefixes:
            self.chord_state = ChordState.PENDING_FIRST_KEY
            self._pending_key = key
            return DispatchResult()

        command = self.bindings.get((key,))
        if command is None:
            return DispatchResult()
        return self._run(command)

    def _reset_chord(self) -> None:
        self.chord_state = ChordState.IDLE
        self._pending_key = None

    def _run(self, command: Command) -> DispatchResult:
        if command in APP_COMMANDS:
            return DispatchResult(command=command)

        changed = bool(self._actions[command]())

        logger.debug(f"{command.value} -> changed={changed}")
        return DispatchResult(command=command, changed=changed)
