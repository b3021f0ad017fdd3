"""Central keybinding registry for Twig.

Provides a single source of truth for the keys shown in help and the
status bar, built from the dispatcher's active keymap.

Modified: 2026-10-19
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional

from twig.core.dispatch import Command, DEFAULT_KEYMAP


@dataclass
class Keybinding:
    """Represents a single keybinding."""
    key: str  # Key or two-key chord, e.g. "j" or "g g"
    command: Command
    description: str  # Human-readable description
    category: str = "General"  # Category for grouping in help


# command -> (description, category)
COMMAND_INFO: Dict[Command, tuple] = {
    Command.ADD_CHILD: ("Add child node", "Editing"),
    Command.ADD_SIBLING: ("Add sibling node (end of group)", "Editing"),
    Command.DELETE: ("Delete node and its children", "Editing"),
    Command.RENAME: ("Rename node", "Editing"),
    Command.MOVE_DOWN: ("Next sibling", "Navigation"),
    Command.MOVE_UP: ("Previous sibling", "Navigation"),
    Command.GO_FIRST: ("Jump to first node", "Navigation"),
    Command.GO_LAST: ("Jump to last node", "Navigation"),
    Command.HELP: ("Show this help", "Application"),
    Command.QUIT: ("Quit", "Application"),
}


class KeybindingRegistry:
    """Registry of the keybindings in effect."""

    def __init__(self, keymap: Optional[Mapping[Command, str]] = None):
        self.keybindings: Dict[str, Keybinding] = {}
        for command, key in (keymap or DEFAULT_KEYMAP).items():
            description, category = COMMAND_INFO[command]
            self.register(key, command, description, category)

    def register(self, key: str, command: Command, description: str,
                 category: str = "General") -> None:
        """Register a keybinding."""
        self.keybindings[key] = Keybinding(
            key=key,
            command=command,
            description=description,
            category=category,
        )

    def key_for(self, command: Command) -> Optional[str]:
        """Get the key bound to a command."""
        for binding in self.keybindings.values():
            if binding.command is command:
                return binding.key
        return None

    def get_bindings_by_category(self) -> Dict[str, List[Keybinding]]:
        """Get keybindings organized by category."""
        result = {}
        for binding in self.keybindings.values():
            if binding.category not in result:
                result[binding.category] = []
            result[binding.category].append(binding)
        return result

    def format_hints(self) -> str:
        """Short hint line for the status bar."""
        hints = []
        for command in (Command.ADD_CHILD, Command.ADD_SIBLING, Command.DELETE,
                        Command.HELP, Command.QUIT):
            key = self.key_for(command)
            if key:
                hints.append(f"{key}:{command.value.replace('_', ' ')}")
        return " ".join(hints)

    def format_help_text(self) -> str:
        """Format help text for display."""
        lines = []
        lines.append("Twig - Terminal Outliner\n")
        lines.append("=" * 40)

        # Group by category
        categories = self.get_bindings_by_category()
        for category in sorted(categories.keys()):
            lines.append(f"\n{category}:")
            lines.append("-" * len(category) + "-")

            bindings = sorted(categories[category], key=lambda b: b.key)
            for binding in bindings:
                # Format key with padding
                key_str = binding.key.ljust(12)
                lines.append(f"  {key_str} {binding.description}")

        lines.append("\n" + "=" * 40)
        lines.append("Chords (e.g. g g) need both keys with nothing in between.")

        return "\n".join(lines)
