"""
TUI (Terminal User Interface) for Twig.

Textual-based outline view with a status bar.

Modified: 2026-10-19
"""

__all__ = ["app", "keybindings", "messages"]
