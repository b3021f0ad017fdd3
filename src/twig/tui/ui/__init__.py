"""
UI components for Twig TUI.

Modified: 2026-10-19
"""

__all__ = [
    "outline_view",
    "status_bar",
    "modals",
]
