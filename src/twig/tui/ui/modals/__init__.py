"""
Modal screens for Twig TUI.

Modified: 2026-10-19
"""

from .help_modal import HelpModal
from .rename_modal import RenameModal

__all__ = ["HelpModal", "RenameModal"]
