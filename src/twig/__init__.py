"""
Twig - terminal outliner

A keyboard-driven, terminal-based editor for hierarchical outlines.
Vim-flavoured navigation, Textual rendering.

Created: 2026-10-19
"""

__version__ = "0.1.0"
__author__ = "Twig contributors"
