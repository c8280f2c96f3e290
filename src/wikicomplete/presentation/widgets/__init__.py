from .editor import NoteEditor
from .suggestion_menu import SuggestionMenu

__all__ = ["NoteEditor", "SuggestionMenu"]
