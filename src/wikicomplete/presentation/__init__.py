"""Presentation layer: the Textual editor hosting the completion session."""

from .app import CompletionApp
from .host import TextualHost

__all__ = ["CompletionApp", "TextualHost"]
