"""Smart Paste - paste screenshots, files and text from the clipboard into the active terminal."""

__version__ = "0.1.0"
