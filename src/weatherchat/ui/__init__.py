"""Terminal UI module for weatherchat.

Provides a Textual-based TUI with the chat page layout.

Module structure:
- config.py: Log levels and display constants
- widgets.py: Input bar, text regions, log panel
- view.py: ChatView implementation over the widgets
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes
- app.py: Application orchestration
"""

from .app import WeatherChatApp, run_textual_tui
from .config import LogLevel
from .view import TextualChatView
from .widgets import DebugPanel, MessageInputBar, TextRegion

__all__ = [
    "DebugPanel",
    "LogLevel",
    "MessageInputBar",
    "TextRegion",
    "TextualChatView",
    "WeatherChatApp",
    "run_textual_tui",
]
