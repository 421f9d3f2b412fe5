"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
The echo and response regions change style through classes only:
-error (validation failure) and -loading (waiting for the model).
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Echo region - hidden until the first submit
   ============================================ */
#input-history {
    visibility: hidden;
    height: auto;
    padding: 1 2;
    margin: 1 1 0 1;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    color: $foreground;

    &.-visible {
        visibility: visible;
    }

    &.-error {
        color: $error;
        border: round $error 60%;
    }
}

/* ============================================
   Response region
   ============================================ */
#response {
    height: 1fr;
    min-height: 5;
    padding: 1 2;
    margin: 1 1 0 1;
    background: $panel;
    border: round $secondary 60%;
    border-title-color: $secondary;
    color: $foreground;
    overflow-y: auto;

    &.-loading {
        color: $text-muted;
        text-style: italic;
    }

    &.-error {
        height: auto;
        min-height: 0;
        color: $error;
        border: round $error 60%;
    }
}

/* ============================================
   Log panel - hidden unless --log-level / Ctrl+D
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-title-style: bold;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    margin: 1 1 0 1;
    scrollbar-gutter: stable;
}

/* ============================================
   Input bar
   ============================================ */
#input-bar {
    height: 3;
    margin: 1 1;
}

#user-input {
    width: 1fr;
}

#send {
    width: 10;
    min-width: 8;
    margin: 0 0 0 1;
    border: tall $success;
    background: $success;
    color: $background;
    text-style: bold;

    &:disabled {
        background: $surface;
        border: tall $border;
        color: $text-muted;
    }
}
"""
