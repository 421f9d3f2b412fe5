"""Theme definitions for the TUI.

To add a new theme, define it here and register it in the app.
"""

from textual.theme import Theme

# Clear-sky palette: sky blue accents on a deep navy background
CLEAR_SKY = Theme(
    name="clear-sky",
    primary="#4fa3e0",      # Sky blue - main accent
    secondary="#9ccbef",    # Pale blue
    accent="#ffd166",       # Sun yellow - highlights
    foreground="#e6eef5",   # Light text
    background="#0d1b2a",   # Night navy
    success="#80c990",      # Green - send button
    warning="#f4a261",      # Orange - log panel
    error="#ef6f6c",        # Red - validation errors
    surface="#1b263b",
    panel="#15202f",
    dark=True,
    variables={
        "border": "#33475b",
        "border-blurred": "#23344a",
        "text-muted": "#7d8fa3",
        "input-cursor-background": "#e6eef5",
        "input-cursor-foreground": "#0d1b2a",
        "input-selection-background": "#4fa3e0 30%",
        "footer-key-foreground": "#ffd166",
        "button-color-foreground": "#0d1b2a",
    },
)
