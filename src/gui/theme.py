"""
Theme - Centralized color and style definitions
The canvas and window reference this for consistent styling
"""

MONO_FONT = 'Menlo'

COLORS = {
    'background': '#000000',
    'boid': '#FF4500',
    'status_text': '#888888',
    'status_bg': '#111111',
}

# Boid dot radius in pixels
BOID_RADIUS = 2


def status_bar_style():
    """Stylesheet for the log status bar."""
    return f"""
        QStatusBar {{
            background-color: {COLORS['status_bg']};
            color: {COLORS['status_text']};
            font-family: {MONO_FONT};
            font-size: 10px;
        }}
    """
