"""Theme and style constants for the GUI.

Constants:
    COLORS: Colors for status text
    FONTS: Font family, size, and weight configurations
    PADDING: Spacing values for margins and padding
    WINDOW_SIZES: Default window dimensions
"""

# Color palette - semantic color names for consistent theming
COLORS = {
    "success": "#2d8a4e",  # Startup finished with a game selected
    "danger": "#dc3545",   # Startup failed
    "warning": "#ffc107",  # Startup finished with messages
    "muted": "#6c757d",    # Secondary text
}

# Font configurations - tuple format: (family, size, weight)
FONTS = {
    "title": ("Segoe UI", 18, "bold"),
    "body": ("Segoe UI", 12),
    "mono": ("Consolas", 11),
}

# Padding and spacing values in pixels
PADDING = {
    "small": 10,
    "medium": 18,
}

# Window sizes - tuple format: (width, height)
WINDOW_SIZES = {
    "status": (640, 420),
}

# Milliseconds between checks on the startup thread
POLL_INTERVAL_MS = 100
