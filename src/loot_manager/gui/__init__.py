"""GUI module using CustomTkinter.

Only the startup status window lives here; plugin lists and editors belong
to the main LOOT interface.

Components:
    StatusWindow: Shows startup progress, the selected game and messages

Submodules:
    styles: Theme constants (colors, fonts, padding, window sizes)
"""

from .status_window import StatusWindow

__all__ = [
    "StatusWindow",
]
