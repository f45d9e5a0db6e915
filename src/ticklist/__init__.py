"""ticklist - a small task list with filtered views and drag reordering."""

__version__ = "0.1.0"
