"""Board rendering: scene and view."""
