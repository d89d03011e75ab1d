"""Side panels: controls and move history."""
