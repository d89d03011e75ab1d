"""Board themes and application stylesheet."""
