"""Board state and cell rules."""
