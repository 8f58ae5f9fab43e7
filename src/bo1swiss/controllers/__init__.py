"""Controllers operating on a Tournament's roster and match log."""
