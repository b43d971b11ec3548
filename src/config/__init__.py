"""Runtime configuration for rozmarra."""
