"""Data acquisition, team registry and persistence."""
