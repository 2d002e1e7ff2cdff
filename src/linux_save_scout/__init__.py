"""Linux Save Scout - find Heroic-managed games and their save prefixes."""

__version__ = "0.1.0"
