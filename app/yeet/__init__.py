"""yeet - move files into a recoverable dumpster instead of deleting them."""

__version__ = "0.3.0"
