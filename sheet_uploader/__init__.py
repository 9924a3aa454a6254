"""Upload the videos listed in a Google Sheet to YouTube."""

__version__ = "0.1.0"
