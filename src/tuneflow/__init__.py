"""TuneFlow - YouTube-backed music player with a playlist session engine."""

__version__ = "0.1.0"
