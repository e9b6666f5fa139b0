"""Domain layer: catalog search, playlist store, playback session."""
