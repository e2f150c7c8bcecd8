"""Domain layer - stations and playback."""
