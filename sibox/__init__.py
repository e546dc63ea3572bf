"""Core building blocks for a 2D tile-based game: delegates, input state, tile maps, worlds and entities."""

__version__ = "0.1.0"