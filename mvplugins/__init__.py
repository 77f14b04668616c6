"""
Plugin toolkit for RPG Maker MV style game runtimes.

Provides a plugin base (typed parameters, command dispatch), a colour value,
metadata lookup for game entities and a map-load hook that strips shadows.
"""

__version__ = "0.1.0"
