"""chess2d - rules and move-generation engine for a 2D chess game."""

__version__ = "0.1.0"
