"""Economy, production, trade and pathfinding for a colonial island-building game."""

__version__ = "0.1.0"