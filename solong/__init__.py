"""A tile-based puzzle game: collect every item, then reach the exit."""

__version__ = "1.0.0"
__all__ = ["cli", "game", "gamemap", "pathcheck", "printf", "render", "xpm"]