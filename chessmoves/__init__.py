"""Chess board model with move generation, move notation and move execution."""

__version__ = "0.1.0"
__all__ = ["board", "king", "move", "pawn", "piece", "pieces", "position"]