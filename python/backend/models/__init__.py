from backend.models.grid import Axis, Direction, Grid, Sweep
from backend.models.tile import Tile, rank_value

__all__ = ["Axis", "Direction", "Grid", "Sweep", "Tile", "rank_value"]
