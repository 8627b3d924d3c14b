from .points import points_from_pairs, points_from_xy

__all__ = ["points_from_pairs", "points_from_xy"]
