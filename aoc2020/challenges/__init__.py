"""Solutions, one module per day. Importing this package registers them all."""

from . import day_1, day_2, day_3, day_4, day_5, day_6

__all__ = ["day_1", "day_2", "day_3", "day_4", "day_5", "day_6"]
