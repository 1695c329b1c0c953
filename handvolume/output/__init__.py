from .level import OutputSink, SharedLevel
from .mapper import GestureOutputMapper, map_to_level

__all__ = ["OutputSink", "SharedLevel", "GestureOutputMapper", "map_to_level"]
