from green.models.garden import Area, Garden
from green.models.planting import Planting, Task

__all__ = [
    "Garden",
    "Area",
    "Planting",
    "Task",
]
