from .serialization import from_json, to_json
from .shapes import Rectangle

__all__ = [
    "Rectangle",
    "to_json",
    "from_json",
]
