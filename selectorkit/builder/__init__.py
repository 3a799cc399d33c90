from .builder import PART_METHODS, SelectorBuilder, build, css_selector_builder
from .errors import DuplicateSingularPartError, OutOfOrderPartError, SelectorError
from .state import SelectorState

__all__ = [
    "SelectorBuilder",
    "SelectorState",
    "css_selector_builder",
    "build",
    "PART_METHODS",
    # Errors
    "SelectorError",
    "DuplicateSingularPartError",
    "OutOfOrderPartError",
]
