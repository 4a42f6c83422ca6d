"""Enums for task attributes, board modes and update classification."""

from enum import Enum


class Color(str, Enum):
    """Palette a task card can be tagged with."""

    BLACK = "black"
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PINK = "pink"


class FilterType(str, Enum):
    """Filter categories offered by the filter bar."""

    ALL = "all"
    OVERDUE = "overdue"
    TODAY = "today"
    FAVORITES = "favorites"
    REPEATING = "repeating"
    ARCHIVE = "archive"


class SortType(str, Enum):
    """Board sort modes."""

    DEFAULT = "default"
    DATE_UP = "date-up"
    DATE_DOWN = "date-down"


class UserAction(str, Enum):
    """What the user asked for. Selects the service call to make."""

    UPDATE_TASK = "update_task"
    ADD_TASK = "add_task"
    DELETE_TASK = "delete_task"


class UpdateType(str, Enum):
    """How observers should consume a model notification."""

    PATCH = "patch"  # One entity changed in place
    MINOR = "minor"  # Visible set changed, keep sort and pagination
    MAJOR = "major"  # Reset sort and pagination
    INIT = "init"  # First load finished


class TaskViewState(str, Enum):
    """View states of a task presenter."""

    NORMAL = "normal"
    EDITING = "editing"
    SAVING = "saving"
    DELETING = "deleting"
    ABORTING = "aborting"
