"""Enumerations shared by the form state and the field widgets."""

from enum import Enum, auto


class AutovalidateMode(Enum):
    """When a field (or a whole form) validates itself."""
    DISABLED = auto()
    ALWAYS = auto()
    ON_USER_INTERACTION = auto()


class OptionsOrientation(Enum):
    """How option-group widgets lay out their options."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    WRAP = "wrap"


class ControlAffinity(Enum):
    """Side of the label the check/radio control is drawn on."""
    LEADING = "leading"
    TRAILING = "trailing"


class InputType(Enum):
    """Kind of value a FormBuilderDateTimePicker produces."""
    DATE = "date"
    TIME = "time"
    BOTH = "both"
