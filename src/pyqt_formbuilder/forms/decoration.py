"""Decoration (label, helper and error lines) drawn around a field control."""

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class InputDecoration:
    """Texts displayed around a field.

    Attributes:
        label_text: Label shown above the control
        helper_text: Hint shown under the control when there is no error
        hint_text: Placeholder shown inside the control when it is empty
        error_text: Forced error; when set the field is always invalid
    """

    label_text: Optional[str] = None
    helper_text: Optional[str] = None
    hint_text: Optional[str] = None
    error_text: Optional[str] = None

    def copy_with(self, **changes) -> "InputDecoration":
        return replace(self, **changes)
