"""Free-form list of tags."""

from typing import Any, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import ChipsInputAdapter


class FormBuilderChipsInput(FormBuilderField):
    """Value is the list of entered strings; duplicates and blanks are dropped."""

    def __init__(self, name: str, max_chips: Optional[int] = None, **kwargs):
        if max_chips is not None and max_chips <= 0:
            raise ValueError(f"max_chips must be positive, got {max_chips}")
        self.max_chips = max_chips
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = ChipsInputAdapter(self)
        control.max_chips = self.max_chips
        return control

    def to_control_value(self, value: Any) -> Any:
        return list(value) if value is not None else []
