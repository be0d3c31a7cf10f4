"""Boolean checkbox field."""

from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.forms.constants import ControlAffinity
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import CheckBoxAdapter


class FormBuilderCheckbox(FormBuilderField):
    """Single checkbox with a title; value is a bool."""

    def __init__(
        self,
        name: str,
        title: str = "",
        control_affinity: ControlAffinity = ControlAffinity.LEADING,
        **kwargs,
    ):
        self.title = title
        self.control_affinity = control_affinity
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = CheckBoxAdapter(self)
        control.setText(self.title)
        if self.control_affinity == ControlAffinity.TRAILING:
            control.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        return control

    def to_control_value(self, value: Any) -> Any:
        return bool(value)
