"""On/off switch field."""

from typing import Any

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from pyqt_formbuilder.forms.constants import ControlAffinity
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import SwitchAdapter


class FormBuilderSwitch(FormBuilderField):
    """Switch with a title; value is a bool. The switch trails the title by default."""

    def __init__(
        self,
        name: str,
        title: str = "",
        control_affinity: ControlAffinity = ControlAffinity.TRAILING,
        **kwargs,
    ):
        self.title = title
        self.control_affinity = control_affinity
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        return SwitchAdapter(self)

    def wrap_control(self, control: QWidget) -> QWidget:
        row = QWidget(self)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        self.title_label = QLabel(self.title, row)
        self.title_label.setBuddy(control)
        if self.control_affinity == ControlAffinity.LEADING:
            layout.addWidget(control)
            layout.addWidget(self.title_label, 1)
        else:
            layout.addWidget(self.title_label, 1)
            layout.addWidget(control)
        return row

    def to_control_value(self, value: Any) -> Any:
        return bool(value)
