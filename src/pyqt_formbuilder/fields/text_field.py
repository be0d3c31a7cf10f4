"""Single- and multi-line text input field."""

from typing import Any, Optional

from PyQt6.QtWidgets import QLineEdit, QWidget

from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import LineEditAdapter, PlainTextAdapter


class FormBuilderTextField(FormBuilderField):
    """
    Text input; the value is the text as typed.

    Use value_transformer to store something else, e.g. ``value_transformer=int``
    for a numeric field validated with FormBuilderValidators.integer().

    Args:
        obscure_text: Mask input (passwords)
        max_lines: More than 1 uses a multi-line editor
        max_length: Hard cap on typed characters
        read_only: Display only
    """

    def __init__(
        self,
        name: str,
        obscure_text: bool = False,
        max_lines: int = 1,
        max_length: Optional[int] = None,
        read_only: bool = False,
        **kwargs,
    ):
        if obscure_text and max_lines != 1:
            raise ValueError("Obscured text fields cannot be multiline")
        self.obscure_text = obscure_text
        self.max_lines = max_lines
        self.max_length = max_length
        self.read_only = read_only
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        if self.max_lines > 1:
            control = PlainTextAdapter(self)
            line_height = control.fontMetrics().lineSpacing()
            control.setFixedHeight(line_height * self.max_lines + 12)
        else:
            control = LineEditAdapter(self)
            if self.obscure_text:
                control.setEchoMode(QLineEdit.EchoMode.Password)
            if self.max_length is not None:
                control.setMaxLength(self.max_length)
        control.setReadOnly(self.read_only)
        return control

    def to_control_value(self, value: Any) -> Any:
        return "" if value is None else str(value)
