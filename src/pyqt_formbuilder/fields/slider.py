"""Numeric slider fields."""

from numbers import Number
from typing import Any, Optional

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QWidget

from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import RangeSliderAdapter, SliderAdapter


def _format_number(value: Number) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


class FormBuilderSlider(FormBuilderField):
    """
    Slider over [min, max]; value is a number, min when no initial value is given.

    Args:
        min: Lowest value
        max: Highest value
        divisions: Number of discrete steps; None moves per integer for
            integer bounds, in 100 steps otherwise
        display_values: Show the current value next to the slider
    """

    def __init__(
        self,
        name: str,
        min: Number,
        max: Number,
        divisions: Optional[int] = None,
        display_values: bool = True,
        **kwargs,
    ):
        self.min = min
        self.max = max
        self.divisions = divisions
        self.display_values = display_values
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = SliderAdapter(self)
        control.configure_range(self.min, self.max, self.divisions)
        return control

    def wrap_control(self, control: QWidget) -> QWidget:
        row = QWidget(self)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(control, 1)
        self.value_label = QLabel(row)
        self.value_label.setVisible(self.display_values)
        layout.addWidget(self.value_label)
        control.connect_change_signal(self._update_value_label)
        return row

    def _update_value_label(self, value: Any) -> None:
        self.value_label.setText(_format_number(value))

    def default_value(self) -> Any:
        return self.min

    def to_control_value(self, value: Any) -> Any:
        return self.min if value is None else value

    def _render(self) -> None:
        super()._render()
        self._update_value_label(self.control.get_value())


class FormBuilderRangeSlider(FormBuilderField):
    """
    Two-handle slider; value is a (start, end) tuple with start <= end.

    Without an initial value (from the field or the form) the range spans
    [min, max].
    """

    def __init__(
        self,
        name: str,
        min: Number,
        max: Number,
        divisions: Optional[int] = None,
        display_values: bool = True,
        **kwargs,
    ):
        self.min = min
        self.max = max
        self.divisions = divisions
        self.display_values = display_values
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = RangeSliderAdapter(self)
        control.configure_range(self.min, self.max, self.divisions)
        return control

    def wrap_control(self, control: QWidget) -> QWidget:
        row = QWidget(self)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(control, 1)
        self.value_label = QLabel(row)
        self.value_label.setVisible(self.display_values)
        layout.addWidget(self.value_label)
        control.connect_change_signal(self._update_value_label)
        return row

    def _update_value_label(self, value: Any) -> None:
        start, end = value
        self.value_label.setText(f"{_format_number(start)} – {_format_number(end)}")

    def default_value(self) -> Any:
        return (self.min, self.max)

    def check_value(self, value: Any) -> None:
        if value is None:
            return
        start, end = value
        if start > end:
            raise ValueError(f"Range start {start} is after end {end}")

    def to_control_value(self, value: Any) -> Any:
        if value is None:
            return (self.min, self.max)
        return tuple(value)

    def from_control_value(self, value: Any) -> Any:
        return tuple(value)

    def _render(self) -> None:
        super()._render()
        self._update_value_label(self.control.get_value())
