"""Date, time and date-time picker field."""

from datetime import date, datetime, time
from typing import Any, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.forms.constants import InputType
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import DateTimeEditAdapter

_VALUE_TYPES = {InputType.DATE: date, InputType.TIME: time, InputType.BOTH: datetime}


class FormBuilderDateTimePicker(FormBuilderField):
    """
    Picker producing a ``date``, ``time`` or ``datetime`` depending on input_type.

    Args:
        input_type: InputType.DATE, InputType.TIME or InputType.BOTH
        first_date: Earliest selectable date
        last_date: Latest selectable date
    """

    def __init__(
        self,
        name: str,
        input_type: InputType = InputType.BOTH,
        first_date: Optional[date] = None,
        last_date: Optional[date] = None,
        **kwargs,
    ):
        if first_date is not None and last_date is not None and first_date > last_date:
            raise ValueError(f"first_date {first_date} is after last_date {last_date}")
        self.input_type = input_type
        self.first_date = first_date
        self.last_date = last_date
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = DateTimeEditAdapter(self.input_type, self)
        control.set_bounds(self.first_date, self.last_date)
        return control

    def check_value(self, value: Any) -> None:
        expected = _VALUE_TYPES[self.input_type]
        if value is not None and not isinstance(value, expected):
            raise TypeError(
                f"{self.input_type.name} picker '{self.name}' expects {expected.__name__}, "
                f"got {type(value).__name__}"
            )
