"""
Option-group fields: checkbox group, radio group, chips and segmented control.

All of them are an OptionGroupAdapter configured differently; the shared
base handles options, disabled options and layout.
"""

from typing import Any, Iterable, List, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.forms.constants import ControlAffinity, OptionsOrientation
from pyqt_formbuilder.forms.field_option import FormBuilderFieldOption, normalize_options
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import OptionGroupAdapter


class _OptionGroupField(FormBuilderField):
    """Base for fields choosing among options with a row/column of buttons."""

    kind = "checkbox"
    exclusive = False
    allow_deselect = True

    def __init__(
        self,
        name: str,
        options: Iterable[Any],
        orientation: OptionsOrientation = OptionsOrientation.WRAP,
        control_affinity: ControlAffinity = ControlAffinity.LEADING,
        disabled: Iterable[Any] = (),
        wrap_columns: int = 3,
        **kwargs,
    ):
        self.options: List[FormBuilderFieldOption] = normalize_options(options)
        self.orientation = orientation
        self.control_affinity = control_affinity
        self.disabled_values = list(disabled)
        self.wrap_columns = wrap_columns
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = OptionGroupAdapter(
            kind=self.kind,
            exclusive=self.exclusive,
            allow_deselect=self.allow_deselect,
            orientation=self.orientation,
            control_affinity=self.control_affinity,
            wrap_columns=self.wrap_columns,
            parent=self,
        )
        control.set_options(self.options)
        control.set_disabled_values(self.disabled_values)
        return control

    def set_options(self, options: Iterable[Any]) -> None:
        """Replace the options; a value no longer offered is cleared."""
        self.options = normalize_options(options)
        offered = [option.value for option in self.options]
        value = self.state.value
        if self.exclusive:
            kept = value if value in offered else None
        else:
            kept = [v for v in (value or []) if v in offered]
        self._syncing = True
        try:
            self.control.set_options(self.options)
        finally:
            self._syncing = False
        if kept != value:
            self.state.set_value(kept)
        self._render()

    def check_value(self, value: Any) -> None:
        if value is None:
            return
        offered = [option.value for option in self.options]
        values = [value] if self.exclusive else list(value)
        unknown = [v for v in values if v not in offered]
        if unknown:
            raise ValueError(f"Field '{self.name}' does not offer {unknown!r}")

    def to_control_value(self, value: Any) -> Any:
        if self.exclusive:
            return value
        return list(value) if value is not None else []


class FormBuilderCheckboxGroup(_OptionGroupField):
    """Checkboxes; value is the list of checked option values, in option order."""

    kind = "checkbox"
    exclusive = False


class FormBuilderRadioGroup(_OptionGroupField):
    """Radio buttons; value is the selected option value."""

    kind = "radio"
    exclusive = True
    allow_deselect = False


class FormBuilderChoiceChip(_OptionGroupField):
    """Chips with single selection; clicking the selected chip clears the value."""

    kind = "chip"
    exclusive = True
    allow_deselect = True

    def __init__(self, name: str, options: Iterable[Any],
                 orientation: OptionsOrientation = OptionsOrientation.HORIZONTAL, **kwargs):
        super().__init__(name, options, orientation=orientation, **kwargs)


class FormBuilderFilterChips(_OptionGroupField):
    """Chips with multiple selection; value is a list.

    Args:
        max_chips: Once this many are selected the others are disabled
    """

    kind = "chip"
    exclusive = False

    def __init__(self, name: str, options: Iterable[Any], max_chips: Optional[int] = None,
                 orientation: OptionsOrientation = OptionsOrientation.HORIZONTAL, **kwargs):
        if max_chips is not None and max_chips <= 0:
            raise ValueError(f"max_chips must be positive, got {max_chips}")
        self.max_chips = max_chips
        super().__init__(name, options, orientation=orientation, **kwargs)

    def create_control(self) -> QWidget:
        control = super().create_control()
        control.set_max_selected(self.max_chips)
        return control

    def check_value(self, value: Any) -> None:
        super().check_value(value)
        if value is not None and self.max_chips is not None and len(value) > self.max_chips:
            raise ValueError(
                f"Field '{self.name}' allows at most {self.max_chips} selections, got {len(value)}"
            )


class FormBuilderSegmentedControl(_OptionGroupField):
    """Joined toggle buttons in a row; value is the selected option value."""

    kind = "segment"
    exclusive = True
    allow_deselect = False
