"""Dropdown fields: plain and searchable."""

from typing import Any, Callable, Iterable, List, Optional

from PyQt6.QtWidgets import QHBoxLayout, QToolButton, QWidget

from pyqt_formbuilder.forms.field_option import FormBuilderFieldOption, normalize_options
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import ComboBoxAdapter, SearchableComboBoxAdapter


class FormBuilderDropdown(FormBuilderField):
    """
    Dropdown choosing one option value.

    Args:
        options: FormBuilderFieldOption instances or bare values
        allow_clear: Show a button that clears the selection
        disabled: Option values that cannot be picked
    """

    def __init__(
        self,
        name: str,
        options: Iterable[Any],
        allow_clear: bool = False,
        disabled: Iterable[Any] = (),
        **kwargs,
    ):
        self.options: List[FormBuilderFieldOption] = normalize_options(options)
        self.allow_clear = allow_clear
        self.disabled_values = list(disabled)
        super().__init__(name, **kwargs)

    def check_value(self, value: Any) -> None:
        if value is not None and value not in [option.value for option in self.options]:
            raise ValueError(f"Dropdown '{self.name}' has no option {value!r}")

    def _make_combo(self) -> ComboBoxAdapter:
        return ComboBoxAdapter(self)

    def create_control(self) -> QWidget:
        control = self._make_combo()
        control.set_options(self.options)
        control.setCurrentIndex(-1)
        for value in self.disabled_values:
            control.set_option_enabled(value, False)
        return control

    def wrap_control(self, control: QWidget) -> QWidget:
        if not self.allow_clear:
            return control
        row = QWidget(self)
        layout = QHBoxLayout(row)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(control, 1)
        self.clear_button = QToolButton(row)
        self.clear_button.setText("✕")
        self.clear_button.setToolTip("Clear")
        self.clear_button.clicked.connect(lambda: self.did_change(None))
        layout.addWidget(self.clear_button)
        return row


class FormBuilderSearchableDropdown(FormBuilderDropdown):
    """
    Dropdown whose items are filtered as the user types.

    Args:
        items: Selectable values
        item_as_string: Label for each item; str() by default
    """

    def __init__(
        self,
        name: str,
        items: Iterable[Any],
        item_as_string: Optional[Callable[[Any], str]] = None,
        **kwargs,
    ):
        to_label = item_as_string or str
        options = [FormBuilderFieldOption(item, to_label(item)) for item in items]
        super().__init__(name, options, **kwargs)

    def _make_combo(self) -> ComboBoxAdapter:
        return SearchableComboBoxAdapter(self)
