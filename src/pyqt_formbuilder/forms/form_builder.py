"""
FormBuilder: the container widget that owns a form's state.

Usage:
    form = FormBuilder(initial_value={"email": "me@example.com"})
    form.add_field(FormBuilderTextField(
        name="email",
        decoration=InputDecoration(label_text="Email"),
        validator=FormBuilderValidators.compose([
            FormBuilderValidators.required(),
            FormBuilderValidators.email(),
        ]),
    ))

    if form.save_and_validate():
        submit(form.value)
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QVBoxLayout, QWidget

from pyqt_formbuilder.forms.constants import AutovalidateMode
from pyqt_formbuilder.forms.field_state import FormBuilderFieldState
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.forms.form_state import FormBuilderState
from pyqt_formbuilder.protocols import get_form_config

logger = logging.getLogger(__name__)


class FormBuilder(QWidget):
    """
    Form container widget.

    Fields added with add_field() (or found inside widgets added with
    add_widget(), or shown anywhere below this widget) register with the
    form's FormBuilderState under their name.

    Signals:
        value_changed(dict): Current value of every field after any user change
        validated(bool): Result of every validation, including the form-wide
            ones triggered by AutovalidateMode.ALWAYS
    """

    value_changed = pyqtSignal(dict)
    validated = pyqtSignal(bool)

    def __init__(
        self,
        initial_value: Optional[Mapping[str, Any]] = None,
        enabled: bool = True,
        skip_disabled: Optional[bool] = None,
        autovalidate_mode: AutovalidateMode = AutovalidateMode.DISABLED,
        on_changed: Optional[Callable[[Dict[str, Any]], None]] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self._on_changed = on_changed
        self.state = FormBuilderState(
            initial_value=initial_value,
            enabled=enabled,
            skip_disabled=skip_disabled,
            autovalidate_mode=autovalidate_mode,
            on_changed=self._on_state_changed,
            on_validated=self.validated.emit,
        )
        self._layout = QVBoxLayout(self)
        self._layout.setSpacing(get_form_config().field_spacing)

    @staticmethod
    def of(widget: QWidget) -> Optional[FormBuilder]:
        """Return the nearest FormBuilder enclosing ``widget``, or None."""
        parent = widget.parentWidget()
        while parent is not None:
            if isinstance(parent, FormBuilder):
                return parent
            parent = parent.parentWidget()
        return None

    # ---- layout ----

    def add_field(self, field: FormBuilderField) -> FormBuilderField:
        self._layout.addWidget(field)
        field.attach(self)
        return field

    def add_widget(self, widget: QWidget) -> QWidget:
        """Add any widget; FormBuilderFields inside it register with this form."""
        self._layout.addWidget(widget)
        if isinstance(widget, FormBuilderField):
            widget.attach(self)
        else:
            nested = widget.findChildren(FormBuilderField)
            for field in nested:
                field.attach(self)
            logger.debug(f"add_widget: registered {len(nested)} nested fields")
        return widget

    def remove_field(self, field: FormBuilderField) -> None:
        field.dispose()
        self._layout.removeWidget(field)
        field.setParent(None)

    # ---- state ----

    @property
    def fields(self) -> Dict[str, FormBuilderFieldState]:
        return self.state.fields

    @property
    def value(self) -> Dict[str, Any]:
        return self.state.value

    @property
    def instant_value(self) -> Dict[str, Any]:
        return self.state.instant_value

    @property
    def initial_value(self) -> Dict[str, Any]:
        return self.state.initial_value

    @property
    def errors(self) -> Dict[str, str]:
        return self.state.errors

    @property
    def is_valid(self) -> bool:
        return self.state.is_valid

    @property
    def enabled(self) -> bool:
        return self.state.enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        self.state.enabled = enabled

    def save(self) -> None:
        self.state.save()

    def validate(self) -> bool:
        return self.state.validate()

    def save_and_validate(self) -> bool:
        return self.state.save_and_validate()

    def reset(self) -> None:
        self.state.reset()

    def patch_value(self, values: Mapping[str, Any]) -> None:
        self.state.patch_value(values)

    def invalidate_field(self, name: str, error_text: str) -> None:
        self.state.invalidate_field(name, error_text)

    def _on_state_changed(self, values: Dict[str, Any]) -> None:
        if self._on_changed is not None:
            self._on_changed(values)
        self.value_changed.emit(values)
