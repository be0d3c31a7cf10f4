"""
Base widget for every form field.

A FormBuilderField shows a label, a control and a message line (helper text
or error). It owns a FormBuilderFieldState, routes control edits into it and
re-renders whenever the state changes. Subclasses only provide the control.
"""
from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from PyQt6.QtCore import QEvent, QObject, pyqtSignal
from PyQt6.QtWidgets import QLabel, QVBoxLayout, QWidget

from pyqt_formbuilder.forms.constants import AutovalidateMode
from pyqt_formbuilder.forms.decoration import InputDecoration
from pyqt_formbuilder.forms.field_state import FormBuilderFieldState
from pyqt_formbuilder.protocols import (
    ChangeSignalEmitter, PlaceholderCapable, ValueGettable, ValueSettable, get_form_config,
)

if TYPE_CHECKING:
    from pyqt_formbuilder.forms.form_builder import FormBuilder

logger = logging.getLogger(__name__)


def _release_state(state: FormBuilderFieldState, _destroyed: Any = None) -> None:
    # Connected to QObject.destroyed: the widget is gone, only the state is safe to touch
    state.listener = None
    state.value_check = None
    state.detach()
    logger.debug(f"Released state of destroyed field '{state.name}'")


class FormBuilderField(QWidget):
    """
    A single named form field.

    Subclasses implement create_control() returning a widget that implements
    ValueGettable, ValueSettable and ChangeSignalEmitter. Everything else
    (registration, validation, decoration) lives here.

    Args:
        name: Key of the field in the form value
        initial_value: Initial value; falls back to the form's initial value
        validator: Callable returning an error message or None
        value_transformer: Applied to the value on save
        on_changed: Called with the new value after each user change
        on_reset: Called after the field resets
        on_saved: Called with the raw value when the field saves
        enabled: Whether the field accepts input
        autovalidate_mode: When the field validates itself
        decoration: Label, helper, hint and forced error texts
        form: FormBuilder to register with; otherwise the enclosing one
    """

    value_changed = pyqtSignal(object)

    def __init__(
        self,
        name: str,
        initial_value: Any = None,
        validator: Optional[Callable[[Any], Optional[str]]] = None,
        value_transformer: Optional[Callable[[Any], Any]] = None,
        on_changed: Optional[Callable[[Any], None]] = None,
        on_reset: Optional[Callable[[], None]] = None,
        on_saved: Optional[Callable[[Any], None]] = None,
        enabled: bool = True,
        autovalidate_mode: Optional[AutovalidateMode] = None,
        decoration: Optional[InputDecoration] = None,
        form: Optional[FormBuilder] = None,
        parent: Optional[QWidget] = None,
    ):
        super().__init__(parent)
        self.decoration = decoration or InputDecoration()
        self._on_changed = on_changed
        self.state = FormBuilderFieldState(
            name=name,
            initial_value=initial_value,
            validator=validator,
            value_transformer=value_transformer,
            on_changed=self._emit_changed,
            on_reset=on_reset,
            on_saved=on_saved,
            enabled=enabled,
            autovalidate_mode=autovalidate_mode,
            decoration_error_text=self.decoration.error_text,
            value_check=self.check_value,
            default_value=self.default_value(),
        )
        self._syncing = False
        self._disposed = False

        self._build_ui()
        self.control = self.create_control()
        for contract in (ValueGettable, ValueSettable, ChangeSignalEmitter):
            if not isinstance(self.control, contract):
                raise TypeError(
                    f"{type(self).__name__}.create_control() returned "
                    f"{type(self.control).__name__}, which does not implement {contract.__name__}"
                )
        if self.decoration.hint_text and isinstance(self.control, PlaceholderCapable):
            self.control.set_placeholder(self.decoration.hint_text)
        self._control_layout.addWidget(self.wrap_control(self.control))
        self.control.connect_change_signal(self._on_control_changed)
        self._watch_focus(self.control)

        self.state.listener = self._render
        self.destroyed.connect(functools.partial(_release_state, self.state))
        self.attach(form)

    # ---- construction ----

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)

        self.label = QLabel(self.decoration.label_text or "", self)
        self.label.setVisible(bool(self.decoration.label_text))
        layout.addWidget(self.label)

        self._control_layout = QVBoxLayout()
        self._control_layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(self._control_layout)

        self.message_label = QLabel(self)
        self.message_label.setWordWrap(True)
        self.message_label.setVisible(False)
        layout.addWidget(self.message_label)

    def create_control(self) -> QWidget:
        """Return the input control; must implement the value and change-signal ABCs."""
        raise NotImplementedError(f"{type(self).__name__} must implement create_control()")

    def wrap_control(self, control: QWidget) -> QWidget:
        """Return the widget placed in the layout; the control itself by default."""
        return control

    def _watch_focus(self, widget: QWidget) -> None:
        widget.installEventFilter(self)
        for child in widget.findChildren(QWidget):
            child.installEventFilter(self)

    # ---- registration ----

    def attach(self, form: Optional[FormBuilder]) -> None:
        """Register with ``form`` (None for a standalone field) and load the initial value."""
        self.state.detach()
        self.state.attach(form.state if form is not None else None)

    def dispose(self) -> None:
        """Unregister from the form; the widget can then be deleted."""
        if self._disposed:
            return
        self._disposed = True
        self.control.disconnect_change_signal(self._on_control_changed)
        self.state.detach()
        logger.debug(f"Disposed field '{self.name}'")

    def showEvent(self, event):
        # Fields placed into a form's layout without add_field() find it on first show
        if self.state.form is None and not self._disposed:
            from pyqt_formbuilder.forms.form_builder import FormBuilder
            form = FormBuilder.of(self)
            if form is not None:
                self.attach(form)
        super().showEvent(event)

    # ---- state mirroring ----

    @property
    def name(self) -> str:
        return self.state.name

    @property
    def value(self) -> Any:
        return self.state.value

    @property
    def initial_value(self) -> Any:
        return self.state.initial_value

    @property
    def error_text(self) -> Optional[str]:
        return self.state.error_text

    @property
    def has_error(self) -> bool:
        return self.state.has_error

    @property
    def is_valid(self) -> bool:
        return self.state.is_valid

    @property
    def touched(self) -> bool:
        return self.state.touched

    def validate(self) -> bool:
        return self.state.validate()

    def save(self) -> None:
        self.state.save()

    def reset(self) -> None:
        self.state.reset()

    def did_change(self, value: Any) -> None:
        """Change the value as if the user had edited it."""
        self.state.did_change(value)

    def invalidate(self, error_text: str) -> None:
        self.state.invalidate(error_text)

    def set_field_enabled(self, enabled: bool) -> None:
        self.state.enabled = enabled

    def request_focus(self) -> None:
        self.control.setFocus()

    # ---- control <-> state ----

    def default_value(self) -> Any:
        """Value used when neither the field nor the form has an initial value."""
        return None

    def check_value(self, value: Any) -> None:
        """Raise ValueError or TypeError for a value the control cannot show."""

    def to_control_value(self, value: Any) -> Any:
        """Convert a field value for the control; identity by default."""
        return value

    def from_control_value(self, value: Any) -> Any:
        """Convert a control value into a field value; identity by default."""
        return value

    def _emit_changed(self, value: Any) -> None:
        if self._on_changed is not None:
            self._on_changed(value)
        self.value_changed.emit(value)

    def _on_control_changed(self, value: Any) -> None:
        if self._syncing:
            return
        self.did_change(self.from_control_value(value))

    def _render(self) -> None:
        control_value = self.to_control_value(self.state.value)
        if self.control.get_value() != control_value:
            self._syncing = True
            try:
                self.control.set_value(control_value)
            finally:
                self._syncing = False

        self.control.setEnabled(self.state.enabled)
        self._render_message()

    def _render_message(self) -> None:
        config = get_form_config()
        error = self.state.error_text
        if error is not None:
            self.message_label.setText(error)
            self.message_label.setStyleSheet(f"color: {config.error_color};")
            self.message_label.setVisible(True)
        elif self.decoration.helper_text:
            self.message_label.setText(self.decoration.helper_text)
            self.message_label.setStyleSheet(f"color: {config.helper_color};")
            self.message_label.setVisible(True)
        else:
            self.message_label.clear()
            self.message_label.setVisible(False)

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.FocusIn:
            self.state.mark_touched()
        return super().eventFilter(obj, event)
