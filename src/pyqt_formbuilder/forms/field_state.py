"""
Field state: value, error and lifecycle of a single form field.

FormBuilderFieldState is the part of a field that does not depend on Qt. The
FormBuilderField widget owns one, feeds user edits into did_change() and
re-renders whenever the state calls its listener.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Optional

from pyqt_formbuilder.forms.constants import AutovalidateMode
from pyqt_formbuilder.protocols.form_config import get_form_config

if TYPE_CHECKING:
    from pyqt_formbuilder.forms.form_state import FormBuilderState

logger = logging.getLogger(__name__)


class FormBuilderFieldState:
    """
    State of one named field.

    Args:
        name: Key of the field in the form value
        initial_value: Initial value; falls back to the form's initial_value[name]
        validator: Callable returning an error message or None
        value_transformer: Applied to the value when it is saved into the form
        on_changed: Called with the new value after each user change
        on_reset: Called after the field resets
        on_saved: Called with the raw value when the field saves
        enabled: Whether the field accepts input (also gated by the form)
        autovalidate_mode: When the field validates itself
        decoration_error_text: Error forced by the decoration; keeps the field invalid
        listener: Called with no arguments whenever value or error changes
        value_check: Raises ValueError or TypeError for a value the field cannot
            hold; consulted before any change so a rejected value leaves the
            field untouched
        default_value: Value used when neither the field nor the form supplies one
    """

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
        decoration_error_text: Optional[str] = None,
        listener: Optional[Callable[[], None]] = None,
        value_check: Optional[Callable[[Any], None]] = None,
        default_value: Any = None,
    ):
        if not name:
            raise ValueError("Field name must be a non-empty string")
        self.name = name
        self._initial_value = initial_value
        self.validator = validator
        self.value_transformer = value_transformer
        self.on_changed = on_changed
        self.on_reset = on_reset
        self.on_saved = on_saved
        self._enabled = enabled
        self.autovalidate_mode = (
            get_form_config().default_autovalidate_mode
            if autovalidate_mode is None else autovalidate_mode
        )
        self.decoration_error_text = decoration_error_text
        self.listener = listener
        self.value_check = value_check
        self.default_value = default_value

        self._form: Optional[FormBuilderState] = None
        self._value: Any = None
        self._error_text: Optional[str] = None
        self._touched = False
        self._has_interacted = False

    # ---- lifecycle ----

    def attach(self, form: Optional[FormBuilderState]) -> None:
        """Register with ``form`` (if any) and load the initial value."""
        self._form = form
        if form is not None:
            form.register_field(self.name, self)
        self._value = self.initial_value
        if self.autovalidate_mode == AutovalidateMode.ALWAYS:
            self._error_text = self._run_validator()
        self._notify()

    def detach(self) -> None:
        if self._form is not None:
            self._form.unregister_field(self.name, self)
            self._form = None

    @property
    def form(self) -> Optional[FormBuilderState]:
        return self._form

    # ---- properties ----

    @property
    def initial_value(self) -> Any:
        """Field initial value if set, else the form's initial value for this name, else default_value."""
        if self._initial_value is not None:
            return self._initial_value
        if self._form is not None and self._form.initial_value.get(self.name) is not None:
            return self._form.initial_value[self.name]
        return self.default_value

    @property
    def value(self) -> Any:
        return self._value

    @property
    def error_text(self) -> Optional[str]:
        if self.decoration_error_text is not None:
            return self.decoration_error_text
        return self._error_text

    @property
    def has_error(self) -> bool:
        return self._error_text is not None or self.decoration_error_text is not None

    @property
    def is_valid(self) -> bool:
        """True if the current value passes the validator (does not display errors)."""
        if self.decoration_error_text is not None:
            return False
        return self.validator is None or self.validator(self._value) is None

    @property
    def touched(self) -> bool:
        return self._touched

    @property
    def enabled(self) -> bool:
        form_enabled = self._form.enabled if self._form is not None else True
        return self._enabled and form_enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        self._enabled = enabled
        self._notify()

    # ---- operations ----

    def set_value(self, value: Any) -> None:
        """Set the value without callbacks or validation."""
        self.check_value(value)
        self._value = value
        self._notify()

    def did_change(self, value: Any) -> None:
        """Record a user edit: autovalidate, call on_changed, notify the form."""
        self.check_value(value)
        self._value = value
        self._has_interacted = True
        if self._should_autovalidate():
            self._error_text = self._run_validator()
        self._notify()
        if self.on_changed is not None:
            self.on_changed(value)
        if self._form is not None:
            self._form.notify_field_changed(self.name)

    def check_value(self, value: Any) -> None:
        """Raise ValueError or TypeError if the field cannot hold ``value``."""
        if self.value_check is not None:
            self.value_check(value)

    def validate(self) -> bool:
        self._error_text = self._run_validator()
        self._notify()
        return self._error_text is None and self.decoration_error_text is None

    def save(self) -> None:
        if self.on_saved is not None:
            self.on_saved(self._value)
        if self._form is None:
            return
        if self.enabled or not self._form.skip_disabled:
            value = self._value
            if self.value_transformer is not None:
                value = self.value_transformer(value)
            self._form.set_internal_field_value(self.name, value)
        else:
            self._form.remove_internal_field_value(self.name)

    def reset(self) -> None:
        self._value = self.initial_value
        self._error_text = None
        self._touched = False
        self._has_interacted = False
        self._notify()
        if self.on_reset is not None:
            self.on_reset()

    def mark_touched(self) -> None:
        """Called when the field gains focus."""
        if not self._touched:
            self._touched = True
            logger.debug(f"Field '{self.name}' touched")

    def invalidate(self, error_text: str) -> None:
        """Display ``error_text`` until the next validation or reset."""
        self._error_text = error_text
        self._notify()

    def refresh(self) -> None:
        """Ask the listener to re-render (e.g. after the form was disabled)."""
        self._notify()

    # ---- internals ----

    def _run_validator(self) -> Optional[str]:
        if self.validator is None:
            return None
        return self.validator(self._value)

    def _should_autovalidate(self) -> bool:
        if self.autovalidate_mode == AutovalidateMode.ALWAYS:
            return True
        if self.autovalidate_mode == AutovalidateMode.ON_USER_INTERACTION:
            return self._has_interacted
        return False

    def _notify(self) -> None:
        if self.listener is not None:
            self.listener()
