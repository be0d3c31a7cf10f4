"""
Form state: the registry of fields belonging to one form.

FormBuilderState holds the name -> field mapping, the saved value snapshot and
the form-wide settings (initial values, enabled, skip_disabled). It has no Qt
dependency; the FormBuilder widget owns one and forwards to it.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional

from pyqt_formbuilder.forms.constants import AutovalidateMode
from pyqt_formbuilder.protocols.form_config import get_form_config

if TYPE_CHECKING:
    from pyqt_formbuilder.forms.field_state import FormBuilderFieldState

logger = logging.getLogger(__name__)


class FormBuilderState:
    """
    Coordinates save/validate/reset across every registered field.

    Fields register under their name; a second registration with the same
    name replaces the first. ``value`` is only populated by save(), which asks
    each field to contribute its (possibly transformed) value.
    """

    def __init__(
        self,
        initial_value: Optional[Mapping[str, Any]] = None,
        enabled: bool = True,
        skip_disabled: Optional[bool] = None,
        autovalidate_mode: AutovalidateMode = AutovalidateMode.DISABLED,
        on_changed: Optional[Callable[[Dict[str, Any]], None]] = None,
        on_validated: Optional[Callable[[bool], None]] = None,
    ):
        self._initial_value: Dict[str, Any] = dict(initial_value or {})
        self._enabled = enabled
        self._skip_disabled = (
            get_form_config().default_skip_disabled if skip_disabled is None else skip_disabled
        )
        self.autovalidate_mode = autovalidate_mode
        self.on_changed = on_changed
        self.on_validated = on_validated
        self._fields: Dict[str, FormBuilderFieldState] = {}
        self._value: Dict[str, Any] = {}

    # ---- read-only views ----

    @property
    def fields(self) -> Dict[str, FormBuilderFieldState]:
        return dict(self._fields)

    @property
    def value(self) -> Dict[str, Any]:
        """Snapshot of values contributed by the last save()."""
        return dict(self._value)

    @property
    def instant_value(self) -> Dict[str, Any]:
        """Current value of every field, without transformers or saving."""
        return {name: field.value for name, field in self._fields.items()}

    @property
    def initial_value(self) -> Dict[str, Any]:
        return dict(self._initial_value)

    @property
    def skip_disabled(self) -> bool:
        return self._skip_disabled

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, enabled: bool) -> None:
        if enabled == self._enabled:
            return
        self._enabled = enabled
        logger.debug(f"Form {'enabled' if enabled else 'disabled'}")
        for field in list(self._fields.values()):
            field.refresh()

    # ---- registration ----

    def register_field(self, name: str, field: FormBuilderFieldState) -> None:
        existing = self._fields.get(name)
        if existing is not None and existing is not field:
            logger.warning(f"Field '{name}' already registered; replacing existing field")
        self._fields[name] = field
        logger.debug(f"Registered field '{name}' ({len(self._fields)} fields)")

    def unregister_field(self, name: str, field: FormBuilderFieldState) -> None:
        # Only the currently registered field may remove the entry; a field that
        # was replaced by a duplicate registration must not evict its successor
        if self._fields.get(name) is not field:
            logger.debug(f"Ignoring unregister of stale field '{name}'")
            return
        del self._fields[name]
        self._value.pop(name, None)
        logger.debug(f"Unregistered field '{name}' ({len(self._fields)} fields)")

    # ---- value snapshot ----

    def set_internal_field_value(self, name: str, value: Any) -> None:
        self._value[name] = value

    def remove_internal_field_value(self, name: str) -> None:
        self._value.pop(name, None)

    # ---- form-wide operations ----

    def save(self) -> None:
        for field in list(self._fields.values()):
            field.save()

    def validate(self) -> bool:
        # Every field validates so that every error gets displayed
        results = [field.validate() for field in list(self._fields.values())]
        result = all(results)
        if self.on_validated is not None:
            self.on_validated(result)
        return result

    def save_and_validate(self) -> bool:
        self.save()
        return self.validate()

    def reset(self) -> None:
        for field in list(self._fields.values()):
            field.reset()
        self._value.clear()

    def patch_value(self, values: Mapping[str, Any]) -> None:
        """
        Change the value of each named field as if the user had edited it.

        Values a field rejects leave that field unchanged; the remaining fields
        are still patched and a ValueError naming the rejected fields is
        raised at the end.
        """
        rejected: Dict[str, str] = {}
        for name, value in values.items():
            field = self._fields.get(name)
            if field is None:
                logger.debug(f"patch_value: no field named '{name}', skipping")
                continue
            try:
                field.check_value(value)
            except (ValueError, TypeError) as e:
                logger.warning(f"patch_value: field '{name}' rejected {value!r}: {e}")
                rejected[name] = str(e)
                continue
            field.did_change(value)
        if rejected:
            raise ValueError(f"Rejected values for fields: {rejected}")

    def invalidate_field(self, name: str, error_text: str) -> None:
        """Attach an externally produced error (e.g. from a server) to a field."""
        if name not in self._fields:
            raise KeyError(f"No field named '{name}' in this form")
        self._fields[name].invalidate(error_text)

    @property
    def is_valid(self) -> bool:
        return all(field.is_valid for field in self._fields.values())

    @property
    def has_error(self) -> bool:
        return any(field.has_error for field in self._fields.values())

    @property
    def errors(self) -> Dict[str, str]:
        return {
            name: field.error_text
            for name, field in self._fields.items()
            if field.error_text is not None
        }

    def notify_field_changed(self, name: str) -> None:
        """Called by a field after the user changed it."""
        if self.autovalidate_mode == AutovalidateMode.ALWAYS:
            self.validate()
        if self.on_changed is not None:
            self.on_changed(self.instant_value)
