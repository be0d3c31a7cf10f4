"""
Form state and the form/field container widgets.

The state classes are plain Python; the widget classes need PyQt6 and are
loaded lazily.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .constants import AutovalidateMode, ControlAffinity, InputType, OptionsOrientation
    from .decoration import InputDecoration
    from .field_option import FormBuilderFieldOption
    from .field_state import FormBuilderFieldState
    from .form_state import FormBuilderState
    from .form_builder import FormBuilder
    from .form_builder_field import FormBuilderField

_EXPORTS = {
    "AutovalidateMode": ("pyqt_formbuilder.forms.constants", "AutovalidateMode"),
    "ControlAffinity": ("pyqt_formbuilder.forms.constants", "ControlAffinity"),
    "InputType": ("pyqt_formbuilder.forms.constants", "InputType"),
    "OptionsOrientation": ("pyqt_formbuilder.forms.constants", "OptionsOrientation"),
    "InputDecoration": ("pyqt_formbuilder.forms.decoration", "InputDecoration"),
    "FormBuilderFieldOption": ("pyqt_formbuilder.forms.field_option", "FormBuilderFieldOption"),
    "FormBuilderFieldState": ("pyqt_formbuilder.forms.field_state", "FormBuilderFieldState"),
    "FormBuilderState": ("pyqt_formbuilder.forms.form_state", "FormBuilderState"),
    "FormBuilder": ("pyqt_formbuilder.forms.form_builder", "FormBuilder"),
    "FormBuilderField": ("pyqt_formbuilder.forms.form_builder_field", "FormBuilderField"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
