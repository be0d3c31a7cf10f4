"""
pyqt-formbuilder: declarative forms for PyQt6.

A FormBuilder container holds named fields (text, checkbox, dropdown,
slider, date picker, ...) that register themselves with the form's state.
The form saves, validates and resets every field at once and exposes the
aggregate value; FormBuilderValidators builds composable field validators.

Architecture:
- Tier 1 (State): FormBuilderState / FormBuilderFieldState, plain Python
- Tier 2 (Protocols): control ABCs and Qt adapters
- Tier 3 (Forms): FormBuilder and FormBuilderField widgets
- Tier 4 (Fields): concrete field widgets
"""

from __future__ import annotations

import importlib

__version__ = "0.1.0"

_EXPORTS = {
    "FormBuilderValidators": "pyqt_formbuilder.validators",
    "FormBuilderConfig": "pyqt_formbuilder.protocols",
    "ValidatorMessages": "pyqt_formbuilder.protocols",
    "set_form_config": "pyqt_formbuilder.protocols",
    "get_form_config": "pyqt_formbuilder.protocols",
    "AutovalidateMode": "pyqt_formbuilder.forms",
    "ControlAffinity": "pyqt_formbuilder.forms",
    "InputType": "pyqt_formbuilder.forms",
    "OptionsOrientation": "pyqt_formbuilder.forms",
    "InputDecoration": "pyqt_formbuilder.forms",
    "FormBuilderFieldOption": "pyqt_formbuilder.forms",
    "FormBuilderFieldState": "pyqt_formbuilder.forms",
    "FormBuilderState": "pyqt_formbuilder.forms",
    "FormBuilder": "pyqt_formbuilder.forms",
    "FormBuilderField": "pyqt_formbuilder.forms",
    "FormBuilderTextField": "pyqt_formbuilder.fields",
    "FormBuilderCheckbox": "pyqt_formbuilder.fields",
    "FormBuilderSwitch": "pyqt_formbuilder.fields",
    "FormBuilderCheckboxGroup": "pyqt_formbuilder.fields",
    "FormBuilderRadioGroup": "pyqt_formbuilder.fields",
    "FormBuilderChoiceChip": "pyqt_formbuilder.fields",
    "FormBuilderFilterChips": "pyqt_formbuilder.fields",
    "FormBuilderSegmentedControl": "pyqt_formbuilder.fields",
    "FormBuilderDropdown": "pyqt_formbuilder.fields",
    "FormBuilderSearchableDropdown": "pyqt_formbuilder.fields",
    "FormBuilderTypeAhead": "pyqt_formbuilder.fields",
    "FormBuilderChipsInput": "pyqt_formbuilder.fields",
    "FormBuilderSlider": "pyqt_formbuilder.fields",
    "FormBuilderRangeSlider": "pyqt_formbuilder.fields",
    "FormBuilderDateTimePicker": "pyqt_formbuilder.fields",
}


def __getattr__(name: str):
    if name in _EXPORTS:
        value = getattr(importlib.import_module(_EXPORTS[name]), name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["__version__", *_EXPORTS.keys()]
