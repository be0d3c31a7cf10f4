"""
Widget protocol definitions, adapters and configuration.

ABC-based control contracts that eliminate duck typing in favor of
explicit, fail-loud inheritance-based architecture. Adapters are loaded
lazily so the configuration can be imported without touching Qt widgets.
"""

from __future__ import annotations

import importlib

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    RangeConfigurable,
    OptionsSelectable,
    ChangeSignalEmitter,
)
from .form_config import FormBuilderConfig, ValidatorMessages, set_form_config, get_form_config

_ADAPTERS = "pyqt_formbuilder.protocols.widget_adapters"
_LAZY_EXPORTS = {
    "PyQtWidgetMeta": _ADAPTERS,
    "SignalAdapterMixin": _ADAPTERS,
    "LineEditAdapter": _ADAPTERS,
    "PlainTextAdapter": _ADAPTERS,
    "TypeAheadLineEditAdapter": _ADAPTERS,
    "ComboBoxAdapter": _ADAPTERS,
    "SearchableComboBoxAdapter": _ADAPTERS,
    "CheckBoxAdapter": _ADAPTERS,
    "SwitchAdapter": _ADAPTERS,
    "SliderAdapter": _ADAPTERS,
    "RangeSliderAdapter": _ADAPTERS,
    "DateTimeEditAdapter": _ADAPTERS,
    "OptionGroupAdapter": _ADAPTERS,
    "ChipsInputAdapter": _ADAPTERS,
}


def __getattr__(name: str):
    if name in _LAZY_EXPORTS:
        module = importlib.import_module(_LAZY_EXPORTS[name])
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "RangeConfigurable",
    "OptionsSelectable",
    "ChangeSignalEmitter",
    "FormBuilderConfig",
    "ValidatorMessages",
    "set_form_config",
    "get_form_config",
    *_LAZY_EXPORTS.keys(),
]
