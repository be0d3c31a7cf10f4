"""
Field widgets.

Each field is a FormBuilderField subclass wrapping one control adapter.
"""

from .text_field import FormBuilderTextField
from .checkbox import FormBuilderCheckbox
from .switch import FormBuilderSwitch
from .options import (
    FormBuilderCheckboxGroup,
    FormBuilderRadioGroup,
    FormBuilderChoiceChip,
    FormBuilderFilterChips,
    FormBuilderSegmentedControl,
)
from .dropdown import FormBuilderDropdown, FormBuilderSearchableDropdown
from .typeahead import FormBuilderTypeAhead
from .chips_input import FormBuilderChipsInput
from .slider import FormBuilderSlider, FormBuilderRangeSlider
from .date_time_picker import FormBuilderDateTimePicker

__all__ = [
    "FormBuilderTextField",
    "FormBuilderCheckbox",
    "FormBuilderSwitch",
    "FormBuilderCheckboxGroup",
    "FormBuilderRadioGroup",
    "FormBuilderChoiceChip",
    "FormBuilderFilterChips",
    "FormBuilderSegmentedControl",
    "FormBuilderDropdown",
    "FormBuilderSearchableDropdown",
    "FormBuilderTypeAhead",
    "FormBuilderChipsInput",
    "FormBuilderSlider",
    "FormBuilderRangeSlider",
    "FormBuilderDateTimePicker",
]
