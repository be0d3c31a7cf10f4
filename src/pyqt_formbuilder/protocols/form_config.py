"""Process-wide configuration for form building.

Provides hooks for applications to customize default field behavior and
the default validator error messages.
"""

from typing import Optional
from dataclasses import dataclass, field

from pyqt_formbuilder.forms.constants import AutovalidateMode


@dataclass
class ValidatorMessages:
    """Default error texts used by FormBuilderValidators when none is given.

    Applications can replace these to localize messages.
    """

    required: str = "This field cannot be empty."
    equal: str = "This field value must be equal to {value}."
    not_equal: str = "This field value must not be equal to {value}."
    min: str = "Value must be greater than or equal to {min}."
    min_exclusive: str = "Value must be greater than {min}."
    max: str = "Value must be less than or equal to {max}."
    max_exclusive: str = "Value must be less than {max}."
    min_length: str = "Value must have a length greater than or equal to {min_length}."
    max_length: str = "Value must have a length less than or equal to {max_length}."
    email: str = "This field requires a valid email address."
    url: str = "This field requires a valid URL address."
    match: str = "Value does not match pattern."
    numeric: str = "Value must be numeric."
    integer: str = "Value must be an integer."
    credit_card: str = "This field requires a valid credit card number."
    ip: str = "This field requires a valid IP."
    date_string: str = "This field requires a valid date string."


@dataclass
class FormBuilderConfig:
    """Base configuration for form building behavior.

    Attributes:
        default_autovalidate_mode: Mode used by fields that don't set one
        default_skip_disabled: Whether new forms omit disabled fields on save
        messages: Default validator error texts
        typeahead_debounce_ms: Delay before a typeahead asks for suggestions
        error_color: Color of the error line under a field
        helper_color: Color of the helper line under a field
    """

    default_autovalidate_mode: AutovalidateMode = AutovalidateMode.ON_USER_INTERACTION
    default_skip_disabled: bool = False
    messages: ValidatorMessages = field(default_factory=ValidatorMessages)
    typeahead_debounce_ms: int = 300
    error_color: str = "#d32f2f"
    helper_color: str = "#757575"
    field_spacing: int = 10


# Global config instance (set by application)
_form_config: Optional[FormBuilderConfig] = None


def set_form_config(config: Optional[FormBuilderConfig]) -> None:
    """Set the global form building configuration.

    Args:
        config: FormBuilderConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormBuilderConfig:
    """Get the current form building configuration.

    Returns:
        Current FormBuilderConfig or default if not set
    """
    if _form_config is None:
        return FormBuilderConfig()
    return _form_config
