"""
Widget ABC contracts for form field controls.

Every control a FormBuilderField wraps implements these contracts, so the field
never needs to know whether it is holding a QLineEdit, a QComboBox or a
composite widget.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable


class ValueGettable(ABC):
    """
    ABC for controls that can return a value.

    All field controls must implement this so the field can read user input.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the control.

        Returns:
            The control's current value. None if no value set.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for controls that can accept a value.

    All field controls must implement this so reset/patch can update them.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the control's value.

        Args:
            value: The value to set. None clears the control.
        """
        pass


class PlaceholderCapable(ABC):
    """ABC for controls that can display hint text while empty."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class RangeConfigurable(ABC):
    """
    ABC for controls that support numeric range configuration.

    Implemented by sliders and range sliders.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float, divisions: int = None) -> None:
        """
        Configure the valid range for numeric input.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
            divisions: Number of discrete steps, None for a continuous range
        """
        pass


class OptionsSelectable(ABC):
    """
    ABC for controls that select from a list of options.

    Implemented by dropdowns and option groups (radio, checkbox, chips).
    """

    @abstractmethod
    def set_options(self, options: Iterable[Any]) -> None:
        """
        Replace the offered options.

        Args:
            options: FormBuilderFieldOption instances
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for controls that emit change signals.

    Provides explicit contract for signal connection, eliminating duck typing
    of signal names (textChanged vs valueChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the control's change signal.

        The callback receives the new value whenever the control's value changes.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect a callback previously given to connect_change_signal.
        """
        pass
