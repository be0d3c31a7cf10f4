"""
Widget adapters that wrap Qt widgets to implement the control ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSlider.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSlider.setValue() vs QComboBox.setCurrentIndex()
- textChanged vs valueChanged vs currentIndexChanged vs toggled

All adapters implement consistent interface via ABCs:
- get_value() / set_value() for all controls
- connect_change_signal() for all controls

Composite controls (option groups, range slider, chips input) are QWidgets
holding several Qt widgets and expose a single value-carrying signal.
"""

import logging
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Dict, Iterable, List, Optional

from PyQt6.QtWidgets import (
    QAbstractButton, QButtonGroup, QCheckBox, QComboBox, QCompleter,
    QDateTimeEdit, QGridLayout, QHBoxLayout, QLineEdit, QPlainTextEdit,
    QPushButton, QRadioButton, QSizePolicy, QSlider, QVBoxLayout, QWidget,
)
from PyQt6.QtCore import QDate, QDateTime, QObject, QSize, QStringListModel, Qt, QTime, pyqtSignal
from PyQt6.QtGui import QColor, QPainter

from pyqt_formbuilder.forms.constants import ControlAffinity, InputType, OptionsOrientation
from pyqt_formbuilder.forms.field_option import FormBuilderFieldOption, normalize_options

from .widget_protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    RangeConfigurable, OptionsSelectable, ChangeSignalEmitter
)

logger = logging.getLogger(__name__)

# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)
_AbcMetaclass = type(ChangeSignalEmitter)


class PyQtWidgetMeta(_QtMetaclass, _AbcMetaclass):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class SignalAdapterMixin(ChangeSignalEmitter):
    """
    Implements ChangeSignalEmitter on top of one Qt signal.

    Subclasses return the signal from _change_signal(). Callbacks receive
    get_value(), never the raw signal arguments, and are remembered so they
    can be disconnected again.
    """

    def _change_signal(self):
        raise NotImplementedError

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        if not hasattr(self, "_change_slots"):
            self._change_slots: Dict[Callable, Callable] = {}
        slot = lambda *args: callback(self.get_value())
        self._change_slots[callback] = slot
        self._change_signal().connect(slot)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        slot = getattr(self, "_change_slots", {}).pop(callback, None)
        if slot is None:
            return
        try:
            self._change_signal().disconnect(slot)
        except TypeError:
            # Signal not connected - ignore
            pass


class LineEditAdapter(QLineEdit, SignalAdapterMixin, ValueGettable, ValueSettable,
                      PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    The value is the raw text; an empty line reads as "" so that
    required() and min_length() see what the user typed.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.text()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)

    def _change_signal(self):
        return self.textChanged


class PlainTextAdapter(QPlainTextEdit, SignalAdapterMixin, ValueGettable, ValueSettable,
                       PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """Adapter for multi-line text input."""

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.toPlainText()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setPlainText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.setPlaceholderText(text)

    def _change_signal(self):
        return self.textChanged


class TypeAheadLineEditAdapter(LineEditAdapter):
    """LineEditAdapter with a popup of suggestions that can be replaced at any time."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._suggestion_model = QStringListModel(self)
        completer = QCompleter(self._suggestion_model, self)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        completer.setFilterMode(Qt.MatchFlag.MatchContains)
        self.setCompleter(completer)

    def set_suggestions(self, suggestions: Iterable[str]) -> None:
        self._suggestion_model.setStringList([str(s) for s in suggestions])
        if self.hasFocus() and self.text():
            self.completer().complete()

    def suggestions(self) -> List[str]:
        return self._suggestion_model.stringList()


class ComboBoxAdapter(QComboBox, SignalAdapterMixin, ValueGettable, ValueSettable,
                      PlaceholderCapable, OptionsSelectable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores option values in itemData, not just display text.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        if value is not None:
            for i in range(self.count()):
                if self.itemData(i) == value:
                    self.setCurrentIndex(i)
                    return
            logger.debug(f"ComboBoxAdapter: value {value!r} not among options, clearing")
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        # ComboBox placeholder is shown when no selection
        self.setPlaceholderText(text)

    def set_options(self, options: Iterable[Any]) -> None:
        """Implement OptionsSelectable ABC."""
        current = self.get_value()
        self.blockSignals(True)
        try:
            self.clear()
            for option in normalize_options(options):
                self.addItem(option.display, option.value)
        finally:
            self.blockSignals(False)
        self.set_value(current)

    def set_option_enabled(self, value: Any, enabled: bool) -> None:
        """Grey out a single option so it cannot be picked."""
        index = self.findData(value)
        if index < 0:
            return
        item = self.model().item(index)
        if item is not None:
            item.setEnabled(enabled)

    def _change_signal(self):
        return self.currentIndexChanged


class SearchableComboBoxAdapter(ComboBoxAdapter):
    """
    Editable ComboBoxAdapter that filters its items as the user types.

    Typed text that does not name an item reads as None.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setEditable(True)
        self.setInsertPolicy(QComboBox.InsertPolicy.NoInsert)
        completer = self.completer()
        completer.setCompletionMode(QCompleter.CompletionMode.PopupCompletion)
        completer.setFilterMode(Qt.MatchFlag.MatchContains)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self.currentIndex() < 0 or self.currentText() != self.itemText(self.currentIndex()):
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        super().set_value(value)
        if self.currentIndex() < 0:
            self.setEditText("")

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.lineEdit().setPlaceholderText(text)


class CheckBoxAdapter(QCheckBox, SignalAdapterMixin, ValueGettable, ValueSettable,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self.setChecked(bool(value) if value is not None else False)

    def _change_signal(self):
        return self.toggled


class SwitchAdapter(CheckBoxAdapter):
    """CheckBoxAdapter drawn as a sliding on/off switch."""

    TRACK_WIDTH = 36
    TRACK_HEIGHT = 18

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

    def sizeHint(self) -> QSize:
        return QSize(self.TRACK_WIDTH + 4, self.TRACK_HEIGHT + 4)

    def hitButton(self, pos) -> bool:
        return self.contentsRect().contains(pos)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        track_color = self.palette().highlight().color() if self.isChecked() else QColor("#9e9e9e")
        if not self.isEnabled():
            painter.setOpacity(0.4)

        radius = self.TRACK_HEIGHT / 2
        painter.setBrush(track_color)
        painter.drawRoundedRect(2, 2, self.TRACK_WIDTH, self.TRACK_HEIGHT, radius, radius)

        knob = self.TRACK_HEIGHT - 4
        x = 2 + self.TRACK_WIDTH - knob - 2 if self.isChecked() else 4
        painter.setBrush(QColor("#ffffff"))
        painter.drawEllipse(int(x), 4, knob, knob)
        painter.end()


class SliderAdapter(QSlider, SignalAdapterMixin, ValueGettable, ValueSettable,
                    RangeConfigurable, metaclass=PyQtWidgetMeta):
    """
    Adapter for QSlider supporting float ranges.

    QSlider only moves in integer steps, so the range is mapped onto
    ``divisions`` steps (or one step per integer for integer ranges).
    """

    DEFAULT_STEPS = 100

    def __init__(self, parent=None):
        super().__init__(Qt.Orientation.Horizontal, parent)
        self._minimum: float = 0
        self._maximum: float = 100
        self._steps = 100
        self.configure_range(0, 100)

    def configure_range(self, minimum: float, maximum: float, divisions: int = None) -> None:
        """Implement RangeConfigurable ABC."""
        if maximum <= minimum:
            raise ValueError(f"Slider maximum ({maximum}) must exceed minimum ({minimum})")
        if divisions is not None and divisions <= 0:
            raise ValueError(f"divisions must be positive, got {divisions}")
        self._minimum = minimum
        self._maximum = maximum
        if divisions is not None:
            self._steps = divisions
        elif isinstance(minimum, int) and isinstance(maximum, int):
            self._steps = maximum - minimum
        else:
            self._steps = self.DEFAULT_STEPS
        self.setRange(0, self._steps)
        self.setPageStep(max(1, self._steps // 10))

    @property
    def step_size(self) -> float:
        return (self._maximum - self._minimum) / self._steps

    def _is_integral(self) -> bool:
        span = self._maximum - self._minimum
        return isinstance(self._minimum, int) and isinstance(self._maximum, int) and span % self._steps == 0

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self._is_integral():
            return self._minimum + self.value() * (self._maximum - self._minimum) // self._steps
        return self._minimum + self.value() * self.step_size

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        if value is None:
            value = self._minimum
        value = min(max(value, self._minimum), self._maximum)
        self.setValue(round((value - self._minimum) / self.step_size))

    def _change_signal(self):
        return self.valueChanged


class RangeSliderAdapter(QWidget, SignalAdapterMixin, ValueGettable, ValueSettable,
                         RangeConfigurable, metaclass=PyQtWidgetMeta):
    """
    Two sliders editing a (start, end) pair.

    Dragging one handle past the other pushes it along, so start <= end holds.
    """

    rangeChanged = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.start_slider = SliderAdapter(self)
        self.end_slider = SliderAdapter(self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(2)
        layout.addWidget(self.start_slider)
        layout.addWidget(self.end_slider)
        self.start_slider.valueChanged.connect(self._on_start_moved)
        self.end_slider.valueChanged.connect(self._on_end_moved)

    def configure_range(self, minimum: float, maximum: float, divisions: int = None) -> None:
        """Implement RangeConfigurable ABC."""
        for slider in (self.start_slider, self.end_slider):
            slider.configure_range(minimum, maximum, divisions)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return (self.start_slider.get_value(), self.end_slider.get_value())

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        if value is None:
            start, end = self.start_slider._minimum, self.end_slider._maximum
        else:
            start, end = value
            if start > end:
                raise ValueError(f"Range start {start} is greater than end {end}")
        self.blockSignals(True)
        try:
            self.start_slider.set_value(start)
            self.end_slider.set_value(end)
        finally:
            self.blockSignals(False)
        self.rangeChanged.emit(self.get_value())

    def _on_start_moved(self, position: int):
        if position > self.end_slider.value():
            self.end_slider.setValue(position)
        self.rangeChanged.emit(self.get_value())

    def _on_end_moved(self, position: int):
        if position < self.start_slider.value():
            self.start_slider.setValue(position)
        self.rangeChanged.emit(self.get_value())

    def _change_signal(self):
        return self.rangeChanged


class DateTimeEditAdapter(QDateTimeEdit, SignalAdapterMixin, ValueGettable, ValueSettable,
                          metaclass=PyQtWidgetMeta):
    """
    Adapter for QDateTimeEdit producing date, time or datetime values.

    Handles None the way the spin box adapters do: for date modes the minimum
    is a sentinel one day before the first selectable date, displayed as
    blank special value text.
    """

    FORMATS = {
        InputType.DATE: "yyyy-MM-dd",
        InputType.TIME: "HH:mm",
        InputType.BOTH: "yyyy-MM-dd HH:mm",
    }

    def __init__(self, input_type: InputType = InputType.BOTH, parent=None):
        super().__init__(parent)
        self.input_type = input_type
        self._is_null = False
        self._syncing = False
        self.setDisplayFormat(self.FORMATS[input_type])
        if input_type != InputType.TIME:
            self.setCalendarPopup(True)
            self.setSpecialValueText(" ")
        self.dateTimeChanged.connect(self._on_edited)

    def set_bounds(self, first: Optional[date] = None, last: Optional[date] = None) -> None:
        """Restrict selectable dates to [first, last]."""
        if first is not None:
            day_before = first - timedelta(days=1)
            sentinel = QDate(day_before.year, day_before.month, day_before.day)
            self.setMinimumDateTime(QDateTime(sentinel, QTime(0, 0)))
        if last is not None:
            self.setMaximumDateTime(QDateTime(QDate(last.year, last.month, last.day), QTime(23, 59, 59)))

    def _on_edited(self, _value):
        if not self._syncing:
            self._is_null = False

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        if self._is_null:
            return None
        if self.input_type != InputType.TIME and self.dateTime() == self.minimumDateTime():
            return None
        if self.input_type == InputType.DATE:
            return self.date().toPyDate()
        if self.input_type == InputType.TIME:
            return self.time().toPyTime().replace(second=0, microsecond=0)
        return self.dateTime().toPyDateTime().replace(second=0, microsecond=0)

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        self._syncing = True
        try:
            if value is None:
                self._is_null = True
                self.setDateTime(self.minimumDateTime())
            elif isinstance(value, datetime):
                self._is_null = False
                self.setDateTime(QDateTime(
                    QDate(value.year, value.month, value.day),
                    QTime(value.hour, value.minute, value.second),
                ))
            elif isinstance(value, date):
                self._is_null = False
                self.setDate(QDate(value.year, value.month, value.day))
            elif isinstance(value, time):
                self._is_null = False
                self.setTime(QTime(value.hour, value.minute, value.second))
            else:
                raise TypeError(f"Expected date, time or datetime, got {type(value).__name__}")
        finally:
            self._syncing = False

    def _change_signal(self):
        return self.dateTimeChanged


class OptionGroupAdapter(QWidget, SignalAdapterMixin, ValueGettable, ValueSettable,
                         OptionsSelectable, metaclass=PyQtWidgetMeta):
    """
    A group of checkable buttons, one per option.

    Args:
        kind: "checkbox", "radio", "chip" or "segment"
        exclusive: Single selection (value is one option value) instead of a list
        allow_deselect: In exclusive mode, clicking the checked button clears the value
        orientation: Layout of the buttons
        control_affinity: Side of the label the indicator is drawn on
        wrap_columns: Columns used by OptionsOrientation.WRAP
    """

    selectionChanged = pyqtSignal(object)

    def __init__(
        self,
        kind: str = "checkbox",
        exclusive: bool = False,
        allow_deselect: bool = True,
        orientation: OptionsOrientation = OptionsOrientation.WRAP,
        control_affinity: ControlAffinity = ControlAffinity.LEADING,
        wrap_columns: int = 3,
        parent=None,
    ):
        super().__init__(parent)
        if kind not in ("checkbox", "radio", "chip", "segment"):
            raise ValueError(f"Unknown option group kind: {kind}")
        self.kind = kind
        self.exclusive = exclusive
        self.allow_deselect = allow_deselect
        self.orientation = OptionsOrientation.HORIZONTAL if kind == "segment" else orientation
        self.control_affinity = control_affinity
        self.wrap_columns = wrap_columns
        self.max_selected: Optional[int] = None
        self._options: List[FormBuilderFieldOption] = []
        self._buttons: List[QAbstractButton] = []
        self._disabled_values: List[Any] = []
        self._updating = False

        self._group = QButtonGroup(self)
        self._group.setExclusive(False)
        self._group.buttonToggled.connect(self._on_button_toggled)

        if self.orientation == OptionsOrientation.VERTICAL:
            self._layout = QVBoxLayout(self)
        elif self.orientation == OptionsOrientation.HORIZONTAL:
            self._layout = QHBoxLayout(self)
        else:
            self._layout = QGridLayout(self)
        self._layout.setContentsMargins(0, 0, 0, 0)
        if kind == "segment":
            self._layout.setSpacing(0)
        elif isinstance(self._layout, QHBoxLayout):
            self._layout.addStretch()

    @property
    def options(self) -> List[FormBuilderFieldOption]:
        return list(self._options)

    @property
    def buttons(self) -> List[QAbstractButton]:
        return list(self._buttons)

    def _make_button(self, option: FormBuilderFieldOption) -> QAbstractButton:
        if self.kind == "checkbox":
            button = QCheckBox(option.display, self)
        elif self.kind == "radio":
            button = QRadioButton(option.display, self)
            button.setAutoExclusive(False)
        else:
            button = QPushButton(option.display, self)
            button.setCheckable(True)
            if self.kind == "chip":
                button.setFlat(True)
        if self.control_affinity == ControlAffinity.TRAILING:
            button.setLayoutDirection(Qt.LayoutDirection.RightToLeft)
        return button

    def set_options(self, options: Iterable[Any]) -> None:
        """Implement OptionsSelectable ABC."""
        current = self.get_value()
        for button in self._buttons:
            self._group.removeButton(button)
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons = []
        self._options = normalize_options(options)

        for index, option in enumerate(self._options):
            button = self._make_button(option)
            self._group.addButton(button, index)
            self._buttons.append(button)
            if isinstance(self._layout, QGridLayout):
                self._layout.addWidget(button, index // self.wrap_columns, index % self.wrap_columns)
            elif isinstance(self._layout, QHBoxLayout) and self.kind != "segment":
                self._layout.insertWidget(index, button)
            else:
                self._layout.addWidget(button)

        self.set_disabled_values(self._disabled_values)
        self._set_checked_values(self._values_from(current))

    def set_disabled_values(self, values: Iterable[Any]) -> None:
        self._disabled_values = list(values)
        self._refresh_enabled()

    def set_max_selected(self, max_selected: Optional[int]) -> None:
        self.max_selected = max_selected
        self._refresh_enabled()

    def _refresh_enabled(self):
        checked = self._checked_values()
        at_limit = (
            not self.exclusive and self.max_selected is not None
            and len(checked) >= self.max_selected
        )
        for option, button in zip(self._options, self._buttons):
            disabled = option.value in self._disabled_values
            if at_limit and not button.isChecked():
                disabled = True
            button.setEnabled(not disabled)

    def _checked_values(self) -> List[Any]:
        return [
            option.value for option, button in zip(self._options, self._buttons)
            if button.isChecked()
        ]

    def _values_from(self, value: Any) -> List[Any]:
        if value is None:
            return []
        if self.exclusive:
            return [value]
        return list(value)

    def _set_checked_values(self, values: List[Any]) -> None:
        # QButtonGroup emits buttonToggled even when the button blocks its signals
        self._updating = True
        try:
            for option, button in zip(self._options, self._buttons):
                button.setChecked(option.value in values)
        finally:
            self._updating = False
        self._refresh_enabled()

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        checked = self._checked_values()
        if self.exclusive:
            return checked[0] if checked else None
        return checked

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        values = self._values_from(value)
        known = [option.value for option in self._options]
        unknown = [v for v in values if v not in known]
        if unknown:
            raise ValueError(f"Values {unknown!r} are not among the options")
        self._set_checked_values(values)
        self.selectionChanged.emit(self.get_value())

    def _on_button_toggled(self, button: QAbstractButton, checked: bool):
        if self._updating:
            return
        if self.exclusive:
            self._updating = True
            try:
                if checked:
                    for other in self._buttons:
                        if other is not button and other.isChecked():
                            other.setChecked(False)
                elif not self.allow_deselect:
                    button.setChecked(True)
                    return
            finally:
                self._updating = False
        self._refresh_enabled()
        self.selectionChanged.emit(self.get_value())

    def _change_signal(self):
        return self.selectionChanged


class ChipsInputAdapter(QWidget, SignalAdapterMixin, ValueGettable, ValueSettable,
                        PlaceholderCapable, metaclass=PyQtWidgetMeta):
    """
    Free-form list of strings entered one at a time.

    Pressing Enter in the entry line adds its text as a chip; clicking a chip
    removes it.
    """

    chipsChanged = pyqtSignal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.max_chips: Optional[int] = None
        self._chips: List[str] = []
        self._chip_buttons: List[QPushButton] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        self._chip_row = QHBoxLayout()
        self._chip_row.setSpacing(4)
        self._chip_row.addStretch()
        layout.addLayout(self._chip_row)

        self.entry = QLineEdit(self)
        self.entry.returnPressed.connect(self._on_return_pressed)
        layout.addWidget(self.entry)

    def add_chip(self, text: str) -> bool:
        """Add a chip; returns False if empty, duplicate or over max_chips."""
        text = text.strip()
        if not text or text in self._chips:
            return False
        if self.max_chips is not None and len(self._chips) >= self.max_chips:
            return False
        self._chips.append(text)
        self._rebuild()
        self.chipsChanged.emit(self.get_value())
        return True

    def remove_chip(self, text: str) -> None:
        if text in self._chips:
            self._chips.remove(text)
            self._rebuild()
            self.chipsChanged.emit(self.get_value())

    def _on_return_pressed(self):
        if self.add_chip(self.entry.text()):
            self.entry.clear()

    def _rebuild(self):
        for button in self._chip_buttons:
            self._chip_row.removeWidget(button)
            button.deleteLater()
        self._chip_buttons = []
        for index, chip in enumerate(self._chips):
            button = QPushButton(f"{chip}  ×", self)
            button.setFlat(True)
            button.clicked.connect(lambda _checked=False, c=chip: self.remove_chip(c))
            self._chip_row.insertWidget(index, button)
            self._chip_buttons.append(button)
        full = self.max_chips is not None and len(self._chips) >= self.max_chips
        self.entry.setEnabled(not full)

    def get_value(self) -> Any:
        """Implement ValueGettable ABC."""
        return list(self._chips)

    def set_value(self, value: Any) -> None:
        """Implement ValueSettable ABC."""
        chips = []
        for chip in value or []:
            chip = str(chip).strip()
            if chip and chip not in chips:
                chips.append(chip)
        self._chips = chips
        self._rebuild()
        self.chipsChanged.emit(self.get_value())

    def set_placeholder(self, text: str) -> None:
        """Implement PlaceholderCapable ABC."""
        self.entry.setPlaceholderText(text)

    def _change_signal(self):
        return self.chipsChanged
