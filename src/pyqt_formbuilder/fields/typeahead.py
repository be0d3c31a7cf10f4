"""Text field offering suggestions while the user types."""

import logging
from typing import Any, Callable, Iterable, Optional

from PyQt6.QtWidgets import QWidget

from pyqt_formbuilder.core import DebounceTimer
from pyqt_formbuilder.forms.form_builder_field import FormBuilderField
from pyqt_formbuilder.protocols import TypeAheadLineEditAdapter, get_form_config

logger = logging.getLogger(__name__)


class FormBuilderTypeAhead(FormBuilderField):
    """
    Free text with a suggestion popup.

    suggestions_callback receives the current text and returns the suggestions
    to show. It is called once typing pauses for ``debounce_ms`` (the
    configured typeahead_debounce_ms by default).
    """

    def __init__(
        self,
        name: str,
        suggestions_callback: Callable[[str], Iterable[Any]],
        on_suggestion_selected: Optional[Callable[[str], None]] = None,
        debounce_ms: Optional[int] = None,
        **kwargs,
    ):
        self.suggestions_callback = suggestions_callback
        self.on_suggestion_selected = on_suggestion_selected
        delay = get_form_config().typeahead_debounce_ms if debounce_ms is None else debounce_ms
        self._debounce = DebounceTimer(delay_ms=delay, handler=self.refresh_suggestions)
        super().__init__(name, **kwargs)

    def create_control(self) -> QWidget:
        control = TypeAheadLineEditAdapter(self)
        control.textEdited.connect(self._debounce.trigger)
        control.completer().activated.connect(self._on_suggestion_activated)
        return control

    def refresh_suggestions(self, pattern: Optional[str] = None) -> None:
        if pattern is None:
            pattern = self.control.get_value()
        suggestions = list(self.suggestions_callback(pattern))
        logger.debug(f"Typeahead '{self.name}': {len(suggestions)} suggestions for {pattern!r}")
        self.control.set_suggestions(suggestions)

    def _on_suggestion_activated(self, text: str) -> None:
        self.did_change(text)
        if self.on_suggestion_selected is not None:
            self.on_suggestion_selected(text)

    def to_control_value(self, value: Any) -> Any:
        return "" if value is None else str(value)

    def dispose(self) -> None:
        self._debounce.cancel()
        super().dispose()
