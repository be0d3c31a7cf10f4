"""Options offered by dropdowns, radio groups, chips and checkbox groups."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass(frozen=True)
class FormBuilderFieldOption:
    """A selectable value with an optional display label."""

    value: Any
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label if self.label is not None else str(self.value)


def normalize_options(options: Iterable[Any]) -> List[FormBuilderFieldOption]:
    """Accept FormBuilderFieldOption instances or bare values."""
    return [
        option if isinstance(option, FormBuilderFieldOption) else FormBuilderFieldOption(option)
        for option in options
    ]
