"""
Format providers used to render message templates.

Templates use `str.format` syntax with positional fields, e.g.
``"Loaded {0} plugins from {1}"``.
"""

from __future__ import annotations

import locale
from abc import ABC, abstractmethod
from typing import Any, Sequence


class FormatProvider(ABC):
    """Renders a template with its positional arguments."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def format(self, template: str, args: Sequence[Any]) -> str: ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class InvariantFormatProvider(FormatProvider):
    """Culture-neutral rendering: plain `str.format`, no locale lookups."""

    @property
    def name(self) -> str:
        return "invariant"

    def format(self, template: str, args: Sequence[Any]) -> str:
        if not args:
            return template
        return template.format(*args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, InvariantFormatProvider)

    def __hash__(self) -> int:
        return hash(InvariantFormatProvider)


class CurrentLocaleFormatProvider(FormatProvider):
    """Renders numeric arguments through the process locale.

    Integers and floats are pre-formatted with `locale.format_string` so
    grouping and decimal separators follow `LC_NUMERIC`.
    """

    @property
    def name(self) -> str:
        return locale.setlocale(locale.LC_NUMERIC)

    def format(self, template: str, args: Sequence[Any]) -> str:
        if not args:
            return template
        converted = [self._convert(a) for a in args]
        return template.format(*converted)

    @staticmethod
    def _convert(value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if isinstance(value, int):
            return locale.format_string("%d", value, grouping=True)
        if isinstance(value, float):
            return locale.format_string("%f", value, grouping=True)
        return value


INVARIANT_CULTURE: FormatProvider = InvariantFormatProvider()
