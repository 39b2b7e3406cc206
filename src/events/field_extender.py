from __future__ import annotations

from typing import Iterable, Iterator, Protocol


class FieldExtender(Protocol):
    """Adds or adjusts the fields written for an entity."""

    def extend(self, fields: list[str]) -> None: ...


class FieldExtenderCollection:
    def __init__(self, extenders: Iterable[FieldExtender] | None = None) -> None:
        self._extenders: list[FieldExtender] = list(extenders or [])

    def add(self, extender: FieldExtender) -> None:
        self._extenders.append(extender)

    def extend_fields(self, fields: list[str]) -> list[str]:
        """Apply every extender in order, in place. Returns ``fields`` for chaining."""
        for extender in self._extenders:
            extender.extend(fields)
        return fields

    def __iter__(self) -> Iterator[FieldExtender]:
        return iter(self._extenders)

    def __len__(self) -> int:
        return len(self._extenders)
