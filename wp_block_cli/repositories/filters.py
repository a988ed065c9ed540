"""Filter primitives applied to materialised resource collections."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Protocol, Sequence, TypeVar

from wp_block_cli.errors import UsageError
from wp_block_cli.models import ResourceRecord, SyncStatus

RecordT = TypeVar("RecordT", bound=ResourceRecord)


class RecordFilter(Protocol):
    def matches(self, record: ResourceRecord) -> bool:
        ...


@dataclass(frozen=True, slots=True)
class NamespaceFilter:
    """Identifier starts with ``<namespace>/``."""

    namespace: str
    attribute: str = "name"

    def matches(self, record: ResourceRecord) -> bool:
        value = getattr(record, self.attribute, None) or ""
        return str(value).startswith(f"{self.namespace}/")


@dataclass(frozen=True, slots=True)
class MembershipFilter:
    """A list attribute contains ``value`` (exact, case-sensitive).

    With ``missing_matches`` a record that does not declare the list at all
    is treated as applying to every value.
    """

    attribute: str
    value: str
    missing_matches: bool = False

    def matches(self, record: ResourceRecord) -> bool:
        members = getattr(record, self.attribute, None)
        if members is None:
            return self.missing_matches
        return self.value in members


@dataclass(frozen=True, slots=True)
class SearchFilter:
    """Case-insensitive substring search over text and list attributes."""

    term: str
    text_attributes: tuple[str, ...] = ("title",)
    list_attributes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.term, str):
            raise TypeError("SearchFilter expects a string term.")

    def matches(self, record: ResourceRecord) -> bool:
        needle = self.term.lower()
        for attribute in self.text_attributes:
            value = getattr(record, attribute, None)
            if value and needle in str(value).lower():
                return True
        for attribute in self.list_attributes:
            for item in getattr(record, attribute, None) or ():
                if needle in str(item).lower():
                    return True
        return False


@dataclass(frozen=True, slots=True)
class FlagFilter:
    """Boolean attribute equals ``expected``."""

    attribute: str
    expected: bool = True

    def matches(self, record: ResourceRecord) -> bool:
        return bool(getattr(record, self.attribute, False)) is self.expected


class SyncStatusChoice(str, Enum):
    SYNCED = "synced"
    UNSYNCED = "unsynced"
    ALL = "all"


@dataclass(frozen=True, slots=True)
class SyncStatusFilter:
    status: SyncStatusChoice = SyncStatusChoice.ALL

    def matches(self, record: ResourceRecord) -> bool:
        if self.status is SyncStatusChoice.ALL:
            return True
        return getattr(record, "sync_status", SyncStatus.SYNCED).value == self.status.value


@dataclass(frozen=True, slots=True)
class ValueInFilter:
    """Attribute equals one of ``values``."""

    attribute: str
    values: frozenset[str]

    def __post_init__(self) -> None:
        if not self.values:
            raise ValueError("ValueInFilter requires at least one value.")

    @classmethod
    def from_csv(cls, attribute: str, raw: str) -> ValueInFilter | None:
        """Build from a comma-separated list; ``None`` when no value survives trimming."""
        values = frozenset(chunk.strip() for chunk in raw.split(",") if chunk.strip())
        if not values:
            return None
        return cls(attribute=attribute, values=values)

    def matches(self, record: ResourceRecord) -> bool:
        return getattr(record, self.attribute, None) in self.values


@dataclass(frozen=True, slots=True)
class EqualsFilter:
    attribute: str
    value: Any

    def matches(self, record: ResourceRecord) -> bool:
        current = getattr(record, self.attribute, None)
        if isinstance(current, Enum):
            current = current.value
        return current == self.value


def apply_filters(records: Iterable[RecordT], filters: Sequence[RecordFilter]) -> list[RecordT]:
    """Return records passing every filter, in their original order."""
    if not filters:
        return list(records)
    return [record for record in records if all(f.matches(record) for f in filters)]


def require_exclusive(**flags: bool) -> None:
    """Raise a usage error when more than one of ``flags`` is set."""
    enabled = [name for name, value in flags.items() if value]
    if len(enabled) > 1:
        names = " and ".join(f"--{name}" for name in enabled)
        raise UsageError(f"{names} are mutually exclusive.")


__all__ = [
    "EqualsFilter",
    "FlagFilter",
    "MembershipFilter",
    "NamespaceFilter",
    "RecordFilter",
    "SearchFilter",
    "SyncStatusChoice",
    "SyncStatusFilter",
    "ValueInFilter",
    "apply_filters",
    "require_exclusive",
]
