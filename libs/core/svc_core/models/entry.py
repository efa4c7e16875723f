from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from svc_core.errors import ConfigError, NotFoundError

DEFAULT_INTERPRETER = "python"


class EntryKind(str, Enum):
    EXECUTABLE = "Executable"
    UTIL = "Util"

    @property
    def label(self) -> str:
        return "Executable" if self is EntryKind.EXECUTABLE else "Utility"


@dataclass(frozen=True)
class Entry:
    """One configured program or script.

    Attributes:
        name: Unique identifier used on the command line
        kind: Whether the path is run directly or through an interpreter
        path: Filesystem path to the target file
        interpreter: Interpreter name for utils (None means "python")
        working_directory: Explicit working directory (None means the
            directory containing `path`)
    """

    name: str
    kind: EntryKind
    path: str
    interpreter: str | None = None
    working_directory: str | None = None

    @property
    def effective_interpreter(self) -> str | None:
        if self.kind is not EntryKind.UTIL:
            return None
        return self.interpreter or DEFAULT_INTERPRETER

    @classmethod
    def from_record(cls, record: Any, index: int = 0) -> "Entry":
        """Build an Entry from one raw configuration record.

        Args:
            record: Mapping read from the configuration file
            index: Position of the record, used in error messages

        Raises:
            ConfigError: If a required field is missing or invalid
        """
        if not isinstance(record, Mapping):
            raise ConfigError(f"Entry #{index + 1} must be a mapping, got {type(record).__name__}")

        name = record.get("name")
        if not isinstance(name, str) or not name.strip():
            raise ConfigError(f"Entry #{index + 1} has no name")
        name = name.strip()

        raw_kind = record.get("type")
        try:
            kind = EntryKind(raw_kind)
        except ValueError:
            choices = ", ".join(k.value for k in EntryKind)
            raise ConfigError(
                f"Entry {name} has unknown type {raw_kind!r} (expected one of: {choices})"
            ) from None

        path = record.get("path")
        if not isinstance(path, str) or not path.strip():
            raise ConfigError(f"Entry {name} has no path")

        interpreter = _optional_str(record, "interpreter", name)
        work_at = _optional_str(record, "work_at", name)

        return cls(
            name=name,
            kind=kind,
            path=path.strip(),
            interpreter=interpreter,
            working_directory=work_at,
        )


def _optional_str(record: Mapping, key: str, name: str) -> str | None:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"Entry {name} field {key!r} must be a string")
    return value.strip() or None


class ServiceConfig:
    """Ordered, name-unique collection of configured entries."""

    def __init__(self, entries: Iterable[Entry] = ()):
        self._entries: dict[str, Entry] = {}
        for entry in entries:
            if entry.name in self._entries:
                raise ConfigError(f"Duplicate entry name: {entry.name}")
            self._entries[entry.name] = entry

    @classmethod
    def from_records(cls, records: Any) -> "ServiceConfig":
        if records is None:
            return cls()
        if not isinstance(records, list):
            raise ConfigError("Services must be a list of entries")
        return cls(Entry.from_record(record, i) for i, record in enumerate(records))

    def find_by_name(self, name: str) -> Entry:
        try:
            return self._entries[name]
        except KeyError:
            raise NotFoundError(name) from None

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
