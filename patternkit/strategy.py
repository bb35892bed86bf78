"""Interchangeable processing strategies applied to user records."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Protocol

REDACTED = "***REDACTED***"


class NoStrategyError(RuntimeError):
    """Raised when data is processed before a strategy has been chosen."""


@dataclass(frozen=True)
class UserData:
    """One user record."""

    id: str
    name: str = ""
    email: str = ""
    phone: str = ""
    city: str = ""
    processed_timestamp: str = ""


class DataProcessingStrategy(Protocol):
    """Turns a list of records into a new list of records."""

    def process(self, data: Iterable[UserData]) -> list[UserData]: ...


_NORMALIZABLE = {"Name": "name", "Email": "email", "City": "city"}
_REDACTABLE = {"Email": "email", "Phone": "phone"}


@dataclass(frozen=True)
class NormalizationStrategy:
    """Trims and lower-cases the named fields (Name, Email, City)."""

    fields_to_normalize: Sequence[str] = field(default_factory=tuple)

    def process(self, data: Iterable[UserData]) -> list[UserData]:
        print("Applying Normalization Strategy...")
        attrs = [_NORMALIZABLE[name] for name in self.fields_to_normalize if name in _NORMALIZABLE]
        return [
            replace(user, **{attr: getattr(user, attr).strip().lower() for attr in attrs})
            for user in data
        ]


@dataclass(frozen=True)
class RedactionStrategy:
    """Replaces the named fields (Email, Phone) with a placeholder."""

    fields_to_redact: Sequence[str] = field(default_factory=tuple)

    def process(self, data: Iterable[UserData]) -> list[UserData]:
        print("Applying Redaction Strategy...")
        attrs = [_REDACTABLE[name] for name in self.fields_to_redact if name in _REDACTABLE]
        return [replace(user, **{attr: REDACTED for attr in attrs}) for user in data]


def _now() -> datetime:
    return datetime.now().astimezone()


def _rfc3339(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = moment.replace(microsecond=0).isoformat()
    if text.endswith("+00:00"):
        text = text[: -len("+00:00")] + "Z"
    return text


@dataclass(frozen=True)
class TimestampStrategy:
    """Stamps every record with the same current time in RFC 3339 form."""

    clock: Callable[[], datetime] = _now

    def process(self, data: Iterable[UserData]) -> list[UserData]:
        print("Applying Timestamp Strategy...")
        stamp = _rfc3339(self.clock())
        return [replace(user, processed_timestamp=stamp) for user in data]


@dataclass
class DataProcessor:
    """Runs whichever strategy is currently configured."""

    strategy: DataProcessingStrategy | None = None

    def process_data(self, data: Iterable[UserData]) -> list[UserData]:
        if self.strategy is None:
            raise NoStrategyError("no processing strategy set")
        print("Processing data using the configured strategy...")
        return self.strategy.process(data)


def format_user(user: UserData) -> str:
    """One report line for a record."""
    return (
        f"  ID: {user.id}, Name: {user.name}, Email: {user.email}, "
        f"Phone: {user.phone}, City: {user.city}, Timestamp: {user.processed_timestamp}"
    )


def _print_users(data: Iterable[UserData]) -> None:
    for user in data:
        print(format_user(user))


def main(argv: Sequence[str] | None = None) -> None:
    """Run the sample normalization, redaction and timestamp scenarios."""
    sample = [
        UserData("1", "  ALICE  ", "Alice.Wonderland@example.com", "[phone]", "  NEW YORK  "),
        UserData("2", "BOB", "Bob.Builder@example.com", "[phone]", "los angeles"),
        UserData("3", "Charlie", "charlie.chaplin@example.com", "[phone]", "london"),
    ]
    processor = DataProcessor()

    print("--- Scenario 1: Normalization & Redaction ---")
    processor.strategy = NormalizationStrategy(("Name", "Email", "City"))
    normalized = processor.process_data(sample)
    _print_users(normalized)

    processor.strategy = RedactionStrategy(("Email", "Phone"))
    redacted = processor.process_data(normalized)
    print("\nRedacted Data:")
    _print_users(redacted)

    print("\n--- Scenario 2: Timestamping ---")
    processor.strategy = TimestampStrategy()
    stamped = processor.process_data(sample)
    print("Timestamped Data:")
    _print_users(stamped)

    print("\n--- Scenario 3: No Strategy ---")
    processor.strategy = None
    try:
        processor.process_data(sample)
    except NoStrategyError as err:
        print("Error (Expected):", err)


if __name__ == "__main__":
    main()