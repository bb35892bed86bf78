from datetime import datetime, timezone

import pytest

from patternkit.strategy import (
    DataProcessor,
    NoStrategyError,
    NormalizationStrategy,
    RedactionStrategy,
    TimestampStrategy,
    UserData,
    format_user,
    main,
)


def _sample():
    return [
        UserData("1", "  ALICE  ", "Alice@Example.com", "[phone]", "  NEW YORK  "),
        UserData("2", "bob", "bob@example.com", "[phone]", "london"),
    ]


def test_normalization_lowers_and_strips_name():
    result = NormalizationStrategy(("Name",)).process(_sample())
    assert result[0].name == "alice"


def test_normalization_is_idempotent():
    strategy = NormalizationStrategy(("Name", "Email", "City"))
    once = strategy.process(_sample())
    assert strategy.process(once) == once


def test_normalization_keeps_already_normal_record():
    data = _sample()
    result = NormalizationStrategy(("Name", "Email", "City")).process(data)
    assert result[1] == data[1]


def test_normalization_leaves_unselected_fields():
    data = _sample()
    result = NormalizationStrategy(("Name",)).process(data)
    assert result[0].city == data[0].city
    assert result[0].email == data[0].email


def test_normalization_does_not_mutate_input():
    data = _sample()
    NormalizationStrategy(("Name",)).process(data)
    assert data[0].name == "  ALICE  "


def test_unknown_fields_are_ignored():
    data = _sample()
    assert NormalizationStrategy(("Phone", "Nope")).process(data) == data
    assert RedactionStrategy(("Name", "City")).process(data) == data


def test_redaction_replaces_email_and_phone():
    data = _sample()
    result = RedactionStrategy(("Email", "Phone")).process(data)
    for before, after in zip(data, result):
        assert after.email == "***REDACTED***"
        assert after.phone == "***REDACTED***"
        assert after.name == before.name


def test_timestamp_uses_rfc3339_with_z_for_utc():
    clock = lambda: datetime(2024, 1, 2, 3, 4, 5, 999, tzinfo=timezone.utc)  # noqa: E731
    result = TimestampStrategy(clock).process(_sample())
    assert [user.processed_timestamp for user in result] == ["2024-01-02T03:04:05Z"] * 2


def test_timestamp_keeps_other_fields():
    data = _sample()
    result = TimestampStrategy().process(data)
    for before, after in zip(data, result):
        assert after.name == before.name
        assert after.processed_timestamp
    assert len({user.processed_timestamp for user in result}) == 1


def test_processor_without_strategy_raises():
    with pytest.raises(NoStrategyError, match="no processing strategy set"):
        DataProcessor().process_data(_sample())


def test_processor_delegates_to_strategy(capsys):
    strategy = RedactionStrategy(("Email",))
    processor = DataProcessor(strategy)
    result = processor.process_data(_sample())
    assert result == strategy.process(_sample())
    assert "Processing data using the configured strategy..." in capsys.readouterr().out


def test_processor_strategy_can_be_swapped():
    processor = DataProcessor(RedactionStrategy(("Email",)))
    processor.strategy = None
    with pytest.raises(NoStrategyError):
        processor.process_data([])


def test_format_user():
    user = UserData("1", "a", "b", "c", "d", "t")
    assert format_user(user) == "  ID: 1, Name: a, Email: b, Phone: c, City: d, Timestamp: t"


def test_main_reports_missing_strategy(capsys):
    main()
    out = capsys.readouterr().out
    assert "Error (Expected): no processing strategy set" in out
    assert "Applying Normalization Strategy..." in out