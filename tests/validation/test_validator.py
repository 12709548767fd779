import logging

import pytest

from fieldcheck.validation import ValidationError, Validator


def test_new_validator_is_empty_and_valid():
    validator = Validator()
    assert validator.errors == {}
    assert validator.is_valid()


@pytest.mark.parametrize(
    ("errors", "expected"),
    [
        ({}, True),
        (None, True),
        ({"field": "error message"}, False),
    ],
)
def test_is_valid_reflects_seeded_errors(errors, expected):
    assert Validator(errors=errors).is_valid() is expected


def test_is_valid_when_mapping_reset_to_none():
    validator = Validator()
    validator.errors = None
    assert validator.is_valid()


def test_seeded_errors_are_copied():
    source = {"field": "error message"}
    validator = Validator(errors=source)
    validator.add_error("other", "another message")
    assert source == {"field": "error message"}


def test_add_error_keeps_first_message():
    validator = Validator()
    validator.add_error("field1", "error message 1")
    assert validator.errors == {"field1": "error message 1"}

    validator.add_error("field2", "error message 2")
    assert len(validator.errors) == 2

    validator.add_error("field1", "new error message")
    assert len(validator.errors) == 2
    assert validator.errors["field1"] == "error message 1"
    assert validator.errors["field2"] == "error message 2"


def test_add_error_rejects_non_string_field():
    validator = Validator()
    with pytest.raises(TypeError):
        validator.add_error(1, "error message")
    assert validator.is_valid()


def test_check_true_does_not_record():
    validator = Validator()
    validator.check(True, "field", "error message")
    assert validator.errors == {}
    assert validator.is_valid()


def test_check_false_records_single_error():
    validator = Validator()
    validator.check(False, "field", "error message")
    assert validator.errors == {"field": "error message"}
    assert not validator.is_valid()


def test_check_false_respects_first_message():
    validator = Validator()
    validator.check(False, "email", "must be provided")
    validator.check(False, "email", "must be a valid email address")
    assert validator.errors == {"email": "must be provided"}


def test_raise_if_invalid_carries_errors():
    validator = Validator()
    validator.add_error("title", "must not be blank")
    validator.add_error("year", "must be greater than 1888")
    with pytest.raises(ValidationError) as excinfo:
        validator.raise_if_invalid()
    assert excinfo.value.errors == {
        "title": "must not be blank",
        "year": "must be greater than 1888",
    }
    assert str(excinfo.value) == "title: must not be blank; year: must be greater than 1888"


def test_raise_if_invalid_noop_when_valid():
    Validator().raise_if_invalid()  # should not raise


def test_add_error_logs_recorded_and_discarded(caplog):
    caplog.set_level(logging.DEBUG, logger="fieldcheck.validation.validator")
    validator = Validator()
    validator.add_error("name", "must be provided")
    validator.add_error("name", "too long")
    messages = [
        record.getMessage()
        for record in caplog.records
        if record.name == "fieldcheck.validation.validator"
    ]
    assert "Recorded error for field name: must be provided" in messages
    assert "Discarding additional error for field name: too long" in messages


def test_validator_constructs_with_bad_log_level_env(monkeypatch):
    package_logger = logging.getLogger("fieldcheck")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level
    for handler in saved_handlers:
        package_logger.removeHandler(handler)
    monkeypatch.setenv("FIELDCHECK_LOG_LEVEL", "chatty")
    try:
        first = Validator()
        second = Validator()
        assert first.is_valid()
        assert second.is_valid()
        assert package_logger.level == logging.INFO
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        for handler in saved_handlers:
            package_logger.addHandler(handler)
        package_logger.setLevel(saved_level)
