"""Unit tests for the Note entity."""

from dataclasses import FrozenInstanceError
from datetime import datetime

import pytest

from monolog.types import MAX_TEXT_LENGTH, Note


def test_create_stamps_with_clock() -> None:
    moment = datetime(2024, 1, 1, 9, 5).astimezone()

    created = Note.create("  hello world ", clock=lambda: moment)

    assert created.text == "hello world"
    assert created.date == moment


def test_create_defaults_to_aware_local_time() -> None:
    created = Note.create("now")
    assert created.date.tzinfo is not None


def test_notes_are_immutable() -> None:
    created = Note.create("fixed")
    with pytest.raises(FrozenInstanceError):
        created.text = "changed"  # type: ignore[misc]


@pytest.mark.parametrize("text", ["", "   "])
def test_empty_text_is_rejected(text) -> None:
    with pytest.raises(ValueError, match="must not be empty"):
        Note.create(text)


def test_text_length_is_bounded() -> None:
    assert Note.create("x" * MAX_TEXT_LENGTH).text == "x" * MAX_TEXT_LENGTH

    with pytest.raises(ValueError, match="limit is 250"):
        Note.create("x" * (MAX_TEXT_LENGTH + 1))
