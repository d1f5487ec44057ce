"""Tests for upload validation predicates."""

import logging
from dataclasses import dataclass

import pytest

from uihelpers import FileInfo, validate_file, validate_file_size, validate_file_type
from uihelpers.config import settings

MB = 1024 * 1024


def test_accepts_jpeg_and_png():
    assert validate_file_type(FileInfo(name="a.jpg", type="image/jpeg", size=10))
    assert validate_file_type(FileInfo(name="b.png", type="image/png", size=10))


def test_rejects_other_types_with_message(caplog):
    file = FileInfo(name="notes.pdf", type="application/pdf", size=10)

    with caplog.at_level(logging.ERROR, logger="uihelpers.files"):
        assert validate_file_type(file) is False

    assert caplog.messages == [
        '"notes.pdf" is not a valid format. Only JPG and PNG images are accepted.'
    ]


def test_size_limit_is_inclusive():
    assert validate_file_size(FileInfo(name="a.png", type="image/png", size=10 * MB))
    assert validate_file_size(FileInfo(name="a.png", type="image/png", size=0))


def test_rejects_oversized_with_message(caplog):
    file = FileInfo(name="huge.png", type="image/png", size=10 * MB + 1)

    with caplog.at_level(logging.ERROR, logger="uihelpers.files"):
        assert validate_file_size(file) is False

    assert caplog.messages == ['"huge.png" is too large. Maximum allowed size is 10MB.']


def test_size_limit_follows_settings(monkeypatch, caplog):
    monkeypatch.setattr(settings, "max_file_size", 2 * MB)
    file = FileInfo(name="mid.png", type="image/png", size=3 * MB)

    with caplog.at_level(logging.ERROR, logger="uihelpers.files"):
        assert validate_file_size(file) is False

    assert "Maximum allowed size is 2MB." in caplog.text


def test_validate_file_reports_every_failure(caplog):
    file = FileInfo(name="movie.mp4", type="video/mp4", size=50 * MB)

    with caplog.at_level(logging.ERROR, logger="uihelpers.files"):
        assert validate_file(file) is False

    assert len(caplog.records) == 2


def test_validate_file_accepts_duck_typed_objects():
    """Any object with name, type and size can be validated."""

    @dataclass
    class Upload:
        name: str
        type: str
        size: int

    assert validate_file(Upload(name="ok.jpg", type="image/jpeg", size=MB))


def test_file_info_rejects_negative_size():
    with pytest.raises(ValueError, match="must be >= 0"):
        FileInfo(name="x.png", type="image/png", size=-1)
