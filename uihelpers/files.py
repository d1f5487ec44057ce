"""Upload validation predicates.

Validators log a user-facing reason and return ``False`` rather than
raising, so callers can collect every rejected file in one pass.
"""

import logging
from dataclasses import dataclass
from typing import Protocol

from uihelpers.config import settings

logger = logging.getLogger(__name__)


class UploadedFile(Protocol):
    name: str
    type: str
    size: int


@dataclass(frozen=True, kw_only=True)
class FileInfo:
    name: str
    type: str
    size: int

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"File size must be >= 0, got {self.size}")

    def __str__(self) -> str:
        return f"FileInfo({self.name}, {self.type}, {self.size}B)"


def validate_file_type(file: UploadedFile) -> bool:
    if file.type not in settings.allowed_file_types:
        logger.error(
            '"%s" is not a valid format. Only JPG and PNG images are accepted.',
            file.name,
        )
        return False
    return True


def validate_file_size(file: UploadedFile) -> bool:
    if file.size > settings.max_file_size:
        logger.error(
            '"%s" is too large. Maximum allowed size is %dMB.',
            file.name,
            settings.max_file_size_mb,
        )
        return False
    return True


def validate_file(file: UploadedFile) -> bool:
    """Run every upload check, logging each failure."""
    type_ok = validate_file_type(file)
    size_ok = validate_file_size(file)
    return type_ok and size_ok
