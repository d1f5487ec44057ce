import logging

from .api_errors import api_error_code, handle_api_error, is_network_error
from .config import Settings, configure_logging, settings
from .duration import (
    convert_ms_to_seconds,
    convert_seconds_to_ms,
    duration_to_human_readable,
    ms_to_human_readable,
    seconds_to_human_readable,
)
from .files import FileInfo, validate_file, validate_file_size, validate_file_type
from .formatting import format_currency, format_date, format_datetime_for_timezone
from .password import InvalidLength, generate_password
from .text import get_nested_value, parse_key_to_title, remove_empty, strip_leading_minus

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "duration_to_human_readable",
    "ms_to_human_readable",
    "seconds_to_human_readable",
    "convert_seconds_to_ms",
    "convert_ms_to_seconds",
    "generate_password",
    "InvalidLength",
    "format_date",
    "format_datetime_for_timezone",
    "format_currency",
    "parse_key_to_title",
    "remove_empty",
    "get_nested_value",
    "strip_leading_minus",
    "FileInfo",
    "validate_file_type",
    "validate_file_size",
    "validate_file",
    "handle_api_error",
    "api_error_code",
    "is_network_error",
    "Settings",
    "settings",
    "configure_logging",
]
