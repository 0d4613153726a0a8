"""
Status messages shown to the user after each action.

Errors never cross the UI boundary as exceptions; the window maps every
outcome to a StatusMessage and displays it in the severity's colour.
"""

from dataclasses import dataclass
from enum import Enum

from ..ui_text import tr
from .errors import ConversionError, FntParseError, FntReadError, OutputWriteError


class Severity(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class StatusMessage:
    severity: Severity
    text: str


def no_input_status() -> StatusMessage:
    return StatusMessage(Severity.WARNING, tr("status.no_input"))


def saved_status(output_path: str) -> StatusMessage:
    return StatusMessage(Severity.SUCCESS, tr("status.saved", path=output_path))


def cancelled_status() -> StatusMessage:
    return StatusMessage(Severity.INFO, tr("status.save_cancelled"))


def error_status(error: ConversionError) -> StatusMessage:
    """Map a conversion failure to the message the user sees."""
    if isinstance(error, OutputWriteError):
        return StatusMessage(Severity.ERROR, tr("status.save_error", reason=error.reason))
    if isinstance(error, (FntReadError, FntParseError)):
        return StatusMessage(Severity.ERROR, tr("status.parse_error"))
    return StatusMessage(Severity.ERROR, str(error))
