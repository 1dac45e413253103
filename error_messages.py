# error_messages.py
"""
Error messages, drop reasons and exception types for the day view layout.
Malformed events are reported as DroppedEvent records, never raised, so a single
bad record cannot blank the whole calendar.
"""
from dataclasses import dataclass
from typing import Any, Optional


class DropReason:
    """Reason codes carried by DroppedEvent."""

    INVALID_DATE = "invalid-date"
    INVALID_RANGE = "invalid-range"
    OUTSIDE_WINDOW = "outside-window"
    DUPLICATE_ID = "duplicate-id"

    # 사용자 데이터 문제로 보고해야 하는 사유 (WARNING 로그)
    MALFORMED = (INVALID_DATE, INVALID_RANGE, DUPLICATE_ID)


@dataclass(frozen=True)
class DroppedEvent:
    """Side-channel warning for an event left out of the layout."""

    event_id: Any
    reason: str
    message: str = ""

    @property
    def is_malformed(self):
        return self.reason in DropReason.MALFORMED


class ErrorMessages:
    """Centralized error message definitions with recovery suggestions."""

    INVALID_EVENT_TIME = {
        'title': 'Invalid Event Time',
        'message': 'An event has a start or end time that could not be read.',
        'suggestions': [
            'Check the event times on the server',
            'The remaining events are still shown',
        ],
        'code': 'EVENT_001'
    }

    SETTINGS_ERROR = {
        'title': 'Settings Error',
        'message': 'Unable to save or load application settings.',
        'suggestions': [
            'Check file permissions in application folder',
            'Settings will use default values'
        ],
        'code': 'CONFIG_001'
    }

    INVALID_TIMEZONE = {
        'title': 'Invalid Time Zone',
        'message': 'The configured time zone is not known on this system.',
        'suggestions': [
            'Use an IANA name such as "Asia/Seoul"',
            'Local wall-clock time is used instead'
        ],
        'code': 'CONFIG_002'
    }

    UNEXPECTED_ERROR = {
        'title': 'Unexpected Error',
        'message': 'An unexpected error occurred.',
        'suggestions': [
            'Try again',
        ],
        'code': 'GENERAL_001'
    }

    @staticmethod
    def get_message(error_type):
        """
        Get error message details by error type.

        Args:
            error_type (str): The error type constant name

        Returns:
            dict: Error message details with title, message, suggestions, and code
        """
        return getattr(ErrorMessages, error_type, ErrorMessages.UNEXPECTED_ERROR)


class CalendarError(Exception):
    """Base exception class for calendar-specific errors."""

    def __init__(self, message, error_code=None, suggestions=None):
        super().__init__(message)
        self.error_code = error_code
        self.suggestions = suggestions or []

    @classmethod
    def from_message(cls, error_type, detail: Optional[str] = None):
        info = ErrorMessages.get_message(error_type)
        message = info['message'] if not detail else f"{info['message']} ({detail})"
        return cls(message, error_code=info['code'], suggestions=info['suggestions'])


class EventParseError(CalendarError):
    """Exception for event times that cannot be turned into an instant."""
    pass


class SettingsError(CalendarError):
    """Exception for settings and configuration errors."""
    pass
