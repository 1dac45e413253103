# constants/__init__.py
"""
상수 패키지 초기화
모든 상수들을 중앙에서 관리하고 쉽게 import할 수 있도록 함
"""

from .ui_constants import DayViewLayout, DateTimeFormat
from .color_constants import BaseColors, EventColors, get_status_color
from .text_constants import (
    StatusText, CalendarText, DropReasonText, format_text, get_status_label
)

__all__ = [
    # UI Constants
    'DayViewLayout', 'DateTimeFormat',

    # Color Constants
    'BaseColors', 'EventColors', 'get_status_color',

    # Text Constants
    'StatusText', 'CalendarText', 'DropReasonText', 'format_text', 'get_status_label',
]
