# constants/text_constants.py
"""
UI 텍스트 상수 정의
일간 뷰에서 보이는 문자열을 중앙에서 관리
"""

# ============================================================================
# 일정 상태 라벨
# ============================================================================
class StatusText:
    LABELS = {
        "pending": "Pending",
        "approved": "Approved",
        "ongoing": "Ongoing",
        "completed": "Completed",
        "rejected": "Rejected",
        "canceled": "Canceled",
    }


# ============================================================================
# 일간 뷰 텍스트
# ============================================================================
class CalendarText:
    NO_TITLE = "(No title)"
    EVENT_SINGULAR = "event"
    EVENT_PLURAL = "events"
    AM = "AM"
    PM = "PM"


# ============================================================================
# 제외된 일정 안내 문구
# ============================================================================
class DropReasonText:
    INVALID_DATE = "Start or end time could not be parsed: {detail}"
    INVALID_RANGE = "End time {end} is before start time {start}"
    OUTSIDE_WINDOW = "Event {start} - {end} is outside the visible window {window_start} - {window_end}"
    DUPLICATE_ID = "Another event with id '{event_id}' was already laid out"


def format_text(template: str, **kwargs) -> str:
    """텍스트 템플릿 포맷팅"""
    return template.format(**kwargs)


def get_status_label(status: str) -> str:
    """상태 라벨 반환, 모르는 상태는 첫 글자만 대문자로"""
    key = str(status).lower()
    if key in StatusText.LABELS:
        return StatusText.LABELS[key]
    return key[:1].upper() + key[1:]
