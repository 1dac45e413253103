# views/day_view_model.py
"""
일간 뷰 화면에 넘길 데이터를 만드는 모듈 (Qt 의존 없음).

날짜별 일정 추리기, 상태 필터, 시간 눈금, 일정 색상을 다루고
layout_calculator의 결과를 그리기용 dict 목록으로 바꾼다.
"""
import datetime
import logging

from constants import DayViewLayout, DateTimeFormat, CalendarText, EventColors
from constants import get_status_color, get_status_label
from error_messages import EventParseError
from event_parser import get_event_id, get_event_name, parse_event_range
from settings_manager import get_day_view_settings
from .layout_calculator import calculate_day_layout

logger = logging.getLogger(__name__)


def get_events_for_date(events, day, tz=None):
    """
    해당 날짜에 걸쳐 있는 일정만 반환합니다 (여러 날 일정 포함, 경계 포함).
    시각을 읽을 수 없는 일정은 걸러내지 않고 그대로 넘겨서
    레이아웃 단계가 invalid-date 경고로 보고하게 합니다.
    """
    start_of_day = datetime.datetime.combine(day, datetime.time.min, tzinfo=tz)
    end_of_day = datetime.datetime.combine(day, datetime.time.max, tzinfo=tz)

    day_events = []
    for index, event in enumerate(events or []):
        try:
            start, end = parse_event_range(event, tz)
        except EventParseError as e:
            logger.debug(f"Invalid date format for event ID {get_event_id(event, index)}: {e}")
            day_events.append(event)
            continue
        if start_of_day <= end and end_of_day >= start:
            day_events.append(event)
    return day_events


def filter_by_status(events, statuses):
    """statuses가 비어 있으면 전부 통과"""
    if not statuses:
        return list(events or [])
    wanted = {str(s).upper() for s in statuses}
    return [e for e in events or [] if str(e.get('status', '')).upper() in wanted]


def _hour_label(hour24):
    hour12 = hour24 - 12 if hour24 > 12 else (12 if hour24 == 0 else hour24)
    ampm = CalendarText.PM if 12 <= hour24 < 24 else CalendarText.AM
    return f"{hour12} {ampm}"


def generate_hour_marks(window):
    """창 안의 정시마다 라벨과 세로 위치(퍼센트)를 만든다."""
    total_minutes = window.total_minutes
    mark = window.start.replace(minute=0, second=0, microsecond=0)
    if mark < window.start:
        mark += datetime.timedelta(hours=1)

    marks = []
    while mark <= window.end:
        top = window.minutes_from_start(mark) / total_minutes * 100
        marks.append({
            'hour': mark.hour,
            'label': _hour_label(mark.hour),
            'top': top,
        })
        mark += datetime.timedelta(hours=1)
    return marks


def _to_int32(value):
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def simple_hash(text):
    """UTF-16 코드 단위 기준 31배 누적 해시 (32비트 정수로 잘림), 절댓값 반환"""
    hash_value = 0
    data = str(text).encode('utf-16-le')
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        hash_value = _to_int32((hash_value << 5) - hash_value + code_unit)
    return abs(hash_value)


def color_for_event_id(event_id):
    """같은 ID는 항상 같은 팔레트 색"""
    palette = EventColors.ID_PALETTE
    if event_id is None:
        return palette[0]
    return palette[simple_hash(event_id) % len(palette)]


def color_for_status(status):
    return get_status_color(status)


def build_status_legend_items(statuses):
    """중복을 제거한 상태 범례 (key는 대문자)"""
    items = []
    seen = set()
    for status in statuses:
        key = str(status).upper()
        if key in seen:
            continue
        seen.add(key)
        items.append({
            'key': key,
            'label': get_status_label(key),
            'color': get_status_color(key),
        })
    return items


def _format_time_range(normalized):
    fmt = DateTimeFormat.TIME_RANGE
    return f"{normalized.original_start.strftime(fmt)} - {normalized.original_end.strftime(fmt)}"


def build_day_view(events, day, settings=None, layout=DayViewLayout):
    """
    일간 뷰 한 화면 분량의 그리기 데이터를 만든다.

    Args:
        events (list): 원본 일정 dict 목록
        day (date): 기준 날짜
        settings (dict): settings.json 내용 (None이면 파일에서 읽음)
        layout: 창/여백 상수 클래스

    Returns:
        dict: {'date', 'title', 'summary', 'hour_marks', 'items', 'warnings', 'legend'}
    """
    view_settings = get_day_view_settings(settings)
    tz = view_settings['timezone']
    color_mode = view_settings['color_mode']

    visible_events = filter_by_status(events, view_settings['statuses'])
    result = calculate_day_layout(visible_events, day, tz=tz, layout=layout)

    items = []
    for event_id, laid_out in result.items.items():
        event = laid_out.event
        if color_mode == "id":
            color = color_for_event_id(event_id)
        else:
            color = color_for_status(event.get('status'))
        items.append({
            'id': event_id,
            'event': event,
            'name': get_event_name(event, CalendarText.NO_TITLE),
            'layout': laid_out.layout,
            'style': laid_out.layout.as_style(),
            'color': color,
            'time_text': _format_time_range(laid_out.normalized),
            'column_index': laid_out.assignment.column_index,
            'num_columns': laid_out.assignment.num_columns,
        })

    count = len(items)
    noun = CalendarText.EVENT_SINGULAR if count == 1 else CalendarText.EVENT_PLURAL
    statuses = [e.get('status') for e in visible_events if e.get('status')]

    return {
        'date': day,
        'title': day.strftime(DateTimeFormat.DAY_TITLE),
        'summary': f"{count} {noun}",
        'hour_marks': generate_hour_marks(result.window),
        'items': items,
        'warnings': list(result.warnings),
        'legend': build_status_legend_items(statuses),
    }
