# event_parser.py
"""
원본 일정(dict)에서 ID와 시작/종료 시각을 꺼내는 헬퍼 모음.

서버 응답 형태(publicId, startTime, endTime)를 기본으로 하고,
id/start/end 별칭과 {'dateTime': ...} / {'date': ...} 형태도 받는다.
"""
import datetime

from dateutil import parser as dateutil_parser

from error_messages import EventParseError


ID_KEYS = ('publicId', 'id')
START_KEYS = ('startTime', 'start')
END_KEYS = ('endTime', 'end')


def _first_present(event, keys):
    for key in keys:
        if key in event and event[key] is not None:
            return event[key]
    return None


def get_event_id(event, index):
    """publicId 또는 id, 둘 다 없으면 'temp-<index>'"""
    event_id = _first_present(event, ID_KEYS)
    if event_id is None or event_id == '':
        return f"temp-{index}"
    return event_id


def get_raw_times(event):
    """(시작 값, 종료 값) 반환. 값은 파싱 전 그대로."""
    return _first_present(event, START_KEYS), _first_present(event, END_KEYS)


def get_event_name(event, default=''):
    return event.get('eventName') or event.get('summary') or default


def _to_datetime(value):
    if isinstance(value, dict):
        value = value.get('dateTime') or value.get('date')

    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise EventParseError("empty time string")
        try:
            return dateutil_parser.isoparse(text)
        except (ValueError, OverflowError) as e:
            raise EventParseError(f"'{value}': {e}") from e
    raise EventParseError(f"unsupported time value {value!r}")


def align_timezone(dt, tz=None):
    """
    tz 기준으로 시각을 맞춘다.

    - tz가 있으면: aware 값은 tz로 변환, naive 값은 tz의 벽시계 시간으로 간주
    - tz가 None이면: aware 값은 로컬 시간으로 변환 후 tzinfo 제거, naive 값은 그대로
    """
    if dt.tzinfo is not None:
        if tz is not None:
            return dt.astimezone(tz)
        return dt.astimezone().replace(tzinfo=None)
    if tz is not None:
        return dt.replace(tzinfo=tz)
    return dt


def parse_event_time(value, tz=None):
    """
    시작/종료 값 하나를 datetime으로 변환합니다.

    Args:
        value: ISO-8601 문자열, datetime, date 또는 {'dateTime': ...} dict
        tz: 기준 시간대 (None이면 naive 로컬 시간)

    Returns:
        datetime.datetime

    Raises:
        EventParseError: 유효한 시각으로 해석할 수 없을 때
    """
    dt = _to_datetime(value)
    try:
        return align_timezone(dt, tz)
    except (OverflowError, ValueError) as e:
        # 시간대 변환 결과가 datetime 범위를 벗어남
        raise EventParseError(f"'{value}': {e}") from e


def parse_event_range(event, tz=None):
    """(start, end) datetime 쌍. 둘 중 하나라도 실패하면 EventParseError."""
    start_value, end_value = get_raw_times(event)
    if start_value is None:
        raise EventParseError("missing start time")
    if end_value is None:
        raise EventParseError("missing end time")
    return parse_event_time(start_value, tz), parse_event_time(end_value, tz)
