# views/layout_calculator.py
"""
일간 뷰 시간축 레이아웃 계산기.

원본 일정 -> 창 안으로 잘라낸 일정 -> 열(레인) 배정 -> 퍼센트 좌표 순으로
한 방향으로만 흐르며, 각 단계는 새 컬렉션을 만든다. 입력 dict는 건드리지 않는다.
"""
import datetime
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from constants import DayViewLayout
from constants.text_constants import DropReasonText, format_text
from error_messages import DropReason, DroppedEvent, EventParseError
from event_parser import get_event_id, parse_event_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewWindow:
    start: datetime.datetime
    end: datetime.datetime

    @property
    def total_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60

    def minutes_from_start(self, dt: datetime.datetime) -> float:
        return (dt - self.start).total_seconds() / 60


@dataclass(frozen=True)
class NormalizedEvent:
    event_id: Any
    event: dict
    original_start: datetime.datetime
    original_end: datetime.datetime
    clamped_start: datetime.datetime
    clamped_end: datetime.datetime

    @property
    def display_minutes(self) -> float:
        return (self.clamped_end - self.clamped_start).total_seconds() / 60

    def overlaps(self, other: "NormalizedEvent") -> bool:
        # 끝점이 맞닿는 것은 겹침이 아니다
        return self.clamped_start < other.clamped_end and other.clamped_start < self.clamped_end


@dataclass(frozen=True)
class ColumnAssignment:
    column_index: int = 0
    num_columns: int = 1


@dataclass(frozen=True)
class Layout:
    top: float
    height: float
    left: float
    width: float
    min_height: str = DayViewLayout.MIN_HEIGHT

    def as_style(self) -> Dict[str, str]:
        return {
            'top': format_percent(self.top),
            'height': format_percent(self.height),
            'left': format_percent(self.left),
            'width': format_percent(self.width),
            'minHeight': self.min_height,
        }


@dataclass(frozen=True)
class LaidOutEvent:
    event: dict
    normalized: NormalizedEvent
    assignment: ColumnAssignment
    layout: Layout

    @property
    def event_id(self):
        return self.normalized.event_id


@dataclass(frozen=True)
class DayLayoutResult:
    window: ViewWindow
    items: Dict[Any, LaidOutEvent]
    warnings: Tuple[DroppedEvent, ...] = ()

    def __len__(self):
        return len(self.items)

    def layout_for(self, event_id) -> Optional[Layout]:
        item = self.items.get(event_id)
        return item.layout if item else None


def format_percent(value: float) -> str:
    text = f"{value:.4f}".rstrip('0').rstrip('.')
    if text == '-0':
        text = '0'
    return f"{text}%"


def _clamp_percent(value: float) -> float:
    return min(100.0, max(0.0, value))


def define_window(day, tz=None, layout=DayViewLayout) -> ViewWindow:
    """
    기준 날짜의 보이는 시간 범위(기본 06:00 ~ 23:30)를 만든다.

    Args:
        day (date | datetime): 기준 날짜. aware datetime이면 tz 기본값으로 그 tzinfo를 쓴다.
        tz: 창과 일정 시각을 맞출 시간대 (None이면 naive 로컬 시간)
        layout: 창 경계 상수 클래스
    """
    if isinstance(day, datetime.datetime):
        if tz is None:
            tz = day.tzinfo
        day = day.date()

    start = datetime.datetime.combine(day, layout.START_TIME, tzinfo=tz)
    end = datetime.datetime.combine(day, layout.END_TIME, tzinfo=tz)
    return ViewWindow(start=start, end=end)


def _drop(warnings, event_id, reason, message, level=logging.WARNING):
    logger.log(level, f"일정 제외 ({reason}) id={event_id}: {message}")
    if warnings is not None:
        warnings.append(DroppedEvent(event_id=event_id, reason=reason, message=message))


def normalize_events(events, window: ViewWindow, warnings: Optional[list] = None) -> List[NormalizedEvent]:
    """
    일정 시각을 파싱해 창 안으로 잘라낸다.

    파싱 실패, 창과 겹치지 않는 일정, 중복 ID는 결과에서 빠지고
    warnings 리스트(주어졌다면)에 DroppedEvent로 기록된다. 예외는 던지지 않는다.
    """
    tz = window.start.tzinfo
    normalized = []
    seen_ids = set()

    for index, event in enumerate(events or []):
        event_id = get_event_id(event, index)

        try:
            start, end = parse_event_range(event, tz)
        except EventParseError as e:
            _drop(warnings, event_id, DropReason.INVALID_DATE,
                  format_text(DropReasonText.INVALID_DATE, detail=e))
            continue

        if end < start:
            _drop(warnings, event_id, DropReason.INVALID_RANGE,
                  format_text(DropReasonText.INVALID_RANGE, start=start.isoformat(), end=end.isoformat()))
            continue

        if end <= window.start or start >= window.end:
            _drop(warnings, event_id, DropReason.OUTSIDE_WINDOW,
                  format_text(DropReasonText.OUTSIDE_WINDOW,
                              start=start.isoformat(), end=end.isoformat(),
                              window_start=window.start.isoformat(), window_end=window.end.isoformat()),
                  level=logging.DEBUG)
            continue

        if event_id in seen_ids:
            _drop(warnings, event_id, DropReason.DUPLICATE_ID,
                  format_text(DropReasonText.DUPLICATE_ID, event_id=event_id))
            continue
        seen_ids.add(event_id)

        normalized.append(NormalizedEvent(
            event_id=event_id,
            event=event,
            original_start=start,
            original_end=end,
            clamped_start=max(start, window.start),
            clamped_end=min(end, window.end),
        ))

    return normalized


def _sort_key(event: NormalizedEvent):
    # 시작이 같으면 종료, ID 순. 입력 순서와 무관하게 같은 결과가 나온다.
    # 1과 "1"처럼 문자열이 같은 ID는 타입 이름으로 구분
    event_id = event.event_id
    return (event.clamped_start, event.clamped_end, type(event_id).__name__, str(event_id))


def group_overlapping_events(events: List[NormalizedEvent]) -> List[List[NormalizedEvent]]:
    """직접 또는 연쇄적으로 겹치는 일정끼리 묶는다 (각 묶음은 시작 시각 순)."""
    if not events:
        return []

    sorted_events = sorted(events, key=_sort_key)

    groups = []
    current_group = [sorted_events[0]]
    group_end_time = sorted_events[0].clamped_end

    for event in sorted_events[1:]:
        if event.clamped_start < group_end_time:
            current_group.append(event)
            group_end_time = max(group_end_time, event.clamped_end)
        else:
            groups.append(current_group)
            current_group = [event]
            group_end_time = event.clamped_end

    groups.append(current_group)
    return groups


def pack_lanes(group_events: List[NormalizedEvent]) -> Tuple[Dict[Any, int], int]:
    """
    그리디 구간 색칠. 종료 시각이 이 일정의 시작 이하인 첫 레인을 재사용하고
    없으면 새 레인을 연다.

    Returns:
        (event_id -> 레인 번호, 레인 수)
    """
    lane_end_times = []
    lanes = {}

    for event in sorted(group_events, key=_sort_key):
        for i, lane_end in enumerate(lane_end_times):
            if lane_end <= event.clamped_start:
                lane_end_times[i] = event.clamped_end
                lanes[event.event_id] = i
                break
        else:
            lanes[event.event_id] = len(lane_end_times)
            lane_end_times.append(event.clamped_end)

    return lanes, len(lane_end_times)


def assign_columns(events: List[NormalizedEvent]) -> Dict[Any, ColumnAssignment]:
    """
    일정마다 겹침 이웃(연쇄 겹침 묶음) 안에서의 열 번호와 열 수를 정한다.

    같은 묶음의 일정은 모두 같은 이웃을 가지므로 묶음당 한 번만 배치하면
    일정별로 따로 계산한 것과 결과가 같다. 겹치는 두 일정은 항상 같은 묶음이라
    서로 다른 열을 받는다.
    """
    assignments = {}
    for group in group_overlapping_events(events):
        lanes, num_columns = pack_lanes(group)
        for event in group:
            assignments[event.event_id] = ColumnAssignment(
                column_index=lanes[event.event_id],
                num_columns=max(1, num_columns),
            )
    return assignments


def compute_layout(event: NormalizedEvent, assignment: ColumnAssignment, window: ViewWindow,
                   layout=DayViewLayout) -> Layout:
    """시간 오프셋과 열 배정을 창 기준 퍼센트 좌표로 바꾼다."""
    total_minutes = window.total_minutes

    top = _clamp_percent(window.minutes_from_start(event.clamped_start) / total_minutes * 100)

    display_minutes = max(event.display_minutes, layout.MIN_EVENT_MINUTES)
    height = _clamp_percent(display_minutes / total_minutes * 100)
    # 창 아래로 넘치지 않게
    height = min(height, 100.0 - top)

    padding = layout.HORIZONTAL_PADDING_PERCENT
    num_columns = max(1, assignment.num_columns)
    column_width = 100.0 / num_columns
    width = _clamp_percent(column_width - 2 * padding)
    left = _clamp_percent(assignment.column_index * column_width + padding)

    return Layout(top=top, height=height, left=left, width=width, min_height=layout.MIN_HEIGHT)


class DayLayoutCalculator:
    def __init__(self, events, day, tz=None, layout=DayViewLayout):
        self.events = list(events or [])
        self.layout = layout
        self.window = define_window(day, tz=tz, layout=layout)

    def calculate(self) -> DayLayoutResult:
        warnings = []
        normalized = normalize_events(self.events, self.window, warnings)
        assignments = assign_columns(normalized)

        items = {}
        for event in sorted(normalized, key=_sort_key):
            assignment = assignments[event.event_id]
            items[event.event_id] = LaidOutEvent(
                event=event.event,
                normalized=event,
                assignment=assignment,
                layout=compute_layout(event, assignment, self.window, self.layout),
            )

        if warnings:
            malformed = sum(1 for w in warnings if w.is_malformed)
            logger.debug(f"일간 레이아웃: {len(items)}개 배치, {len(warnings)}개 제외 (잘못된 데이터 {malformed}개)")

        return DayLayoutResult(window=self.window, items=items, warnings=tuple(warnings))


def calculate_day_layout(events, day, tz=None, layout=DayViewLayout) -> DayLayoutResult:
    return DayLayoutCalculator(events, day, tz=tz, layout=layout).calculate()
