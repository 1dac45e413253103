# constants/ui_constants.py
"""
일간 뷰 레이아웃 상수 정의
보이는 시간 범위, 최소 표시 길이, 여백 등을 중앙에서 관리
"""
import datetime


# ============================================================================
# 일간 뷰 레이아웃 상수
# ============================================================================
class DayViewLayout:
    # 보이는 시간 범위 (06:00 ~ 23:30)
    START_TIME = datetime.time(6, 0)
    END_TIME = datetime.time(23, 30)

    # 짧은 일정도 클릭할 수 있도록 하는 최소 표시 길이 (분)
    MIN_EVENT_MINUTES = 15

    # 일정 좌우 여백 (퍼센트, 양쪽 각각)
    HORIZONTAL_PADDING_PERCENT = 0.5

    # 퍼센트 높이와 별개인 고정 최소 높이
    MIN_HEIGHT = "1.5rem"

    # Qt 캔버스용 픽셀 값
    TIME_GRID_LEFT = 50
    HOUR_HEIGHT = 64
    MIN_HEIGHT_PX = 24
    LABEL_WIDTH = 45


# ============================================================================
# 시간 표시 형식
# ============================================================================
class DateTimeFormat:
    TIME_RANGE = "%H:%M"
    DAY_TITLE = "%A, %B %d, %Y"
