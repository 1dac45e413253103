# constants/color_constants.py
"""
색상 관련 상수 정의
일정 상태별 색상과 ID 기반 팔레트를 중앙에서 관리
"""

# ============================================================================
# 기본 색상
# ============================================================================
class BaseColors:
    WHITE = "#FFFFFF"
    BLACK = "#000000"
    GRAY = "#888888"
    GRID_LINE_DARK = "#404040"
    GRID_LINE_LIGHT = "#D0D0D0"
    LABEL_DARK = "#D0D0D0"
    LABEL_LIGHT = "#222222"


# ============================================================================
# 일정 색상
# ============================================================================
class EventColors:
    MAROON = "#800000"
    SKY = "#0EA5E9"
    GOLD = "#EAB308"
    ROSE = "#F43F5E"
    VIOLET = "#8B5CF6"

    # 상태(대문자) -> 색상
    STATUS_TO_COLOR = {
        "APPROVED": MAROON,
        "ONGOING": SKY,
        "PENDING": GOLD,
        "CANCELED": ROSE,
        "CANCELLED": ROSE,
        "REJECTED": ROSE,
        "COMPLETED": VIOLET,
    }
    UNKNOWN_STATUS_COLOR = SKY

    # ID 해시로 고르는 팔레트 (blue, indigo, purple, pink, teal, cyan, orange, lime)
    ID_PALETTE = (
        "#3B82F6",
        "#6366F1",
        "#A855F7",
        "#EC4899",
        "#14B8A6",
        "#06B6D4",
        "#F97316",
        "#84CC16",
    )


def get_status_color(status: str) -> str:
    """상태 문자열에 대응하는 색상 반환 (대소문자 무시)"""
    if not status:
        return EventColors.UNKNOWN_STATUS_COLOR
    return EventColors.STATUS_TO_COLOR.get(str(status).upper(), EventColors.UNKNOWN_STATUS_COLOR)
