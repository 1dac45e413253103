import json
import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config import SETTINGS_FILE, DEFAULT_TIMEZONE, DEFAULT_COLOR_MODE, COLOR_MODES
from error_messages import ErrorMessages, SettingsError

logger = logging.getLogger(__name__)

def load_settings(path=None):
    """설정 파일(settings.json)을 읽어와서 딕셔너리로 반환합니다."""
    path = path or SETTINGS_FILE
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning(f"설정 파일이 손상되어 기본값을 사용합니다: {path}")
                return {} # 파일이 손상되었을 경우 빈 딕셔너리 반환
        return data if isinstance(data, dict) else {}
    return {} # 파일이 없을 경우 빈 딕셔너리 반환

def save_settings(data, path=None):
    """설정 데이터(딕셔너리)를 settings.json 파일에 저장합니다."""
    path = path or SETTINGS_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=4)
    except OSError as e:
        raise SettingsError.from_message('SETTINGS_ERROR', str(e)) from e

def resolve_timezone(name):
    """
    IANA 시간대 이름을 ZoneInfo로 변환합니다.

    Returns:
        ZoneInfo | None: 이름이 비었거나 알 수 없는 시간대면 None (로컬 벽시계 시간)
    """
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        info = ErrorMessages.INVALID_TIMEZONE
        logger.warning(f"{info['message']} '{name}' ({info['code']})")
        return None

def get_day_view_settings(settings=None):
    """
    일간 뷰 계산에 필요한 설정만 추려서 반환합니다.

    Returns:
        dict: {'timezone': ZoneInfo | None, 'color_mode': str, 'statuses': list}
    """
    if settings is None:
        settings = load_settings()

    color_mode = settings.get("day_view_color_mode", DEFAULT_COLOR_MODE)
    if color_mode not in COLOR_MODES:
        logger.warning(f"알 수 없는 색상 모드 '{color_mode}', 기본값({DEFAULT_COLOR_MODE})을 사용합니다.")
        color_mode = DEFAULT_COLOR_MODE

    statuses = settings.get("day_view_statuses") or []
    if not isinstance(statuses, list):
        statuses = [statuses]

    return {
        'timezone': resolve_timezone(settings.get("timezone", DEFAULT_TIMEZONE)),
        'color_mode': color_mode,
        'statuses': [str(s).upper() for s in statuses],
    }
