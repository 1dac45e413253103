# config.py
import os
import sys

def get_data_dir():
    """Get the appropriate data directory for user files."""
    if hasattr(sys, '_MEIPASS'):
        if sys.platform == "win32":
            data_dir = os.path.join(os.path.expanduser('~'), 'AppData', 'Local', 'BookingCalendar')
        else:
            data_dir = os.path.join(os.path.expanduser('~'), '.bookingcalendar')
    else:
        # 개발 모드에서는 현재 디렉토리 사용
        data_dir = os.path.dirname(os.path.abspath(__file__))

    os.makedirs(data_dir, exist_ok=True)
    return data_dir

# --- File Paths ---
_DATA_DIR = get_data_dir()
SETTINGS_FILE = os.path.join(_DATA_DIR, "settings.json")
ERROR_LOG_FILE = os.path.join(_DATA_DIR, "error.log")

# --- Time ---
DEFAULT_TIMEZONE = None  # None이면 시간대 없는 로컬 벽시계 시간으로 계산

# --- Day View Defaults ---
DEFAULT_EVENT_COLOR = '#555555'
DEFAULT_COLOR_MODE = "status"  # "status", "id"
COLOR_MODES = ("status", "id")
