import sys
import json
import datetime
import argparse
import logging

from logger_config import setup_logger
from settings_manager import load_settings, get_day_view_settings
from error_messages import CalendarError, ErrorMessages
from views.day_view_model import build_day_view, get_events_for_date

logger = logging.getLogger(__name__)


def load_events_file(path):
    """일정 JSON 파일 로드. 리스트 또는 {'events': [...]} 형태를 받는다."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("events", [])
    if not isinstance(data, list):
        raise CalendarError(f"일정 파일 형식이 올바르지 않습니다: {path}")
    return [e for e in data if isinstance(e, dict)]


def view_data_to_json(view_data):
    """build_day_view 결과를 JSON으로 내보낼 수 있는 형태로 변환"""
    return {
        'date': view_data['date'].isoformat(),
        'title': view_data['title'],
        'summary': view_data['summary'],
        'events': [
            {
                'id': item['id'],
                'name': item['name'],
                'time': item['time_text'],
                'color': item['color'],
                'columnIndex': item['column_index'],
                'numColumns': item['num_columns'],
                'layout': item['style'],
            }
            for item in view_data['items']
        ],
        'warnings': [
            {'id': w.event_id, 'reason': w.reason, 'message': w.message}
            for w in view_data['warnings']
        ],
        'legend': view_data['legend'],
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Day view layout for reservation events")
    parser.add_argument("events_file", help="JSON file with the events to lay out")
    parser.add_argument("--date", type=datetime.date.fromisoformat, help="day to render (YYYY-MM-DD), default today")
    parser.add_argument("--settings", help="settings.json path")
    parser.add_argument("--timezone", help="IANA time zone, overrides settings")
    parser.add_argument("--dump", action="store_true", help="print layout JSON instead of opening a window")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args(argv)


def show_day_view(view_data, settings):
    from PyQt6.QtWidgets import QApplication, QWidget, QVBoxLayout, QLabel, QScrollArea
    from views.day_view import DayViewCanvas

    app = QApplication.instance() or QApplication(sys.argv)

    window = QWidget()
    window.setWindowTitle(view_data['title'])
    window.resize(480, 720)
    layout = QVBoxLayout(window)
    layout.addWidget(QLabel(f"{view_data['title']}  ·  {view_data['summary']}"))

    canvas = DayViewCanvas(is_dark=settings.get("theme", "dark") == "dark")
    canvas.set_data(view_data)
    canvas.event_activated.connect(
        lambda event: logger.info(f"일정 선택: {event.get('eventName', '')} ({event.get('publicId', '')})"))

    scroll = QScrollArea()
    scroll.setWidgetResizable(True)
    scroll.setWidget(canvas)
    layout.addWidget(scroll)

    window.show()
    return app.exec()


def main(argv=None):
    args = parse_args(argv)
    setup_logger(logging.DEBUG if args.debug else logging.INFO)

    settings = load_settings(args.settings)
    if args.timezone:
        settings = dict(settings, timezone=args.timezone)

    day = args.date or datetime.date.today()
    tz = get_day_view_settings(settings)['timezone']

    try:
        all_events = load_events_file(args.events_file)
    except (OSError, json.JSONDecodeError, CalendarError) as e:
        logger.error(f"일정 파일을 읽을 수 없습니다: {e}")
        return 1

    view_data = build_day_view(get_events_for_date(all_events, day, tz), day, settings)

    malformed = [w for w in view_data['warnings'] if w.is_malformed]
    if malformed:
        info = ErrorMessages.INVALID_EVENT_TIME
        logger.warning(f"{info['title']} ({info['code']}): {len(malformed)}개 일정 제외")
        for warning in malformed:
            logger.warning(f"  {warning.event_id}: {warning.reason} - {warning.message}")

    if args.dump:
        print(json.dumps(view_data_to_json(view_data), indent=2, ensure_ascii=False, default=str))
        return 0

    return show_day_view(view_data, settings)


if __name__ == '__main__':
    sys.exit(main())
