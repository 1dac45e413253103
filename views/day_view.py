# views/day_view.py
import logging

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QRect, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QPen

from constants import DayViewLayout, BaseColors
from .widgets import draw_event

logger = logging.getLogger(__name__)

MUTED_STATUSES = ("CANCELED", "CANCELLED", "REJECTED")


def layout_to_rect(layout, width, height, min_height_px=DayViewLayout.MIN_HEIGHT_PX, left_offset=0):
    """퍼센트 레이아웃을 (x, y, w, h) 픽셀 좌표로 변환"""
    x = left_offset + layout.left / 100 * width
    y = layout.top / 100 * height
    w = layout.width / 100 * width
    h = max(layout.height / 100 * height, min_height_px)
    return int(round(x)), int(round(y)), int(round(w)), int(round(h))


class DayViewCanvas(QWidget):
    event_activated = pyqtSignal(dict)

    def __init__(self, parent=None, is_dark=True, layout=DayViewLayout):
        super().__init__(parent)
        self.is_dark = is_dark
        self.layout_constants = layout
        self.view_data = None
        self.event_rects = []
        self.setMouseTracking(True)

        visible_minutes = (
            (layout.END_TIME.hour * 60 + layout.END_TIME.minute)
            - (layout.START_TIME.hour * 60 + layout.START_TIME.minute)
        )
        self.setMinimumHeight(int(visible_minutes / 60 * layout.HOUR_HEIGHT))

    def set_data(self, view_data):
        self.view_data = view_data
        self.update()

    def get_event_at(self, pos):
        # 나중에 그려진(위에 있는) 일정 우선
        for rect, event_data in reversed(self.event_rects):
            if rect.contains(pos):
                return event_data
        return None

    def paintEvent(self, event):
        if not self.view_data:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.event_rects.clear()

        self._draw_time_grid(painter)
        self._draw_events(painter)

    def _draw_time_grid(self, painter):
        painter.save()
        grid_left = self.layout_constants.TIME_GRID_LEFT
        line_color = QColor(BaseColors.GRID_LINE_DARK if self.is_dark else BaseColors.GRID_LINE_LIGHT)
        label_color = QColor(BaseColors.LABEL_DARK if self.is_dark else BaseColors.LABEL_LIGHT)
        label_height = painter.fontMetrics().height()

        for mark in self.view_data['hour_marks']:
            y = int(mark['top'] / 100 * self.height())
            painter.setPen(QPen(line_color, 1))
            painter.drawLine(grid_left, y, self.width(), y)

            painter.setPen(label_color)
            rect = QRect(0, y - label_height // 2, self.layout_constants.LABEL_WIDTH, label_height)
            painter.drawText(rect, Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter, mark['label'])
        painter.restore()

    def _draw_events(self, painter):
        painter.save()
        grid_left = self.layout_constants.TIME_GRID_LEFT
        area_width = self.width() - grid_left

        for item in self.view_data['items']:
            x, y, w, h = layout_to_rect(item['layout'], area_width, self.height(),
                                        self.layout_constants.MIN_HEIGHT_PX, left_offset=grid_left)
            rect = QRect(x, y, w, h)
            self.event_rects.append((rect, item['event']))

            status = str(item['event'].get('status', '')).upper()
            draw_event(painter, rect, item['color'], item['time_text'], item['name'],
                       is_muted=status in MUTED_STATUSES)
        painter.restore()

    def mouseDoubleClickEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            super().mouseDoubleClickEvent(event)
            return

        clicked_event = self.get_event_at(event.position().toPoint())
        if clicked_event:
            logger.debug(f"DayViewCanvas: 일정 더블클릭 - {clicked_event.get('eventName', '')}")
            self.event_activated.emit(clicked_event)
            event.accept()
