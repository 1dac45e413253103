# views/widgets.py
from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QColor, QFontMetrics, QTextDocument, QPainterPath

from config import DEFAULT_EVENT_COLOR


def get_text_color_for_background(hex_color):
    try:
        hex_color = hex_color.lstrip('#')
        r, g, b = tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
        luminance = (0.299 * r + 0.587 * g + 0.114 * b)
        return '#000000' if luminance > 149 else '#FFFFFF'
    except (AttributeError, ValueError, IndexError):
        return '#FFFFFF'


def _escape(text):
    return text.replace('&', '&amp;').replace('<', '&lt;').replace('>', '&gt;')


def draw_event(painter, rect, color, time_text, summary_text, is_muted=False):
    painter.save()

    if is_muted:
        painter.setOpacity(0.5)

    color = color or DEFAULT_EVENT_COLOR
    painter.setBrush(QColor(color))
    painter.setPen(Qt.PenStyle.NoPen)

    clip_path = QPainterPath()
    clip_path.addRoundedRect(QRectF(rect), 4, 4)
    painter.drawPath(clip_path)
    painter.setClipPath(clip_path)

    text_color = QColor(get_text_color_for_background(color))
    painter.setPen(text_color)
    text_rect = rect.adjusted(4, -2, -4, -1)

    # 너무 좁으면 글자는 생략
    font_metrics = QFontMetrics(painter.font())
    min_text_width = font_metrics.horizontalAdvance('Abc')
    if text_rect.width() < min_text_width:
        painter.restore()
        return

    full_html = f"<p style='margin:0; font-weight:600;'>{_escape(summary_text)}</p>"
    if time_text:
        full_html += f"<p style='margin:0; font-size:8pt;'>{_escape(time_text)}</p>"

    doc = QTextDocument()
    doc.setDefaultStyleSheet(f"p {{ color: {text_color.name()}; line-height: 100%; }}")
    doc.setTextWidth(text_rect.width())
    doc.setHtml(full_html)

    painter.translate(text_rect.topLeft())
    doc.drawContents(painter, QRectF(0, 0, text_rect.width(), text_rect.height()))

    painter.restore()
