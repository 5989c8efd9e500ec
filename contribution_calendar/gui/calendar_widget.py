# gui/calendar_widget.py
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame, QToolTip
from PySide6.QtCore import Qt, QPoint
from PySide6.QtGui import QCursor

from contribution_calendar.logic.cell_style import (
    cell_classes, background_color, TODAY_BORDER, SELECTED_BORDER,
)
from contribution_calendar.utils.date_helper import WEEKDAY_LABELS

CELL_SIZE = 14
TOOLTIP_OFFSET = 15


class DayCellFrame(QFrame):
    """잔디 한 칸. 클릭 → 선택, 마우스 올림 → 툴팁"""

    def __init__(self, cell, on_click, on_hover, on_leave):
        super().__init__()
        self.cell = cell
        self._on_click = on_click
        self._on_hover = on_hover
        self._on_leave = on_leave
        self.setFixedSize(CELL_SIZE, CELL_SIZE)

        classes = cell_classes(cell)
        color = background_color(classes)
        if color is None:
            # 다른 해 채움 칸: 투명, 상호작용 없음
            self.setStyleSheet("background: transparent; border: none;")
            self.setEnabled(False)
            return

        border = "transparent"
        if "is-today" in classes:
            border = TODAY_BORDER
        if "is-selected" in classes:
            border = SELECTED_BORDER
        self.setStyleSheet(f"background:{color}; border:2px solid {border}; border-radius:2px;")
        self.setCursor(Qt.PointingHandCursor)

    def mousePressEvent(self, ev):
        if self.cell.in_year and ev.button() == Qt.LeftButton:
            self._on_click(self.cell.date)
        super().mousePressEvent(ev)

    def enterEvent(self, ev):
        if self.cell.in_year:
            pos = QCursor.pos()
            self._on_hover(self.cell.date, pos.x(), pos.y())
        super().enterEvent(ev)

    def leaveEvent(self, ev):
        if self.cell.in_year:
            self._on_leave()
        super().leaveEvent(ev)


class YearGridWidget(QWidget):
    """
    연간 잔디 그리드
    - 행: 요일(일~토), 열: 주
    - 맨 윗줄에 월 표시(그 달 1일이 있는 주)
    """

    def __init__(self, on_day_click, on_day_hover, on_day_leave):
        super().__init__()
        self.on_day_click = on_day_click
        self.on_day_hover = on_day_hover
        self.on_day_leave = on_day_leave
        self.vbox = QVBoxLayout(self)
        self.vbox.setContentsMargins(0, 0, 0, 0)

        self.grid = QGridLayout()
        self.grid.setSpacing(3)
        self.vbox.addLayout(self.grid)
        self.vbox.addStretch(1)

    def clear_grid(self):
        while self.grid.count():
            item = self.grid.takeAt(0)
            w = item.widget()
            if w is not None:
                w.hide()
                w.deleteLater()  # 자기 이벤트 처리 중에 지워질 수 있음

    def render_year(self, cells):
        self.clear_grid()

        # 요일 라벨 (0열)
        for r, w in enumerate(WEEKDAY_LABELS):
            lbl = QLabel(w); lbl.setAlignment(Qt.AlignCenter)
            lbl.setStyleSheet("color:#57606a; font-size:10px;")
            self.grid.addWidget(lbl, r + 1, 0)

        for i, cell in enumerate(cells):
            week, weekday = divmod(i, 7)
            col = week + 1
            if cell.in_year and cell.date.day == 1:
                m = QLabel(f"{cell.date.month}월")
                m.setStyleSheet("color:#57606a; font-size:10px;")
                self.grid.addWidget(m, 0, col, 1, 4, Qt.AlignLeft)
            frame = DayCellFrame(cell, self.on_day_click, self._hover, self._leave)
            self.grid.addWidget(frame, weekday + 1, col)

    def _hover(self, day, x, y):
        tooltip = self.on_day_hover(day, x, y)
        if tooltip is not None and tooltip.visible:
            QToolTip.showText(QPoint(tooltip.x + TOOLTIP_OFFSET, tooltip.y + TOOLTIP_OFFSET), tooltip.content, self)

    def _leave(self):
        self.on_day_leave()
        QToolTip.hideText()
