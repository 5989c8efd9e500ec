# gui/main_window.py
import logging

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QToolBar, QPushButton, QLabel, QMessageBox,
    QFrame, QScrollArea,
)
from PySide6.QtCore import Qt, QThreadPool
from PySide6.QtGui import QPainter, QPixmap, QLinearGradient, QColor, QBrush

from contribution_calendar.config import Settings
from contribution_calendar.data.background_source import BackgroundSource, FALLBACK_GRADIENT
from contribution_calendar.data.holiday_source import HolidaySource
from contribution_calendar.gui.calendar_widget import YearGridWidget
from contribution_calendar.gui.day_panel import DetailPanel
from contribution_calendar.gui.schedule_dialog import open_schedule_dialog
from contribution_calendar.gui.workers import FetchWorker
from contribution_calendar.logic.session import CalendarSession

logger = logging.getLogger(__name__)


class BackgroundFrame(QWidget):
    """배경: 사진이 있으면 꽉 채워 가운데 정렬, 없으면 그라데이션"""

    def __init__(self):
        super().__init__()
        self._pixmap = None

    def set_image(self, data):
        pix = QPixmap()
        if data and pix.loadFromData(data):
            self._pixmap = pix
        else:
            if data:
                logger.error("배경 이미지 디코딩 실패, 그라데이션 사용")
            self._pixmap = None
        self.update()

    def paintEvent(self, event):
        p = QPainter(self)
        if self._pixmap is not None:
            scaled = self._pixmap.scaled(self.size(), Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
            x = (scaled.width() - self.width()) // 2
            y = (scaled.height() - self.height()) // 2
            p.drawPixmap(-x, -y, scaled)
        else:
            top, bottom = FALLBACK_GRADIENT
            g = QLinearGradient(0, 0, 0, self.height())
            g.setColorAt(0.0, QColor(top))
            g.setColorAt(1.0, QColor(bottom))
            p.fillRect(self.rect(), QBrush(g))
        p.end()


class CalendarWindow(QMainWindow):
    def __init__(self, settings: Settings, holiday_source=None, background_source=None):
        super().__init__()
        self.setWindowTitle("연간 일정 달력")
        self.resize(1100, 620)

        self.settings = settings
        self.holiday_source = holiday_source or HolidaySource(settings)
        self.background_source = background_source or BackgroundSource(settings)
        self.pool = QThreadPool.globalInstance()
        self._workers = set()  # 실행 중 워커 참조 유지

        self.session = CalendarSession(
            holiday_loader=self._load_holidays,
            selection_policy=settings.default_selection,
        )
        # 일정이 바뀌면 전체 다시 그리기
        self.session.store.subscribe(lambda _key: self.refresh())

        self._build_ui()
        self.session.mount()
        self._load_background()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        tb.setMovable(False)
        self.addToolBar(tb)

        self.btn_prev = QPushButton("이전 해")
        self.btn_prev.clicked.connect(self.prev_year)
        tb.addWidget(self.btn_prev)

        self.year_label = QLabel("")
        self.year_label.setStyleSheet("font-weight:600; font-size:16px; padding:0 12px;")
        tb.addWidget(self.year_label)

        self.btn_next = QPushButton("다음 해")
        self.btn_next.clicked.connect(self.next_year)
        tb.addWidget(self.btn_next)

        tb.addSeparator()

        btn_today = QPushButton("올해")
        btn_today.setToolTip("현재 연도로 이동")
        btn_today.clicked.connect(self.go_to_current_year)
        tb.addWidget(btn_today)

        # 중앙: 배경 위에 반투명 카드
        self.background = BackgroundFrame()
        self.setCentralWidget(self.background)
        root = QVBoxLayout(self.background)
        root.setContentsMargins(24, 24, 24, 24)

        card = QFrame()
        card.setObjectName("card")
        card.setStyleSheet("#card { background: rgba(255,255,255,0.92); border-radius: 10px; }")
        cv = QVBoxLayout(card)

        self.calendar = YearGridWidget(
            on_day_click=self.select_day,
            on_day_hover=self.session.hover,
            on_day_leave=self.session.unhover,
        )
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.NoFrame)
        scroll.setStyleSheet("background: transparent;")
        scroll.setWidget(self.calendar)
        cv.addWidget(scroll, 1)

        self.detail = DetailPanel(on_add=self.add_schedule, on_edit=self.edit_schedule,
                                  on_delete=self.delete_schedule)
        cv.addWidget(self.detail)

        root.addWidget(card)
        self.status = self.statusBar()

    # ---------------- 동작 ----------------
    def refresh(self):
        s = self.session
        self.calendar.render_year(s.cells())
        self.detail.show_details(s.details())
        self.year_label.setText(f"{s.year}년")
        # 지원 연도 끝에서는 이동 버튼 잠금
        self.btn_prev.setEnabled(s.can_go_prev)
        self.btn_next.setEnabled(s.can_go_next)
        self.status.showMessage(f"일정 {len(s.store)}건, 공휴일 {len(s.holidays)}일")

    def prev_year(self):
        if self.session.can_go_prev and self.session.prev_year():
            self.refresh()

    def next_year(self):
        if self.session.can_go_next and self.session.next_year():
            self.refresh()

    def go_to_current_year(self):
        if self.session.go_to_current_year():
            self.refresh()

    def select_day(self, day):
        if self.session.select_day(day):
            self.refresh()

    def add_schedule(self):
        if self.session.selected is None:
            return
        self.session.open_add_modal()
        open_schedule_dialog(self, self.session)

    def edit_schedule(self, entry_id: int):
        self.session.open_edit_modal(entry_id)
        open_schedule_dialog(self, self.session)

    def delete_schedule(self, entry_id: int):
        def confirm():
            return QMessageBox.question(self, "확인", "이 일정을 삭제하시겠습니까?") == QMessageBox.Yes
        self.session.delete_entry(entry_id, confirm)

    # ---------------- 네트워크 ----------------
    def _start(self, worker, on_done, on_fail=None):
        self._workers.add(worker)

        def done(token, result):
            self._workers.discard(worker)
            on_done(token, result)

        def fail(token, error):
            self._workers.discard(worker)
            if on_fail is not None:
                on_fail(token, error)

        worker.signals.finished.connect(done, Qt.QueuedConnection)
        worker.signals.failed.connect(fail, Qt.QueuedConnection)
        self.pool.start(worker)

    def _load_holidays(self, year: int, token: int):
        worker = FetchWorker(token, self.holiday_source.fetch, year)
        self._start(worker, self._on_holidays, self._on_holidays_failed)

    def _on_holidays(self, token, holidays):
        if self.session.holidays.apply(token, holidays):
            self.refresh()

    def _on_holidays_failed(self, token, error):
        if self.session.holidays.fail(token, error):
            self.refresh()

    def _load_background(self):
        worker = FetchWorker(0, self.background_source.fetch)
        self._start(worker, self._on_background, self._on_background_failed)

    def _on_background(self, _token, background):
        self.background.set_image(background.image_data)

    def _on_background_failed(self, _token, error):
        logger.error("Unsplash background failed, using fallback gradient: %s", error)
        self.background.set_image(None)
