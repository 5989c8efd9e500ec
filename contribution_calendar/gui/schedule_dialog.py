# gui/schedule_dialog.py
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QPushButton,
)

from contribution_calendar.logic.session import Modal
from contribution_calendar.utils.date_helper import date_key


def open_schedule_dialog(parent, session) -> bool:
    """
    세션의 모달 상태(ADD/EDIT)에 맞는 입력창을 띄운다
    - 등록/저장 → session.submit_modal()
    - 취소/닫기 → session.cancel_modal() (저장소 변경 없음)
    """
    dlg = ScheduleDialog(parent, session)
    if dlg.exec():
        return session.submit_modal()
    session.cancel_modal()
    return False


class ScheduleDialog(QDialog):
    def __init__(self, parent, session):
        super().__init__(parent)
        self.session = session
        is_edit = session.modal is Modal.EDIT
        self.setWindowTitle("일정 수정" if is_edit else "새 일정")

        v = QVBoxLayout(self)
        heading = "일정 수정" if is_edit else date_key(session.selected)
        title = QLabel(heading)
        title.setStyleSheet("font-weight:600; font-size:14px;")
        v.addWidget(title)

        self.text_edit = QLineEdit(session.draft)
        self.text_edit.setPlaceholderText("새 일정 내용")
        v.addWidget(self.text_edit)

        # 버튼
        btns = QHBoxLayout()
        cancel_btn = QPushButton("취소")
        self.submit_btn = QPushButton("저장" if is_edit else "등록")
        self.submit_btn.setDefault(True)
        btns.addStretch(1)
        btns.addWidget(cancel_btn)
        btns.addWidget(self.submit_btn)
        v.addLayout(btns)

        cancel_btn.clicked.connect(self.reject)
        self.submit_btn.clicked.connect(self.accept)
        self.text_edit.textChanged.connect(self._on_text_changed)
        self._on_text_changed(self.text_edit.text())

        self.setMinimumWidth(320)
        self.text_edit.setFocus()

    def _on_text_changed(self, text: str):
        # 빈 내용이면 등록 불가
        self.session.set_draft(text)
        self.submit_btn.setEnabled(self.session.can_submit)

