# gui/day_panel.py
from PySide6.QtWidgets import QFrame, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QWidget


class DetailPanel(QFrame):
    """선택한 날짜의 상세: 제목, 공휴일/휴일 표시, 일정 목록(수정/삭제)"""

    def __init__(self, on_add, on_edit, on_delete):
        super().__init__()
        self.on_add = on_add
        self.on_edit = on_edit
        self.on_delete = on_delete

        v = QVBoxLayout(self)
        top = QHBoxLayout()
        self.title = QLabel("")
        self.title.setStyleSheet("font-weight:600; font-size:15px;")
        self.btn_add = QPushButton("새 일정 추가")
        self.btn_add.clicked.connect(self.on_add)
        top.addWidget(self.title)
        top.addStretch(1)
        top.addWidget(self.btn_add)
        v.addLayout(top)

        self.badge = QLabel("")
        self.badge.setStyleSheet("font-weight:600; color:#cf222e;")
        v.addWidget(self.badge)

        v.addWidget(QLabel("일정 목록"))
        self.list_box = QVBoxLayout()
        v.addLayout(self.list_box)
        v.addStretch(1)

    def _clear_list(self):
        while self.list_box.count():
            item = self.list_box.takeAt(0)
            w = item.widget()
            if w is not None:
                w.hide()
                w.deleteLater()  # 자기 이벤트 처리 중에 지워질 수 있음

    def show_details(self, details):
        if details is None:
            self.setVisible(False)
            return
        self.setVisible(True)
        self.title.setText(details.title)
        self.badge.setText(details.badge or "")
        self.badge.setVisible(bool(details.badge))

        self._clear_list()
        if not details.entries:
            self.list_box.addWidget(QLabel("등록된 일정이 없습니다."))
            return

        for entry in details.entries:
            row = QWidget()
            h = QHBoxLayout(row)
            h.setContentsMargins(0, 0, 0, 0)
            h.addWidget(QLabel(entry.text), 1)
            btn_edit = QPushButton("수정")
            btn_del = QPushButton("삭제")
            # ID 로 지정 (위치가 바뀌어도 같은 일정)
            btn_edit.clicked.connect(lambda _=False, eid=entry.id: self.on_edit(eid))
            btn_del.clicked.connect(lambda _=False, eid=entry.id: self.on_delete(eid))
            h.addWidget(btn_edit)
            h.addWidget(btn_del)
            self.list_box.addWidget(row)
