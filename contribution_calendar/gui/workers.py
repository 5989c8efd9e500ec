# gui/workers.py
import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from contribution_calendar.exceptions import NetworkFailure

logger = logging.getLogger(__name__)


class FetchSignals(QObject):
    # (token, 결과) / (token, 예외)
    finished = Signal(int, object)
    failed = Signal(int, object)


def run_fetch(token: int, fn, args, on_finished, on_failed):
    """
    조회 실행 후 결과/실패 중 정확히 하나를 알린다
    - NetworkFailure: 예상된 실패
    - 그 밖의 예외도 스레드 경계라 여기서 잡고 로그 후 실패로 알림
    """
    try:
        result = fn(*args)
    except NetworkFailure as e:
        on_failed(token, e)
        return
    except Exception as e:
        logger.exception("조회 중 예기치 않은 오류 (token=%s)", token)
        on_failed(token, e)
        return
    on_finished(token, result)


class FetchWorker(QRunnable):
    """
    네트워크 조회를 QThreadPool 에서 실행
    - 결과는 시그널로 GUI 스레드에 전달 (상태 변경은 GUI 스레드에서만)
    - 취소 없음. 오래된 결과는 받는 쪽에서 token 으로 거른다
    """

    def __init__(self, token: int, fn, *args):
        super().__init__()
        self.token = token
        self.fn = fn
        self.args = args
        self.signals = FetchSignals()

    def run(self):
        run_fetch(self.token, self.fn, self.args, self.signals.finished.emit, self.signals.failed.emit)
