import os
import threading
from contextlib import contextmanager
from typing import Callable, Optional


def current_worker_id() -> str:
    """
    中文：返回当前执行单元标识（xdist 进程 + 线程）。
    English: Identifier of the current execution unit (xdist worker + thread).
    """

    worker = os.environ.get("PYTEST_XDIST_WORKER", "main")
    return f"{worker}:{threading.get_ident()}"


class RunScopedContext:
    """
    中文：运行期上下文，在同一执行单元的测试步骤之间传递一条消息。
    English: Per-worker message slot shared between steps of one scenario.

    每个 worker 拥有独立槽位，互不可见。场景结束时必须调用 clear_message()，
    否则复用的线程会读到上一个场景的值。
    """

    def __init__(self, worker_id: Callable[[], str] = current_worker_id):
        self._worker_id = worker_id
        self._slots = {}
        self._lock = threading.Lock()

    def set_message(self, message: str) -> None:
        key = self._worker_id()
        with self._lock:
            self._slots[key] = message

    def get_message(self) -> Optional[str]:
        key = self._worker_id()
        with self._lock:
            return self._slots.get(key)

    def clear_message(self) -> None:
        key = self._worker_id()
        with self._lock:
            self._slots.pop(key, None)

    @contextmanager
    def scope(self):
        """在退出时（包括异常）清空当前 worker 的槽位。"""
        try:
            yield self
        finally:
            self.clear_message()

    @property
    def active_workers(self) -> tuple:
        with self._lock:
            return tuple(sorted(self._slots))


run_context = RunScopedContext()
