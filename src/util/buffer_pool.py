import threading
from contextlib import contextmanager
from io import BytesIO
from typing import Iterator


class BufferPool:
    """Thread-safe pool of reusable in-memory byte buffers."""

    __max_idle: int
    __idle: list[BytesIO]
    __lock: threading.Lock

    def __init__(self, max_idle: int):
        if max_idle < 0:
            raise ValueError("Pool size must not be negative")
        self.__max_idle = max_idle
        self.__idle = []
        self.__lock = threading.Lock()

    @property
    def idle_count(self) -> int:
        with self.__lock:
            return len(self.__idle)

    def checkout(self) -> BytesIO:
        with self.__lock:
            if self.__idle:
                return self.__idle.pop()
        return BytesIO()

    def release(self, buffer: BytesIO):
        buffer.seek(0)
        buffer.truncate()
        with self.__lock:
            if len(self.__idle) < self.__max_idle:
                self.__idle.append(buffer)

    @contextmanager
    def borrow(self) -> Iterator[BytesIO]:
        buffer = self.checkout()
        try:
            yield buffer
        finally:
            self.release(buffer)
