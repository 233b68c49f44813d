import threading
from typing import Any


class Singleton(type):
    """Metaclass that keeps one shared instance per class, created lazily on first call."""

    _instances: dict[type, Any] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    def reset(cls):
        # the next call rebuilds the instance, e.g. after the environment changed
        with cls._lock:
            cls._instances.pop(cls, None)
