"""Lazily initialized, lock-guarded single-instance holder."""
import threading
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class SingletonHolder(Generic[T]):
    """
    Holds at most one instance created by ``factory``.

    The first call to :meth:`get` creates the instance; every later call,
    including concurrent first calls from other threads, returns the same
    object. Creation uses double-checked locking, so the factory runs at
    most once per holder (or once per :meth:`reset`). A factory that raises
    leaves the holder empty.
    """

    def __init__(self, factory: Callable[[], T]):
        self._factory = factory
        self._instance: Optional[T] = None
        self._lock = threading.Lock()

    def get(self) -> T:
        """Return the instance, creating it on first access."""
        if self._instance is None:
            with self._lock:
                if self._instance is None:
                    self._instance = self._factory()
        return self._instance

    @property
    def is_initialized(self) -> bool:
        return self._instance is not None

    def reset(self) -> None:
        """Drop the instance so the next access creates a new one."""
        with self._lock:
            self._instance = None
