"""
Process-wide singleton holder.

Singleton keeps one shared (x, y) pair for the whole process:
- Singleton.get_instance() builds the instance on first call and returns the
  same object on every call after that.
- First access uses double-checked locking, so concurrent first callers still
  end up with exactly one construction. Once built, get_instance() never locks.
- Direct construction and copying (copy.copy, copy.deepcopy, pickle) raise
  SingletonError.
- set_value/print_value/get_value share a per-instance lock, so a reader never
  sees x from one update and y from another.
"""
import logging
import threading

from core.exceptions import SingletonError

logger = logging.getLogger(__name__)

_CONSTRUCT_TOKEN = object()

class Singleton:
    _instance: "Singleton | None" = None
    _instance_lock = threading.Lock()

    # number of times the instance has been built; stays at 1 outside tests
    construction_count = 0

    def __init__(self, _token=None):
        if _token is not _CONSTRUCT_TOKEN:
            logger.warning("Rejected direct construction of Singleton")
            raise SingletonError("Singleton cannot be constructed directly; use Singleton.get_instance()")
        self.x = 0
        self.y = 0
        self._value_lock = threading.RLock()
        Singleton.construction_count += 1

    @classmethod
    def get_instance(cls) -> "Singleton":
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                # another thread may have built it while we waited
                instance = cls._instance
                if instance is None:
                    instance = cls(_CONSTRUCT_TOKEN)
                    cls._instance = instance
                    logger.info("Singleton initialized (handle=%s)", hex(id(instance)))
        return instance

    @classmethod
    def reset(cls):
        """Drop the shared instance and its counter. Only meant for test isolation."""
        with cls._instance_lock:
            cls._instance = None
            Singleton.construction_count = 0

    def set_value(self, x: int, y: int):
        with self._value_lock:
            self.x = x
            self.y = y
        logger.debug("Singleton value set to (%s, %s)", x, y)

    def get_value(self) -> tuple[int, int]:
        with self._value_lock:
            return self.x, self.y

    def print_value(self):
        x, y = self.get_value()
        print(f"{x} {y}")

    # ------------- duplication guards -------------
    def __copy__(self):
        logger.warning("Rejected copy of Singleton")
        raise SingletonError("Singleton cannot be copied")

    def __deepcopy__(self, memo):
        logger.warning("Rejected deepcopy of Singleton")
        raise SingletonError("Singleton cannot be copied")

    def __reduce_ex__(self, protocol):
        raise SingletonError("Singleton cannot be pickled or duplicated")
