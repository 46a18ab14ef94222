"""Count edits made in the UI that haven't been applied yet"""

import threading

from ..logging_config import get_logger

logger = get_logger("change_counter")


class UnappliedChangeCounter:
    """Thread-safe count of unapplied changes.

    Editors increment the counter when they open a change and decrement it
    when the change is applied or cancelled. The count never goes below
    zero: decrementing at zero leaves it at zero.
    """

    def __init__(self):
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        with self._lock:
            return self._count

    def has_unapplied_changes(self) -> bool:
        with self._lock:
            return self._count > 0

    def increment(self) -> None:
        with self._lock:
            self._count += 1

    def decrement(self) -> None:
        with self._lock:
            if self._count > 0:
                self._count -= 1
                return

        logger.warning("Tried to decrement the unapplied change counter below zero")
