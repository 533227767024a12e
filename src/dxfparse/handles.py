import logging

from .errors import InvalidInputError

log = logging.getLogger(__name__)


class HandleAllocator:
    """Assigns synthetic handles to entities and blocks that have none.

    One allocator belongs to one parse call, so every parse starts counting
    at 0 again.
    """

    def __init__(self, start: int = 0) -> None:
        self._next = start

    def ensure_handle(self, record: object) -> None:
        """Give ``record`` the next free handle if its own handle is missing.

        Raises
        ------
        InvalidInputError
            If record is None
        """
        if record is None:
            raise InvalidInputError("Record cannot be None when ensuring its handle")
        handle = getattr(record, "handle", None)
        if handle not in (None, "", 0):
            return
        setattr(record, "handle", self._next)
        log.debug(f"Assigned synthetic handle {self._next} to {type(record).__name__}")
        self._next += 1

    @property
    def next_handle(self) -> int:
        return self._next
