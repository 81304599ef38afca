import threading
import uuid
from contextlib import contextmanager
from typing import Callable, Iterator

from receipt_points.errors import ReceiptNotFoundError
from receipt_points.models import Receipt, StoredReceipt
from receipt_points.points import compute_points


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReadWriteLock:
    """Many concurrent readers or a single writer.

    A waiting writer blocks new readers, so writers are not starved.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
                self._cond.notify_all()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ReceiptStore:
    """Append-only in-memory table of scored receipts, safe for use from
    multiple threads."""

    def __init__(self, scorer: Callable[[Receipt], int] = compute_points):
        self._scorer = scorer
        self._lock = ReadWriteLock()
        self._receipts: dict[str, StoredReceipt] = {}

    def submit(self, receipt: Receipt) -> tuple[str, int]:
        """Score a receipt and store it under a fresh id.

        Returns (id, points).
        """
        points = self._scorer(receipt)
        receipt_id = self.save(receipt, points)
        return receipt_id, points

    def save(self, receipt: Receipt, points: int) -> str:
        with self._lock.write():
            receipt_id = new_receipt_id()
            self._receipts[receipt_id] = StoredReceipt(id=receipt_id, receipt=receipt, points=points)
        return receipt_id

    def get(self, receipt_id: str) -> StoredReceipt:
        with self._lock.read():
            stored = self._receipts.get(receipt_id)
        if stored is None:
            raise ReceiptNotFoundError()
        return stored

    def lookup(self, receipt_id: str) -> int:
        return self.get(receipt_id).points

    def list_all(self) -> dict[str, StoredReceipt]:
        """Snapshot of every stored receipt, keyed by id."""
        with self._lock.read():
            return dict(self._receipts)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._receipts)


store = ReceiptStore()


def get_store() -> ReceiptStore:
    return store
