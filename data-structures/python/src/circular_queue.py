"""Array-backed circular queue with amortized doubling.

Elements live in a fixed-length list and the front index wraps modulo the
capacity, so dequeue never shifts anything. When the list fills up, enqueue
copies the contents in logical order into a list twice as long, starting at
index 0.
"""

from typing import TypeVar, Generic, List, Iterator, Optional

T = TypeVar('T')

DEFAULT_CAPACITY = 10


class EmptyQueueError(IndexError):
    """Raised when removing from a queue that holds no elements."""


class CircularQueue(Generic[T]):
    DEFAULT_CAPACITY = DEFAULT_CAPACITY

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 1:
            raise ValueError("capacity must be a positive integer")
        self._data: List[Optional[T]] = [None] * capacity
        self._front = 0
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._data)

    def peek(self) -> Optional[T]:
        if self._size == 0:
            return None
        return self._data[self._front]

    def enqueue(self, value: T) -> None:
        if self.is_full():
            self._grow()
        rear = (self._front + self._size) % len(self._data)
        self._data[rear] = value
        self._size += 1

    def dequeue(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("dequeue from empty queue")
        value = self._data[self._front]
        self._data[self._front] = None
        self._front = (self._front + 1) % len(self._data)
        self._size -= 1
        return value

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return len(self._data)

    def slots(self) -> List[Optional[T]]:
        """Return a copy of the raw backing store, empty slots as None."""
        return self._data.copy()

    def copy(self) -> 'CircularQueue[T]':
        clone: CircularQueue[T] = CircularQueue(len(self._data))
        clone._data = self._data.copy()
        clone._front = self._front
        clone._size = self._size
        return clone

    def _grow(self) -> None:
        old_capacity = len(self._data)
        new_data: List[Optional[T]] = [None] * (old_capacity * 2)
        for i in range(self._size):
            new_data[i] = self._data[(self._front + i) % old_capacity]
        self._data = new_data
        self._front = 0

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        capacity = len(self._data)
        for i in range(self._size):
            yield self._data[(self._front + i) % capacity]

    def __repr__(self) -> str:
        return (f"CircularQueue(size={self._size}, capacity={len(self._data)}, "
                f"front={self._front})")

    def __str__(self) -> str:
        return str(self.slots())
