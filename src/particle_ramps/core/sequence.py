"""
Ordered sequence of positioned elements.

Both editors keep a list of elements sorted by a normalized position
(ControlPoint.x, ColorStop.pos) with the same rules:
- the first element sits at 0.0 and the last at 1.0 while dragged
- interior elements are clamped to [INTERIOR_MIN, INTERIOR_MAX]
- endpoints can never be deleted, and the list never drops below min_count

PositionedSequence implements those rules once, parameterized by the name
of the position attribute.
"""

from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")

INTERIOR_MIN = 0.01
INTERIOR_MAX = 0.99
MIN_COUNT = 2


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp a value to [low, high]."""
    return max(low, min(high, value))


class PositionedSequence(Generic[T]):
    """
    Elements kept sorted by their position attribute.

    Elements are mutable and are tracked by identity, so an element keeps
    being found after a re-sort moves it past its neighbours.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        key: str = "x",
        min_count: int = MIN_COUNT,
    ):
        self.key = key
        self.min_count = min_count
        self._items: list[T] = []
        self.replace(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        """Element at index. Negative indices are rejected, not wrapped."""
        self.check_index(index)
        return self._items[index]

    def check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} elements")

    @property
    def items(self) -> list[T]:
        """The owned list. Callers must not reorder it."""
        return self._items

    def position(self, item: T) -> float:
        return getattr(item, self.key)

    def sort(self) -> None:
        # Stable, so elements at equal positions keep their relative order
        self._items.sort(key=self.position)

    def index_of(self, item: T) -> int:
        """Index of an element by identity (not equality)."""
        for i, candidate in enumerate(self._items):
            if candidate is item:
                return i
        raise ValueError("element is not in this sequence")

    def is_endpoint(self, index: int) -> bool:
        return index == 0 or index == len(self._items) - 1

    def clamp_position(self, index: int, position: float) -> float:
        """
        Position an element at index may take.

        The first element is locked to 0.0, the last to 1.0, everything in
        between is kept strictly inside the endpoints.
        """
        if index == 0:
            return 0.0
        if index == len(self._items) - 1:
            return 1.0
        return clamp(position, INTERIOR_MIN, INTERIOR_MAX)

    def replace(self, items: Iterable[T]) -> None:
        """Replace all elements wholesale and re-sort."""
        self._items = list(items)
        self.sort()

    def insert(self, item: T) -> int:
        """Append an element, re-sort, and return where it landed."""
        self._items.append(item)
        self.sort()
        return self.index_of(item)

    def move(self, index: int, position: float) -> int:
        """
        Move the element at index, re-sort, and return its new index.

        Raises:
            IndexError: If index is out of range
        """
        item = self[index]
        setattr(item, self.key, self.clamp_position(index, position))
        self.sort()
        return self.index_of(item)

    def can_delete(self, index: int) -> bool:
        if not 0 <= index < len(self._items):
            return False
        if self.is_endpoint(index):
            return False
        return len(self._items) > self.min_count

    def delete(self, index: int) -> bool:
        """Remove an interior element. Returns False if the delete was refused."""
        if not self.can_delete(index):
            return False
        del self._items[index]
        return True
