"""Circular selection over a fixed list of labels."""

from collections.abc import Iterable


class CandidateList:
    """Ordered, non-empty labels plus a wrapping selection index."""

    def __init__(self, labels: Iterable[str], start: int = 0):
        self._labels: tuple[str, ...] = tuple(labels)
        if not self._labels:
            raise ValueError("CandidateList needs at least one label")
        if not 0 <= start < len(self._labels):
            raise ValueError(f"start index {start} out of range for {len(self._labels)} labels")
        self._index = start

    @property
    def labels(self) -> tuple[str, ...]:
        return self._labels

    @property
    def index(self) -> int:
        return self._index

    @property
    def selected(self) -> str:
        return self._labels[self._index]

    def __len__(self) -> int:
        return len(self._labels)

    def next(self) -> None:
        self._index = (self._index + 1) % len(self._labels)

    def previous(self) -> None:
        if self._index == 0:
            self._index = len(self._labels) - 1
        else:
            self._index -= 1

    def __repr__(self) -> str:
        return f"CandidateList({list(self._labels)!r}, index={self._index})"
