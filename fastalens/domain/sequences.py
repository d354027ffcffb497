from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Mapping

UNBOUNDED_LABEL = "∞"


@dataclass(frozen=True, slots=True)
class SequenceFile:
    path: Path
    raw_lengths: tuple[int, ...] = ()

    @property
    def record_count(self) -> int:
        return len(self.raw_lengths)


@dataclass(frozen=True, slots=True)
class Catalog:
    """Path-sorted, read-only collection of sequence files."""

    files: tuple[SequenceFile, ...] = ()

    @classmethod
    def from_files(cls, files: Iterable[SequenceFile]) -> Catalog:
        by_path: dict[Path, SequenceFile] = {}
        for item in files:
            by_path[item.path] = item
        return cls(tuple(sorted(by_path.values(), key=lambda item: item.path)))

    @classmethod
    def from_lengths(cls, lengths_by_path: Mapping[Path | str, Iterable[int]]) -> Catalog:
        return cls.from_files(
            SequenceFile(Path(path), tuple(lengths))
            for path, lengths in lengths_by_path.items()
        )

    @property
    def paths(self) -> tuple[Path, ...]:
        return tuple(item.path for item in self.files)

    def raw_lengths(self, index: int) -> tuple[int, ...]:
        if 0 <= index < len(self.files):
            return self.files[index].raw_lengths
        return ()

    def __len__(self) -> int:
        return len(self.files)

    def __iter__(self) -> Iterator[SequenceFile]:
        return iter(self.files)

    def __getitem__(self, index: int) -> SequenceFile:
        return self.files[index]


@dataclass(frozen=True, slots=True)
class FilterRange:
    """Inclusive length bounds; ``max=None`` leaves the top unbounded."""

    min: int = 0
    max: int | None = None

    def contains(self, length: int) -> bool:
        if length < self.min:
            return False
        return self.max is None or length <= self.max

    def describe(self) -> str:
        upper = UNBOUNDED_LABEL if self.max is None else str(self.max)
        return f"{self.min}-{upper}"


@dataclass(frozen=True, slots=True)
class Bin:
    label: str
    count: int


@dataclass(frozen=True, slots=True)
class AnalyticsSnapshot:
    filtered_lengths: tuple[int, ...] = ()
    bins: tuple[Bin, ...] = ()

    @property
    def total(self) -> int:
        return len(self.filtered_lengths)

    def length_at(self, index: int) -> int | None:
        if 0 <= index < len(self.filtered_lengths):
            return self.filtered_lengths[index]
        return None
