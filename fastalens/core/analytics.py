"""Length filtering and histogram binning.

Everything here is pure: the same raw lengths and filter range always give
the same snapshot, so callers rebuild the whole snapshot on every change
instead of patching a previous one.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from fastalens.domain.sequences import AnalyticsSnapshot, Bin, FilterRange

TARGET_BIN_COUNT = 10


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def bin_width_for(max_len: int) -> int:
    return max(1, _ceil_div(max_len, TARGET_BIN_COUNT))


def compute_bins(lengths: Sequence[int]) -> tuple[Bin, ...]:
    """
    Bucket lengths into roughly ten equal-width bins starting at zero.

    The bucket count carries one extra bucket above ``ceil(max / width)`` and
    any index past the end is clamped into the last bucket, so the maximum
    length is always counted. Empty buckets are kept so labels stay contiguous.
    """
    if not lengths:
        return ()

    max_len = max(lengths)
    bin_width = bin_width_for(max_len)
    bin_count = _ceil_div(max_len, bin_width) + 1

    counts = [0] * bin_count
    for length in lengths:
        index = min(length // bin_width, bin_count - 1)
        counts[index] += 1

    return tuple(
        Bin(label=f"{index * bin_width}-{(index + 1) * bin_width - 1}", count=count)
        for index, count in enumerate(counts)
    )


def apply_filter(raw_lengths: Iterable[int], filter_range: FilterRange) -> tuple[int, ...]:
    """Keep the lengths inside ``filter_range``, in their original order."""
    return tuple(length for length in raw_lengths if filter_range.contains(length))


def build_snapshot(
    raw_lengths: Iterable[int],
    filter_range: FilterRange,
) -> AnalyticsSnapshot:
    filtered = apply_filter(raw_lengths, filter_range)
    return AnalyticsSnapshot(filtered_lengths=filtered, bins=compute_bins(filtered))
