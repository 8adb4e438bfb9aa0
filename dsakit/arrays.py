"""Searching, scanning and prefix-sum routines over integer sequences."""

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right
from collections.abc import Iterable, MutableSequence, Sequence
from itertools import accumulate, groupby, islice

_NOT_FOUND = -1


def _require_items(seq: Sequence[int], what: str) -> None:
    if not seq:
        raise ValueError(f"{what} of an empty sequence")


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``arr``, or -1 if absent."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] == target:
            return mid
        if arr[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return _NOT_FOUND


def find_first_occurrence(arr: Sequence[int], target: int) -> int:
    """Return the lowest index of ``target`` in sorted ``arr``, or -1."""
    index = bisect_left(arr, target)
    if index < len(arr) and arr[index] == target:
        return index
    return _NOT_FOUND


def find_last_occurrence(arr: Sequence[int], target: int) -> int:
    """Return the highest index of ``target`` in sorted ``arr``, or -1."""
    index = bisect_right(arr, target) - 1
    if index >= 0 and arr[index] == target:
        return index
    return _NOT_FOUND


def count_occurrences(arr: Sequence[int], target: int) -> int:
    """Count how many times ``target`` occurs in sorted ``arr``."""
    return bisect_right(arr, target) - bisect_left(arr, target)


def find_highest(arr: Sequence[int]) -> int:
    """Return the largest element; raise ValueError when ``arr`` is empty."""
    _require_items(arr, "highest element")
    return max(arr)


def find_second_highest(arr: Sequence[int]) -> int | None:
    """Return the largest value strictly below the maximum.

    Returns None when every element equals the maximum; raises ValueError
    when there are fewer than two elements.
    """
    if len(arr) < 2:
        raise ValueError("second highest element needs at least two elements")
    first, second = arr[0], None
    for value in islice(arr, 1, None):
        if value > first:
            first, second = value, first
        elif value < first and (second is None or value > second):
            second = value
    return second


def find_kth_missing(arr: Sequence[int], k: int) -> int:
    """Return the k-th positive integer missing from sorted ``arr``."""
    left, right = 0, len(arr) - 1
    while left <= right:
        mid = (left + right) // 2
        if arr[mid] - (mid + 1) < k:
            left = mid + 1
        else:
            right = mid - 1
    return left + k


def find_leaders(arr: Sequence[int]) -> list[int]:
    """Return the elements greater than everything to their right.

    The last element is always a leader; leaders are listed from right to left.
    """
    _require_items(arr, "leaders")
    max_right = arr[-1]
    leaders = [max_right]
    for value in reversed(arr[:-1]):
        if value > max_right:
            max_right = value
            leaders.append(value)
    return leaders


def linear_search(arr: Iterable[int], target: int) -> int:
    """Return the first index of ``target`` by scanning, or -1."""
    return next((i for i, value in enumerate(arr) if value == target), _NOT_FOUND)


def majority_element(nums: Iterable[int]) -> int:
    """Return the Boyer-Moore majority candidate of ``nums``."""
    count = 0
    candidate = None
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    if candidate is None:
        raise ValueError("majority element of an empty sequence")
    return candidate


def max_product(nums: Iterable[int]) -> int:
    """Return the largest product of a contiguous, non-empty subarray."""
    values = iter(nums)
    try:
        first = next(values)
    except StopIteration:
        raise ValueError("max product of an empty sequence") from None
    high = low = best = first
    for value in values:
        candidates = (value, high * value, low * value)
        high, low = max(candidates), min(candidates)
        best = max(best, high)
    return best


def _min_index(nums: Sequence[int]) -> int:
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[right]:
            left = mid + 1
        else:
            right = mid
    return left


def find_min_rotated(nums: Sequence[int]) -> int:
    """Return the smallest element of a rotated sorted sequence."""
    _require_items(nums, "minimum")
    return nums[_min_index(nums)]


def find_max_rotated(nums: Sequence[int]) -> int:
    """Return the largest element of a rotated sorted sequence."""
    _require_items(nums, "maximum")
    return nums[_min_index(nums) - 1]


def find_pivot(arr: Sequence[int]) -> int:
    """Return the pivot value (the smallest element) of a rotated sorted sequence."""
    _require_items(arr, "pivot")
    return arr[_min_index(arr)]


def find_rotation_count(arr: Sequence[int]) -> int:
    """Return how many places a sorted sequence has been rotated right."""
    return _min_index(arr)


def find_peak_element(nums: Sequence[int]) -> int:
    """Return the index of an element larger than its neighbours."""
    _require_items(nums, "peak")
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] > nums[mid + 1]:
            right = mid
        else:
            left = mid + 1
    return left


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return _NOT_FOUND


def prefix_sums(arr: Iterable[int]) -> list[int]:
    """Return the running totals of ``arr`` from the left."""
    return list(accumulate(arr))


def suffix_sums(arr: Sequence[int]) -> list[int]:
    """Return the running totals of ``arr`` from the right."""
    return list(accumulate(reversed(arr)))[::-1]


class NumArray:
    """Answers inclusive range-sum queries in constant time."""

    def __init__(self, nums: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(nums)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def sum_range(self, left: int, right: int) -> int:
        """Return the sum of the elements from ``left`` to ``right`` inclusive."""
        if not 0 <= left <= right < len(self):
            raise IndexError(f"invalid range [{left}, {right}] for {len(self)} elements")
        return self._prefix[right + 1] - self._prefix[left]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Collapse runs of equal values in place and return the new length."""
    nums[:] = [value for value, _ in groupby(nums)]
    return len(nums)


def remove_duplicates_at_most_twice(nums: MutableSequence[int]) -> int:
    """Keep at most two of each value of a sorted list in place; return the new length."""
    kept: list[int] = []
    for value in nums:
        if len(kept) < 2 or value != kept[-2]:
            kept.append(value)
    nums[:] = kept
    return len(nums)


def isqrt(x: int) -> int:
    """Return the integer square root of a non-negative ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def move_zeros_to_end(arr: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping other values in order."""
    arr[:] = [v for v in arr if v != 0] + [v for v in arr if v == 0]