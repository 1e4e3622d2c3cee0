"""Classic sorting algorithms returning new sorted lists."""

from collections.abc import Sequence

__all__ = [
    "int_min",
    "int_max",
    "bubble_sort",
    "bucket_sort",
    "counting_sort",
    "heap_sort",
    "insert_sort",
]


def _nonempty_copy(values: Sequence, name: str) -> list:
    if len(values) < 1:
        raise ValueError(f"{name}: empty input")
    return list(values)


def int_min(values: Sequence[int]) -> int:
    """Return the smallest integer in a non-empty sequence."""
    if len(values) < 1:
        raise ValueError("int_min: empty input")
    return min(values)


def int_max(values: Sequence[int]) -> int:
    """Return the largest integer in a non-empty sequence."""
    if len(values) < 1:
        raise ValueError("int_max: empty input")
    return max(values)


def bubble_sort(values: Sequence[float]) -> list[float]:
    """Sort with bubble sort (stable, O(n^2))."""
    result = _nonempty_copy(values, "bubble_sort")
    for end in range(len(result) - 1, 0, -1):
        for j in range(end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insert_sort(values: Sequence[float]) -> list[float]:
    """Sort with insertion sort (O(n^2))."""
    result = _nonempty_copy(values, "insert_sort")
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and result[j] > current:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _sift_down(heap: list, root: int, size: int) -> None:
    while True:
        largest = root
        for child in (2 * root + 1, 2 * root + 2):
            if child < size and heap[child] > heap[largest]:
                largest = child
        if largest == root:
            return
        heap[root], heap[largest] = heap[largest], heap[root]
        root = largest


def heap_sort(values: Sequence[float]) -> list[float]:
    """Sort with heap sort using a max-heap (O(n log n), not stable)."""
    result = _nonempty_copy(values, "heap_sort")
    size = len(result)
    for root in range(size // 2, -1, -1):
        _sift_down(result, root, size)
    for end in range(size - 1, 0, -1):
        result[0], result[end] = result[end], result[0]
        _sift_down(result, 0, end)
    return result


def _bucket_sort(values: list[int], bucket_size: int) -> list[int]:
    if len(values) < 2:
        return values
    low, high = min(values), max(values)
    if low == high:
        return values
    count = (high - low) // bucket_size + 1
    buckets: list[list[int]] = [[] for _ in range(count)]
    for value in values:
        buckets[(value - low) // bucket_size].append(value)
    if count == 1:
        # everything fell in one bucket: shrink the buckets and split again
        bucket_size -= 1
    result: list[int] = []
    for bucket in buckets:
        result.extend(_bucket_sort(bucket, bucket_size))
    return result


def bucket_sort(values: Sequence[int], bucket_size: int) -> list[int]:
    """Sort integers with bucket sort, each bucket spanning bucket_size values."""
    result = _nonempty_copy(values, "bucket_sort")
    if bucket_size < 1:
        raise ValueError(f"bucket_sort: bucket size must be positive ({bucket_size})")
    return _bucket_sort(result, bucket_size)


def counting_sort(values: Sequence[int]) -> list[int]:
    """Sort non-negative integers with counting sort (O(n + k))."""
    result = _nonempty_copy(values, "counting_sort")
    if len(result) == 1:
        return result
    if min(result) < 0:
        raise ValueError("counting_sort: values must be non-negative")
    counts = [0] * (max(result) + 1)
    for value in result:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]