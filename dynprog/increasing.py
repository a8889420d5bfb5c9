"""Longest-increasing-subsequence style problems."""

from __future__ import annotations

from collections.abc import Sequence


def _lis_lengths(values: Sequence[int]) -> list[int]:
    """Length of the longest strictly increasing subsequence ending at each position."""
    lengths: list[int] = []
    for value in values:
        best = max(
            (length for earlier, length in zip(values, lengths) if earlier < value),
            default=0,
        )
        lengths.append(best + 1)
    return lengths


def longest_increasing_subsequence(arr: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence (1 for an empty input)."""
    return max(_lis_lengths(arr), default=1)


def divisible_set(arr: Sequence[int]) -> list[int]:
    """Largest subset in which every pair divides one another, largest element first."""
    values = sorted(arr)
    if not values:
        raise ValueError("arr must not be empty")

    lengths: list[int] = []
    parents: list[int] = []
    best_length, last = 1, 0
    for index, value in enumerate(values):
        length, parent = 1, index
        for earlier_index, (earlier, earlier_length) in enumerate(zip(values, lengths)):
            if value % earlier == 0 and length < earlier_length + 1:
                length, parent = earlier_length + 1, earlier_index
        lengths.append(length)
        parents.append(parent)
        if best_length < length:
            best_length, last = length, index

    result = [values[last]]
    while parents[last] != last:
        last = parents[last]
        result.append(values[last])
    return result


def _is_predecessor(longer: str, shorter: str) -> bool:
    """True if ``shorter`` is ``longer`` with exactly one character removed."""
    if len(longer) != len(shorter) + 1:
        return False
    matched = 0
    for char in longer:
        if matched < len(shorter) and char == shorter[matched]:
            matched += 1
    return matched == len(shorter)


def longest_string_chain(words: Sequence[str]) -> int:
    """Longest chain where each word adds exactly one character to the previous."""
    ordered = sorted(words, key=len)
    lengths: list[int] = []
    best = 1
    for word in ordered:
        length = 1
        for earlier, earlier_length in zip(ordered, lengths):
            if _is_predecessor(word, earlier) and length < earlier_length + 1:
                length = earlier_length + 1
        lengths.append(length)
        best = max(best, length)
    return best


def longest_bitonic_sequence(arr: Sequence[int]) -> int:
    """Length of the longest subsequence that strictly rises and then strictly falls."""
    rising = _lis_lengths(arr)
    falling = _lis_lengths(arr[::-1])[::-1]
    return max((up + down - 1 for up, down in zip(rising, falling)), default=1)


def number_of_lis(arr: Sequence[int]) -> int:
    """Number of strictly increasing subsequences of maximum length."""
    lengths: list[int] = []
    counts: list[int] = []
    for value in arr:
        length, count = 1, 1
        for earlier, earlier_length, earlier_count in zip(arr, lengths, counts):
            if earlier < value:
                if earlier_length + 1 > length:
                    length, count = earlier_length + 1, earlier_count
                elif earlier_length + 1 == length:
                    count += earlier_count
        lengths.append(length)
        counts.append(count)

    if not lengths:
        return 0
    best = max(lengths)
    return sum(count for length, count in zip(lengths, counts) if length == best)