"""Dynamic programming over pairs of strings: subsequences, edits and pattern matching."""

from __future__ import annotations


def _lcs_table(s: str, t: str) -> list[list[int]]:
    """Full table where cell ``[i][j]`` is the LCS length of ``s[:i]`` and ``t[:j]``."""
    table = [[0] * (len(t) + 1)]
    for a in s:
        above = table[-1]
        row = [0]
        for j, b in enumerate(t, start=1):
            row.append(above[j - 1] + 1 if a == b else max(above[j], row[j - 1]))
        table.append(row)
    return table


def lcs_length(s: str, t: str) -> int:
    """Length of the longest common subsequence of ``s`` and ``t``."""
    above = [0] * (len(t) + 1)
    for a in s:
        row = [0]
        for j, b in enumerate(t, start=1):
            row.append(above[j - 1] + 1 if a == b else max(above[j], row[j - 1]))
        above = row
    return above[-1]


def lcs_string(s: str, t: str) -> str:
    """One longest common subsequence of ``s`` and ``t``."""
    table = _lcs_table(s, t)
    i, j = len(s), len(t)
    chars: list[str] = []
    while i and j:
        if s[i - 1] == t[j - 1]:
            chars.append(s[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            i -= 1
        else:
            j -= 1
    return "".join(reversed(chars))


def longest_common_substring(s: str, t: str) -> int:
    """Length of the longest run of characters appearing contiguously in both strings."""
    best = 0
    above = [0] * (len(t) + 1)
    for a in s:
        row = [0]
        for j, b in enumerate(t, start=1):
            row.append(above[j - 1] + 1 if a == b else 0)
        best = max(best, *row)
        above = row
    return best


def longest_palindromic_subsequence(s: str) -> int:
    """Length of the longest subsequence of ``s`` that reads the same both ways."""
    return lcs_length(s[::-1], s)


def min_insertions_palindrome(s: str) -> int:
    """Fewest characters to insert into ``s`` to make it a palindrome."""
    return len(s) - longest_palindromic_subsequence(s)


def min_insert_delete(s: str, t: str) -> int:
    """Fewest single-character insertions and deletions that turn ``s`` into ``t``."""
    return len(s) + len(t) - 2 * lcs_length(s, t)


def shortest_common_supersequence(a: str, b: str) -> str:
    """One shortest string that holds both ``a`` and ``b`` as subsequences."""
    table = _lcs_table(a, b)
    i, j = len(a), len(b)
    chars: list[str] = []
    while i and j:
        if a[i - 1] == b[j - 1]:
            chars.append(a[i - 1])
            i -= 1
            j -= 1
        elif table[i - 1][j] > table[i][j - 1]:
            chars.append(a[i - 1])
            i -= 1
        else:
            chars.append(b[j - 1])
            j -= 1
    chars.extend(reversed(a[:i]))
    chars.extend(reversed(b[:j]))
    return "".join(reversed(chars))


def edit_distance(s: str, t: str) -> int:
    """Fewest insertions, deletions and replacements that turn ``s`` into ``t``."""
    above = list(range(len(t) + 1))
    for i, a in enumerate(s, start=1):
        row = [i]
        for j, b in enumerate(t, start=1):
            if a == b:
                row.append(above[j - 1])
            else:
                row.append(1 + min(above[j], row[j - 1], above[j - 1]))
        above = row
    return above[-1]


def wildcard_match(pattern: str, text: str) -> bool:
    """True if ``pattern`` matches all of ``text``; '?' matches one character, '*' any run."""
    above = [True] + [False] * len(text)
    only_stars = True
    for p in pattern:
        only_stars = only_stars and p == "*"
        row = [only_stars]
        for j, c in enumerate(text, start=1):
            if p == c or p == "?":
                row.append(above[j - 1])
            elif p == "*":
                row.append(above[j] or row[j - 1])
            else:
                row.append(False)
        above = row
    return above[-1]