"""String matching: prefix function, KMP, Manacher and Rabin-Karp hashing."""

from __future__ import annotations

from collections.abc import Sequence

_DEFAULT_MODULUS = 1_000_000_007
_DEFAULT_BASE = 31
_SEARCH_MODULI = (1_000_000_007, 1_000_000_009)


def prefix_function(pattern: Sequence) -> list[int]:
    """Return, for every prefix, the length of its longest proper border."""
    lps = [0] * len(pattern)
    for i, item in enumerate(pattern[1:], start=1):
        j = lps[i - 1]
        while j > 0 and item != pattern[j]:
            j = lps[j - 1]
        if item == pattern[j]:
            j += 1
        lps[i] = j
    return lps


def kmp_search(pattern: Sequence, text: Sequence) -> list[int]:
    """Return the start index of every (possibly overlapping) match of pattern in text."""
    if not pattern:
        return []
    lps = prefix_function(pattern)
    size = len(pattern)
    matches = []
    j = 0
    for i, item in enumerate(text):
        while j > 0 and item != pattern[j]:
            j = lps[j - 1]
        if item == pattern[j]:
            j += 1
        if j == size:
            matches.append(i - size + 1)
            j = lps[j - 1]
    return matches


def manacher_odd(s: Sequence) -> list[int]:
    """Return p where s[i-p[i]+1 : i+p[i]] is the longest odd palindrome centred at i."""
    n = len(s)
    radii = [0] * n
    left, right = 0, 0
    for i in range(n):
        radius = min(right - i, radii[left + right - i]) if i < right else 0
        while i - radius >= 0 and i + radius < n and s[i - radius] == s[i + radius]:
            radius += 1
        radii[i] = radius
        if i + radius > right:
            left, right = i - radius, i + radius
    return radii


def manacher(s: Sequence) -> list[int]:
    """Return palindrome radii for every character and every gap between characters.

    Entry 2*j describes the odd palindrome centred at s[j], entry 2*j+1 the
    even palindrome centred between s[j] and s[j+1]; each value is the
    palindrome's length plus one.
    """
    if not s:
        return []
    spread: list = [None]
    for item in s:
        spread.extend((item, None))
    return manacher_odd(spread)[1:-1]


def _char_value(ch: str) -> int:
    return ord(ch) - ord("a") + 1


class RollingHash:
    """Polynomial prefix hashes of a string, giving O(1) substring hashes."""

    def __init__(
        self, text: str, modulus: int = _DEFAULT_MODULUS, base: int = _DEFAULT_BASE
    ) -> None:
        self.text = text
        self.modulus = modulus
        self.base = base
        self._prefix = [0]
        power = 1
        for ch in text:
            self._prefix.append((self._prefix[-1] + _char_value(ch) * power) % modulus)
            power = power * base % modulus
        inverse_base = pow(base, modulus - 2, modulus)
        self._inverse_powers = [1]
        for _ in text:
            self._inverse_powers.append(self._inverse_powers[-1] * inverse_base % modulus)

    def __len__(self) -> int:
        return len(self.text)

    def get_hash(self, start: int, end: int) -> int:
        """Hash of text[start:end + 1], independent of where the substring sits."""
        if not 0 <= start <= end + 1 <= len(self.text):
            raise IndexError(f"range [{start}, {end}] outside text of length {len(self.text)}")
        difference = self._prefix[end + 1] - self._prefix[start]
        return difference * self._inverse_powers[start] % self.modulus


def rabin_karp_search(pattern: str, text: str) -> list[int]:
    """Return the start index of every match, comparing double polynomial hashes."""
    size = len(pattern)
    if not size or size > len(text):
        return []
    text_hashes = [RollingHash(text, modulus, _DEFAULT_BASE) for modulus in _SEARCH_MODULI]
    target = tuple(
        RollingHash(pattern, modulus, _DEFAULT_BASE).get_hash(0, size - 1)
        for modulus in _SEARCH_MODULI
    )
    return [
        start
        for start in range(len(text) - size + 1)
        if tuple(h.get_hash(start, start + size - 1) for h in text_hashes) == target
    ]