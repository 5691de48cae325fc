import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpkit.strings import (
    RollingHash,
    kmp_search,
    manacher,
    manacher_odd,
    prefix_function,
    rabin_karp_search,
)

small_text = st.text(alphabet="ab", max_size=30)
small_pattern = st.text(alphabet="ab", min_size=1, max_size=4)


def test_prefix_function_known_value():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


def test_prefix_function_empty():
    assert prefix_function("") == []


@given(st.text(alphabet="abc", max_size=25))
def test_prefix_function_is_a_border(pattern):
    lps = prefix_function(pattern)
    assert len(lps) == len(pattern)
    for i, k in enumerate(lps):
        assert k <= i
        assert pattern[:k] == pattern[i - k + 1 : i + 1]


def test_kmp_overlapping_matches():
    assert kmp_search("aa", "aaaa") == [0, 1, 2]


def test_kmp_empty_pattern_has_no_matches():
    assert kmp_search("", "abc") == []


@given(small_pattern, small_text)
def test_kmp_matches_are_real_and_complete(pattern, text):
    matches = kmp_search(pattern, text)
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert matches == expected


@given(small_pattern, small_text)
def test_rabin_karp_agrees_with_kmp(pattern, text):
    assert rabin_karp_search(pattern, text) == kmp_search(pattern, text)


def test_rabin_karp_pattern_longer_than_text():
    assert rabin_karp_search("abc", "ab") == []


def test_rolling_hash_is_position_independent():
    whole = RollingHash("xabcab")
    assert whole.get_hash(1, 2) == whole.get_hash(4, 5)
    assert whole.get_hash(1, 3) == RollingHash("abc").get_hash(0, 2)


def test_rolling_hash_empty_range():
    assert RollingHash("abc").get_hash(1, 0) == 0


@pytest.mark.parametrize("start,end", [(-1, 0), (0, 3), (2, 0)])
def test_rolling_hash_out_of_range(start, end):
    with pytest.raises(IndexError):
        RollingHash("abc").get_hash(start, end)


@settings(max_examples=50)
@given(st.text(alphabet="abc", min_size=1, max_size=12), st.data())
def test_rolling_hash_equal_substrings_equal_hashes(text, data):
    h = RollingHash(text)
    start = data.draw(st.integers(0, len(text) - 1))
    end = data.draw(st.integers(start, len(text) - 1))
    assert h.get_hash(start, end) == RollingHash(text[start : end + 1]).get_hash(0, end - start)


def test_manacher_source_example():
    assert manacher("abcbcba") == [2, 1, 2, 1, 4, 1, 8, 1, 4, 1, 2, 1, 2]


def test_manacher_empty():
    assert manacher("") == []
    assert manacher_odd("") == []


@given(st.text(alphabet="ab", max_size=20))
def test_manacher_odd_radii_are_maximal(s):
    radii = manacher_odd(s)
    assert len(radii) == len(s)
    for i, p in enumerate(radii):
        piece = s[i - p + 1 : i + p]
        assert piece == piece[::-1]
        assert i - p < 0 or i + p >= len(s) or s[i - p] != s[i + p]


@given(st.text(alphabet="ab#", min_size=1, max_size=20))
def test_manacher_covers_odd_and_even_centres(s):
    result = manacher(s)
    assert len(result) == 2 * len(s) - 1
    for k, p in enumerate(result):
        length = p - 1
        start = (k - length + 1) // 2
        piece = s[start : start + length]
        assert piece == piece[::-1]
        assert start - 1 < 0 or start + length >= len(s) or s[start - 1] != s[start + length]