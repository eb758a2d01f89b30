import pytest

from bmpcollector.partition import peer_partition


def test_pinned_value():
    assert peer_partition("ab", 10) == 5


@pytest.mark.parametrize("count", [1, 2, 3, 7, 16, 100])
def test_result_in_range_for_hex_keys(count):
    for key in ["00112233445566778899aabbccddeeff", "f" * 32, "0" * 32, "a1"]:
        assert 0 <= peer_partition(key, count) < count


def test_only_first_and_last_characters_matter():
    assert peer_partition("a" + "xyz" * 5 + "b", 13) == peer_partition("ab", 13)
    assert peer_partition("abc", 13) == peer_partition("cba", 13)


def test_bytes_and_str_agree():
    assert peer_partition(b"deadbeef", 9) == peer_partition("deadbeef", 9)


def test_single_character_key_counts_twice():
    assert peer_partition("a", 1000) == peer_partition("aa", 1000)


def test_empty_key_rejected():
    with pytest.raises(ValueError):
        peer_partition("", 4)


@pytest.mark.parametrize("count", [0, -3])
def test_bad_partition_count_rejected(count):
    with pytest.raises(ValueError):
        peer_partition("ab", count)