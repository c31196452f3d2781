from jvalue.version import (
    MAJOR_VERSION,
    MICRO_VERSION,
    MINOR_VERSION,
    version_cmp,
    version_str,
)


def test_version_str():
    assert version_str() == "2.14"


def test_version_str_matches_parts():
    parts = version_str().split(".")
    assert int(parts[0]) == MAJOR_VERSION
    assert int(parts[1]) == MINOR_VERSION
    assert MICRO_VERSION == 0 and len(parts) == 2


def test_cmp_equal():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION) == 0


def test_cmp_older_gives_positive():
    assert version_cmp(MAJOR_VERSION - 1, 99, 99) > 0
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION - 1, 99) > 0


def test_cmp_newer_gives_negative():
    assert version_cmp(MAJOR_VERSION + 1, 0, 0) < 0
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION + 1) < 0


def test_cmp_major_difference_dominates():
    assert version_cmp(MAJOR_VERSION - 1, MINOR_VERSION + 5, 0) == 1