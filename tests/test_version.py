from jsonvalue.version import (
    MAJOR_VERSION,
    MICRO_VERSION,
    MINOR_VERSION,
    VERSION,
    version_cmp,
    version_str,
)


def test_version_str():
    assert version_str() == VERSION


def test_version_str_starts_with_major_minor():
    assert version_str().startswith(f"{MAJOR_VERSION}.{MINOR_VERSION}")


def test_version_cmp_equal():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION) == 0


def test_version_cmp_older_major():
    assert version_cmp(MAJOR_VERSION - 1, 0, 0) > 0


def test_version_cmp_older_minor():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION - 1, MICRO_VERSION) > 0


def test_version_cmp_older_micro():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION - 1) > 0


def test_version_cmp_newer_major():
    assert version_cmp(MAJOR_VERSION + 1, MINOR_VERSION, MICRO_VERSION) < 0


def test_version_cmp_newer_minor():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION + 1, MICRO_VERSION) < 0


def test_version_cmp_newer_micro():
    assert version_cmp(MAJOR_VERSION, MINOR_VERSION, MICRO_VERSION + 1) < 0