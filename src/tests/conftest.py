"""
Pytest configuration and fixtures for rpmversion tests.
"""

import pytest

from rpmversion import EVR, DepOrdering, DepRequirement


@pytest.fixture
def vercmp_cases():
    """Provide version string pairs for comparison testing."""
    return [
        # (v1, v2, expected_result)
        ("1.0", "1.0", 0),
        ("1.0", "2.0", -1),
        ("2.0", "1.0", 1),
        ("2.0.1", "2.0.1", 0),
        ("2.0", "2.0.1", -1),
        ("2.0.1a", "2.0.1a", 0),
        ("2.0.1a", "2.0.1", 1),
        ("5.5p1", "5.5p2", -1),
        ("5.5p10", "5.5p1", 1),
        ("10xyz", "10.1xyz", -1),
        ("xyz10", "xyz10.1", -1),
        ("xyz.4", "8", -1),
        ("6.0.rc1", "6.0", 1),
        ("10b2", "10a1", 1),
        ("1.0aa", "1.0a", 1),
        ("10", "9", 1),
        ("0001", "1", 0),
        ("1.0.0", "1_0_0", 0),
        ("1.0.0", "1.0.a", 1),
        ("1.0~rc1", "1.0", -1),
        ("1.0~rc1", "1.0~rc2", -1),
        ("1.0~rc1~git123", "1.0~rc1", -1),
        ("~", "", -1),
        ("", "", 0),
        ("1.0", "", 1),
        ("a", "A", 1),
        ("1.0.", "1.0", 0),
        ("..1.0", "1.0", 0),
        ("123456789012345678901234567890", "123456789012345678901234567891", -1),
        ("99999999999999999999", "100000000000000000000", -1),
    ]


@pytest.fixture
def version_samples():
    """Provide a set of version strings for order property tests."""
    return [
        "",
        "~",
        "~~",
        "0",
        "1",
        "01",
        "1.0",
        "1_0",
        "1.0~rc1",
        "1.0~rc2",
        "1.0a",
        "1.0.a",
        "1.0.0",
        "1.0.1",
        "1.1",
        "2",
        "10",
        "a",
        "b",
        "Z",
        "1.0+git",
        "5.5p1",
        "5.5p10",
    ]


@pytest.fixture
def make_req():
    """Provide a factory for constrained dependency requirements."""

    def _make_req(name, operator, epoch, version, release=""):
        return DepRequirement(
            name, (DepOrdering[operator], EVR(epoch, version, release))
        )

    return _make_req
