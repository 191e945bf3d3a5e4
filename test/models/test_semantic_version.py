import pytest

from bootstrap_images.errors import InvalidVersionError
from bootstrap_images.models import SemanticVersion


@pytest.mark.parametrize("text,expected", [
    ("1.22.0", (1, 22, 0, (), ())),
    ("v1.18.0", (1, 18, 0, (), ())),
    ("1.22.0-rc.0", (1, 22, 0, ("rc", "0"), ())),
    ("v3.4.13-0+build.7", (3, 4, 13, ("0",), ("build", "7"))),
])
def test_parse(text, expected):
    v = SemanticVersion.parse(text)
    assert (v.major, v.minor, v.patch, v.prerelease, v.build) == expected


@pytest.mark.parametrize("text", ["", "1.22", "v1.22.0.1", "01.2.3", "1.2.3-01", "latest", "1.2.3 ", "vv1.2.3"])
def test_parse_invalid(text):
    with pytest.raises(InvalidVersionError, match="Invalid semantic version"):
        SemanticVersion.parse(text)


@pytest.mark.parametrize("text,expected", [
    ("1.8", "1.8.0"),
    ("v1", "1.0.0"),
    (" v1.8.9 ", "1.8.9"),
    ("1.08.0", "1.8.0"),
    ("1.8.7-0", "1.8.7-0"),
])
def test_parse_tolerant(text, expected):
    assert str(SemanticVersion.parse_tolerant(text)) == expected


@pytest.mark.parametrize("text", ["latest", "sha256-abc", "", "1.2.3.4", "v1.x"])
def test_parse_tolerant_invalid(text):
    with pytest.raises(InvalidVersionError):
        SemanticVersion.parse_tolerant(text)


def test_precedence():
    ordered = [
        "1.0.0-alpha",
        "1.0.0-alpha.1",
        "1.0.0-alpha.beta",
        "1.0.0-beta",
        "1.0.0-beta.2",
        "1.0.0-beta.11",
        "1.0.0-rc.1",
        "1.0.0",
        "1.0.1",
        "1.1.0",
        "2.0.0",
    ]
    versions = [SemanticVersion.parse(v) for v in ordered]
    assert sorted(reversed(versions)) == versions
    assert all(a < b for a, b in zip(versions, versions[1:]))


def test_leading_v_and_build_metadata_ignored_by_comparison():
    assert SemanticVersion.parse("v1.8.9") == SemanticVersion.parse("1.8.9")
    assert SemanticVersion.parse("1.8.9+a") == SemanticVersion.parse("1.8.9+b")
    assert len({SemanticVersion.parse("1.8.9"), SemanticVersion.parse("v1.8.9+meta")}) == 1


def test_numeric_ordering_is_not_lexical():
    assert SemanticVersion.parse("1.10.0") > SemanticVersion.parse("1.9.0")
