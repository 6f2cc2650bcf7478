from __future__ import annotations

import pytest

from semcheck import MalformedCoreError, NumericParseError, Version, parse_version


def test_parse_full_version() -> None:
    assert parse_version("1.2.3") == Version(major=1, minor=2, revision=3, tag="")


def test_parse_two_part_core_defaults_revision() -> None:
    parsed = parse_version("1.2")
    assert parsed.triple() == (1, 2, 0)
    assert parsed.tag == ""


def test_parse_keeps_tag_verbatim() -> None:
    parsed = parse_version("10.5.7-dashes-and.dots")
    assert parsed.triple() == (10, 5, 7)
    assert parsed.tag == "dashes-and.dots"


def test_parse_keeps_build_metadata_inside_tag() -> None:
    assert parse_version("1.0.0-beta+exp.sha.5114f85").tag == "beta+exp.sha.5114f85"


def test_parse_drops_build_metadata_without_tag() -> None:
    parsed = parse_version("1.2.3+build.7")
    assert parsed.triple() == (1, 2, 3)
    assert parsed.tag == ""

    parsed = parse_version("1.2.3+build-1")
    assert parsed.triple() == (1, 2, 3)
    assert parsed.tag == ""


@pytest.mark.parametrize("version, parts", [("1", 1), ("1.2.3.4", 4), ("1.2.3.4-rc", 4)])
def test_parse_rejects_wrong_part_count(version, parts) -> None:
    with pytest.raises(MalformedCoreError) as exc_info:
        parse_version(version)
    assert exc_info.value.got == parts
    assert exc_info.value.expected == "2 or 3"


@pytest.mark.parametrize(
    "version, part, value",
    [
        ("a.2.3", "major", "a"),
        ("1.b.3", "minor", "b"),
        ("1.2.x", "revision", "x"),
        ("1..3", "minor", ""),
        ("1_0.2.3", "major", "1_0"),
        (" 1.2.3", "major", " 1"),
        ("\u0661.2.3", "major", "\u0661"),
        ("1.2.3 ", "revision", "3 "),
    ],
)
def test_parse_wraps_numeric_errors(version, part, value) -> None:
    with pytest.raises(NumericParseError) as exc_info:
        parse_version(version)
    err = exc_info.value
    assert err.part == part
    assert err.value == value
    assert isinstance(err.cause, ValueError)
    assert err.__cause__ is err.cause
