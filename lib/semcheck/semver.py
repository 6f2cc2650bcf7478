from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from .errors import InvalidVersionError, MalformedCoreError, NumericParseError, PatternCompileError

logger = logging.getLogger(__name__)

_NUMERIC = r"(?:0|[1-9][0-9]*)"
_IDENTIFIER = rf"(?:{_NUMERIC}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"

VALID_PATTERN = (
    rf"({_NUMERIC})\.({_NUMERIC})\.({_NUMERIC})"
    rf"(?:-({_IDENTIFIER}(?:\.{_IDENTIFIER})*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)

_TAG_CHUNKS = 2
_DIGITS = re.compile(r"[+-]?[0-9]+")


@runtime_checkable
class Versioning(Protocol):
    def valid(self, version: str) -> bool: ...

    def in_range(self, version: str, start: str, end: str) -> bool: ...

    def greater_than_or_equal(self, version: str, compare: str) -> bool: ...

    def smaller_than_or_equal(self, version: str, compare: str) -> bool: ...


@dataclass(frozen=True)
class Version:
    major: int
    minor: int
    revision: int = 0
    tag: str = ""

    def triple(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.revision


def _to_int(part: str, value: str) -> int:
    try:
        if _DIGITS.fullmatch(value) is None:
            raise ValueError(f"invalid literal for a version component: {value!r}")
        return int(value)
    except ValueError as exc:
        raise NumericParseError(part, value, exc) from exc


def parse_version(version: str) -> Version:
    """Split a version string into its numeric core and verbatim tag.

    Accepts a two part core (revision defaults to 0) even though the
    validator only admits three parts. Build metadata after ``+`` is dropped
    from an untagged core and left inside the tag otherwise.
    """
    tag = ""
    core = version
    dash = core.find("-")
    plus = core.find("+")
    if dash != -1 and (plus == -1 or dash < plus):
        chunks = core.split("-", 1)
        if len(chunks) != _TAG_CHUNKS:
            raise MalformedCoreError(
                f"versions with a tag should be 2 chunks. Got {len(chunks)}",
                expected="2",
                got=len(chunks),
            )
        core, tag = chunks
    else:
        core = core.split("+", 1)[0]

    parts = core.split(".")
    if len(parts) not in (2, 3):
        raise MalformedCoreError(
            f"versions should be 2 or 3 parts. Got {len(parts)}",
            expected="2 or 3",
            got=len(parts),
        )

    major = _to_int("major", parts[0])
    minor = _to_int("minor", parts[1])
    revision = _to_int("revision", parts[2]) if len(parts) == 3 else 0
    return Version(major=major, minor=minor, revision=revision, tag=tag)


class Semver:
    """Validator and comparator for MAJOR.MINOR.PATCH[-tag][+build] strings.

    Only the numeric triple takes part in ordering; the tag and build
    metadata are ignored.
    """

    def __init__(self, pattern: str = VALID_PATTERN):
        try:
            self._re_valid = re.compile(pattern)
        except re.error as exc:
            raise PatternCompileError(f"invalid version pattern: {exc}") from exc

    def valid(self, version: str) -> bool:
        if not isinstance(version, str):
            return False
        return self._re_valid.fullmatch(version) is not None

    def in_range(self, version: str, start: str, end: str) -> bool:
        lower_ok = self._greater_than_or_equal(version, start, compare_operand="start")
        upper_ok = True
        if end != "":
            upper_ok = self._smaller_than_or_equal(version, end, compare_operand="end")
        logger.debug("in_range(%s, %s, %s): lower=%s upper=%s", version, start, end or "*", lower_ok, upper_ok)
        return lower_ok and upper_ok

    def greater_than_or_equal(self, version: str, compare: str) -> bool:
        return self._greater_than_or_equal(version, compare, compare_operand="compare")

    def smaller_than_or_equal(self, version: str, compare: str) -> bool:
        return self._smaller_than_or_equal(version, compare, compare_operand="compare")

    def _build_pair(self, version: str, compare: str, compare_operand: str) -> tuple[Version, Version]:
        if not self.valid(version):
            raise InvalidVersionError("version", version)
        if not self.valid(compare):
            raise InvalidVersionError(compare_operand, compare)
        sem_version, sem_compare = parse_version(version), parse_version(compare)
        logger.debug("comparing %s with %s", sem_version.triple(), sem_compare.triple())
        return sem_version, sem_compare

    def _greater_than_or_equal(self, version: str, compare: str, *, compare_operand: str) -> bool:
        sem_version, sem_compare = self._build_pair(version, compare, compare_operand)
        if sem_version.major != sem_compare.major:
            return sem_version.major > sem_compare.major
        if sem_version.minor != sem_compare.minor:
            return sem_version.minor > sem_compare.minor
        return sem_version.revision >= sem_compare.revision

    def _smaller_than_or_equal(self, version: str, compare: str, *, compare_operand: str) -> bool:
        sem_version, sem_compare = self._build_pair(version, compare, compare_operand)
        if sem_version.major != sem_compare.major:
            return sem_version.major < sem_compare.major
        if sem_version.minor != sem_compare.minor:
            return sem_version.minor < sem_compare.minor
        return sem_version.revision <= sem_compare.revision


def new() -> Semver:
    return Semver()
