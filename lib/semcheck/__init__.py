from .errors import (
    InvalidVersionError,
    MalformedCoreError,
    NumericParseError,
    PatternCompileError,
    SemverError,
)
from .semver import Semver, Version, Versioning, new, parse_version

__all__ = [
    "Semver",
    "Version",
    "Versioning",
    "new",
    "parse_version",
    "SemverError",
    "InvalidVersionError",
    "MalformedCoreError",
    "NumericParseError",
    "PatternCompileError",
]
