from __future__ import annotations

from semcheck import Version


def format_bound(value: str | None) -> str:
    text = (value or "").strip()
    return text or "-"


def format_tag(version: Version) -> str:
    return version.tag or "-"


def version_to_dict(version: Version) -> dict[str, object]:
    return {
        "major": version.major,
        "minor": version.minor,
        "revision": version.revision,
        "tag": version.tag or None,
    }
