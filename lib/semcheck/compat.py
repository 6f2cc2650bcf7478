from __future__ import annotations

from typing import Any

from .errors import InvalidVersionError
from .semver import Versioning

RANGE_SEPARATOR = ".."


def parse_range_expr(expr: str) -> tuple[str, str]:
    """Split ``START..END`` into its bounds; a missing END means unbounded."""
    text = (expr or "").strip()
    if RANGE_SEPARATOR not in text:
        return text, ""
    start, end = text.split(RANGE_SEPARATOR, 1)
    return start.strip(), end.strip()


def format_range_expr(start: str, end: str) -> str:
    return f"{start}{RANGE_SEPARATOR}{end}"


def evaluate_compatibility(
        semver: Versioning,
        data: dict[str, Any],
        *,
        current_version: str,
) -> dict[str, Any]:
    supported_range = str(data.get("supported_range") or "").strip()

    reasons: list[str] = []
    if supported_range:
        start, end = parse_range_expr(supported_range)
        try:
            if not semver.in_range(current_version, start, end):
                reasons.append("version_out_of_range")
        except InvalidVersionError as exc:
            if exc.operand == "version":
                reasons.append("invalid_current_version")
            else:
                reasons.append("invalid_supported_range")

    return {
        "supported_range": supported_range or None,
        "current_version": current_version,
        "compatible": not reasons,
        "reasons": reasons,
    }
