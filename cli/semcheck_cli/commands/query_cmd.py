from __future__ import annotations

import typer

from semcheck import SemverError, Versioning, new, parse_version
from semcheck.compat import evaluate_compatibility, parse_range_expr

from .. import console
from ..config import load_config, resolve_output
from ..formatting import format_bound, format_tag, version_to_dict


def _json_mode(json_output: bool) -> bool:
    return json_output or resolve_output(load_config()) == "json"


def _fail(exc: SemverError) -> typer.Exit:
    console.err(str(exc))
    return typer.Exit(code=2)


def _verdict(result: bool, payload: dict[str, object], *, json_mode: bool) -> None:
    if json_mode:
        console.print_json({**payload, "result": result})
    else:
        console.print("true" if result else "false")
    if not result:
        raise typer.Exit(code=1)


def resolve_bounds(start: str | None, end: str | None, range_name: str | None) -> tuple[str, str]:
    if range_name:
        if start or end:
            console.err("Use either START [END] or --range NAME, not both.")
            raise typer.Exit(code=2)
        cfg = load_config()
        named = cfg.ranges.get(range_name)
        if named is None:
            console.err(f"Unknown range: {range_name}")
            raise typer.Exit(code=2)
        return named.start, named.end
    if not start:
        console.err("Provide START or --range NAME.")
        raise typer.Exit(code=2)
    return start, end or ""


def check_valid(semver: Versioning, versions: list[str]) -> dict[str, bool]:
    return {v: semver.valid(v) for v in versions}


def valid(
        versions: list[str] = typer.Argument(..., help="Version strings to validate."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Validate version strings against the semantic version grammar."""
    results = check_valid(new(), versions)
    if _json_mode(json_output):
        console.print_json({"results": results})
    else:
        for version, is_valid in results.items():
            if is_valid:
                console.ok(version)
            else:
                console.err(f"{version} is not a valid version")
    if not all(results.values()):
        raise typer.Exit(code=1)


def parse(
        version: str = typer.Argument(..., help="Version string."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Show the numeric core and tag of a version."""
    if not new().valid(version):
        console.err(f"{version} is not a valid version")
        raise typer.Exit(code=2)
    try:
        parsed = parse_version(version)
    except SemverError as exc:
        raise _fail(exc)
    if _json_mode(json_output):
        console.print_json({"version": version, **version_to_dict(parsed)})
        return
    console.print(f"major={parsed.major} minor={parsed.minor} revision={parsed.revision} tag={format_tag(parsed)}")


def gte(
        version: str = typer.Argument(..., help="Version to test."),
        compare: str = typer.Argument(..., help="Version to compare against."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Exit 0 when VERSION >= COMPARE."""
    try:
        result = new().greater_than_or_equal(version, compare)
    except SemverError as exc:
        raise _fail(exc)
    _verdict(result, {"version": version, "compare": compare, "op": ">="}, json_mode=_json_mode(json_output))


def lte(
        version: str = typer.Argument(..., help="Version to test."),
        compare: str = typer.Argument(..., help="Version to compare against."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Exit 0 when VERSION <= COMPARE."""
    try:
        result = new().smaller_than_or_equal(version, compare)
    except SemverError as exc:
        raise _fail(exc)
    _verdict(result, {"version": version, "compare": compare, "op": "<="}, json_mode=_json_mode(json_output))


def in_range(
        version: str = typer.Argument(..., help="Version to test."),
        start: str | None = typer.Argument(None, help="Inclusive lower bound."),
        end: str | None = typer.Argument(None, help="Inclusive upper bound (omit for unbounded)."),
        range_name: str | None = typer.Option(None, "--range", "-r", help="Use a named range from config."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Exit 0 when START <= VERSION <= END."""
    lower, upper = resolve_bounds(start, end, range_name)
    try:
        result = new().in_range(version, lower, upper)
    except SemverError as exc:
        raise _fail(exc)
    payload = {"version": version, "start": lower, "end": upper or None}
    if not _json_mode(json_output) and not result:
        console.info(f"{version} is outside {lower} .. {format_bound(upper)}")
    _verdict(result, payload, json_mode=_json_mode(json_output))


def check(
        version: str = typer.Argument(..., help="Current version."),
        supported: str = typer.Option(..., "--supported", "-s", help="Supported range START..END."),
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
) -> None:
    """Evaluate VERSION against a supported range expression."""
    try:
        compat = evaluate_compatibility(new(), {"supported_range": supported}, current_version=version)
    except SemverError as exc:
        raise _fail(exc)
    if _json_mode(json_output):
        console.print_json(compat)
    else:
        start, end = parse_range_expr(supported)
        if compat["compatible"]:
            console.ok(f"{version} is within {start} .. {format_bound(end)}")
        for reason in compat["reasons"]:
            console.err(f"{version}: {reason}")
    if not compat["compatible"]:
        raise typer.Exit(code=1)
