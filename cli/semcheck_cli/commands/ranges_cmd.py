from __future__ import annotations

import typer
from rich.table import Table

from semcheck import new

from .. import console
from ..config import RangeConfig, config_path, load_config, save_config
from ..formatting import format_bound

app = typer.Typer(help="Manage named version ranges (~/.config/semcheck/config.toml).")


@app.command("list")
def list_ranges(
        json_output: bool = typer.Option(False, "--json", help="Output JSON only."),
):
    cfg = load_config()
    if json_output:
        console.print_json({name: {"start": r.start, "end": r.end or None} for name, r in cfg.ranges.items()})
        return
    if not cfg.ranges:
        console.info(f"No ranges configured in {config_path()}")
        return
    table = Table(title="Ranges")
    table.add_column("name")
    table.add_column("start")
    table.add_column("end")
    for name, r in sorted(cfg.ranges.items()):
        table.add_row(name, r.start, format_bound(r.end))
    console.print(table)


@app.command("set")
def set_range(
        name: str = typer.Argument(..., help="Range name."),
        start: str = typer.Argument(..., help="Inclusive lower bound."),
        end: str = typer.Argument("", help="Inclusive upper bound (empty for unbounded)."),
):
    semver = new()
    for label, value in (("start", start), ("end", end)):
        if value and not semver.valid(value):
            console.err(f"{label} `{value}` is invalid")
            raise typer.Exit(code=2)
    cfg = load_config()
    cfg.ranges[name] = RangeConfig(start=start, end=end)
    saved = save_config(cfg)
    console.ok(f"Range {name} saved: {saved}")


@app.command("remove")
def remove_range(
        name: str = typer.Argument(..., help="Range name."),
):
    cfg = load_config()
    if name not in cfg.ranges:
        console.err(f"Unknown range: {name}")
        raise typer.Exit(code=2)
    del cfg.ranges[name]
    saved = save_config(cfg)
    console.ok(f"Range {name} removed: {saved}")
