"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO); the caller gets
the text back from :func:`render_result`. Renderers are dispatched by
``result.op``; unknown ops fall through to a generic key-value renderer.

Demo transcripts are printed verbatim, one :class:`~rich.text.Text` per line,
so brackets in lines like ``[Kanishk]`` are never parsed as markup.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from solidctl.domain.discounts import format_amount
from solidctl.output.console import create_console, get_output, style_for_variant

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from solidctl.services.result import ServiceResult

    Renderer = Callable[..., None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal, which is the
    case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    data = result.data
    if result.op in ("run", "save"):
        return "\n".join(data.get("lines", []))
    if result.op == "run_all":
        return "\n".join(line for demo in data.get("demos", []) for line in demo["lines"])
    if result.op == "catalog":
        return "\n".join(item["key"] for item in data.get("items", []))
    if result.op == "tiers":
        return "\n".join(item["name"] for item in data.get("items", []))
    if result.op == "discount":
        return format_amount(data["discount"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    line = Text("OK", style="solid.ok")
    line.append(f"  {result.op}", style="solid.op")
    console.print(line)


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    line = Text(f"  {key}: ", style="solid.key")
    line.append(str(value), style=style)
    console.print(line)


def _lines(console: Console, lines: list[str]) -> None:
    for line in lines:
        console.print(Text(line))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block, with timings when telemetry is on (verbose only)."""
    if not result.meta:
        return

    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_timings(console, v)
        else:
            console.print(Text(f"    {k}: {v}"))


def _timing_line(span_data: dict[str, Any], indent: int) -> Text:
    duration = span_data.get("duration_ms", 0.0)
    line = Text(" " * indent)
    line.append(f"{duration:>8.2f}ms", style="yellow" if duration > 100 else "dim")
    line.append(f"  {span_data.get('name', '?')}")
    annotations = span_data.get("annotations") or {}
    if annotations:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    return line


def _render_timings(console: Console, span_data: dict[str, Any]) -> None:
    console.print(_timing_line(span_data, 4))
    for stage in span_data.get("stages", []):
        console.print(_timing_line(stage, 8))


def _demo_heading(console: Console, demo: dict[str, Any]) -> None:
    variant = str(demo.get("variant", ""))
    title = Text(f"{demo.get('title', '')} ", style="solid.heading")
    title.append(f"({demo.get('principle', '')}, ", style="dim")
    title.append(variant, style=style_for_variant(variant))
    title.append(")", style="dim")
    console.print(Rule(title, align="left", style="dim"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    detail = err.detail if err else {}

    # Lines printed before the failure come first, as the script printed them.
    _lines(console, detail.get("lines", []))

    line = Text("ERROR", style="solid.error")
    line.append(f"  {result.op}", style="solid.op")
    line.append(f": {msg}")
    console.print(line)

    available = detail.get("available")
    if available:
        console.print(Text(f"  available: {', '.join(map(str, available))}", style="dim"))

    if verbose and detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Demo renderers ────────────────────────────────────────────────────


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Print a demo's transcript exactly as the script printed it."""
    if verbose:
        _demo_heading(console, result.data)
    _lines(console, result.data.get("lines", []))
    if verbose:
        _render_meta(console, result)


def _render_run_all(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for demo in result.data.get("demos", []):
        _demo_heading(console, demo)
        _lines(console, demo.get("lines", []))
        if not demo.get("ok", True):
            line = Text("ERROR", style="solid.error")
            line.append(f"  {demo.get('error')}")
            console.print(line)
        console.print()

    failed = result.data.get("failed", 0)
    summary = Text(f"{result.data.get('count', 0)} demos")
    if failed:
        summary.append(f", {failed} failed", style="solid.error")
    console.print(summary)
    if verbose:
        _render_meta(console, result)


def _render_catalog(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Key", style="solid.op", no_wrap=True)
    table.add_column("Principle", style="solid.heading")
    table.add_column("Variants")
    if verbose:
        table.add_column("Summary", style="dim")

    for item in result.data.get("items", []):
        variants = Text()
        for i, variant in enumerate(item.get("variants", [])):
            if i:
                variants.append(", ")
            variants.append(variant, style=style_for_variant(variant))
        row: list[Any] = [item["key"], item["title"], variants]
        if verbose:
            row.append(item.get("summary", ""))
        table.add_row(*row)

    console.print(table)
    if verbose:
        _render_meta(console, result)


# ── Discount / storage renderers ──────────────────────────────────────


def _render_discount(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "amount", format_amount(d["amount"]))
    _field(console, "tier", d.get("tier") or "none")
    _field(console, "discount", format_amount(d["discount"]), style="solid.amount")
    _field(console, "total", format_amount(d["total"]))
    if verbose:
        _render_meta(console, result)


def _render_tiers(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Tier", style="solid.heading", no_wrap=True)
    table.add_column("Source")
    table.add_column("Example", style="solid.amount", justify="right")
    for item in result.data.get("items", []):
        table.add_row(item["name"], item["source"], format_amount(item["example"]))
    console.print(table)
    if verbose:
        _render_meta(console, result)


def _render_save(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _lines(console, result.data.get("lines", []))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "run": _render_run,
    "run_all": _render_run_all,
    "catalog": _render_catalog,
    "discount": _render_discount,
    "tiers": _render_tiers,
    "save": _render_save,
}
