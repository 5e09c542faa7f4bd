"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tenurectl.domain.labels import DEFAULT_LOCALE, heading
from tenurectl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from tenurectl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose, locale=locale)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the duration."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "total_label" in result.data:
        return str(result.data["total_label"])
    if "label" in result.data:
        return str(result.data["label"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="tenure.ok")
    op = Text(f"  {result.op}", style="tenure.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "tenure.key"), (str(value), style)))


def _is_zero(duration: dict[str, Any]) -> bool:
    return not any(duration.get(unit) for unit in ("years", "months", "days"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="tenure.error")
    op = Text(f"  {result.op}", style="tenure.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Period renderers ──────────────────────────────────────────────────


def _render_period(
    result: ServiceResult, console: Console, *, verbose: bool = False, locale: str
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, heading("from", locale), d.get("start_display", ""), style="tenure.date")
    _field(console, heading("to", locale), d.get("end_display", ""), style="tenure.date")
    _field(console, heading("duration", locale), d.get("label", ""), style="tenure.total")
    if verbose:
        _field(console, "raw", d.get("duration", {}))


def _period_table(rows: list[dict[str, Any]], *, locale: str, verbose: bool) -> Table:
    table = Table(
        title=heading("periods", locale),
        show_header=True,
        pad_edge=False,
        expand=False,
    )
    if verbose:
        table.add_column("ID", style="tenure.id", no_wrap=True)
    table.add_column(heading("from", locale), style="tenure.date", no_wrap=True)
    table.add_column(heading("to", locale), style="tenure.date", no_wrap=True)
    table.add_column(heading("duration", locale))

    for row in rows:
        label = str(row.get("label", ""))
        if row.get("issue"):
            label = f"{label} ({row['issue']})"
        cells = [
            row.get("start_display") or str(row.get("start", "")),
            row.get("end_display") or str(row.get("end", "")),
            Text(label, style="tenure.zero") if _is_zero(row.get("duration", {})) else label,
        ]
        if verbose:
            cells.insert(0, str(row.get("id", "")))
        table.add_row(*cells)
    return table


def _render_total(
    result: ServiceResult, console: Console, *, verbose: bool = False, locale: str
) -> None:
    d = result.data
    _status_line(console, result)

    rows = d.get("periods", [])
    if rows:
        console.print(_period_table(rows, locale=locale, verbose=verbose))
    else:
        console.print(Text(f"  {heading('empty', locale)}", style="dim"))

    console.print(
        Panel(
            Text(str(d.get("total_label", "")), style="tenure.total", justify="center"),
            title=heading("total", locale),
        )
    )


def _render_loaded(
    result: ServiceResult, console: Console, *, verbose: bool = False, locale: str
) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "path", d.get("path", ""))
    _field(console, "periods", len(d.get("periods", [])))


def _render_generic(
    result: ServiceResult, console: Console, *, verbose: bool = False, locale: str
) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, Any] = {
    "measure_period": _render_period,
    "total_experience": _render_total,
    "load_periods": _render_loaded,
}
