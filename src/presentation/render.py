"""Plain-text rendering of TableViews for consoles and log output."""

from __future__ import annotations

from .table import BodyState, TableView

LOADING_TEXT = "Chargement..."
COLUMN_SEPARATOR = " | "


def _cell_text(value: object) -> str:
    return "" if value is None else str(value)


def render_text(view: TableView) -> str:
    """Render a TableView as aligned text columns.

    Layout: optional title, optional search line, then the body (loading
    text, empty message, or header + separator + one line per row), then
    the pagination footer when present.
    """
    lines: list[str] = []
    if view.title:
        lines.append(view.title)
    if view.search_placeholder is not None:
        lines.append(f"[{view.search_term or view.search_placeholder}]")

    if view.state is BodyState.LOADING:
        lines.append(LOADING_TEXT)
    elif view.state is BodyState.EMPTY:
        lines.append(view.empty_message or "")
    else:
        headers = [
            h.label + (f" {h.indicator}" if h.indicator else "") for h in view.headers
        ]
        body = [
            [_cell_text(c) for c in row.cells] + ([", ".join(row.actions)] if row.actions else [])
            for row in view.rows
        ]
        widths = [
            max([len(headers[i])] + [len(r[i]) for r in body if i < len(r)])
            for i in range(len(headers))
        ]
        lines.append(COLUMN_SEPARATOR.join(h.ljust(w) for h, w in zip(headers, widths)).rstrip())
        lines.append("-+-".join("-" * w for w in widths))
        for r in body:
            lines.append(COLUMN_SEPARATOR.join(c.ljust(w) for c, w in zip(r, widths)).rstrip())

    if view.pagination is not None:
        p = view.pagination
        prev_mark = " " if p.previous_disabled else "<"
        next_mark = " " if p.next_disabled else ">"
        lines.append(f"{p.summary}  {prev_mark} {p.page_label} {next_mark}".rstrip())
    return "\n".join(lines)
