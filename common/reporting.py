"""Shared reporting helpers with rich formatting."""

from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, TypeAlias

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

Reporter = Callable[[str], None]
Renderable: TypeAlias = Any


class PanelPrinter(Protocol):
    def __call__(self, message: Renderable, title: str | None = None, style: str | None = None) -> None: ...


class TableBuilder(Protocol):
    def __call__(
        self,
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        title: str | None = None,
        style: str | None = None,
    ) -> object: ...


def show_panel(paneler: PanelPrinter | None, message: Renderable, title: str | None = None, style: str | None = None) -> None:
    if paneler is None:
        return
    paneler(message, title, style)


def show_table(
    reporter: Reporter,
    paneler: PanelPrinter | None,
    table_builder: TableBuilder | None,
    *,
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[str]],
    style: str | None = None,
    wrap_panel: bool = True,
) -> None:
    if table_builder is None:
        lines = []
        if title:
            lines.append(f"{title}")
        header = " | ".join(columns)
        lines.append(header)
        lines.append("-" * len(header))
        for row in rows:
            lines.append(" | ".join(row))
        reporter("\n".join(lines))
        return

    table = table_builder(columns, rows, title=title, style=style)
    if paneler is None or not wrap_panel:
        reporter(table)
        return
    show_panel(paneler, table, title=title, style=style)


def _plain_reporter(message: str) -> None:
    print(message)


def make_reporter(use_rich: bool = True, console: Console | None = None) -> tuple[Reporter, PanelPrinter | None, TableBuilder | None]:
    """Build the output callables used by console senders and the shell.

    Command output is escaped before printing: usage strings such as
    ``[command]`` must not be read as rich markup.
    """
    if not use_rich:
        return _plain_reporter, None, None

    console = console or Console()

    def reporter(message: Renderable) -> None:
        if not isinstance(message, str):
            console.print(message)
            return
        console.print(escape(message), highlight=False, soft_wrap=True)

    def panel(message: Renderable, title: str | None = None, style: str | None = None) -> None:
        content = escape(message) if isinstance(message, str) else message
        if style is None:
            console.print(Panel(content, title=title, box=box.ROUNDED))
        else:
            console.print(Panel(content, title=title, box=box.ROUNDED, style=style))

    def table_builder(
        columns: Sequence[str],
        rows: Sequence[Sequence[str]],
        title: str | None = None,
        style: str | None = None,
    ) -> object:
        table = Table(title=title, box=box.ROUNDED)
        if style:
            table.style = style
        for column in columns:
            table.add_column(column)
        for row in rows:
            table.add_row(*(escape(cell) for cell in row))
        return table

    return reporter, panel, table_builder
