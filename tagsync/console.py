"""Operator-facing rendering of tag sets."""

from typing import Optional

from rich.console import Console
from rich.table import Table

from .tagset import TagSet

console = Console()


def tags_table(identifier: str, observed: TagSet,
               declared: Optional[TagSet] = None) -> Table:
    """Table of observed tags, with a Declared column when declared tags are given."""
    table = Table(title=identifier, show_header=True, header_style="bold magenta")
    table.add_column("Key", width=40)
    table.add_column("Observed")
    if declared is not None:
        table.add_column("Declared")

    keys = sorted(set(observed) | set(declared or ()))
    for key in keys:
        row = [key, observed.key_value(key) if observed.key_exists(key) else "-"]
        if declared is not None:
            want = declared.key_value(key)
            if want is None:
                row.append("-")
            elif want == observed.key_value(key):
                row.append("[green]In sync[/green]")
            else:
                row.append(f"[yellow]{want}[/yellow]")
        table.add_row(*row)
    return table


def render_tags(identifier: str, observed: TagSet,
                declared: Optional[TagSet] = None, out: Optional[Console] = None) -> None:
    (out or console).print(tags_table(identifier, observed, declared))
