"""Column-driven table rendering for listings."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

EMPTY_CELL = "-"


@dataclass
class Column:
    key: str
    header: str
    render: Optional[Callable[[Any], Any]] = None


def _value(item: Any, key: str) -> Any:
    if isinstance(item, dict):
        return item.get(key)
    return getattr(item, key, None)


class DataTable:
    """Turn rows into header + string cells according to column config.

    A column's ``render`` callable receives the whole item; otherwise the
    item's value under ``key`` is used, and falsy values show as ``-``.
    """

    def __init__(self, columns: List[Column], empty_message: str = "No data available"):
        self.columns = columns
        self.empty_message = empty_message

    @property
    def headers(self) -> List[str]:
        return [c.header for c in self.columns]

    def cell(self, item: Any, column: Column) -> str:
        if column.render is not None:
            value = column.render(item)
        else:
            value = _value(item, column.key) or EMPTY_CELL
        return str(value)

    def rows(self, data: Iterable[Any]) -> List[List[str]]:
        return [[self.cell(item, c) for c in self.columns] for item in data]

    def render_text(self, data: Iterable[Any]) -> str:
        """Plain-text table with aligned columns, or the empty message."""
        rows = self.rows(data)
        if not rows:
            return self.empty_message

        widths = [len(h) for h in self.headers]
        for row in rows:
            widths = [max(w, len(cell)) for w, cell in zip(widths, row)]

        def line(cells):
            return "  ".join(cell.ljust(w) for cell, w in zip(cells, widths)).rstrip()

        out = [line(self.headers), line("-" * w for w in widths)]
        out.extend(line(row) for row in rows)
        return "\n".join(out)
