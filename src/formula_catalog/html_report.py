# src/formula_catalog/html_report.py

"""
Paginated HTML report of a finished catalog.

Each page ``truthtables<i>.htm`` shows up to ``tables_per_page`` truth tables
in discovery order. Every table is rendered as a T/F grid (one column per
variable plus the output column), followed by its minimal formula(s) and the
list of all formulas with that truth table. Pages link to their neighbours.
"""

from __future__ import annotations
import html
import os
from typing import List, Optional, Sequence

from tqdm.auto import tqdm

from .catalog import Catalog, TruthTableRecord
from .forms.formula import variable_names
from .forms.pretty import format_formula, format_table_rows

__all__ = [
    "TABLES_PER_PAGE",
    "HtmlPage",
    "page_file_name",
    "render_truth_table",
    "write_html_pages",
]

TABLES_PER_PAGE = 256
PAGE_FILE_PREFIX = "truthtables"
PAGE_FILE_EXTENSION = "htm"
TABLE_HEADER_LEVEL = 3


def page_file_name(index: int) -> str:
    """
    >>> page_file_name(2)
    'truthtables2.htm'
    """
    return f"{PAGE_FILE_PREFIX}{index}.{PAGE_FILE_EXTENSION}"


class HtmlPage:
    """
    Minimal HTML page builder. All text arguments are escaped.

    Examples
    --------
    >>> page = HtmlPage("demo")
    >>> page.header("a < b", 2)
    >>> "<h2>a &lt; b</h2>" in page.render()
    True
    """

    def __init__(self, title: str):
        self.title = title
        self._body: List[str] = []

    def header(self, text: str, level: int = 1) -> None:
        self._body.append(f"<h{level}>{html.escape(text)}</h{level}>")

    def paragraph(self, text: str) -> None:
        self._body.append(f"<p>{html.escape(text)}</p>")

    def link(self, href: str, text: str) -> str:
        return f'<a href="{html.escape(href, quote=True)}">{html.escape(text)}</a>'

    def raw(self, markup: str) -> None:
        self._body.append(markup)

    def table(self, header: Sequence[str], rows, *, border: int = 1) -> None:
        out = [f'<table border="{border}">', "<tr>"]
        out += [f"<th>{html.escape(h)}</th>" for h in header]
        out.append("</tr>")
        for row in rows:
            out.append("<tr>" + "".join(f"<td>{html.escape(c)}</td>" for c in row) + "</tr>")
        out.append("</table>")
        self._body.append("\n".join(out))

    def items(self, items: Sequence[str], *, ordered: bool = False) -> None:
        tag = "ol" if ordered else "ul"
        body = "\n".join(f"<li>{html.escape(i)}</li>" for i in items)
        self._body.append(f"<{tag}>\n{body}\n</{tag}>")

    def render(self) -> str:
        body = "\n\n".join(self._body)
        return (
            "<!DOCTYPE html>\n<html>\n<head>\n"
            '<meta charset="utf-8">\n'
            f"<title>{html.escape(self.title)}</title>\n"
            "</head>\n<body>\n"
            f"{body}\n"
            "</body>\n</html>\n"
        )


def render_truth_table(page: HtmlPage, record: TruthTableRecord, names: Sequence[str], *, unicode_ops: bool = False) -> None:
    """Append one truth table, its minimal formula(s) and all its formulas to ``page``."""
    table = record.truth_table
    title = f"Truth table {table.bits} ({table})"
    page.header(title, TABLE_HEADER_LEVEL)
    page.table(list(names) + ["output"], format_table_rows(table))

    fmt = lambda f: format_formula(f, names, unicode_ops=unicode_ops)
    count = record.minimal[0].operator_count
    label = "Minimum formula" if len(record.minimal) == 1 else "Minimum formulas"
    page.paragraph(f"{label} ({count} binary operators): " + "; ".join(fmt(f) for f in record.minimal))
    page.paragraph(f"All {len(record.formulas)} formulas with this truth table:")
    page.items([fmt(f) for f in record.formulas])


def write_html_pages(
    catalog: Catalog,
    directory: str,
    *,
    names: Optional[Sequence[str]] = None,
    tables_per_page: int = TABLES_PER_PAGE,
    unicode_ops: bool = False,
    progress: bool = True,
) -> List[str]:
    """
    Write the catalog as ``truthtables0.htm``, ``truthtables1.htm``, ...

    Returns the written file paths. An empty catalog still produces one page
    stating that no truth table was found.
    """
    if tables_per_page < 1:
        raise ValueError("tables_per_page must be ≥ 1")
    names = list(names) if names is not None else variable_names(catalog.n)
    records = catalog.list_truth_tables()
    chunks = [records[i:i + tables_per_page] for i in range(0, len(records), tables_per_page)] or [[]]

    paths = []
    pages = range(len(chunks))
    if progress:
        pages = tqdm(pages, total=len(chunks), desc="HTML pages")
    for i in pages:
        page = HtmlPage(f"Truth tables over {catalog.n} variables, page {i + 1} of {len(chunks)}")
        page.header(page.title, 1)
        nav = []
        if i > 0:
            nav.append(page.link(page_file_name(i - 1), "previous"))
        if i + 1 < len(chunks):
            nav.append(page.link(page_file_name(i + 1), "next"))
        if nav:
            page.raw("<p>" + " | ".join(nav) + "</p>")
        if not chunks[i]:
            page.paragraph("No truth table was found.")
        for record in chunks[i]:
            render_truth_table(page, record, names, unicode_ops=unicode_ops)

        filepath = os.path.join(directory, page_file_name(i))
        with open(filepath, "w", encoding="utf-8", newline="\n") as f:
            f.write(page.render())
        paths.append(filepath)
    return paths
