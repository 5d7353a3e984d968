import os

import pytest

from formula_catalog.catalog import Catalog
from formula_catalog.html_report import HtmlPage, page_file_name, write_html_pages


def _read(path):
    with open(path, encoding="utf-8") as f:
        return f.read()


def test_single_page_holds_all_tables(run_n1, tmp_path):
    paths = write_html_pages(run_n1.catalog, str(tmp_path), progress=False)
    assert [os.path.basename(p) for p in paths] == ["truthtables0.htm"]
    page = _read(paths[0])
    assert page.count("<h3>Truth table") == 4
    assert "previous" not in page and "next" not in page
    assert "Minimum formula (0 binary operators): p1</p>" in page


def test_pagination_and_links(run_n1, tmp_path):
    paths = write_html_pages(run_n1.catalog, str(tmp_path), tables_per_page=2, progress=False)
    assert [os.path.basename(p) for p in paths] == ["truthtables0.htm", "truthtables1.htm"]
    first, second = _read(paths[0]), _read(paths[1])
    assert '<a href="truthtables1.htm">next</a>' in first
    assert '<a href="truthtables0.htm">previous</a>' in second
    # discovery order: p1, ~p1 on the first page; the constants on the second
    assert "<h3>Truth table 2 (01)</h3>" in first
    assert "<h3>Truth table 0 (00)</h3>" in second
    assert "Minimum formulas (1 binary operators): p1 ^ p1;" in second


def test_truth_table_grid_and_escaping(run_n1, tmp_path):
    page = _read(write_html_pages(run_n1.catalog, str(tmp_path), progress=False)[0])
    assert "<th>p1</th><th>output</th>" in page.replace("\n", "")
    assert "<td>T</td>" in page and "<td>F</td>" in page
    # "&" in formulas is escaped
    assert "<li>p1 &amp; p1</li>" in page


def test_empty_catalog_writes_one_page(tmp_path):
    paths = write_html_pages(Catalog(2).finalize(), str(tmp_path), progress=False)
    assert len(paths) == 1
    assert "No truth table was found." in _read(paths[0])


def test_invalid_page_size(run_n1, tmp_path):
    with pytest.raises(ValueError):
        write_html_pages(run_n1.catalog, str(tmp_path), tables_per_page=0)


def test_page_builder():
    page = HtmlPage("t")
    page.items(["a<b"], ordered=True)
    out = page.render()
    assert "<ol>\n<li>a&lt;b</li>\n</ol>" in out
    assert out.startswith("<!DOCTYPE html>")
    assert page_file_name(0) == "truthtables0.htm"
