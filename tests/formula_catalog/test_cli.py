import os

import pytest

from formula_catalog.cli import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.n == 3
    assert args.output == "text"
    assert args.max_size == 2
    assert args.query == []
    assert not args.quiet


def test_text_mode_writes_formula_list_and_report(tmp_path):
    code = main(["-n", "1", "--max-size", "1", "--output-dir", str(tmp_path), "-q"])
    assert code == 0
    assert sorted(os.listdir(tmp_path)) == ["formulalist.txt", "report.txt"]
    with open(tmp_path / "formulalist.txt", encoding="utf-8") as f:
        assert len(f.read().splitlines()) == 26


def test_html_mode_writes_pages(tmp_path):
    code = main(["-n", "2", "-o", "html", "--max-size", "1", "--output-dir", str(tmp_path), "-q"])
    assert code == 0
    assert sorted(os.listdir(tmp_path)) == ["report.txt", "truthtables0.htm"]


def test_budget_flag_reaches_the_report(tmp_path):
    main(["-n", "3", "--max-size", "2", "--max-formulas", "500", "--output-dir", str(tmp_path), "-q"])
    with open(tmp_path / "report.txt", encoding="utf-8") as f:
        text = f.read()
    assert "Status: incomplete" in text
    assert "Stopped by: formula budget" in text


def test_query_prints_the_entry(tmp_path, capsys):
    main(["-n", "2", "--max-size", "1", "--output-dir", str(tmp_path), "-q", "--query", "p2 ^ p1"])
    out = capsys.readouterr().out
    assert "truth table" in out and "0110" in out


@pytest.mark.parametrize("argv", [
    ["-n", "7"],
    ["--max-size", "-1"],
    ["-o", "pdf"],
    ["-n", "1", "--query", "p2"],
    ["--query", "p1 &"],
])
def test_bad_arguments_exit_with_usage_error(argv, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["--output-dir", str(tmp_path), "-q"])
    assert exc.value.code == 2


def test_huge_size_ceiling_stops_on_budget(tmp_path, capsys):
    code = main(["-n", "2", "--max-size", "3000", "--max-formulas", "10000", "--output-dir", str(tmp_path)])
    assert code == 0
    out = " ".join(capsys.readouterr().out.split())
    assert "the run stops here" in out
    with open(tmp_path / "report.txt", encoding="utf-8") as f:
        text = f.read()
    assert "Stopped by: formula budget" in text
    assert "Formulas generated: 4,708" in text
