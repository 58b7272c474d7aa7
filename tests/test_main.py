"""Tests for the command line entry point."""

import io
import json
import sys

import pytest

import main


@pytest.fixture
def run_cli(monkeypatch):
    """Run main() with the given arguments and return its exit code."""
    def run(*argv, stdin=None):
        monkeypatch.setattr(sys, "argv", ["main.py", *argv])
        if stdin is not None:
            monkeypatch.setattr(sys, "stdin", io.StringIO(stdin))
        return main.main()
    return run


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(
        "selector:\n"
        "  title: h1\n"
        "  items: [li]\n"
        "  count:\n"
        "    selector: .count\n"
        "    number: true\n"
    )
    return path


HTML = "<h1>Shop</h1><ul><li>a</li><li>b</li></ul><span class='count'>1,024</span>"


class TestMain:
    """Tests for main()."""

    def test_html_file(self, run_cli, schema_file, tmp_path, capsys):
        """Test extraction from an HTML file."""
        html_file = tmp_path / "page.html"
        html_file.write_text(HTML)

        assert run_cli(str(schema_file), str(html_file)) == 0
        assert json.loads(capsys.readouterr().out) == {"title": "Shop", "items": ["a", "b"], "count": 1024}

    def test_html_from_stdin(self, run_cli, schema_file, capsys):
        """Test extraction from standard input with compact output."""
        assert run_cli(str(schema_file), "--indent", "0", stdin=HTML) == 0
        output = capsys.readouterr().out
        assert output.strip() == '{"title": "Shop", "items": ["a", "b"], "count": 1024}'

    def test_missing_schema(self, run_cli, tmp_path):
        """Test a missing schema file exits with an error."""
        assert run_cli(str(tmp_path / "missing.json"), stdin=HTML) == 1

    def test_invalid_schema(self, run_cli, tmp_path):
        """Test a structurally invalid schema exits with an error."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"selector": "h1", "trim": "yes"}))
        assert run_cli(str(path), stdin=HTML) == 1

    def test_empty_selector(self, run_cli, tmp_path):
        """Test extraction errors exit with an error."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"selector": {"title": ""}}))
        assert run_cli(str(path), stdin=HTML) == 1

    def test_missing_html(self, run_cli, schema_file, tmp_path):
        """Test an unreadable HTML file exits with an error."""
        assert run_cli(str(schema_file), str(tmp_path / "missing.html")) == 1
