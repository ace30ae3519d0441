"""
Tests for the cssjss command line.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest

from cssjss.cli import create_parser, main


class TestCss2Jss:
    """`cssjss css2jss` converts CSS files and stdin."""

    def test_file_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "style.css"
        path.write_text(".foo { width: 10px; display: -webkit-box; display: flex }")

        assert main(["css2jss", str(path), "-u", "px", "--bare"]) == 0

        out = capsys.readouterr().out
        assert json.loads(out) == {
            "foo": {"width": 10, "display": "flex", "fallbacks": [{"display": "-webkit-box"}]}
        }

    def test_stdin_wrapped(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO(".a { -webkit-transform: none }"))

        assert main(["css2jss", "--dashes"]) == 0

        out = capsys.readouterr().out
        assert "makeStyles" in out
        assert '"-webkit-transform": "none"' in out

    def test_output_file(self, tmp_path: Path) -> None:
        source = tmp_path / "style.css"
        source.write_text(".a { color: red }")
        target = tmp_path / "styles.js"

        assert main(["css2jss", str(source), "-o", str(target)]) == 0
        assert '"color": "red"' in target.read_text()

    def test_strict_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "broken.css"
        path.write_text(".a { color red }")

        assert main(["css2jss", str(path), "--strict"]) == 1
        assert "Expected a colon" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["css2jss", str(tmp_path / "missing.css")]) == 1
        assert "missing.css" in capsys.readouterr().err


class TestJss2Css:
    """`cssjss jss2css` converts JSON style objects."""

    def test_file_to_stdout(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "styles.json"
        path.write_text(json.dumps({"foo": {"width": 10, "color": "red"}}))

        assert main(["jss2css", str(path)]) == 0
        assert capsys.readouterr().out == "\n.foo {\n  width:10px;\ncolor:red;\n}"

    def test_invalid_json(self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
        monkeypatch.setattr(sys, "stdin", io.StringIO("{not json"))

        assert main(["jss2css"]) == 1
        assert "Expecting property name" in capsys.readouterr().err


class TestParser:
    """Argument parsing."""

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["css2jss"])
        assert args.file is None
        assert args.unit is None
        assert not args.dashes
        assert not args.bare
