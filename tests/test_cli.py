# tests/test_cli.py
"""End-to-end tests for the command-line interface."""

import json

import pytest

from prettydiag import __version__
from prettydiag.main import EXIT_ERROR, EXIT_INFRA, EXIT_OK, main


def write_json(path, reports):
    path.write_text(json.dumps({
        "files": {"test.zc": "let id<a>(x : a) : a := x + 1"},
        "reports": reports,
    }), encoding="utf-8")
    return str(path)


ERROR_REPORT = {
    "severity": "error",
    "message": "Error with one marker and no hints",
    "markers": [{"file": "test.zc", "begin": [1, 25], "end": [1, 30],
                 "message": "Required here"}],
}

WARNING_REPORT = dict(ERROR_REPORT, severity="warning", message="just a warning")


class TestMain:

    def test_error_report_exit_code(self, tmp_path, capsys):
        src = write_json(tmp_path / "d.json", [ERROR_REPORT])
        assert main([src, "--ascii", "--color", "never"]) == EXIT_ERROR
        out = capsys.readouterr().out
        assert out.splitlines()[:6] == [
            "[error]: Error with one marker and no hints",
            "     +-> test.zc@1:25-1:30",
            "     |",
            "   1 | let id<a>(x : a) : a := x + 1",
            "     :                         ^----",
            "     :                         `- Required here",
        ]

    def test_warnings_only_exit_ok(self, tmp_path, capsys):
        src = write_json(tmp_path / "d.json", [WARNING_REPORT])
        assert main([src, "--color", "never"]) == EXIT_OK
        assert "[warning]: just a warning" in capsys.readouterr().out

    def test_unicode_and_colour(self, tmp_path, capsys):
        src = write_json(tmp_path / "d.json", [ERROR_REPORT])
        main([src, "--unicode", "--color", "always"])
        out = capsys.readouterr().out
        assert "\x1b[31m" in out
        assert "╭─▶" in out

    def test_several_files(self, tmp_path, capsys):
        a = write_json(tmp_path / "a.json", [WARNING_REPORT])
        b = write_json(tmp_path / "b.json", [ERROR_REPORT])
        assert main([a, b, "--ascii", "--color", "never"]) == EXIT_ERROR
        out = capsys.readouterr().out
        assert out.index("[warning]") < out.index("[error]")

    def test_output_file(self, tmp_path, capsys):
        src = write_json(tmp_path / "d.json", [WARNING_REPORT])
        dest = tmp_path / "out" / "report.txt"
        assert main([src, "--ascii", "--color", "never", "-o", str(dest)]) == EXIT_OK
        assert capsys.readouterr().out == ""
        assert dest.read_text(encoding="utf-8").startswith("[warning]: just a warning")

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.json")]) == EXIT_INFRA
        assert "cannot read" in capsys.readouterr().err

    def test_malformed_input(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"reports": [{"message": "m", "severity": "fatal"}]}),
                        encoding="utf-8")
        assert main([str(path)]) == EXIT_INFRA
        err = capsys.readouterr().err
        assert "reports[0].severity" in err
        assert "unknown severity" in err

    def test_input_not_utf8(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"reports": []}\xff')
        assert main([str(path)]) == EXIT_INFRA
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_source_file_not_utf8(self, tmp_path, capsys):
        (tmp_path / "src.zc").write_bytes(b"\xff\xfelet x")
        path = tmp_path / "d.json"
        path.write_text(json.dumps({
            "files": {"src.zc": {"path": "src.zc"}},
            "reports": [ERROR_REPORT],
        }), encoding="utf-8")
        assert main([str(path), "--color", "never"]) == EXIT_INFRA
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "files.src.zc: cannot decode" in captured.err

    def test_null_attribute_rejected(self, tmp_path, capsys):
        src = write_json(tmp_path / "d.json", [
            dict(ERROR_REPORT, message=[{"text": "hi", "attrs": [None]}]),
        ])
        assert main([src, "--color", "always"]) == EXIT_INFRA
        assert "reports[0].message[0].attrs[0]" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--version"])
        assert info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_glyph_flags_are_exclusive(self, tmp_path):
        src = write_json(tmp_path / "d.json", [ERROR_REPORT])
        with pytest.raises(SystemExit) as info:
            main([src, "--ascii", "--unicode"])
        assert info.value.code == 2
