from __future__ import annotations

import io
import json

import pytest

from minitemplate.cli import main


@pytest.fixture
def template_file(tmp_path):
    path = tmp_path / "page.txt"
    path.write_text("{{#items}}<{{.}}>{{/items}}{{^items}}empty{{/items}}", encoding="utf-8")
    return path


def test_renders_json_data(tmp_path, template_file, capsys):
    data = tmp_path / "data.json"
    data.write_text(json.dumps({"items": ["a", "b"]}), encoding="utf-8")

    assert main([str(template_file), str(data)]) == 0
    assert capsys.readouterr().out == "<a><b>"


def test_renders_toml_data(tmp_path, template_file, capsys):
    data = tmp_path / "data.toml"
    data.write_text('items = ["x"]\n', encoding="utf-8")

    assert main([str(template_file), str(data)]) == 0
    assert capsys.readouterr().out == "<x>"


def test_missing_data_is_empty(template_file, capsys):
    assert main([str(template_file)]) == 0
    assert capsys.readouterr().out == "empty"


def test_writes_output_file(tmp_path, template_file):
    out = tmp_path / "out.txt"
    assert main([str(template_file), "-o", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "empty"


def test_reads_template_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hi {{name}}"))
    assert main(["-"]) == 0
    assert capsys.readouterr().out == "Hi {{name}}"


def test_custom_delimiters_and_escape(tmp_path, capsys):
    template = tmp_path / "t.html"
    template.write_text("<p><%msg%></p>", encoding="utf-8")
    data = tmp_path / "d.json"
    data.write_text(json.dumps({"msg": "a < b"}), encoding="utf-8")

    args = [str(template), str(data), "--open", "<%", "--close", "%>", "--escape", "html"]
    assert main(args) == 0
    assert capsys.readouterr().out == "<p>a &lt; b</p>"


def test_config_file(tmp_path, capsys):
    template = tmp_path / "t.txt"
    template.write_text("[[#a]]x[[/b]]", encoding="utf-8")
    config = tmp_path / "render.toml"
    config.write_text(
        '[delimiters]\nopen = "[["\nclose = "]]"\n[render]\nstrict_block_names = true\n',
        encoding="utf-8",
    )

    assert main([str(template), "--config", str(config)]) == 1
    assert "Mismatched" in capsys.readouterr().err


def test_strict_flag(tmp_path, capsys):
    template = tmp_path / "t.txt"
    template.write_text("{{#a}}x{{/b}}", encoding="utf-8")
    assert main([str(template), "--strict"]) == 1
    assert capsys.readouterr().err.startswith("error: ")


def test_template_errors_exit_1(tmp_path, capsys):
    template = tmp_path / "bad.txt"
    template.write_text("{{#b}}body", encoding="utf-8")

    assert main([str(template)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Missing closing block for: {{#b}}" in captured.err


def test_bad_data_file_exits_1(tmp_path, template_file, capsys):
    data = tmp_path / "data.json"
    data.write_text("{not json", encoding="utf-8")
    assert main([str(template_file), str(data)]) == 1
    assert "error:" in capsys.readouterr().err


def test_missing_template_exits_1(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_check_valid(template_file):
    assert main([str(template_file), "--check"]) == 0


def test_check_reports_errors(tmp_path, capsys):
    template = tmp_path / "t.txt"
    template.write_text("{{#a}}\n{{/b}}{{/c}}", encoding="utf-8")

    assert main([str(template), "--check"]) == 1
    err = capsys.readouterr().err.splitlines()
    assert len(err) == 2
    assert "Mismatched '{{/b}}'" in err[0]
    assert "Unexpected '{{/c}}'" in err[1]


@pytest.mark.parametrize("flag", ["--open", "--close"])
def test_empty_delimiter_is_rejected(template_file, capsys, flag):
    assert main([str(template_file), flag, ""]) == 1
    assert "Delimiters must be non-empty" in capsys.readouterr().err


def test_unwritable_output_exits_1(tmp_path, template_file, capsys):
    out = tmp_path / "missing-dir" / "out.txt"
    assert main([str(template_file), "-o", str(out)]) == 1
    assert capsys.readouterr().err.startswith("error: ")
