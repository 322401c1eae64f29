"""Unit tests for codefig.api.highlight.cmd_css."""

from codefig.api.highlight.cmd_css import cmd_css


def test_default_stylesheet(isolated_config, run_cmd):
    result = run_cmd(cmd_css)

    assert result.success is True
    assert result.output["style"] == "default"
    assert result.output["css_class"] == "highlight"
    assert ".highlight .k" in result.output["css"]


def test_style_override(isolated_config, run_cmd):
    result = run_cmd(cmd_css, style="monokai")

    assert result.success is True
    assert result.output["style"] == "monokai"
    assert "monokai" in result.result


def test_unknown_style_fails(isolated_config, run_cmd):
    result = run_cmd(cmd_css, style="no-such-style")

    assert result.success is False
    assert "Unknown Pygments style" in result.result
    assert result.output["css"] == ""


def test_uses_config_file(write_config, run_cmd, isolated_config):
    path = write_config({"highlight": {"css_class": "syntax", "style": "friendly"}})

    result = run_cmd(cmd_css, config_path=path)

    assert result.success is True
    assert result.output["css_class"] == "syntax"
    assert ".syntax .k" in result.output["css"]


def test_missing_config_file_fails(tmp_path, run_cmd):
    result = run_cmd(cmd_css, config_path=tmp_path / "missing.json")

    assert result.success is False
    assert "Configuration file not found" in result.result
