"""Unit tests for codefig.api.config.CodefigConfig module."""

import pytest

from codefig.api.config.CodefigConfig import CodefigConfig
from codefig.api.config.HighlightConfig import HighlightConfig
from codefig.api.config.LogConfig import LogConfig


class TestDefaults:
    def test_defaults(self):
        config = CodefigConfig()
        assert config.highlight == HighlightConfig(css_class="highlight", style="default", default_lexer="text")
        assert config.log == LogConfig(level="WARNING", file=None)

    def test_load_without_any_file_uses_defaults(self, isolated_config):
        assert CodefigConfig.load() == CodefigConfig()


class TestLoad:
    def test_explicit_path(self, write_config):
        path = write_config({"highlight": {"style": "monokai"}, "log": {"level": "DEBUG"}})

        config = CodefigConfig.load(path)

        assert config.highlight.style == "monokai"
        assert config.highlight.css_class == "highlight"
        assert config.log.level == "DEBUG"

    def test_default_file_in_working_directory(self, isolated_config, write_config):
        write_config({"highlight": {"css_class": "syntax"}})

        assert CodefigConfig.load().highlight.css_class == "syntax"

    def test_env_var_path(self, isolated_config, write_config, monkeypatch):
        path = write_config({"highlight": {"default_lexer": "bash"}}, name="other.json")
        monkeypatch.setenv("CODEFIG_CONFIG", str(path))

        assert CodefigConfig.get_config_path() == path.resolve()
        assert CodefigConfig.load().highlight.default_lexer == "bash"

    def test_explicit_missing_path_raises(self, tmp_path):
        with pytest.raises(ValueError, match="Configuration file not found"):
            CodefigConfig.load(tmp_path / "missing.json")

    def test_invalid_json_raises(self, tmp_path):
        path = tmp_path / "codefig.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            CodefigConfig.load(path)


class TestValidation:
    def test_unknown_style(self):
        with pytest.raises(ValueError, match="highlight.style: .*Unknown Pygments style"):
            CodefigConfig.from_dict({"highlight": {"style": "no-such-style"}})

    def test_unknown_default_lexer(self):
        with pytest.raises(ValueError, match="highlight.default_lexer: .*Unknown Pygments lexer"):
            CodefigConfig.from_dict({"highlight": {"default_lexer": "no-such-lexer"}})

    def test_empty_css_class(self):
        with pytest.raises(ValueError, match="highlight.css_class"):
            CodefigConfig.from_dict({"highlight": {"css_class": ""}})

    def test_unknown_log_level(self):
        with pytest.raises(ValueError, match="log.level"):
            CodefigConfig.from_dict({"log": {"level": "LOUD"}})

    def test_extra_section_forbidden(self):
        with pytest.raises(ValueError, match="Configuration validation error: themes"):
            CodefigConfig.from_dict({"themes": {}})

    def test_to_dict_round_trip(self, tmp_path):
        config = CodefigConfig.from_dict({"log": {"file": str(tmp_path / "codefig.log")}})

        data = config.to_dict()

        assert data["log"]["file"] == str(tmp_path / "codefig.log")
        assert CodefigConfig.from_dict(data) == config
