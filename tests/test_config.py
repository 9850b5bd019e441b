"""Tests for configuration loading and access."""

import logging

from devtoolkit.utils.config import DEFAULT_CONFIG, ConfigManager


class TestDefaults:
    def test_default_values(self):
        config = ConfigManager()

        assert config.get("console.color") == "auto"
        assert config.get("console.stream") == "stdout"
        assert config.get("smart_exception.print_backtrace") is True
        assert config.get("smart_exception.suggest_solution") is True

    def test_missing_key_returns_default(self):
        config = ConfigManager()

        assert config.get("console.width") is None
        assert config.get("console.color.shade", "none") == "none"

    def test_set_does_not_touch_module_defaults(self):
        config = ConfigManager()
        config.set("console.color", "never")

        assert DEFAULT_CONFIG["console"]["color"] == "auto"
        assert ConfigManager().get("console.color") == "auto"

    def test_set_creates_nested_sections(self):
        config = ConfigManager()
        config.set("extra.section.flag", True)

        assert config.get("extra.section.flag") is True


class TestYamlFiles:
    def test_file_values_merge_with_defaults(self, tmp_path):
        path = tmp_path / "devtoolkit.yaml"
        path.write_text("console:\n  color: always\nsmart_exception:\n  print_backtrace: false\n")

        config = ConfigManager(path)

        assert config.get("console.color") == "always"
        assert config.get("console.stream") == "stdout"
        assert config.get("smart_exception.print_backtrace") is False
        assert config.get("smart_exception.suggest_solution") is True

    def test_missing_file_keeps_defaults(self, tmp_path, caplog):
        config = ConfigManager(tmp_path / "absent.yaml")

        assert config.to_dict() == DEFAULT_CONFIG
        assert "Config file not found" in caplog.text

    def test_invalid_yaml_keeps_defaults(self, tmp_path, caplog):
        path = tmp_path / "broken.yaml"
        path.write_text("console: [unclosed\n")

        with caplog.at_level(logging.ERROR, logger="devtoolkit.utils.config"):
            config = ConfigManager(path)

        assert config.to_dict() == DEFAULT_CONFIG
        assert "Failed to load config" in caplog.text

    def test_non_mapping_yaml_keeps_defaults(self, tmp_path, caplog):
        path = tmp_path / "list.yaml"
        path.write_text("- console\n- smart_exception\n")

        config = ConfigManager(path)

        assert config.to_dict() == DEFAULT_CONFIG
        assert "must contain a mapping" in caplog.text

    def test_empty_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert ConfigManager(path).to_dict() == DEFAULT_CONFIG

    def test_saved_file_can_be_loaded(self, tmp_path):
        path = tmp_path / "saved.yaml"
        config = ConfigManager()
        config.set("console.mirror_to_logging", True)

        config.save_config(path)

        assert ConfigManager(path).get("console.mirror_to_logging") is True
