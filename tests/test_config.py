"""Tests for ScreenConfig and its YAML loader."""

import pytest
import yaml

from neuroclass.config import ScreenConfig, load_config, save_config
from neuroclass.viz.palette import THEMES


class TestScreenConfig:
    def test_defaults(self):
        config = ScreenConfig()
        assert config.title == "Neuron Classification"
        assert config.line_limit == 2
        assert (config.card_width, config.card_height) == (180, 180)
        assert config.colors == THEMES["light"]

    @pytest.mark.parametrize("field, value", [
        ("line_limit", 0),
        ("line_limit", True),
        ("card_width", -1),
        ("card_height", "tall"),
        ("title", ""),
        ("theme", "sepia"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValueError):
            ScreenConfig(**{field: value})

    def test_from_dict_unknown_key(self):
        with pytest.raises(KeyError, match="font_size"):
            ScreenConfig.from_dict({"font_size": 12})

    def test_from_dict_none(self):
        assert ScreenConfig.from_dict(None) == ScreenConfig()


class TestYaml:
    def test_load(self, tmp_path):
        path = tmp_path / "screen.yaml"
        path.write_text("theme: dark\nline_limit: 3\n")
        config = load_config(path)
        assert config.theme == "dark"
        assert config.line_limit == 3
        assert config.card_width == 180

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == ScreenConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- dark\n- light\n")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_save_then_load(self, tmp_path):
        config = ScreenConfig(title="Neurons", theme="dark", card_width=200)
        path = save_config(config, tmp_path / "out.yaml")
        with open(path) as f:
            assert yaml.safe_load(f)["card_width"] == 200
        assert load_config(path) == config


class TestThemeLookup:
    def test_colors_come_from_get_theme(self):
        from neuroclass.viz.palette import get_theme
        assert ScreenConfig(theme="dark").colors == get_theme("dark")

    def test_unknown_theme_message_lists_available(self):
        with pytest.raises(ValueError, match="Available"):
            ScreenConfig(theme="sepia")
