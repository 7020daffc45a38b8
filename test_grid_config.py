"""
Test Grid Configuration
=======================

Defaults, validation, styled-attribute aliases and YAML loading.

Usage:
    pytest test_grid_config.py
"""

import math

import pytest
import supervision as sv

from winddirections_grid import (
    DEFAULT_CIRCLE_COUNT,
    DEFAULT_GRID_LINE_WIDTH,
    DEFAULT_LABEL_TEXT_SIZE,
    GridConfig,
    InvalidConfigurationError,
    default_config,
    parse_color,
)


def test_defaults():
    config = default_config()

    assert config.circle_count == DEFAULT_CIRCLE_COUNT == 3
    assert config.grid_line_width == DEFAULT_GRID_LINE_WIDTH == 1.0
    assert config.label_text_size == DEFAULT_LABEL_TEXT_SIZE == 40.0
    assert config.grid_color == sv.Color(r=0, g=0, b=0)
    assert config.label_color == sv.Color(r=0, g=0, b=0)
    assert config.label_stroke_width == DEFAULT_GRID_LINE_WIDTH
    assert GridConfig() == config


def test_default_factory_returns_independent_instances():
    a = default_config()
    b = default_config()

    assert a == b
    assert a.grid_color is not b.grid_color


@pytest.mark.parametrize("circle_count", [0, -1, 2.5, True, "3"])
def test_invalid_circle_count(circle_count):
    with pytest.raises(InvalidConfigurationError):
        GridConfig(circle_count=circle_count)


@pytest.mark.parametrize(
    "field_name,value",
    [
        ("grid_line_width", 0),
        ("grid_line_width", -1.0),
        ("grid_line_width", math.nan),
        ("label_text_size", 0.0),
        ("label_text_size", math.inf),
        ("label_stroke_width", -0.5),
        ("grid_color", "#000000"),
        ("label_color", (0, 0, 0)),
    ],
)
def test_invalid_field_values(field_name, value):
    with pytest.raises(InvalidConfigurationError):
        GridConfig(**{field_name: value})


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfigurationError, ValueError)


def test_zero_label_stroke_width_allowed():
    assert GridConfig(label_stroke_width=0.0).label_stroke_width == 0.0


def test_with_changes_returns_new_validated_config():
    config = GridConfig()
    changed = config.with_changes(circle_count=6, grid_color="#336699")

    assert changed.circle_count == 6
    assert changed.grid_color == sv.Color(r=0x33, g=0x66, b=0x99)
    assert config.circle_count == 3

    with pytest.raises(InvalidConfigurationError):
        config.with_changes(circle_count=0)
    with pytest.raises(InvalidConfigurationError):
        config.with_changes(line_colour="#000000")


def test_parse_color():
    assert parse_color("#ff0000") == sv.Color(r=255, g=0, b=0)
    assert parse_color([0, 128, 255]) == sv.Color(r=0, g=128, b=255)
    assert parse_color(sv.Color(r=1, g=2, b=3)) == sv.Color(r=1, g=2, b=3)

    for bad in ["red-ish", "#12345", [0, 0], [0, 0, 256], [0.5, 0, 0], 42]:
        with pytest.raises(InvalidConfigurationError):
            parse_color(bad)


def test_from_dict_field_names():
    config = GridConfig.from_dict({
        "circle_count": 5,
        "grid_line_width": 2,
        "grid_color": "#101010",
        "label_text_size": 20,
        "label_color": [255, 255, 255],
        "label_stroke_width": 0,
    })

    assert config.circle_count == 5
    assert config.grid_line_width == 2.0
    assert isinstance(config.grid_line_width, float)
    assert config.grid_color == sv.Color(r=16, g=16, b=16)
    assert config.label_text_size == 20.0
    assert config.label_color == sv.Color(r=255, g=255, b=255)
    assert config.label_stroke_width == 0.0


def test_from_dict_widget_attribute_aliases():
    config = GridConfig.from_dict({
        "circles_number": 2,
        "grid_size": 3,
        "grid_color": "#00ff00",
        "text_size": 12,
        "text_color": "#0000ff",
    })

    assert config.circle_count == 2
    assert config.grid_line_width == 3.0
    assert config.label_text_size == 12.0
    assert config.label_color == sv.Color(r=0, g=0, b=255)
    # Unspecified fields keep their defaults
    assert config.label_stroke_width == DEFAULT_GRID_LINE_WIDTH


def test_from_dict_rejects_bad_input():
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_dict({"circle_count": 2, "circles_number": 3})
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_dict({"ring_count": 2})
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_dict([("circle_count", 2)])
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_dict({"circles_number": 0})


def test_to_dict_serializes_colors_as_hex():
    config = GridConfig(grid_color=sv.Color(r=255, g=128, b=0))
    data = config.to_dict()

    assert data["grid_color"] == "#ff8000"
    assert data["label_color"] == "#000000"
    assert GridConfig.from_dict(data) == config


def test_from_yaml(tmp_path):
    path = tmp_path / "grid.yaml"
    path.write_text(
        "circles_number: 4\n"
        "grid_size: 2\n"
        "grid_color: '#4a4a4a'\n"
        "label_text_size: 32\n"
        "label_color: [200, 30, 30]\n"
    )

    config = GridConfig.from_yaml(path)

    assert config.circle_count == 4
    assert config.grid_line_width == 2.0
    assert config.grid_color == sv.Color(r=0x4a, g=0x4a, b=0x4a)
    assert config.label_text_size == 32.0
    assert config.label_color == sv.Color(r=200, g=30, b=30)


def test_from_yaml_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert GridConfig.from_yaml(path) == default_config()


def test_from_yaml_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        GridConfig.from_yaml(tmp_path / "missing.yaml")

    broken = tmp_path / "broken.yaml"
    broken.write_text("circle_count: [1, 2\n")
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_yaml(broken)

    invalid = tmp_path / "invalid.yaml"
    invalid.write_text("circle_count: 0\n")
    with pytest.raises(InvalidConfigurationError):
        GridConfig.from_yaml(invalid)


if __name__ == "__main__":
    raise SystemExit(pytest.main([__file__, "-v"]))
