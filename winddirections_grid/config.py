"""
Configuration schema for the wind directions grid.

This module defines the grid style configuration (circle count, grid
stroke, label text) together with its named defaults. Configurations are
immutable and validated at construction; they can be built in code, from a
dict of styled attributes, or from a YAML file.
"""

import dataclasses
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Sequence

import supervision as sv
import yaml


DEFAULT_CIRCLE_COUNT = 3
DEFAULT_GRID_LINE_WIDTH = 1.0
DEFAULT_LABEL_TEXT_SIZE = 40.0
DEFAULT_GRID_COLOR_HEX = "#000000"
DEFAULT_LABEL_COLOR_HEX = "#000000"

# Styled attribute names accepted as aliases of the dataclass fields.
ATTRIBUTE_ALIASES = {
    "circles_number": "circle_count",
    "grid_size": "grid_line_width",
    "text_size": "label_text_size",
    "text_color": "label_color",
}


class InvalidConfigurationError(ValueError):
    """Raised when a grid configuration value is rejected."""
    pass


def parse_color(value: Any) -> sv.Color:
    """
    Convert a configuration value into a supervision Color.

    Accepts an existing ``sv.Color``, a hex string (``"#RRGGBB"`` or
    ``"#RGB"``) or an ``[r, g, b]`` sequence of 0-255 integers.

    Raises:
        InvalidConfigurationError: If the value is not a valid color
    """
    if isinstance(value, sv.Color):
        return value

    if isinstance(value, str):
        try:
            return sv.Color.from_hex(value)
        except ValueError as e:
            raise InvalidConfigurationError(f"Invalid hex color: {value!r}") from e

    if isinstance(value, Sequence) and len(value) == 3:
        channels = list(value)
        if all(
            isinstance(c, int) and not isinstance(c, bool) and 0 <= c <= 255
            for c in channels
        ):
            return sv.Color(r=channels[0], g=channels[1], b=channels[2])

    raise InvalidConfigurationError(
        f"Color must be a hex string or [r, g, b] in [0, 255], got {value!r}"
    )


def _black() -> sv.Color:
    return sv.Color(r=0, g=0, b=0)


@dataclass(frozen=True)
class GridConfig:
    """
    Immutable style configuration for one grid render.

    Attributes:
        circle_count: Number of rings between center and outer edge (>= 1)
        grid_line_width: Stroke width shared by rings and axis lines
        grid_color: Stroke color shared by rings and axis lines
        label_text_size: Font size of the N/E/S/W labels
        label_color: Fill and stroke color of the labels
        label_stroke_width: Outline width of the label glyphs

    Example:
        >>> config = GridConfig(circle_count=4, grid_color=sv.Color.from_hex("#3366ff"))
        >>> config.with_changes(label_text_size=24.0).label_text_size
        24.0
    """

    circle_count: int = DEFAULT_CIRCLE_COUNT
    grid_line_width: float = DEFAULT_GRID_LINE_WIDTH
    grid_color: sv.Color = field(default_factory=_black)
    label_text_size: float = DEFAULT_LABEL_TEXT_SIZE
    label_color: sv.Color = field(default_factory=_black)
    label_stroke_width: float = DEFAULT_GRID_LINE_WIDTH

    def __post_init__(self):
        """Validate grid configuration."""
        if isinstance(self.circle_count, bool) or not isinstance(self.circle_count, int):
            raise InvalidConfigurationError(
                f"circle_count must be an integer, got {self.circle_count!r}"
            )
        if self.circle_count < 1:
            raise InvalidConfigurationError(
                f"circle_count must be >= 1, got {self.circle_count}"
            )

        for name in ("grid_line_width", "label_text_size"):
            value = getattr(self, name)
            if not _is_number(value) or not math.isfinite(value) or value <= 0:
                raise InvalidConfigurationError(
                    f"{name} must be a positive number, got {value!r}"
                )

        if (
            not _is_number(self.label_stroke_width)
            or not math.isfinite(self.label_stroke_width)
            or self.label_stroke_width < 0
        ):
            raise InvalidConfigurationError(
                f"label_stroke_width must be >= 0, got {self.label_stroke_width!r}"
            )

        for name in ("grid_color", "label_color"):
            if not isinstance(getattr(self, name), sv.Color):
                raise InvalidConfigurationError(
                    f"{name} must be a supervision Color, got {getattr(self, name)!r}"
                )

    def with_changes(self, **changes: Any) -> "GridConfig":
        """
        Return a new validated configuration with some fields replaced.

        Color fields accept anything ``parse_color`` accepts.

        Raises:
            InvalidConfigurationError: On unknown fields or invalid values
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown grid configuration fields: {sorted(unknown)}"
            )

        for name in ("grid_color", "label_color"):
            if name in changes:
                changes[name] = parse_color(changes[name])

        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a YAML/JSON compatible dict (colors as hex)."""
        return {
            "circle_count": self.circle_count,
            "grid_line_width": self.grid_line_width,
            "grid_color": self.grid_color.as_hex(),
            "label_text_size": self.label_text_size,
            "label_color": self.label_color.as_hex(),
            "label_stroke_width": self.label_stroke_width,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GridConfig":
        """
        Build a configuration from a dict of styled attributes.

        Keys are the dataclass field names or the widget attribute aliases
        (``circles_number``, ``grid_size``, ``text_size``, ``text_color``).
        Missing keys fall back to the defaults.

        Raises:
            InvalidConfigurationError: On unknown keys or invalid values
        """
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Grid configuration must be a mapping, got {type(data).__name__}"
            )

        values: Dict[str, Any] = {}
        for key, value in data.items():
            name = ATTRIBUTE_ALIASES.get(key, key)
            if name in values:
                raise InvalidConfigurationError(
                    f"Grid configuration field '{name}' given more than once"
                )
            values[name] = value

        for name in ("grid_line_width", "label_text_size", "label_stroke_width"):
            if isinstance(values.get(name), int) and not isinstance(values[name], bool):
                values[name] = float(values[name])

        return default_config().with_changes(**values)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "GridConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            circle_count: 4
            grid_line_width: 2
            grid_color: "#444444"
            label_text_size: 32
            label_color: [200, 30, 30]

        An empty file yields the default configuration.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidConfigurationError: If the YAML is malformed or invalid
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Grid config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(f"Invalid YAML in {path}: {e}") from e

        return cls.from_dict(data or {})


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def default_config() -> GridConfig:
    """Fresh configuration holding the widget defaults."""
    return GridConfig(
        circle_count=DEFAULT_CIRCLE_COUNT,
        grid_line_width=DEFAULT_GRID_LINE_WIDTH,
        grid_color=sv.Color.from_hex(DEFAULT_GRID_COLOR_HEX),
        label_text_size=DEFAULT_LABEL_TEXT_SIZE,
        label_color=sv.Color.from_hex(DEFAULT_LABEL_COLOR_HEX),
        label_stroke_width=DEFAULT_GRID_LINE_WIDTH,
    )
