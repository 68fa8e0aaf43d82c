"""
Rendering and traversal configuration.

All canvas constants live here so tests can shrink the canvas. Configs
serialize to plain JSON dicts; missing keys fall back to defaults.
"""

from typing import Dict, Any
from dataclasses import dataclass, field
from pathlib import Path
import json

from .canvas import Palette

REMAINDER_POLICIES = ("truncate", "distribute")


@dataclass
class RenderConfig:
    canvas_size: int = 400
    point_size: int = 12
    level_spacing: int = 50
    base_offset: int = 10
    frame_delay: int = 50
    # "truncate" drops the (x2 - x1) % k leftover pixels of a subdivision,
    # "distribute" hands them one each to the leftmost children
    remainder: str = "truncate"
    trailing_sweeps: bool = True
    palette: Palette = field(default_factory=Palette)

    def validate(self) -> "RenderConfig":
        """
        Raises:
            ValueError: on non-positive sizes or delay, negative spacing,
                or an unknown remainder policy
        """
        for name in ("canvas_size", "point_size", "frame_delay"):
            value = getattr(self, name)
            if not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        for name in ("level_spacing", "base_offset"):
            value = getattr(self, name)
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        if self.remainder not in REMAINDER_POLICIES:
            raise ValueError(
                f"Unknown remainder policy: {self.remainder}. Use {' or '.join(REMAINDER_POLICIES)}"
            )
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "canvas_size": self.canvas_size,
            "point_size": self.point_size,
            "level_spacing": self.level_spacing,
            "base_offset": self.base_offset,
            "frame_delay": self.frame_delay,
            "remainder": self.remainder,
            "trailing_sweeps": self.trailing_sweeps,
            "palette": [list(c) for c in self.palette.colors()],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "RenderConfig":
        defaults = cls()
        palette = defaults.palette
        if "palette" in d:
            palette = Palette.from_colors(d["palette"])
        return cls(
            canvas_size=d.get("canvas_size", defaults.canvas_size),
            point_size=d.get("point_size", defaults.point_size),
            level_spacing=d.get("level_spacing", defaults.level_spacing),
            base_offset=d.get("base_offset", defaults.base_offset),
            frame_delay=d.get("frame_delay", defaults.frame_delay),
            remainder=d.get("remainder", defaults.remainder),
            trailing_sweeps=d.get("trailing_sweeps", defaults.trailing_sweeps),
            palette=palette,
        ).validate()


def create_default_config() -> Dict[str, Any]:
    """Default configuration as a JSON-ready dict."""
    return RenderConfig().to_dict()


def load_config(path) -> RenderConfig:
    with open(path, 'r') as f:
        return RenderConfig.from_dict(json.load(f))


def save_config(config: RenderConfig, path) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    return path
