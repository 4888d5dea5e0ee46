# renderer/settings.py
from dataclasses import dataclass, field, replace
from core.vector import Color

# Named sample/depth trade-offs, from fast previews to final frames.
QUALITY_LEVELS = {
    "draft": {"samples": 4, "bounces": 8},
    "preview": {"samples": 32, "bounces": 20},
    "final": {"samples": 200, "bounces": 50},
}

SHADING_MODES = ("path", "normals")


@dataclass
class RenderSettings:
    """Image size, sampling and reproducibility options for one render."""
    image_width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    background: Color = field(default_factory=lambda: Color(0, 0, 0))
    seed: int = 42
    workers: int = 1
    jitter: bool = True
    shading: str = "path"

    def __post_init__(self):
        if self.image_width <= 0:
            raise ValueError(f"image_width must be positive, got {self.image_width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.image_height <= 0:
            raise ValueError("aspect_ratio is too large for the image width")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.shading not in SHADING_MODES:
            raise ValueError(f"Unknown shading mode {self.shading!r}; expected one of {SHADING_MODES}")

    @property
    def image_height(self) -> int:
        return int(self.image_width / self.aspect_ratio)

    def with_quality(self, level: str) -> "RenderSettings":
        """Copy of these settings using a named quality level."""
        try:
            quality = QUALITY_LEVELS[level]
        except KeyError:
            raise ValueError(f"Unknown quality level {level!r}; expected one of {sorted(QUALITY_LEVELS)}") from None
        return replace(self, samples_per_pixel=quality["samples"], max_depth=quality["bounces"])
