# core/settings.py
from dataclasses import dataclass, replace

# Named quality levels; CLI flags override individual fields.
QUALITY_PRESETS = {
    "preview": {"width": 200, "samples_per_pixel": 10, "max_depth": 8},
    "balanced": {"width": 300, "samples_per_pixel": 100, "max_depth": 30},
    "final": {"width": 600, "samples_per_pixel": 500, "max_depth": 50},
}

AXIS_MODES = ("random", "cycle")


@dataclass(frozen=True)
class RenderSettings:
    """
    Parameters of one render: image size, samples and bounces per pixel, worker count and
    the seed every random stream is derived from.
    """
    width: int = 300
    aspect_ratio: float = 1.0
    samples_per_pixel: int = 100
    max_depth: int = 30
    workers: int = 1
    seed: int = 0
    axis_mode: str = "random"

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.axis_mode not in AXIS_MODES:
            raise ValueError(f"axis_mode must be one of {AXIS_MODES}, got {self.axis_mode!r}")

    @property
    def height(self) -> int:
        return max(1, int(self.width / self.aspect_ratio))

    @classmethod
    def from_preset(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_PRESETS:
            raise ValueError(f"Unknown quality preset {name!r}; choose from {sorted(QUALITY_PRESETS)}")
        values = dict(QUALITY_PRESETS[name])
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_overrides(self, **overrides) -> "RenderSettings":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
