"""
Configuration settings for the path tracer
"""
import logging
from dataclasses import dataclass
from typing import Optional

TONE_MAPPINGS = ("gamma", "reinhard")

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


@dataclass
class RenderConfig:
    """Image size and sampling settings for one render."""
    width: int = 400
    aspect_ratio: float = 16.0 / 9.0
    samples_per_pixel: int = 100
    max_depth: int = 50
    workers: int = 1
    seed: Optional[int] = None
    tone_mapping: str = "gamma"
    output: str = "image.png"

    def __post_init__(self):
        if self.width <= 0:
            raise ValueError(f"width must be positive, got {self.width}")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.samples_per_pixel <= 0:
            raise ValueError(f"samples_per_pixel must be positive, got {self.samples_per_pixel}")
        if self.max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {self.max_depth}")
        if self.workers <= 0:
            raise ValueError(f"workers must be positive, got {self.workers}")
        if self.tone_mapping not in TONE_MAPPINGS:
            raise ValueError(f"Unknown tone mapping {self.tone_mapping!r}; "
                             f"expected one of {', '.join(TONE_MAPPINGS)}")

    @property
    def height(self) -> int:
        return max(1, int(self.width / self.aspect_ratio))


def configure_logging(level: int = logging.INFO):
    logging.basicConfig(level=level, format=LOG_FORMAT)
