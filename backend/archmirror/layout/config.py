import os
from dataclasses import dataclass

# Importing the app config loads .env before LAYOUT_* values are read.
import archmirror.config  # noqa: F401


@dataclass(frozen=True)
class LayoutConfig:
    """
    Tuning for the spring relaxation. Distances are canvas units.

    target_length  rest length of an edge; longer edges pull, shorter push
    radius_factor  initial circle radius as a fraction of min(width, height)
    iterations     fixed number of relaxation passes (no convergence check)
    spring         fraction of the length deviation corrected per edge visit
    centering      fraction of the offset to the canvas center removed per pass
    """

    target_length: float = 140.0
    radius_factor: float = 0.35
    iterations: int = 80
    spring: float = 0.02
    centering: float = 0.001

    @classmethod
    def from_env(cls) -> "LayoutConfig":
        return cls(
            target_length=float(os.getenv("LAYOUT_TARGET_LENGTH", "140")),
            radius_factor=float(os.getenv("LAYOUT_RADIUS_FACTOR", "0.35")),
            iterations=int(os.getenv("LAYOUT_ITERATIONS", "80")),
            spring=float(os.getenv("LAYOUT_SPRING", "0.02")),
            centering=float(os.getenv("LAYOUT_CENTERING", "0.001")),
        )


DEFAULT_LAYOUT = LayoutConfig()
