"""Run configuration.

Paths and the cell size are explicit inputs rather than constants baked into
the driver. ``RenderConfig`` is immutable; derive variants with
``dataclasses.replace``.
"""

import logging
from dataclasses import dataclass

from worldmap.errors import ConfigError
from worldmap.types import DEFAULT_CELL_SIZE

DEFAULT_OUTPUT_DIR = "."
DEFAULT_PREVIEW_SIZE = 2048
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RenderConfig:
    """Configuration of one conversion run.

    Attributes:
        input_path: World-map XML file to read.
        output_dir: Directory receiving ``<layer>.svg`` files.
        cell_size: Physical size of one grid cell in world units.
        background: Add a white background rectangle (``background`` layer).
        strict: Reject unknown geometry tags instead of skipping them.
        preview: Also write a ``<layer>.png`` raster preview per layer.
        preview_size: Long edge of the raster previews, in pixels.
        log_level: Name of the logging level used by the CLI.
    """

    input_path: str
    output_dir: str = DEFAULT_OUTPUT_DIR
    cell_size: int = DEFAULT_CELL_SIZE
    background: bool = False
    strict: bool = True
    preview: bool = False
    preview_size: int = DEFAULT_PREVIEW_SIZE
    log_level: str = "INFO"

    def validate(self) -> "RenderConfig":
        if self.cell_size <= 0:
            raise ConfigError(f"cell_size must be positive, got {self.cell_size}")
        if self.preview_size <= 0:
            raise ConfigError(
                f"preview_size must be positive, got {self.preview_size}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {self.log_level!r}")
        return self

    @property
    def logging_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
