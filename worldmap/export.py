"""Artifact writer.

Persists each layer document as ``<layer>.svg`` (and optionally a
``<layer>.png`` preview) inside an output directory. Existing files are
overwritten.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from worldmap.errors import ExportError
from worldmap.renderer.layers import Document
from worldmap.renderer.raster import PreviewRenderer
from worldmap.types import LayerName

logger = logging.getLogger(__name__)

SVG_EXTENSION = ".svg"
PREVIEW_EXTENSION = ".png"


class SvgWriter:
    output_dir: Path
    preview: Optional[PreviewRenderer]

    def __init__(
        self,
        output_dir: Union[str, Path] = ".",
        preview: Optional[PreviewRenderer] = None,
    ):
        self.output_dir = Path(output_dir)
        self.preview = preview

    def path_for(self, name: LayerName, extension: str = SVG_EXTENSION) -> Path:
        return self.output_dir / f"{name}{extension}"

    def write(self, name: LayerName, document: Document) -> List[Path]:
        """Write ``document``; returns every file produced for the layer.

        Raises:
            ExportError: If the directory or a file cannot be written.
        """
        svg_path = self.path_for(name)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            svg_path.write_text(document.to_string(), encoding="utf-8")
        except OSError as e:
            raise ExportError(f"Cannot write {svg_path}: {e}") from e
        logger.info("Wrote layer %r (%d primitives) to %s", name, len(document), svg_path)
        paths = [svg_path]

        if self.preview is not None:
            png_path = self.path_for(name, PREVIEW_EXTENSION)
            try:
                self.preview.render(document).save(png_path)
            except OSError as e:
                raise ExportError(f"Cannot write {png_path}: {e}") from e
            paths.append(png_path)
        return paths
