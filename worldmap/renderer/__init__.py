"""Rendering subpackage.

Turns a classified world into layered documents. The renderer is split into:

* :mod:`worldmap.renderer.shapes` - polygon / text / rect primitives and the
  geometry → primitive conversion anchored at a cell origin.
* :mod:`worldmap.renderer.layers` - the lazily populated layer store that
  writes every primitive to its semantic layer and to the ``map`` composite.
* :mod:`worldmap.renderer.raster` - Pillow based PNG previews of a layer,
  handy for eyeballing large maps without an SVG viewer.
"""
