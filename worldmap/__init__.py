"""worldmap
===========

Render a tile-based world map (cells of point / polygon features with
attributes) into one SVG document per semantic layer plus a composite
``map`` document.

Typical use::

    from worldmap.decode import load_world
    from worldmap.pipeline import build_layers

    store, bounds, stats = build_layers(load_world("worldmap.xml"))
    print(store.get("map").to_string())

See :mod:`worldmap.pipeline` for the end-to-end driver and
:mod:`worldmap.style` for the classification rules.
"""

__version__ = "0.1.0"
