"""Domain layer: geometry value objects, type tags, and GeoJSON input.

This layer depends only on stdlib and :mod:`spatialwriter.errors`.
It must never import from writer, services, infrastructure, commands, or config.
"""
