"""Writer layer: primitive packing, axis order, strategies, and the Writer facade."""

from spatialwriter.writer.facade import Writer

__all__ = ["Writer"]
