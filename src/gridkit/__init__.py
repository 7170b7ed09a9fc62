"""gridkit - Region segmentation and shortest paths on 2-D grids.

gridkit is a small library with a CLI for two grid algorithms: splitting a
labeled grid into connected regions with their area, perimeter and side
count, and finding shortest paths over a graph whose adjacency is decided by
a predicate.

Example:
    $ gridkit regions garden.txt --verbose

This prints every region of garden.txt with its measurements and the total
price (area times perimeter) and bulk price (area times sides).
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
