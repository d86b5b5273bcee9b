"""Raw-material and product catalogues with production cost and sale price, CSV storage and a terminal menu."""

__version__ = "0.1.0"