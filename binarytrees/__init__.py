"""Binary trees of integers with parent links, traversals, measurements, relatives and drawing."""

__version__ = "0.1.0"