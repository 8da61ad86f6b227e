"""Classic algorithms on strings, arrays, grids, graphs, trees and search."""

__version__ = "0.1.0"