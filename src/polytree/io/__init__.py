"""Boundary file I/O for polytree.

This module reads boundary (.poly) files into domain contours. Inner rings
are read and discarded.

Key classes and functions:
- read_poly_file: Read the outer contours of a path or text stream
- PolyFileReader: Load a boundary file and inspect its contours
"""

from polytree.io.reader import PolyFileReader, is_file_source, read_poly_file

__all__ = [
    "PolyFileReader",
    "is_file_source",
    "read_poly_file",
]
