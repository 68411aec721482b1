"""Reader for boundary (.poly) files.

A .poly file starts with a free-form name line, followed by sections:

    australia
    1
       1.123E+02   -1.05E+01
       ...
    END
    -2
       ...
    END
    END

Each section opens with an integer id and ends with END; the file ends with a
final END. Sections with a negative id (or an osmosis-style ``!`` prefix) are
inner rings and are skipped, since holes are not supported.
"""

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import IO

from polytree.domain import Contour, Point
from polytree.exceptions import PolyFileError

PolySource = str | os.PathLike | IO[str]

_HEADER_RE = re.compile(r"^(!?)(-?\d+)")
_POINT_RE = re.compile(r"^\s+([0-9.Ee+-]+)\s+([0-9.Ee+-]+)")
_END_RE = re.compile(r"^END")


def is_file_source(source: object) -> bool:
    """Check if source refers to a .poly file rather than a contour."""
    return isinstance(source, (str, os.PathLike)) or hasattr(source, "readline")


def _parse_lines(lines: Iterable[str], origin: str) -> tuple[str | None, list[Contour]]:
    name: str | None = None
    contours: list[Contour] = []
    points: list[Point] = []
    is_hole = False

    for lineno, line in enumerate(lines, start=1):
        header = _HEADER_RE.match(line)
        if header:
            is_hole = bool(header.group(1)) or int(header.group(2)) < 0
            continue

        point = _POINT_RE.match(line)
        if point:
            try:
                points.append(Point(float(point.group(1)), float(point.group(2))))
            except ValueError as e:
                raise PolyFileError(origin, f"line {lineno}: bad coordinates") from e
            continue

        if _END_RE.match(line):
            if points and not is_hole:
                contours.append(tuple(points))
            points = []
            continue

        if lineno == 1:
            name = line.strip() or None

    return name, contours


def _read(source: PolySource) -> tuple[str | None, list[Contour]]:
    if hasattr(source, "readline"):
        origin = getattr(source, "name", "<stream>")
        try:
            return _parse_lines(source, str(origin))  # type: ignore[arg-type]
        except PolyFileError:
            raise
        except UnicodeDecodeError as e:
            raise PolyFileError(str(origin), "not valid UTF-8") from e
        except OSError as e:
            raise PolyFileError(str(origin), str(e)) from e

    path = Path(source)  # type: ignore[arg-type]
    try:
        with path.open("r", encoding="utf-8") as fh:
            return _parse_lines(fh, str(path))
    except PolyFileError:
        raise
    except UnicodeDecodeError as e:
        raise PolyFileError(str(path), "not valid UTF-8") from e
    except OSError as e:
        raise PolyFileError(str(path), e.strerror or str(e)) from e


def read_poly_file(source: PolySource) -> list[Contour]:
    """Read the outer contours of a .poly file.

    Args:
        source: Path to the file, or an open text stream

    Returns:
        Outer contours in file order, as stored (not closed)

    Raises:
        PolyFileError: If the file cannot be read
    """
    _, contours = _read(source)
    return contours


class PolyFileReader:
    """Loads a .poly file and exposes its outer contours.

    Example:
        with PolyFileReader(Path("boundary.poly")) as reader:
            for contour in reader.iter_contours():
                print(len(contour))
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the .poly file
        """
        self._path = path
        self._name: str | None = None
        self._contours: list[Contour] | None = None

    def load(self) -> None:
        """Read and parse the file.

        Raises:
            PolyFileError: If the file does not exist or cannot be read
        """
        self._name, self._contours = _read(self._path)

    def _require_loaded(self) -> list[Contour]:
        if self._contours is None:
            raise RuntimeError("Boundary not loaded. Call load() first.")
        return self._contours

    @property
    def name(self) -> str | None:
        """Boundary name from the first line of the file."""
        self._require_loaded()
        return self._name

    @property
    def contour_count(self) -> int:
        """Number of outer contours read."""
        return len(self._require_loaded())

    @property
    def point_count(self) -> int:
        """Total number of points over all outer contours."""
        return sum(len(c) for c in self._require_loaded())

    @property
    def contours(self) -> list[Contour]:
        """Outer contours in file order."""
        return list(self._require_loaded())

    def iter_contours(self) -> Iterator[Contour]:
        """Iterate over the outer contours."""
        yield from self._require_loaded()

    def close(self) -> None:
        """Drop the parsed contours."""
        self._name = None
        self._contours = None

    def __enter__(self) -> "PolyFileReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
