"""Points, vectors, compass directions and rectangular character grids."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


@dataclass(frozen=True)
class Vector:
    """A displacement on the grid; y grows downwards."""

    dx: int
    dy: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.dx + other.dx, self.dy + other.dy)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    def __mul__(self, factor: int) -> Vector:
        return Vector(self.dx * factor, self.dy * factor)

    __rmul__ = __mul__

    def rotate_clockwise(self) -> Vector:
        """Turn the vector a quarter turn to the right."""
        return Vector(-self.dy, self.dx)


@dataclass(frozen=True)
class Point:
    """A square's coordinates on the grid."""

    x: int
    y: int

    def __add__(self, vector: Vector) -> Point:
        return Point(self.x + vector.dx, self.y + vector.dy)

    def __sub__(self, other: Union[Point, Vector]) -> Union[Vector, Point]:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        return Point(self.x - other.dx, self.y - other.dy)


class Direction(Enum):
    """The four compass directions, in clockwise order."""

    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @property
    def vector(self) -> Vector:
        return Vector(*self.value)


class Grid:
    """A rectangular grid of single-character squares."""

    def __init__(self, squares: Iterable[str], width: int) -> None:
        self._squares = list(squares)
        if width < 0:
            raise ValueError("grid width must not be negative")
        if width == 0:
            if self._squares:
                raise ValueError("a grid of width 0 cannot hold squares")
            self.height = 0
        else:
            if len(self._squares) % width:
                raise ValueError("square count is not a multiple of the width")
            self.height = len(self._squares) // width
        self.width = width

    def _index(self, point: Point) -> Optional[int]:
        if 0 <= point.x < self.width and 0 <= point.y < self.height:
            return point.y * self.width + point.x
        return None

    def get(self, point: Point) -> Optional[str]:
        """Return the square at point, or None when it lies outside the grid."""
        index = self._index(point)
        return None if index is None else self._squares[index]

    def set(self, point: Point, value: str) -> None:
        index = self._index(point)
        if index is None:
            raise IndexError(f"{point} lies outside the grid")
        self._squares[index] = value

    def items(self) -> Iterator[tuple[Point, str]]:
        """Yield every square with its point, row by row."""
        for index, square in enumerate(self._squares):
            yield Point(index % self.width, index // self.width), square

    def adjacent_points(self, point: Point) -> list[Point]:
        """The in-bounds neighbours of point, in the order N, E, S, W."""
        neighbours = (point + direction.vector for direction in Direction)
        return [neighbour for neighbour in neighbours if self._index(neighbour) is not None]

    def find(self, value: str) -> Optional[Point]:
        """The first point holding value, or None."""
        return next((point for point, square in self.items() if square == value), None)

    def copy(self) -> Grid:
        return Grid(self._squares, self.width)

    def with_square(self, point: Point, value: str) -> Grid:
        """A copy of the grid with one square replaced."""
        grid = self.copy()
        grid.set(point, value)
        return grid

    def __iter__(self) -> Iterator[str]:
        return iter(self._squares)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.width == other.width and self._squares == other._squares

    def __str__(self) -> str:
        rows = (
            "".join(self._squares[start:start + self.width])
            for start in range(0, len(self._squares), self.width or 1)
        )
        return "\n".join(rows)


def parse_grid(text: str) -> Grid:
    """Build a grid from lines of equal length; trailing blank lines are ignored."""
    rows = text.splitlines()
    while rows and not rows[-1]:
        rows.pop()
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise ValueError("grid rows differ in length")
    return Grid("".join(rows), width)


def make_grid(fill: str, width: int, height: int) -> Grid:
    """A width by height grid where every square holds fill."""
    if height < 0:
        raise ValueError("grid height must not be negative")
    return Grid([fill] * (width * height), width)