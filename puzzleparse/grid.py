"""
Rectangular grids of cells, addressed by points.

The cells engine produces one of these from a block of text. Puzzle solutions then
poke around in it by coordinate, so the Grid supports the usual mapping-ish access
with a Point as key, plus row-wise views for printing and comparison.

Coordinates are (x, y) = (column, row), with the origin at the top-left corner,
which is how a human reads a puzzle input off the screen.
"""

from typing import NamedTuple, Iterable, Iterator, Callable

class Point(NamedTuple):
	x: int
	y: int

	def __add__(self, other): return Point(self.x + other[0], self.y + other[1])
	def __sub__(self, other): return Point(self.x - other[0], self.y - other[1])

	def distance_ortho(self, other) -> int:
		""" Also known as Manhattan distance. """
		return abs(self.x - other[0]) + abs(self.y - other[1])

	def neighbours_ortho(self) -> list["Point"]:
		return [self + step for step in ORTHOGONAL]

	def neighbours_diag(self) -> list["Point"]:
		return [self + step for step in ORTHOGONAL + DIAGONAL]

ORTHOGONAL = (Point(0, -1), Point(1, 0), Point(0, 1), Point(-1, 0))
DIAGONAL = (Point(1, -1), Point(1, 1), Point(-1, 1), Point(-1, -1))


class Grid:
	"""
	Row-major storage of width*height cells.
	Two grids are equal when they have the same shape and the same cells.
	"""
	def __init__(self, width:int, height:int, cells:list):
		assert len(cells) == width * height, (width, height, len(cells))
		self.width, self.height = width, height
		self.__cells = cells

	@staticmethod
	def from_rows(rows:Iterable[Iterable]) -> "Grid":
		rows = [list(r) for r in rows]
		width = len(rows[0]) if rows else 0
		if any(len(r) != width for r in rows):
			raise ValueError("uneven grid row lengths: %r" % [len(r) for r in rows])
		return Grid(width, len(rows), [c for r in rows for c in r])

	@staticmethod
	def filled(width:int, height:int, value=None) -> "Grid":
		return Grid(width, height, [value] * (width * height))

	def __offset(self, point) -> int:
		x, y = point
		if 0 <= x < self.width and 0 <= y < self.height: return y * self.width + x
		raise IndexError(point)

	def __getitem__(self, point): return self.__cells[self.__offset(point)]
	def __setitem__(self, point, value): self.__cells[self.__offset(point)] = value

	def __contains__(self, point):
		x, y = point
		return 0 <= x < self.width and 0 <= y < self.height

	def get(self, point, default=None):
		return self[point] if point in self else default

	def points(self) -> Iterator[Point]:
		for y in range(self.height):
			for x in range(self.width):
				yield Point(x, y)

	__iter__ = points

	def __len__(self): return len(self.__cells)

	def values(self) -> Iterator:
		return iter(self.__cells)

	def items(self) -> Iterator[tuple[Point, object]]:
		return zip(self.points(), self.__cells)

	def rows(self) -> list[list]:
		w = self.width
		return [self.__cells[y*w:(y+1)*w] for y in range(self.height)]

	def find_all(self, predicate:Callable) -> list[Point]:
		return [p for p, v in self.items() if predicate(v)]

	def map(self, fn:Callable) -> "Grid":
		return Grid(self.width, self.height, [fn(v) for v in self.__cells])

	def __eq__(self, other):
		if not isinstance(other, Grid): return NotImplemented
		return (self.width, self.height) == (other.width, other.height) and list(self.values()) == list(other.values())

	def __repr__(self):
		return "Grid.from_rows(%r)" % self.rows()

	def display(self, render:Callable=str) -> str:
		""" A picture of the grid, one line per row. """
		return '\n'.join(''.join(map(render, row)) for row in self.rows())
