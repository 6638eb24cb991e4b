"""
A field of pipes, read as a grid of tiles. Somewhere there is exactly one 'S', the start,
which sits on a closed loop of pipe. How far along the loop is the point farthest from it?

	..F7.
	.FJ|.
	SJ.L7
	|F--J
	LJ...

The start is found by an index capture while the grid is being built, so the grammar
itself insists there is exactly one.
"""

from enum import Enum

from puzzleparse.prelude import *

NORTH, EAST, SOUTH, WEST = ORTHOGONAL

class Tile(Enum):
	VERTICAL = '|'
	HORIZONTAL = '-'
	NORTH_EAST = 'L'
	NORTH_WEST = 'J'
	SOUTH_WEST = '7'
	SOUTH_EAST = 'F'
	GROUND = '.'
	START = 'S'

CONNECTIONS = {
	Tile.VERTICAL: (NORTH, SOUTH),
	Tile.HORIZONTAL: (EAST, WEST),
	Tile.NORTH_EAST: (NORTH, EAST),
	Tile.NORTH_WEST: (NORTH, WEST),
	Tile.SOUTH_WEST: (SOUTH, WEST),
	Tile.SOUTH_EAST: (SOUTH, EAST),
}

field = Definition(
	assign('tiles', cells(cast=Tile, each=match(
		arm(Tile.START, index=index_into('start')),
		arm(ANY),
	))),
)

def _connects(tiles:Grid, point:Point) -> list[Point]:
	return [point + step for step in CONNECTIONS.get(tiles.get(point), ())]

def loop_length(text:str) -> int:
	tiles, start = field.parse(text).pick('tiles', 'start')
	previous, here = start, next((n for n in start.neighbours_ortho() if start in _connects(tiles, n)), None)
	if here is None: raise ValueError("no pipe connects to the start at %r" % (start,))
	length = 1
	while here != start:
		following = next((n for n in _connects(tiles, here) if n != previous), None)
		if following is None or (following != start and here not in _connects(tiles, following)):
			raise ValueError("the pipe loop is open at %r" % (here,))
		previous, here = here, following
		length += 1
	return length

def part1(text:str) -> int:
	return loop_length(text) // 2
