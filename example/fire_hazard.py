"""
A grid of a million lights, and a list of instructions for fiddling with rectangles of them:

	turn on 0,0 through 999,999
	toggle 0,0 through 999,0
	turn off 499,499 through 500,500

Each line is parsed by a nested definition. The verb is cut out with a regex (everything
up to the first digit) and mapped to an Action by a match, so an unknown verb is a loud
failure rather than a quiet misreading.
"""

from enum import Enum

from puzzleparse.prelude import *

class Action(Enum):
	TURN_ON = 'turn on'
	TURN_OFF = 'turn off'
	TOGGLE = 'toggle'

instruction = Definition(
	assign('action', matching=r'\D+', transform=match(
		("turn on ", Action.TURN_ON),
		("turn off ", Action.TURN_OFF),
		("toggle ", Action.TOGGLE),
	)),
	assign('x1', USIZE), ',', assign('y1', USIZE),
	" through ",
	assign('x2', USIZE), ',', assign('y2', USIZE),
	result=lambda action, x1, y1, x2, y2: (action, Point(x1, y1), Point(x2, y2)),
)

instructions = Definition(assign('instructions', split('\n', each=instruction)), result=lambda instructions: instructions)

SIZE = 1000

def _apply(instructions, on, off, toggle) -> int:
	rows = [[0] * SIZE for _ in range(SIZE)]
	effect = {Action.TURN_ON: on, Action.TURN_OFF: off, Action.TOGGLE: toggle}
	for action, top_left, bottom_right in instructions:
		fn = effect[action]
		for y in range(top_left.y, bottom_right.y + 1):
			row = rows[y]
			for x in range(top_left.x, bottom_right.x + 1):
				row[x] = fn(row[x])
	return sum(map(sum, rows))

def part1(text:str) -> int:
	return _apply(instructions.parse(text), lambda v: 1, lambda v: 0, lambda v: 1 - v)

def part2(text:str) -> int:
	return _apply(instructions.parse(text), lambda v: v + 1, lambda v: max(0, v - 1), lambda v: v + 2)
