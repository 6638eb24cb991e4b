"""
Reading a block of text as a rectangular grid, one value per character.

Rows are separated by line breaks (Unix style unless told otherwise) and must all have
the same length. There is deliberately no forgiveness about a trailing line break: if
the block ends with one, the last row is empty and the grid is uneven. Cut the block
out of the input with a delimiter that swallows the final newline instead.

The pipeline is the same as for a split, except that nothing may be dropped: a grid
with holes in it is not a grid. Positions are Points, (x=column, y=row).
"""

import re

from .interface import LanguageError, ConstructionError, UnevenGrid
from .support import failureprone
from .grid import Point, Grid
from .split import Collecting
from .transform import Site, TRANSFORM_ERRORS, failure_in, as_transform


class Cells(Collecting):
	def __init__(self, *, indexed:bool, cast, each, line_breaks:str):
		if line_breaks not in failureprone.LINEBREAK_MODE:
			raise ConstructionError("Unknown line break mode %r; choose from %r" % (line_breaks, sorted(failureprone.LINEBREAK_MODE)))
		self.indexed = bool(indexed)
		self.cast = as_transform(cast)
		self.each = as_transform(each)
		self.line_breaks = line_breaks

	def check(self, top=False):
		for stage in self.children():
			if stage.fallible:
				raise ConstructionError("%r: cells cannot drop elements, so %r is not allowed here." % (self, stage))
		super().check(top)

	def run(self, text):
		if isinstance(text, re.Match): text = text.group(0)
		rows = failureprone.split_lines(text, self.line_breaks)
		width = len(rows[0])
		if any(len(row) != width for row in rows):
			raise UnevenGrid("uneven grid row lengths: %r" % [len(row) for row in rows])
		slots = self._slots()
		cast, each, indexed = self.cast, self.each, self.indexed
		values = []
		for y, row in enumerate(rows):
			for x, piece in enumerate(row):
				point = Point(x, y)
				try:
					item = piece if cast is None else cast.apply(piece)
					value = (point, item) if indexed else item
					if each is not None: value = each.apply(value, Site(point, slots))
				except LanguageError: raise
				except TRANSFORM_ERRORS as ex:
					raise failure_in("couldn't transform cell %r at %r" % (piece, point), ex) from ex
				values.append(value)
		return Grid(width, len(rows), values), self._finish(slots)

	def __repr__(self):
		parts = ['indexed'] if self.indexed else []
		if self.cast is not None: parts.append('cast=%r' % self.cast)
		if self.each is not None: parts.append('each=%r' % self.each)
		return "cells(%s)" % ' '.join(parts)


def cells(*, indexed=False, cast=None, each=None, line_breaks='unix') -> Cells:
	return Cells(indexed=indexed, cast=cast, each=each, line_breaks=line_breaks)
