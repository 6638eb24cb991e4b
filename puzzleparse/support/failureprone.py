"""
This module is all about showing where an extraction went wrong.

A message like "expected delimiter ',' found end of input" is a lot more useful when it
also shows the offending line with a row of carets under the spot where the cursor was.
The engine only ever deals in integer offsets into whatever string it was handed, so the
SourceText turns such an offset back into a row and a column, cuts out the line, and
draws the picture.

Line breaks are a funny thing. Unix calls for \n. Apple prior to OSx called for \r.
CP/M and its descendants call for \r\n. Unicode has a whole list.

Puzzle inputs overwhelmingly use \n, so the grid engine splits rows on 'unix' unless told
otherwise. Diagnostics use 'normal', which accepts any of the three common conventions.
The options are the keys of the LINEBREAK_MODE dictionary.
"""

import bisect, re

LINEBREAK_MODE = {
	'normal': re.compile(r'\r\n?|\n'),
	'unix': re.compile(r'\n'),
	'dos': re.compile(r'\r\n'),
	'apple': re.compile(r'\r'),
	'unicode': re.compile(r'\r\n|[\x0a-\x0d\x1c-\x1e\u0085\u2028\u2029]'),
}

def split_lines(text:str, line_breaks='unix') -> list[str]:
	""" Like str.split: a trailing line break yields a final empty line. """
	return LINEBREAK_MODE[line_breaks].split(text)

def illustration(line:str, column:int, width:int=0, *, margin='', caption="near here") -> str:
	"""
	The line, and under it a run of carets from the given column.
	At least one caret appears, even for an empty span or a column at the end of the line.
	Tabs in the line are reproduced under it so the carets land where they should.
	"""
	line = line.rstrip('\r\n')
	under = ''.join('\t' if c == '\t' else ' ' for c in margin + line[:column])
	carets = '^' * max(1, min(width, len(line) - column))
	return "%s%s\n%s%s %s" % (margin, line, under, carets, caption)

class SourceText:
	""" Some text, plus the means to find rows and columns in it. Line starts are found on demand. """
	def __init__(self, content:str, filename:str=None, line_breaks='normal'):
		self.content = content
		self.filename = filename
		self.line_breaks = line_breaks
		self.__starts = None

	def __line_starts(self) -> list[int]:
		if self.__starts is None:
			self.__starts = [0] + [m.end() for m in LINEBREAK_MODE[self.line_breaks].finditer(self.content)]
		return self.__starts

	def row_col(self, offset:int) -> tuple[int, int]:
		""" Zero-based row and column of a character offset. """
		starts = self.__line_starts()
		row = bisect.bisect_right(starts, offset) - 1
		return row, offset - starts[row]

	def line(self, row:int) -> str:
		""" Zero-based, with its line break (if any) still attached. """
		starts = self.__line_starts()
		stop = starts[row+1] if row+1 < len(starts) else len(self.content)
		return self.content[starts[row]:stop]

	def complaint(self, offset:int, width:int, message:str) -> str:
		row, col = self.row_col(offset)
		where = "At" if self.filename is None else "%s:" % self.filename
		heading = "%s line %d, column %d: %s" % (where, row + 1, col + 1, message)
		return heading + '\n' + illustration(self.line(row), col, width, margin=' >>> ')
