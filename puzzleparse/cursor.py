"""
The cursor: a position in a string which only ever moves forward.

This plays the role the Scanner plays in a lexer, minus the automaton. Sections take
turns consuming a prefix of whatever remains; once a character is behind the cursor,
nothing looks at it again.
"""

from .interface import TakeFailure

class Cursor:
	def __init__(self, text:str, at:int=0):
		self.__text = text
		self.__size = len(text)
		self.left = at

	@property
	def text(self) -> str:
		return self.__text

	def remaining(self) -> str:
		""" The unconsumed suffix of the text. """
		return self.__text[self.left:]

	def is_exhausted(self) -> bool:
		return self.left >= self.__size

	def advance_to(self, offset:int):
		""" Consume everything before the given offset. Going backwards is a bug in the caller. """
		assert self.left <= offset <= self.__size, (self.left, offset, self.__size)
		self.left = offset

	def advance_by(self, nr_chars:int):
		self.advance_to(self.left + nr_chars)

	def take_prefix(self, nr_chars:int) -> str:
		""" Consume and return exactly the next nr_chars characters. """
		if self.left + nr_chars > self.__size:
			raise TakeFailure(
				"couldn't take %d characters from %r" % (nr_chars, self.remaining()),
				text=self.__text, offset=self.left, width=self.__size - self.left,
			)
		start = self.left
		self.advance_by(nr_chars)
		return self.__text[start:self.left]

	def slice_to(self, offset:int) -> str:
		""" Consume and return the text between the cursor and the given offset. """
		start = self.left
		self.advance_to(offset)
		return self.__text[start:offset]
