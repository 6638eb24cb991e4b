"""
This file aggregates the exception types and agreed constants which the extraction engine deals in.

There are exactly two kinds of trouble:

* A ConstructionError means the definition itself makes no sense. These surface while
  compiling, before any input is looked at, because a definition that cannot work should
  fail on the developer's machine rather than halfway through somebody's puzzle input.
* A ParseFailure means the input did not fit the definition. These are fatal: there is
  no recovery, no partial result. Whoever called `parse` gets the exception, with enough
  positional information to draw a picture of the spot where things went wrong.

The only soft failure anywhere in the system is the "attempt" wrapper on split elements,
which drops elements whose transform fails. It never swallows a ParseFailure.
"""

import sys
from typing import Optional

from .support import failureprone

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the extraction machinery. """

class ConstructionError(LanguageError):
	""" The sections or transforms of a definition are combined in a way that cannot work. """

class ParseFailure(LanguageError):
	"""
	Fatal mismatch between input and definition.

	The text and offset are filled in by whichever running definition first sees the
	exception, so a failure deep inside a split element still gets located relative to
	the string that definition was parsing.
	"""
	def __init__(self, message:str, *, text:Optional[str]=None, offset:Optional[int]=None, width:int=0):
		super().__init__(message)
		self.message = message
		self.text, self.offset, self.width = text, offset, width

	def __str__(self):
		return self.message

	def is_located(self):
		return self.text is not None

	def locate(self, text:str, offset:int, width:int=0):
		""" Attach position information, unless some inner definition already did. """
		if not self.is_located():
			self.text, self.offset, self.width = text, offset, width
		return self

	@property
	def remaining(self) -> Optional[str]:
		""" The unconsumed input at the time of failure. """
		if self.text is None: return None
		return self.text[self.offset:]

	def complaint(self, filename:str=None) -> str:
		""" The message, plus an illustrated excerpt of the input if the failure has been located. """
		if not self.is_located(): return self.message
		return failureprone.SourceText(self.text, filename=filename).complaint(self.offset, self.width, self.message)

	def emit(self, filename:str=None):
		""" Print to standard error the generated complaint. """
		print(self.complaint(filename), file=sys.stderr)

class LiteralNotFound(ParseFailure):
	""" A required prefix or delimiter is not where the definition says it should be. """

class TakeFailure(ParseFailure):
	""" A fixed-width, matching, or capturing assignment could not get its text. """

class UnparsedInput(ParseFailure):
	""" Input remains after the last section. """

class TransformFailure(ParseFailure):
	""" A typecast, call, or other transform raised on a value it was not prepared for. """

class UnmatchedValue(ParseFailure):
	""" No arm of a match accepted the value. """

class IndexCardinality(ParseFailure):
	""" An index capture was set too often, or a required one never got set. """

class UnevenGrid(ParseFailure):
	""" The rows of a cell grid differ in length. """

class SizeMismatch(ParseFailure):
	""" A fixed-size destination got the wrong number of elements. """


class _Sentinel:
	""" Named singletons read better in a repr than a bare object() does. """
	def __init__(self, name): self.__name = name
	def __repr__(self): return self.__name

KEEP = _Sentinel('KEEP') # A match arm with this result passes the value through unchanged.
DROP = _Sentinel('DROP') # What an attempted transform produces in place of a failed element.
ITERATOR = _Sentinel('ITERATOR') # Split destination: produce a lazy single-pass iterator.
