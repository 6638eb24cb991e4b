"""
Literals: the fixed bits of text between the interesting bits.

A literal plays one of two roles, decided by its position in the definition:

* As a prefix, it must appear exactly at the cursor. This is what a literal does when it
  opens the definition, or when it follows another literal, or when it follows an
  assignment that knows its own extent (take, matching, capturing).
* As a boundary, it ends the whole-match assignment in front of it. The first occurrence
  at or after the cursor wins; whatever lies between becomes the assignment's text.

Either way, the literal's own text is consumed and thrown away.

Regular expressions are always applied to the remaining text as a fresh string,
so a '^' in the pattern means "at the cursor", not "at the start of the input".
"""

import re
from typing import Union

from .cursor import Cursor
from .interface import LiteralNotFound

class Literal:
	""" Abstract: subclasses decide how to find themselves in the remaining text. """

	def find_in(self, text:str):
		""" Return (start, end) of the first occurrence in text, or None. """
		raise NotImplementedError(type(self))

	def at_start_of(self, text:str):
		""" Return the end of an occurrence at position zero, or None. """
		raise NotImplementedError(type(self))

	def strip_prefix(self, cursor:Cursor):
		rest = cursor.remaining()
		end = self.at_start_of(rest)
		if end is None:
			raise LiteralNotFound(
				"expected literal %s at start of %r" % (self.describe(), rest),
				text=cursor.text, offset=cursor.left, width=len(rest),
			)
		cursor.advance_by(end)

	def find_boundary(self, cursor:Cursor) -> str:
		""" Consume through the first occurrence; return the text before it. """
		rest = cursor.remaining()
		found = self.find_in(rest)
		if found is None:
			raise LiteralNotFound(
				"expected delimiter %s, found end of input in %r" % (self.describe(), rest),
				text=cursor.text, offset=cursor.left, width=len(rest),
			)
		start, end = found
		before = cursor.slice_to(cursor.left + start)
		cursor.advance_by(end - start)
		return before

	def resolve(self, bindings) -> "Literal":
		""" Most literals are what they are. Back-references need the bindings made so far. """
		return self

	def describe(self) -> str:
		raise NotImplementedError(type(self))

	def __repr__(self):
		return "%s(%s)" % (type(self).__name__, self.describe())


class Text(Literal):
	""" A fixed string. A single character is just a short string. """
	def __init__(self, text:str):
		self.text = text

	def find_in(self, text):
		start = text.find(self.text)
		return None if start < 0 else (start, start + len(self.text))

	def at_start_of(self, text):
		return len(self.text) if text.startswith(self.text) else None

	def describe(self): return repr(self.text)


class Regex(Literal):
	def __init__(self, pattern:Union[str, re.Pattern]):
		self.regex = re.compile(pattern)

	def find_in(self, text):
		m = self.regex.search(text)
		return None if m is None else m.span()

	def at_start_of(self, text):
		m = self.regex.match(text)
		return None if m is None else m.end()

	def describe(self): return '/%s/' % self.regex.pattern


class BackRef(Literal):
	""" Whatever text an earlier assignment in the same definition bound, used as a literal. """
	def __init__(self, name:str):
		self.name = name

	def resolve(self, bindings) -> Literal:
		value = bindings[self.name]
		if isinstance(value, re.Match): value = value.group(0)
		return Text(str(value))

	def describe(self): return '{%s}' % self.name


def regex(pattern:str) -> Regex:
	return Regex(pattern)

def backref(name:str) -> BackRef:
	return BackRef(name)

def as_literal(thing) -> Literal:
	""" Plain strings mean text; compiled patterns mean regular expressions. """
	if isinstance(thing, Literal): return thing
	if isinstance(thing, str):
		if not thing: raise ValueError("A text literal cannot be empty.")
		return Text(thing)
	if isinstance(thing, re.Pattern): return Regex(thing)
	raise TypeError("Cannot use %r as a literal." % (thing,))
