"""
Splitting a slice of text into a sequence of elements.

A splitter runs a little pipeline over its input:

	source  -- cut the text into pieces: around a separator, per character,
	           per regex match, or per regex match with capture groups.
	cast    -- optional; applied to each raw piece. Usually a typecast, possibly
	           attempted (drop failures) or wrapped with result_of (Ok/Err).
	index   -- if requested, pair each element with its position among those the cast kept.
	each    -- optional; applied to the (possibly indexed) element. May be attempted.
	into    -- collect: into any container constructor (list by default), into exactly
	           so many elements, or not at all (a lazy iterator).

Positions count the elements that survive the cast stage. Anything the each stage drops
still used up its position.

Index captures made by a match in the `each` stage come back alongside the collection,
for the enclosing definition to bind. A lazy iterator would only make its captures after
the caller consumed it, which is too late, so that combination is refused when compiling.
"""

import re
from typing import Optional, Iterator, Callable

from .interface import LanguageError, ConstructionError, SizeMismatch, DROP, ITERATOR
from .literal import Text, Regex, as_literal
from .transform import Transform, Site, TRANSFORM_ERRORS, failure_in, as_transform


class Source:
	""" Abstract: cuts a string into pieces. """
	def pieces(self, text:str) -> Iterator:
		raise NotImplementedError(type(self))

class OnText(Source):
	""" Classic delimiter split. Empty pieces (as from doubled separators) are dropped. """
	def __init__(self, sep:str): self.sep = sep
	def pieces(self, text):
		return (p for p in text.split(self.sep) if p)
	def __repr__(self): return "on %r" % self.sep

class OnRegex(Source):
	""" Split around each non-overlapping match. Empty pieces are dropped. """
	def __init__(self, regex:re.Pattern): self.regex = regex
	def pieces(self, text):
		pos = 0
		for m in self.regex.finditer(text):
			if m.start() > pos: yield text[pos:m.start()]
			pos = max(pos, m.end())
		if pos < len(text): yield text[pos:]
	def __repr__(self): return "on /%s/" % self.regex.pattern

class Characters(Source):
	def pieces(self, text): return iter(text)
	def __repr__(self): return "chars"

class FindMatches(Source):
	def __init__(self, regex:re.Pattern): self.regex = regex
	def pieces(self, text): return (m.group(0) for m in self.regex.finditer(text))
	def __repr__(self): return "find matches /%s/" % self.regex.pattern

class FindCaptures(Source):
	""" Each element is the re.Match itself, for its capture groups. """
	def __init__(self, regex:re.Pattern): self.regex = regex
	def pieces(self, text): return self.regex.finditer(text)
	def __repr__(self): return "find captures /%s/" % self.regex.pattern


class Destination:
	lazy = False
	def collect(self, elements:Iterator): raise NotImplementedError(type(self))

class Lazy(Destination):
	lazy = True
	def collect(self, elements): return elements
	def __repr__(self): return "into iterator"

class Collect(Destination):
	"""
	Any callable taking an iterable works: list, set, tuple, frozenset, dict (from pairs,
	where a later key overwrites an earlier one), collections.Counter, and so on.
	"""
	def __init__(self, container:Callable): self.container = container
	def collect(self, elements): return self.container(elements)
	def __repr__(self): return "into %s" % getattr(self.container, '__name__', self.container)

class Exactly(Destination):
	def __init__(self, size:int, container:Callable=list):
		if size < 0: raise ConstructionError("Negative size %d" % size)
		self.size, self.container = size, container
	def collect(self, elements):
		items = list(elements)
		if len(items) != self.size:
			raise SizeMismatch("expected exactly %d elements, found %d: %r" % (self.size, len(items), items))
		return self.container(items)
	def __repr__(self): return "try into exactly %d" % self.size

def exactly(size:int, container:Callable=list) -> Exactly:
	return Exactly(size, container)

def as_destination(thing) -> Destination:
	if thing is ITERATOR: return Lazy()
	if isinstance(thing, Destination): return thing
	if callable(thing): return Collect(thing)
	raise ConstructionError("Cannot collect into %r" % (thing,))


class Collecting(Transform):
	"""
	Common ground between splits and cells: both run a cast/index/each pipeline and
	may produce index captures, which they do not forward to anything enclosing them.
	"""
	cast : Optional[Transform]
	each : Optional[Transform]

	def run(self, value) -> tuple[object, dict]:
		""" Return the collection and a dictionary of captured indexes. """
		raise NotImplementedError(type(self))

	def apply(self, value, site=None):
		return self.run(value)[0]

	def children(self):
		return tuple(t for t in (self.cast, self.each) if t is not None)

	def own_captures(self):
		return [] if self.each is None else self.each.captures()

	def captures(self):
		return []

	def check(self, top=False):
		if self.cast is not None and self.cast.captures():
			raise ConstructionError("%r: index captures belong in the each= stage, not cast=." % self)
		if self.own_captures() and not top:
			raise ConstructionError("%r: index captures only work on a split or cells assigned directly to a name." % self)
		names = [c.name for c in self.own_captures()]
		if len(set(names)) != len(names):
			raise ConstructionError("%r: duplicate index capture names %r" % (self, names))
		super().check(top)

	def _slots(self):
		return {c.name: c.new_slot() for c in self.own_captures()}

	@staticmethod
	def _finish(slots) -> dict:
		return {name: slot.final() for name, slot in slots.items()}


class Splitter(Collecting):
	def __init__(self, source:Source, *, indexed:bool, into, cast, each):
		self.source = source
		self.indexed = bool(indexed)
		self.into = as_destination(into)
		self.cast = as_transform(cast)
		self.each = as_transform(each)

	def check(self, top=False):
		if self.into.lazy and self.own_captures():
			raise ConstructionError("Cannot combine `into iterator` with a `match` that captures indexes.")
		super().check(top)

	def run(self, value):
		if isinstance(value, re.Match): value = value.group(0)
		slots = self._slots()
		produced = self.__produce(value, slots)
		if self.into.lazy: return produced, {}
		result = self.into.collect(produced)
		return result, self._finish(slots)

	def __produce(self, text, slots):
		cast, each, indexed = self.cast, self.each, self.indexed
		position = 0
		for piece in self.source.pieces(text):
			try:
				item = piece if cast is None else cast.apply(piece)
				if item is DROP: continue
				index, position = position, position + 1
				value = (index, item) if indexed else item
				if each is not None:
					value = each.apply(value, Site(index, slots))
					if value is DROP: continue
			except LanguageError: raise
			except TRANSFORM_ERRORS as ex:
				raise failure_in("couldn't transform element %r at index %d" % (piece, position), ex) from ex
			yield value

	def __repr__(self):
		parts = [repr(self.source)]
		if self.indexed: parts.append('indexed')
		parts.append(repr(self.into))
		if self.cast is not None: parts.append('cast=%r' % self.cast)
		if self.each is not None: parts.append('each=%r' % self.each)
		return "split(%s)" % ' '.join(parts)


def _source_for(on) -> Source:
	literal = as_literal(on)
	if isinstance(literal, Text): return OnText(literal.text)
	if isinstance(literal, Regex): return OnRegex(literal.regex)
	raise ConstructionError("Cannot split on %r" % (on,))

def split(on=' ', *, indexed=False, into=list, cast=None, each=None) -> Splitter:
	""" Split around a separator: a string (one space by default) or a compiled regex. """
	try: source = _source_for(on)
	except (TypeError, ValueError) as ex: raise ConstructionError(str(ex)) from None
	return Splitter(source, indexed=indexed, into=into, cast=cast, each=each)

def chars(*, indexed=False, into=list, cast=None, each=None) -> Splitter:
	return Splitter(Characters(), indexed=indexed, into=into, cast=cast, each=each)

def find_matches(pattern, *, indexed=False, into=list, cast=None, each=None) -> Splitter:
	return Splitter(FindMatches(re.compile(pattern)), indexed=indexed, into=into, cast=cast, each=each)

def find_captures(pattern, *, indexed=False, into=list, cast=None, each=None) -> Splitter:
	return Splitter(FindCaptures(re.compile(pattern)), indexed=indexed, into=into, cast=cast, each=each)
