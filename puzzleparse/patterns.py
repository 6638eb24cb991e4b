"""
Patterns for the arms of a match transform.

Python's own `match` statement can't be assembled at run time, so the engine brings
its own small pattern vocabulary. Anything that isn't already a Pattern is promoted:

	ANY                     -- the wildcard
	"foo", 3, 'x'           -- equality
	("|", ANY)              -- a tuple matches element-wise, which suits indexed elements
	range(1, 5)             -- integer membership
	between(5, 8)           -- inclusive span, like 5..=8
	span(9, None)           -- half-open span, like 9..
	where(str.isupper)      -- any predicate
	Ok(ANY), Err("x")       -- the outcome of a result_of(...) transform
	"foo" | one_of("bar")   -- alternatives, via the | operator on Pattern objects

Spans quietly refuse values they can't be compared with, so a span arm can sit in
front of a wildcard arm without tripping over the odd string.
"""

from typing import Callable

class Pattern:
	def matches(self, value) -> bool:
		raise NotImplementedError(type(self))

	def __or__(self, other): return Alternatives(self, as_pattern(other))
	def __ror__(self, other): return Alternatives(as_pattern(other), self)


class Wildcard(Pattern):
	def matches(self, value): return True
	def __repr__(self): return 'ANY'

ANY = Wildcard()


class Equals(Pattern):
	def __init__(self, value): self.value = value
	def matches(self, value): return value == self.value
	def __repr__(self): return repr(self.value)


class Span(Pattern):
	""" Either bound may be None, meaning unbounded on that side. """
	def __init__(self, lo=None, hi=None, *, inclusive:bool):
		self.lo, self.hi, self.inclusive = lo, hi, inclusive

	def matches(self, value):
		try:
			if self.lo is not None and value < self.lo: return False
			if self.hi is None: return True
			return value <= self.hi if self.inclusive else value < self.hi
		except TypeError:
			return False

	def __repr__(self):
		op = '..=' if self.inclusive else '..'
		return "%s%s%s" % ('' if self.lo is None else repr(self.lo), op, '' if self.hi is None else repr(self.hi))


class Membership(Pattern):
	def __init__(self, container): self.container = container
	def matches(self, value):
		try: return value in self.container
		except TypeError: return False
	def __repr__(self): return 'in %r' % (self.container,)


class Alternatives(Pattern):
	def __init__(self, *options:Pattern): self.options = options
	def matches(self, value): return any(p.matches(value) for p in self.options)
	def __repr__(self): return ' | '.join(map(repr, self.options))


class TuplePattern(Pattern):
	def __init__(self, parts): self.parts = tuple(map(as_pattern, parts))
	def matches(self, value):
		if not isinstance(value, tuple) or len(value) != len(self.parts): return False
		return all(p.matches(v) for p, v in zip(self.parts, value))
	def __repr__(self): return '(%s)' % ', '.join(map(repr, self.parts))


class Where(Pattern):
	def __init__(self, predicate:Callable): self.predicate = predicate
	def matches(self, value): return bool(self.predicate(value))
	def __repr__(self): return 'where(%s)' % getattr(self.predicate, '__name__', repr(self.predicate))


class Outcome:
	"""
	The result of a fallible transform, for matching upon. Ok carries the converted value;
	Err carries the original element which failed to convert.
	Used as a pattern, the payload is itself a pattern.
	"""
	__slots__ = ('value',)
	def __init__(self, value=ANY): self.value = value
	def __eq__(self, other): return type(self) is type(other) and self.value == other.value
	def __hash__(self): return hash((type(self), self.value))
	def __repr__(self): return '%s(%r)' % (type(self).__name__, self.value)

class Ok(Outcome): pass
class Err(Outcome): pass

class OutcomePattern(Pattern):
	def __init__(self, kind:type, inner:Pattern): self.kind, self.inner = kind, inner
	def matches(self, value): return type(value) is self.kind and self.inner.matches(value.value)
	def __repr__(self): return '%s(%r)' % (self.kind.__name__, self.inner)


def as_pattern(thing) -> Pattern:
	if isinstance(thing, Pattern): return thing
	if isinstance(thing, Outcome): return OutcomePattern(type(thing), as_pattern(thing.value))
	if isinstance(thing, tuple): return TuplePattern(thing)
	if isinstance(thing, range): return Membership(thing)
	return Equals(thing)

def between(lo, hi) -> Span:
	""" Inclusive at both ends. """
	return Span(lo, hi, inclusive=True)

def span(lo=None, hi=None) -> Span:
	""" Inclusive below, exclusive above. """
	return Span(lo, hi, inclusive=False)

def at_least(lo) -> Span: return Span(lo, None, inclusive=True)
def at_most(hi) -> Span: return Span(None, hi, inclusive=True)

def where(predicate:Callable) -> Where: return Where(predicate)

def one_of(*options) -> Alternatives:
	return Alternatives(*map(as_pattern, options))
