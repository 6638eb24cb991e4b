"""
Transforms: what happens to a slice of text after it's been cut out of the input.

A transform is a small immutable object with an `apply(value, site)` method. Most of them
are pure functions of the value. The exception is the Match, which may also record the
position of the element it's looking at into an index capture; the position and the
capture slots arrive together as the "site", courtesy of whichever split or cells engine
is driving the iteration. Outside of a split or cells, there is no site.

Transforms compose left-to-right. Two wrappers exist only for split elements:

	attempt(t)    -- if t raises ValueError or produces None, drop the element.
	result_of(t)  -- wrap t's outcome as Ok(value) or Err(original) for a following match.

Neither ever swallows a ParseFailure: a nested definition that fails is fatal, period.

Structural checks happen in `check(top)`, called while compiling the enclosing definition.
The `top` flag is true only for the transform directly attached to an assignment.
"""

from typing import Callable, NamedTuple, Optional

from . import convert
from .interface import LanguageError, ConstructionError, TransformFailure, UnmatchedValue, IndexCardinality, KEEP, DROP
from .patterns import Pattern, Ok, Err, as_pattern

# Exceptions a non-"try" transform may raise that will be reported as a TransformFailure.
# Anything else is a bug in somebody's code, and propagates as-is.
TRANSFORM_ERRORS = (ValueError, ArithmeticError, LookupError, TypeError)

def failure_in(what:str, ex:Exception) -> TransformFailure:
	return TransformFailure("%s: %s: %s" % (what, type(ex).__name__, ex))


class Slot:
	""" Abstract: accumulates the indexes recorded by one index capture during one split. """
	def record(self, index): raise NotImplementedError(type(self))
	def final(self): raise NotImplementedError(type(self))

class _OnceSlot(Slot):
	def __init__(self, name, required:bool):
		self.name, self.required = name, required
		self.index, self.was_set = None, False

	def record(self, index):
		if self.was_set:
			raise IndexCardinality("index %s was set multiple times (at %r and %r)." % (self.name, self.index, index))
		self.index, self.was_set = index, True

	def final(self):
		if self.required and not self.was_set:
			raise IndexCardinality("index %s was never set." % self.name)
		return self.index

class _ManySlot(Slot):
	def __init__(self, name):
		self.name, self.indexes = name, []
	def record(self, index): self.indexes.append(index)
	def final(self): return self.indexes


class IndexCapture:
	""" Abstract: an instruction, attached to a match arm, to record where that arm fired. """
	def __init__(self, name:str):
		if not name or not name.isidentifier():
			raise ConstructionError("Index capture name %r is not an identifier." % (name,))
		self.name = name
	def new_slot(self) -> Slot: raise NotImplementedError(type(self))
	def __repr__(self): return "%s(%r)" % (type(self).__name__, self.name)

class IndexInto(IndexCapture):
	""" Exactly one element must match. """
	def new_slot(self): return _OnceSlot(self.name, required=True)

class TryIndexInto(IndexCapture):
	""" Zero or one elements may match; zero yields None. """
	def new_slot(self): return _OnceSlot(self.name, required=False)

class IndexesInto(IndexCapture):
	""" Any number may match; the result lists their indexes in order. """
	def new_slot(self): return _ManySlot(self.name)

def index_into(name): return IndexInto(name)
def try_index_into(name): return TryIndexInto(name)
def indexes_into(name): return IndexesInto(name)


class Site(NamedTuple):
	""" Where an element sits, and where to record that fact. """
	index: object
	slots: dict


class Transform:
	fallible = False # True if the transform may produce DROP.

	def apply(self, value, site:Optional[Site]=None):
		raise NotImplementedError(type(self))

	def children(self) -> tuple:
		return ()

	def captures(self) -> list[IndexCapture]:
		""" Index captures which record into the slots of an enclosing split or cells. """
		return [c for child in self.children() for c in child.captures()]

	def check(self, top:bool=False):
		for child in self.children(): child.check()

	def then(self, *more) -> "Compose":
		return compose(self, *more)


class Transformable:
	""" Something which is not itself a transform, but knows how to become one. """
	def to_transform(self) -> Transform:
		raise NotImplementedError(type(self))


class Typecast(Transform):
	def __init__(self, target):
		self.target = target
		try: self.__convert = convert.converter_for(target)
		except TypeError as ex: raise ConstructionError(str(ex)) from None

	def apply(self, value, site=None):
		return self.__convert(value)

	def __repr__(self): return "typecast(%s)" % getattr(self.target, '__name__', self.target)


class Call(Transform):
	def __init__(self, fn:Callable):
		if not callable(fn): raise ConstructionError("%r is not callable." % (fn,))
		self.fn = fn

	def apply(self, value, site=None):
		return self.fn(value)

	def __repr__(self): return "call(%s)" % getattr(self.fn, '__name__', repr(self.fn))


class Compose(Transform):
	def __init__(self, steps):
		self.steps = tuple(steps)
		self.fallible = any(s.fallible for s in self.steps)

	def apply(self, value, site=None):
		for step in self.steps:
			value = step.apply(value, site)
			if value is DROP: break
		return value

	def children(self): return self.steps

	def __repr__(self): return "compose(%s)" % ', '.join(map(repr, self.steps))


class Attempt(Transform):
	fallible = True
	def __init__(self, inner:Transform):
		self.inner = inner

	def apply(self, value, site=None):
		try: result = self.inner.apply(value, site)
		except LanguageError: raise
		except ValueError: return DROP
		return DROP if result is None else result

	def children(self): return (self.inner,)

	def check(self, top=False):
		if self.inner.fallible: raise ConstructionError("Cannot attempt %r: it is already fallible." % self.inner)
		super().check(top)

	def __repr__(self): return "attempt(%r)" % self.inner


class ResultOf(Transform):
	def __init__(self, inner:Transform):
		self.inner = inner

	def apply(self, value, site=None):
		try: return Ok(self.inner.apply(value, site))
		except LanguageError: raise
		except ValueError: return Err(value)

	def children(self): return (self.inner,)

	def check(self, top=False):
		if self.inner.fallible: raise ConstructionError("Cannot take the result of %r: it may drop elements." % self.inner)
		super().check(top)

	def __repr__(self): return "result_of(%r)" % self.inner


class Arm:
	def __init__(self, pattern:Pattern, result, when:Optional[Callable], capture:Optional[IndexCapture]):
		self.pattern, self.result, self.when, self.capture = pattern, result, when, capture

	def accepts(self, value) -> bool:
		return self.pattern.matches(value) and (self.when is None or bool(self.when(value)))

	def produce(self, value, site):
		if self.result is KEEP: return value
		if isinstance(self.result, Transform): return self.result.apply(value, site)
		return self.result

	def __repr__(self):
		parts = [repr(self.pattern)]
		if self.when is not None: parts.append('if ...')
		if self.capture is not None: parts.append('=> %r' % self.capture)
		if self.result is not KEEP: parts.append('=> %r' % (self.result,))
		return ' '.join(parts)


class Match(Transform):
	""" Ordered arms; the first to accept the value decides the outcome. """
	def __init__(self, arms):
		self.arms = tuple(arms)
		if not self.arms: raise ConstructionError("A match needs at least one arm.")
		names = [a.capture.name for a in self.arms if a.capture is not None]
		if len(set(names)) != len(names):
			raise ConstructionError("Index capture names must be distinct within a match: %r" % names)

	def apply(self, value, site=None):
		for arm in self.arms:
			if arm.accepts(value):
				if arm.capture is not None:
					site.slots[arm.capture.name].record(site.index)
				return arm.produce(value, site)
		if site is None:
			raise UnmatchedValue("unmatched value in match expression: %r" % (value,))
		raise UnmatchedValue("unmatched value in match expression: %r at index %r" % (value, site.index))

	def children(self):
		return tuple(a.result for a in self.arms if isinstance(a.result, Transform))

	def captures(self):
		return [a.capture for a in self.arms if a.capture is not None] + super().captures()

	def check(self, top=False):
		for t in self.children():
			if t.fallible: raise ConstructionError("Match arm result %r may drop the element; use attempt(match(...)) instead." % t)
		super().check(top)

	def __repr__(self): return "match(%s)" % ', '.join(map(repr, self.arms))


def as_transform(thing) -> Optional[Transform]:
	"""
	Promote shorthand: a typecast target means a Typecast; any other callable means a Call.
	A definition means a nested parse.
	"""
	if thing is None or isinstance(thing, Transform): return thing
	if isinstance(thing, Transformable): return thing.to_transform()
	if convert.is_target(thing): return Typecast(thing)
	if callable(thing): return Call(thing)
	raise ConstructionError("%r is neither a transform, a typecast target, nor callable." % (thing,))

def typecast(target) -> Typecast: return Typecast(target)
def call(fn:Callable) -> Call: return Call(fn)

def compose(*steps) -> Transform:
	""" Left to right. compose(U8, fn) is the classic "typecast, then call". """
	steps = [as_transform(s) for s in steps]
	if not steps: raise ConstructionError("Nothing to compose.")
	return steps[0] if len(steps) == 1 else Compose(steps)

def attempt(thing) -> Attempt: return Attempt(as_transform(thing))
def result_of(thing) -> ResultOf: return ResultOf(as_transform(thing))

def arm(pattern, result=KEEP, *, when:Optional[Callable]=None, index:Optional[IndexCapture]=None) -> Arm:
	"""
	One clause of a match. The result may be KEEP (the default), a transform to apply to the
	value, or any other object, which is produced as a constant. Typecast targets and other
	callables are promoted to transforms, as everywhere else.
	"""
	if index is not None and not isinstance(index, IndexCapture):
		raise ConstructionError("index= takes index_into(...), try_index_into(...), or indexes_into(...); not %r" % (index,))
	if result is not KEEP and (isinstance(result, Transformable) or convert.is_target(result) or callable(result)):
		result = as_transform(result)
	return Arm(as_pattern(pattern), result, when, index)

def match(*arms) -> Match:
	""" Each arm is either an Arm or a (pattern, result) pair. """
	return Match(a if isinstance(a, Arm) else arm(*a) for a in arms)
