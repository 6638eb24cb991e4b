"""
Sections, and the sequencer which runs them against a cursor.

A definition is an ordered list of sections. Each section is either a literal, which is
matched and thrown away, or an assignment, which cuts out some text, transforms it, and
binds the result to a name. How much text an assignment gets depends on its mode:

	take=n          -- exactly the next n characters
	matching=rx     -- the text of a regex match anchored at the cursor
	capturing=rx    -- same, but the value is the re.Match itself, for its groups
	(none of those) -- "whole match": everything up to the next literal, or else
	                   everything up to the end of the input if it's the last section

The first three know their own extent. A whole-match assignment does not, so it needs
a literal right after it to say where it stops, unless it's the very last section.

Compiling a definition turns that list into a flat sequence of steps, each of which knows
exactly what to do with the cursor. All the structural checks happen then, once, before
any input is seen. Parsing walks the steps, insists that the input be completely consumed,
and finally hands the bindings to the result function, matching its parameter names.

For example::

	card = Definition(
		"Card ", assign('id', int), regex(r':\\s+'),
		assign('winning', split(cast=int)), " | ", assign('mine', split(cast=int)),
		result=Card,
	)
	cards = [card.parse(line) for line in lines]
"""

import inspect, re
from typing import Optional, Callable

from .interface import LanguageError, ConstructionError, ParseFailure, TakeFailure, UnparsedInput
from .cursor import Cursor
from .literal import Literal, BackRef, as_literal
from .split import Collecting
from .transform import Transform, Transformable, TRANSFORM_ERRORS, failure_in, as_transform
from .support.symtab import Bindings


class Mode:
	""" Abstract: how an assignment gets its text. """
	self_delimiting = True
	def extract(self, cursor:Cursor): raise NotImplementedError(type(self))

class WholeMatch(Mode):
	self_delimiting = False
	def __repr__(self): return ''

class TakeFixed(Mode):
	""" Counts characters. Python strings have no business being cut mid-character. """
	def __init__(self, size:int):
		if not isinstance(size, int) or size < 0: raise ConstructionError("take= wants a non-negative int, not %r" % (size,))
		self.size = size
	def extract(self, cursor): return cursor.take_prefix(self.size)
	def __repr__(self): return ' take %d' % self.size

class Matching(Mode):
	def __init__(self, pattern):
		try: self.regex = re.compile(pattern)
		except (TypeError, re.error) as ex: raise ConstructionError("Bad pattern %r: %s" % (pattern, ex)) from None

	def find(self, cursor) -> re.Match:
		m = self.regex.match(cursor.remaining())
		if m is None:
			rest = cursor.remaining()
			raise TakeFailure("couldn't match /%s/ at start of %r" % (self.regex.pattern, rest), text=cursor.text, offset=cursor.left, width=len(rest))
		cursor.advance_by(m.end())
		return m

	def extract(self, cursor): return self.find(cursor).group(0)
	def __repr__(self): return ' matching /%s/' % self.regex.pattern

class Capturing(Matching):
	def extract(self, cursor): return self.find(cursor)
	def __repr__(self): return ' capturing /%s/' % self.regex.pattern


class Section:
	pass

class LiteralSection(Section):
	def __init__(self, literal:Literal): self.literal = literal
	def __repr__(self): return repr(self.literal)

class Assign(Section):
	""" A name of None means "skip": the text is consumed and transformed, but not bound. """
	def __init__(self, name:Optional[str], mode:Mode, transform:Optional[Transform]):
		if name is not None and not (isinstance(name, str) and name.isidentifier()):
			raise ConstructionError("Binding name %r is not an identifier." % (name,))
		self.name, self.mode, self.transform = name, mode, transform

	def captured_names(self) -> list:
		if isinstance(self.transform, Collecting): return [c.name for c in self.transform.own_captures()]
		return []

	def check(self):
		t = self.transform
		if t is None: return
		if t.fallible:
			raise ConstructionError("%r: attempt(...) only works on the elements of a split." % self)
		if not isinstance(t, Collecting) and t.captures():
			raise ConstructionError("%r: index captures only work inside a split or cells." % self)
		t.check(top=True)

	def bind(self, value, bindings:Bindings, text:str, start:int, stop:int):
		""" Transform the value and bind the result, along with any captured indexes. """
		t = self.transform
		try:
			if t is None: result, captured = value, {}
			elif isinstance(t, Collecting): result, captured = t.run(value)
			else: result, captured = t.apply(value), {}
		except ParseFailure as pf:
			pf.locate(text, start, stop - start)
			raise
		except LanguageError: raise
		except TRANSFORM_ERRORS as ex:
			raise failure_in("couldn't transform %r for %s" % (value, self.describe()), ex).locate(text, start, stop - start) from ex
		if self.name is not None: bindings[self.name] = result
		bindings.update_fresh(captured.items())

	def describe(self):
		return '_' if self.name is None else self.name

	def __repr__(self):
		return "assign(%s%r%s)" % (self.describe(), self.mode, '' if self.transform is None else ' %r' % self.transform)


def as_section(thing) -> Section:
	""" Sections pass through; anything a literal can be made of becomes a literal section. """
	if isinstance(thing, Section): return thing
	try: return LiteralSection(as_literal(thing))
	except (TypeError, ValueError) as ex: raise ConstructionError(str(ex)) from None

def _mode(take, matching, capturing) -> Mode:
	given = [k for k, v in (('take', take), ('matching', matching), ('capturing', capturing)) if v is not None]
	if len(given) > 1: raise ConstructionError("Pick at most one of %s." % ', '.join(given))
	if take is not None: return TakeFixed(take)
	if matching is not None: return Matching(matching)
	if capturing is not None: return Capturing(capturing)
	return WholeMatch()

def assign(name:str, transform=None, *, take:int=None, matching=None, capturing=None) -> Assign:
	return Assign(name, _mode(take, matching, capturing), as_transform(transform))

def skip(transform=None, *, take:int=None, matching=None, capturing=None) -> Assign:
	return Assign(None, _mode(take, matching, capturing), as_transform(transform))


class Step:
	def run(self, cursor:Cursor, bindings:Bindings): raise NotImplementedError(type(self))

class StripLiteral(Step):
	def __init__(self, literal:Literal): self.literal = literal
	def run(self, cursor, bindings):
		self.literal.resolve(bindings).strip_prefix(cursor)

class BoundedAssign(Step):
	def __init__(self, section:Assign, literal:Literal): self.section, self.literal = section, literal
	def run(self, cursor, bindings):
		start = cursor.left
		value = self.literal.resolve(bindings).find_boundary(cursor)
		self.section.bind(value, bindings, cursor.text, start, start + len(value))

class SelfDelimited(Step):
	def __init__(self, section:Assign): self.section = section
	def run(self, cursor, bindings):
		start = cursor.left
		value = self.section.mode.extract(cursor)
		self.section.bind(value, bindings, cursor.text, start, cursor.left)

class TailAssign(Step):
	def __init__(self, section:Assign): self.section = section
	def run(self, cursor, bindings):
		start = cursor.left
		value = cursor.slice_to(len(cursor.text))
		self.section.bind(value, bindings, cursor.text, start, cursor.left)


class ResultBinder:
	"""
	Calls the result function with keyword arguments picked out of the bindings by
	parameter name. A **kwargs parameter gets everything.
	"""
	def __init__(self, fn:Callable, available:list):
		if not callable(fn): raise ConstructionError("result=%r is not callable." % (fn,))
		try: signature = inspect.signature(fn)
		except (TypeError, ValueError) as ex: raise ConstructionError("Cannot inspect result=%r: %s" % (fn, ex)) from None
		self.fn, self.wanted, self.everything = fn, [], False
		for p in signature.parameters.values():
			if p.kind is p.VAR_KEYWORD: self.everything = True
			elif p.kind is p.VAR_POSITIONAL: continue
			elif p.kind is p.POSITIONAL_ONLY:
				raise ConstructionError("Result parameter %r is positional-only; bindings are passed by name." % p.name)
			elif p.name in available: self.wanted.append(p.name)
			elif p.default is p.empty:
				raise ConstructionError("Result parameter %r is not bound by this definition, which binds only %r." % (p.name, available))

	def __call__(self, bindings:Bindings):
		if self.everything: return self.fn(**bindings)
		return self.fn(**{name: bindings[name] for name in self.wanted})


class Program:
	""" A compiled definition: steps, plus what to do with the bindings at the end. """
	def __init__(self, steps:list, names:list, result:Optional[ResultBinder]):
		self.steps, self.names, self.result = steps, names, result

	def parse(self, text:str):
		if not isinstance(text, str): raise TypeError("Can only parse str, not %s" % type(text).__name__)
		cursor = Cursor(text)
		bindings = Bindings()
		try:
			for step in self.steps: step.run(cursor, bindings)
		except ParseFailure as pf:
			pf.locate(text, cursor.left)
			raise
		if not cursor.is_exhausted():
			rest = cursor.remaining()
			raise UnparsedInput("unparsed input remains: %r" % rest, text=text, offset=cursor.left, width=len(rest))
		if self.result is None: return bindings
		return self.result(bindings)


def _compile(sections:list, result:Optional[Callable]) -> Program:
	if not sections: raise ConstructionError("A definition needs at least one section.")
	steps, bound, pending = [], [], None

	def bind_names(section:Assign):
		for name in ([section.name] if section.name is not None else []) + section.captured_names():
			if name in bound: raise ConstructionError("%r binds %r, which is already bound." % (section, name))
			bound.append(name)

	for section in sections:
		if isinstance(section, LiteralSection):
			literal = section.literal
			if isinstance(literal, BackRef) and literal.name not in bound:
				raise ConstructionError("backref(%r) refers to a name not bound before it; bound so far: %r" % (literal.name, bound))
			if pending is None: steps.append(StripLiteral(literal))
			else:
				steps.append(BoundedAssign(pending, literal))
				bind_names(pending)
				pending = None
		else:
			assert isinstance(section, Assign), type(section)
			if pending is not None:
				raise ConstructionError("%r reads up to a delimiter, so it must be followed by a literal or be the last section." % pending)
			section.check()
			if section.mode.self_delimiting:
				steps.append(SelfDelimited(section))
				bind_names(section)
			else: pending = section
	if pending is not None:
		steps.append(TailAssign(pending))
		bind_names(pending)
	binder = None if result is None else ResultBinder(result, bound)
	return Program(steps, bound, binder)


class Definition(Transformable):
	"""
	Sections may be given all at once, or added one at a time with the builder methods,
	which return the definition so that calls chain. The result function may likewise be
	given up front or supplied later with the `result` decorator:

		d = Definition().literal("move ").assign('n', int).literal(" from ").assign('src', int)
		@d.result
		def move(n, src): return Move(n, src)

	Compiling is lazy and cached, but may be forced with `compile()` so that structural
	mistakes surface at import time. Adding a section throws the cached program away.
	"""
	def __init__(self, *sections, result:Callable=None, name:str=None):
		self.__sections = [as_section(s) for s in sections]
		self.__result = result
		self.__name = name
		self.__program = None

	def __add(self, section:Section):
		self.__sections.append(section)
		self.__program = None
		return self

	def literal(self, thing) -> "Definition":
		return self.__add(as_section(thing))

	def assign(self, name:str, transform=None, *, take:int=None, matching=None, capturing=None) -> "Definition":
		return self.__add(assign(name, transform, take=take, matching=matching, capturing=capturing))

	def skip(self, transform=None, *, take:int=None, matching=None, capturing=None) -> "Definition":
		return self.__add(skip(transform, take=take, matching=matching, capturing=capturing))

	def result(self, fn:Callable) -> Callable:
		""" Decorator: install the result function, and hand it back unchanged. """
		self.__result = fn
		self.__program = None
		return fn

	def compile(self) -> "Definition":
		if self.__program is None:
			self.__program = _compile(self.__sections, self.__result)
		return self

	def names(self) -> list:
		""" The names this definition binds, in the order it binds them. """
		return list(self.compile().__program.names)

	def parse(self, text:str):
		return self.compile().__program.parse(text)

	def to_transform(self) -> "NestedParse":
		return NestedParse(self)

	def __repr__(self):
		if self.__name is not None: return "<Definition %s>" % self.__name
		return "Definition(%s)" % ', '.join(map(repr, self.__sections))


class NestedParse(Transform):
	"""
	Runs another definition on the value, with a fresh cursor and fresh bindings.
	The inner definition sees nothing of the outer one's bindings.
	"""
	def __init__(self, definition:Definition):
		self.definition = definition

	def apply(self, value, site=None):
		if isinstance(value, re.Match): value = value.group(0)
		return self.definition.parse(value)

	def check(self, top=False):
		self.definition.compile()

	def __repr__(self): return "nested(%r)" % self.definition


def nested(*sections, result:Callable=None) -> NestedParse:
	return NestedParse(Definition(*sections, result=result))

def compile(*sections, result:Callable=None) -> Definition:
	""" Build and validate a definition now, for parsing many inputs later. """
	return Definition(*sections, result=result).compile()

def parse(text:str, *sections, result:Callable=None):
	""" One-shot: define, compile, and parse. """
	return Definition(*sections, result=result).parse(text)
