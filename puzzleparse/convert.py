"""
Typecasts: turning a slice of text into a value of some target type.

The rule is simple. If there's a converter registered for the target, use it.
Otherwise the target had better be a class that can be constructed from the text.
That covers int, float, and friends, plus any Enum or user class with a suitable
constructor, without any reflection trickery.

Python has one unbounded integer type, but puzzle statements are full of bytes and
32-bit words, and an out-of-range value usually signals a misunderstanding of the
input. So there are sized integer targets (U8, I32, and so on) which check their range.
There is also no character type, so CHAR is a target which insists on a string of
length one. Digits convert to numbers by their value whether they came from a
character split or a word split, since either way they're just short strings.

A regular-expression match converts from its whole matched text, except that a plain
class without a registered converter gets the match object itself. That way a class can
pick apart capture groups in its own constructor.

The registry is written during setup (module import, mostly) and only read while parsing.
"""

import re, warnings
from typing import Callable

_INTEGER = re.compile(r'[+-]?[0-9]+')

def parse_int(text:str) -> int:
	""" Stricter than int(): no surrounding blanks, no underscores, decimal only. """
	if _INTEGER.fullmatch(text) is None:
		raise ValueError("invalid integer: %r" % (text,))
	return int(text)

def parse_bool(text:str) -> bool:
	if text == 'true': return True
	if text == 'false': return False
	raise ValueError("invalid bool: %r" % (text,))

class Target:
	""" Abstract: a conversion target that isn't a Python class. """
	name : str
	def __call__(self, text:str): raise NotImplementedError(type(self))
	def __repr__(self): return self.name

class SizedInt(Target):
	def __init__(self, name:str, bits:int, signed:bool):
		self.name, self.bits, self.signed = name, bits, signed
		if signed: self.lo, self.hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
		else: self.lo, self.hi = 0, (1 << bits) - 1

	def __call__(self, text:str) -> int:
		value = parse_int(text)
		if not self.lo <= value <= self.hi:
			raise ValueError("%d is out of range for %s" % (value, self.name))
		return value

class Char(Target):
	name = 'char'
	def __call__(self, text:str) -> str:
		if len(text) != 1:
			raise ValueError("cannot convert %r to char as it's not exactly one character" % (text,))
		return text

U8, U16, U32, U64, U128 = (SizedInt('u%d'%b, b, False) for b in (8, 16, 32, 64, 128))
I8, I16, I32, I64, I128 = (SizedInt('i%d'%b, b, True) for b in (8, 16, 32, 64, 128))
USIZE, ISIZE = SizedInt('usize', 64, False), SizedInt('isize', 64, True)
CHAR = Char()

CONVERTERS : dict[object, Callable] = {
	int: parse_int,
	float: float,
	str: str,
	bool: parse_bool,
}

def register(target, converter:Callable):
	""" Teach the typecast machinery a new target. Replacing an existing converter is allowed, but noisy. """
	if target in CONVERTERS:
		warnings.warn("Replacing the converter for %r" % (target,))
	CONVERTERS[target] = converter

def is_target(thing) -> bool:
	""" Could this be the subject of a typecast? """
	if isinstance(thing, (type, Target)): return True
	try: return thing in CONVERTERS
	except TypeError: return False

def converter_for(target) -> Callable:
	""" Look it up now, so the parse loop doesn't have to. """
	if isinstance(target, Target): return _from_text(target)
	try: fn = CONVERTERS[target]
	except (KeyError, TypeError): fn = None
	if fn is None:
		if not callable(target): raise TypeError("%r is not a typecast target" % (target,))
		return target
	return _from_text(fn)

def _from_text(fn):
	def convert(value):
		if isinstance(value, re.Match): value = value.group(0)
		return fn(value)
	return convert

def convert(value, target):
	""" One-shot typecast. The engine uses converter_for instead, but this is handy in solutions. """
	return converter_for(target)(value)
