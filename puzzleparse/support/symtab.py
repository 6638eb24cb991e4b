"""
Every invocation of a definition gets its own little symbol table: the Bindings.

The concept is deliberately narrower than a general-purpose symbol table:

* A binding is made exactly once. Sections execute strictly left-to-right, so if a
  name shows up twice, somebody made a mistake in their definition. That mistake is
  normally caught while compiling, but the table enforces it anyway.
* There is no parent scope. A nested parse sees nothing of its caller's bindings.
  That isolation is the whole point: a nested definition is an ordinary function
  of the substring it's handed.
* Insertion order is kept, because a caller asking for "everything" usually wants
  it in the order the input presented it.

For the moment, looking up a name that isn't there raises an exception.
Why? Because it's Python.
"""

from collections.abc import Mapping
from typing import Iterator

class NoSuchSymbol(KeyError):
	pass

class SymbolAlreadyExists(KeyError):
	pass

class Bindings(Mapping):
	""" Insertion-ordered mapping from name to extracted value. """
	def __init__(self):
		self.local : dict[str, object] = {}

	def __getitem__(self, key):
		try: return self.local[key]
		except KeyError: raise NoSuchSymbol(key) from None

	def __setitem__(self, key, value):
		if key in self.local:
			raise SymbolAlreadyExists(key)
		self.local[key] = value

	def __contains__(self, key):
		return key in self.local

	def __iter__(self) -> Iterator[str]:
		return iter(self.local)

	def __len__(self):
		return len(self.local)

	def __getattr__(self, name):
		# Only reached when normal attribute lookup fails.
		if name.startswith('_') or name == 'local': raise AttributeError(name)
		try: return self.local[name]
		except KeyError: raise AttributeError(name) from None

	def update_fresh(self, items):
		""" Bind several names at once, each of which must be new. """
		for key, value in items:
			self[key] = value

	def pick(self, *names) -> tuple:
		""" Convenient for the common "parse, then unpack a few values" idiom. """
		return tuple(self[name] for name in names)

	def __repr__(self):
		return "Bindings(%s)" % ', '.join('%s=%r' % pair for pair in self.local.items())
