"""
Everything a puzzle solution normally needs, in one place:

	from puzzleparse.prelude import *
"""

from .interface import (
	LanguageError, ConstructionError, ParseFailure,
	LiteralNotFound, TakeFailure, UnparsedInput, TransformFailure,
	UnmatchedValue, IndexCardinality, UnevenGrid, SizeMismatch,
	KEEP, DROP, ITERATOR,
)
from .convert import U8, U16, U32, U64, U128, I8, I16, I32, I64, I128, USIZE, ISIZE, CHAR, register, convert
from .grid import Point, Grid, ORTHOGONAL, DIAGONAL
from .literal import regex, backref
from .patterns import ANY, Ok, Err, between, span, at_least, at_most, where, one_of
from .transform import (
	typecast, call, compose, attempt, result_of, match, arm,
	index_into, try_index_into, indexes_into,
)
from .split import split, chars, find_matches, find_captures, exactly
from .cells import cells
from .sections import Definition, assign, skip, nested, parse, compile
from .support.symtab import Bindings

__all__ = [
	'LanguageError', 'ConstructionError', 'ParseFailure',
	'LiteralNotFound', 'TakeFailure', 'UnparsedInput', 'TransformFailure',
	'UnmatchedValue', 'IndexCardinality', 'UnevenGrid', 'SizeMismatch',
	'KEEP', 'DROP', 'ITERATOR',
	'U8', 'U16', 'U32', 'U64', 'U128', 'I8', 'I16', 'I32', 'I64', 'I128', 'USIZE', 'ISIZE', 'CHAR',
	'register', 'convert',
	'Point', 'Grid', 'ORTHOGONAL', 'DIAGONAL',
	'regex', 'backref',
	'ANY', 'Ok', 'Err', 'between', 'span', 'at_least', 'at_most', 'where', 'one_of',
	'typecast', 'call', 'compose', 'attempt', 'result_of', 'match', 'arm',
	'index_into', 'try_index_into', 'indexes_into',
	'split', 'chars', 'find_matches', 'find_captures', 'exactly',
	'cells',
	'Definition', 'assign', 'skip', 'nested', 'parse', 'compile',
	'Bindings',
]
