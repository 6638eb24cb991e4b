import unittest
from puzzleparse.prelude import *
from puzzleparse.sections import NestedParse

def reverse_bits(n:int) -> int:
	return int('{:08b}'.format(n)[::-1], 2)

class TestSequencing(unittest.TestCase):
	def test_prefix_then_rest(self):
		for rest in ["", "x", "hello world", "prefix: again"]:
			with self.subTest(rest=rest):
				self.assertEqual(rest, parse("prefix: " + rest, "prefix: ", assign('rest'))['rest'])

	def test_trailing_input(self):
		with self.assertRaises(UnparsedInput) as cm: parse("abc!", "abc")
		self.assertIn("unparsed input remains: '!'", str(cm.exception))
		self.assertEqual(3, cm.exception.offset)
		self.assertEqual("!", cm.exception.remaining)
		self.assertEqual(0, len(parse("abc", "abc")))

	def test_literal_roles(self):
		b = parse("move 3 from 1 to 2", "move ", assign('n', int), " from ", assign('a', int), " to ", assign('b', int))
		self.assertEqual((3, 1, 2), b.pick('n', 'a', 'b'))
		self.assertEqual(['n', 'a', 'b'], list(b))

	def test_missing_literal(self):
		with self.assertRaises(LiteralNotFound) as cm: parse("move 3", "move ", assign('n', int), " from ", assign('a'))
		self.assertIn("expected delimiter ' from '", str(cm.exception))
		with self.assertRaises(LiteralNotFound) as cm: parse("mov 3", "move ", assign('n'))
		self.assertIn("expected literal 'move '", str(cm.exception))

	def test_self_delimiting(self):
		b = parse("AB12cd", assign('two', take=2), assign('num', U8, matching=r'\d+'), assign('rest'))
		self.assertEqual(('AB', 12, 'cd'), b.pick('two', 'num', 'rest'))
		b = parse("12-34!", assign('m', capturing=r'(\d+)-(\d+)'), "!")
		self.assertEqual(('12', '34'), b['m'].groups())
		with self.assertRaises(TakeFailure): parse("A", assign('two', take=2))
		with self.assertRaises(TakeFailure): parse("AB", assign('num', matching=r'\d+'), assign('rest'))

	def test_skip(self):
		b = parse("x=1, y=2", skip(matching=r'\w='), assign('x', int), ', ', skip(take=2), assign('y', int))
		self.assertEqual(['x', 'y'], list(b))

	def test_regex_literal(self):
		b = parse("Card   7:  1  2", regex(r'Card\s+'), assign('id', int), regex(r':\s+'), assign('nums', split(cast=int)))
		self.assertEqual((7, [1, 2]), b.pick('id', 'nums'))

	def test_backref(self):
		b = parse("ab|cd|ef", assign('a', take=2), assign('sep', take=1), assign('b'), backref('sep'), assign('c'))
		self.assertEqual(('cd', 'ef'), b.pick('b', 'c'))

	def test_result_callable(self):
		self.assertEqual(7, parse("3+4", assign('a', int), '+', assign('b', int), result=lambda a, b: a + b))
		self.assertEqual({'a': 3, 'b': 4}, parse("3+4", assign('a', int), '+', assign('b', int), result=lambda **kw: kw))
		self.assertEqual(3, parse("3+4", assign('a', int), '+', assign('b', int), result=lambda a, c=0: a + c))

	def test_transform_failure_is_located(self):
		with self.assertRaises(TransformFailure) as cm: parse("n=12x", "n=", assign('n', int))
		self.assertEqual(2, cm.exception.offset)
		self.assertIn("At line 1, column 3", cm.exception.complaint())

	def test_idempotence(self):
		d = compile("a=", assign('a', split(',', cast=int)), result=lambda a: a)
		text = "a=1,2,3"
		self.assertEqual(d.parse(text), d.parse(text))
		self.assertEqual([1, 2, 3], d.parse(text))

class TestBuilder(unittest.TestCase):
	def test_chaining_and_decorator(self):
		d = Definition().literal("move ").assign('n', int).literal(" from ").assign('src', int)
		@d.result
		def move(n, src): return (n, src)
		self.assertEqual((2, 9), d.parse("move 2 from 9"))
		self.assertEqual(['n', 'src'], d.names())

	def test_adding_recompiles(self):
		d = Definition(assign('a', int))
		self.assertEqual(1, d.parse("1")['a'])
		d.literal("!")
		with self.assertRaises(LiteralNotFound): d.parse("1")

class TestSplitsAndCells(unittest.TestCase):
	def test_split_on_dash(self):
		self.assertEqual(["fee", "fi", "fo", "fum"], parse("fee-fi-fo-fum", assign('w', split('-')))['w'])

	def test_chars_try_u8(self):
		self.assertEqual({3, 4}, parse("n33dl3 in 4 h4yst4ck", assign('d', chars(cast=attempt(U8), into=set)))['d'])

	def test_fixed_size(self):
		d = compile(assign('v', split(into=exactly(4), cast=U8, each=reverse_bits)))
		self.assertEqual([128, 64, 32, 16], d.parse("1 2 4 8")['v'])
		for bad in ["1 2 4", "1 2 4 8 16"]:
			with self.subTest(bad=bad), self.assertRaises(SizeMismatch):
				d.parse(bad)

	def test_cells(self):
		g = parse("012\n345", assign('g', cells(cast=U8)))['g']
		self.assertEqual([[0, 1, 2], [3, 4, 5]], g.rows())
		with self.assertRaises(UnevenGrid) as cm: parse("01\n234", assign('g', cells(cast=U8)))
		self.assertEqual(0, cm.exception.offset)

	def test_index_capture(self):
		d = compile(assign('seq', split(' ', each=match(arm("|", 0, index=index_into('idx')), arm(ANY, U8)))))
		b = d.parse("1 2 | 30 4")
		self.assertEqual([1, 2, 0, 30, 4], b['seq'])
		self.assertEqual(2, b['idx'])
		with self.assertRaises(IndexCardinality): d.parse("1 2 30 4")

	def test_try_index_capture(self):
		d = compile(assign('seq', split(' ', each=match(arm("|", 0, index=try_index_into('idx')), arm(ANY, U8)))))
		self.assertIsNone(d.parse("1 2 30 4")['idx'])
		with self.assertRaises(IndexCardinality): d.parse("1 | 2 | 4")

	def test_captured_index_reaches_result(self):
		d = compile(
			assign('g', cells(each=match(arm('S', '.', index=index_into('start')), arm(ANY)))),
			result=lambda g, start: (start, g[start]),
		)
		self.assertEqual((Point(1, 1), '.'), d.parse("..\n.S"))

	def test_nested(self):
		line = Definition(assign('k'), '=', assign('v', int), result=lambda k, v: (k, v))
		d = compile(assign('pairs', split('; ', each=line, into=dict)))
		self.assertEqual({'a': 1, 'b': 2}, d.parse("a=1; b=2")['pairs'])
		self.assertIsInstance(d.names(), list)

	def test_nested_failure_stays_fatal(self):
		line = nested(assign('v', int), ';')
		d = compile(assign('xs', split(' ', each=attempt(line))))
		with self.assertRaises(LiteralNotFound): d.parse("1; 2")

	def test_nested_regex_match(self):
		pair = nested(assign('a', int), ',', assign('b', int), result=lambda a, b: a * b)
		self.assertEqual([2, 12], parse("(1,2) (3,4)", assign('p', find_matches(r'\d+,\d+', each=pair)))['p'])
		self.assertIsInstance(pair, NestedParse)

class TestConstruction(unittest.TestCase):
	def assertConstructionError(self, *sections, result=None):
		with self.assertRaises(ConstructionError):
			compile(*sections, result=result)

	def test_structure(self):
		self.assertConstructionError()
		self.assertConstructionError(assign('a'), assign('b'))
		self.assertConstructionError(assign('a'), ',', assign('a'))
		self.assertConstructionError(backref('x'), assign('x'))
		self.assertConstructionError(assign('x'), backref('x'))

	def test_transforms(self):
		self.assertConstructionError(assign('a', attempt(int)))
		self.assertConstructionError(assign('a', split(into=ITERATOR, each=match(arm('|', index=index_into('i')), arm(ANY)))))
		self.assertConstructionError(assign('a', compose(split(each=match(arm('|', index=index_into('i')), arm(ANY))), len)))
		self.assertConstructionError(assign('a', match(arm('|', index=index_into('i')), arm(ANY))))
		self.assertConstructionError(assign('a', cells(cast=attempt(U8))))
		self.assertConstructionError(assign('i'), ',', assign('a', split(each=match(arm('|', index=index_into('i')), arm(ANY)))))

	def test_modes(self):
		with self.assertRaises(ConstructionError): assign('a', take=1, matching='x')
		with self.assertRaises(ConstructionError): assign('a', take=-1)
		with self.assertRaises(ConstructionError): assign('a', matching='(')
		with self.assertRaises(ConstructionError): assign('not a name')
		with self.assertRaises(ConstructionError): Definition(3)

	def test_result_parameters(self):
		self.assertConstructionError(assign('a'), result=lambda b: b)
		self.assertConstructionError(assign('a'), result=42)

	def test_nested_isolation(self):
		inner = Definition(assign('x'), result=lambda x, outer: x)
		self.assertConstructionError(assign('outer', take=1), assign('rest', inner))
		inner_backref = Definition(backref('outer'), assign('x'))
		self.assertConstructionError(assign('outer', take=1), assign('rest', inner_backref))

class TestDiagnostics(unittest.TestCase):
	def test_complaint(self):
		text = "a=1\nb=x"
		lines = Definition(assign('lines', split('\n', each=nested(skip(take=2), assign('v', int)))))
		with self.assertRaises(TransformFailure) as cm: lines.parse(text)
		self.assertEqual("b=x"[2:], cm.exception.remaining)
		self.assertTrue(cm.exception.complaint().startswith("At line 1, column 3"))

if __name__ == '__main__':
	unittest.main()
