import unittest
from puzzleparse.interface import ConstructionError, UnmatchedValue, IndexCardinality, DROP, KEEP
from puzzleparse.convert import U8
from puzzleparse.patterns import ANY, Ok, Err, between, span, at_least, where, one_of
from puzzleparse.transform import (
	Site, typecast, call, compose, attempt, result_of, match, arm,
	index_into, try_index_into, indexes_into,
)

class TestPatterns(unittest.TestCase):
	def test_vocabulary(self):
		m = match(
			arm(between(0, 9), 'digit'),
			arm(span(10, 100), 'small'),
			arm(at_least(100), 'big'),
			arm('|' | one_of('/', '\\'), 'bar'),
			arm(('x', ANY), 'x-tuple'),
			arm(where(str.isupper), 'shout'),
			arm(ANY, 'other'),
		)
		for value, expect in [
			(9, 'digit'), (10, 'small'), (99, 'small'), (100, 'big'),
			('|', 'bar'), ('\\', 'bar'), (('x', 3), 'x-tuple'), ('HI', 'shout'), ('hi', 'other'),
		]:
			with self.subTest(value=value):
				self.assertEqual(expect, m.apply(value))

	def test_range_and_outcomes(self):
		m = match((range(1, 3), 'low'), (Ok(ANY), 'fine'), (Err('x'), 'ex'), (ANY, KEEP))
		self.assertEqual('low', m.apply(2))
		self.assertEqual(3, m.apply(3))
		self.assertEqual('fine', m.apply(Ok(5)))
		self.assertEqual('ex', m.apply(Err('x')))
		self.assertEqual(Err('y'), m.apply(Err('y')))

	def test_guard(self):
		m = match(arm(ANY, 'even', when=lambda v: v % 2 == 0), arm(ANY, 'odd'))
		self.assertEqual(['even', 'odd'], [m.apply(4), m.apply(5)])

class TestTransforms(unittest.TestCase):
	def test_compose(self):
		t = compose(U8, lambda v: v * 2)
		self.assertEqual(14, t.apply('7'))
		self.assertEqual(4, typecast(U8).then(call(lambda v: v + 1)).apply('3'))

	def test_attempt(self):
		t = attempt(U8)
		self.assertEqual(5, t.apply('5'))
		self.assertIs(DROP, t.apply('x'))
		self.assertIs(DROP, attempt(lambda v: None).apply('x'))
		self.assertTrue(t.fallible)
		with self.assertRaises(ConstructionError): attempt(attempt(U8)).check()

	def test_result_of(self):
		t = result_of(U8)
		self.assertEqual(Ok(5), t.apply('5'))
		self.assertEqual(Err('x'), t.apply('x'))
		self.assertNotEqual(Ok('x'), Err('x'))

	def test_unmatched(self):
		m = match(('a', 1))
		with self.assertRaises(UnmatchedValue) as cm: m.apply('b')
		self.assertIn("unmatched value in match expression: 'b'", str(cm.exception))

	def test_arm_result_shorthand(self):
		self.assertEqual(30, match(('|', 0), (ANY, U8)).apply('30'))
		self.assertEqual(0, match(('|', 0), (ANY, U8)).apply('|'))

	def test_captures(self):
		m = match(arm('|', 0, index=index_into('bar')), arm('#', index=indexes_into('walls')), arm(ANY))
		self.assertEqual(['bar', 'walls'], [c.name for c in m.captures()])
		slots = {c.name: c.new_slot() for c in m.captures()}
		for i, v in enumerate("a|##"):
			m.apply(v, Site(i, slots))
		self.assertEqual(1, slots['bar'].final())
		self.assertEqual([2, 3], slots['walls'].final())

	def test_cardinality(self):
		once = index_into('x').new_slot()
		with self.assertRaises(IndexCardinality): once.final()
		once.record(1)
		with self.assertRaises(IndexCardinality): once.record(2)
		maybe = try_index_into('y').new_slot()
		self.assertIsNone(maybe.final())

	def test_construction(self):
		with self.assertRaises(ConstructionError): match()
		with self.assertRaises(ConstructionError): match(arm('a', index=index_into('i')), arm('b', index=index_into('i')))
		with self.assertRaises(ConstructionError): index_into('not a name')
		with self.assertRaises(ConstructionError): compose()
		with self.assertRaises(ConstructionError): typecast(42)
		with self.assertRaises(ConstructionError): match(arm(ANY, attempt(U8))).check()

if __name__ == '__main__':
	unittest.main()
