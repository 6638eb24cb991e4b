import unittest
from puzzleparse.support import failureprone

class TestSplitLines(unittest.TestCase):
	def test_modes(self):
		for mode, text, expect in [
			('unix', "ab\ncd", ['ab', 'cd']),
			('unix', "ab\r\ncd", ['ab\r', 'cd']),
			('dos', "ab\r\ncd", ['ab', 'cd']),
			('normal', "a\rb\r\nc\nd", ['a', 'b', 'c', 'd']),
			('apple', "a\rb", ['a', 'b']),
			('unicode', "a\u2028b", ['a', 'b']),
			('unix', "ab\n", ['ab', '']),
		]:
			with self.subTest(mode=mode, text=text):
				self.assertEqual(expect, failureprone.split_lines(text, mode))

class TestSourceText(unittest.TestCase):
	def test_row_col(self):
		s = failureprone.SourceText("abc\r\ndef")
		self.assertEqual((0, 0), s.row_col(0))
		self.assertEqual((0, 2), s.row_col(2))
		self.assertEqual((1, 1), s.row_col(6))
		self.assertEqual((1, 3), s.row_col(8))
		self.assertEqual("abc\r\n", s.line(0))
		self.assertEqual("def", s.line(1))

	def test_complaint(self):
		s = failureprone.SourceText("abc\ndef", filename='input.txt')
		lines = s.complaint(5, 2, "oops").split('\n')
		self.assertEqual("input.txt: line 2, column 2: oops", lines[0])
		self.assertEqual(" >>> def", lines[1])
		self.assertEqual("      ^^ near here", lines[2])

	def test_illustration(self):
		self.assertEqual("abc\n  ^ near here", failureprone.illustration("abc\n", 2))
		self.assertEqual("abc\n   ^ near here", failureprone.illustration("abc", 3, 5))
		self.assertEqual("\tx\n\t^ here", failureprone.illustration("\tx", 1, caption="here"))

if __name__ == '__main__':
	unittest.main()
