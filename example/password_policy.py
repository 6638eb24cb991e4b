"""
Password policies, one per line:

	1-3 a: abcde
	2-9 c: ccccccccc

Shows a fixed-width assignment (the letter is always exactly one character) and
iteration over a lazily split input.
"""

from typing import NamedTuple

from puzzleparse.prelude import *

class Policy(NamedTuple):
	lo: int
	hi: int
	letter: str
	password: str

	def sled_rental(self) -> bool:
		return self.lo <= self.password.count(self.letter) <= self.hi

	def toboggan(self) -> bool:
		first, second = (self.password[i-1:i] == self.letter for i in (self.lo, self.hi))
		return first != second

policy = Definition(
	assign('lo', U8), '-', assign('hi', U8), ' ',
	assign('letter', CHAR, take=1), ': ',
	assign('password'),
	result=Policy,
)

policies = compile(assign('policies', split('\n', each=policy, into=ITERATOR)), result=lambda policies: policies)

def part1(text:str) -> int:
	return sum(p.sled_rental() for p in policies.parse(text))

def part2(text:str) -> int:
	return sum(p.toboggan() for p in policies.parse(text))
