"""
Scratchcards: each line lists the winning numbers and the numbers you have.

	Card   1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53

Numbers are right-aligned, so the runs of blanks vary. A regex literal soaks up the
padding around the punctuation, and a split on single spaces drops the empty pieces
between doubled blanks.
"""

from typing import NamedTuple

from puzzleparse.prelude import *

class Card(NamedTuple):
	id: int
	winning: frozenset
	mine: list

	def matches(self) -> int:
		return sum(1 for n in self.mine if n in self.winning)

card = Definition(
	regex(r'Card\s+'), assign('id', U32), regex(r':\s+'),
	assign('winning', split(cast=U8, into=frozenset)),
	regex(r'\s+\|\s+'),
	assign('mine', split(cast=U8)),
	result=Card,
)

def parse_cards(text:str) -> list[Card]:
	return parse(text, assign('cards', split('\n', each=card)), result=lambda cards: cards)

def part1(text:str) -> int:
	return sum(1 << (c.matches() - 1) for c in parse_cards(text) if c.matches())

def part2(text:str) -> int:
	cards = parse_cards(text)
	copies = [1] * len(cards)
	for i, c in enumerate(cards):
		for j in range(i + 1, min(len(cards), i + 1 + c.matches())):
			copies[j] += copies[i]
	return sum(copies)
