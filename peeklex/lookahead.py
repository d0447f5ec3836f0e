"""
Arbitrary-depth lookahead over a one-shot scanner.

A parser generally wants to look a token or two ahead before it commits to
anything. The Scanner can't go back, so the Lexer keeps whatever it has pulled
but not yet handed out in a pair of parallel FIFO queues (one for token kinds,
one for semantic values) and pulls from the scanner only as deep as it's asked.

Running out of tokens is not an error: `peek` and `consume` return None, and the
caller must check. Once the scanner reports the end of the text, the lexer
remembers, and never asks it again.

A Lexer is good for one text. When done with it, call `release()` (or use it as
a context manager) and throw it away. Any use after that raises UseAfterRelease.
"""

import sys
from collections import deque
from typing import Optional

from .support.interfaces import InvalidArgument, UseAfterRelease
from .scanning.interface import Token, LexerFilter
from .scanning.engine import Scanner

VERBOSE = False

def _check_depth(n):
	if isinstance(n, bool) or not isinstance(n, int) or n < 1:
		raise InvalidArgument('n', 'a positive integer', n)

class Lexer:
	def __init__(self, name:str, text:str, rules, lexer_filter:Optional[LexerFilter]=None, *, anchored=True):
		self.name = name
		self.__scanner = Scanner(text, rules, lexer_filter, anchored=anchored, name=name)
		self.__kinds = deque()
		self.__semantics = deque()
		self.end_of_stream = False
		self.__is_open = True
		self.__pulled = self.__deepest = 0

	@property
	def is_open(self) -> bool: return self.__is_open

	@property
	def buffered(self) -> int:
		""" How many tokens have been pulled from the scanner but not yet consumed. """
		return len(self.__kinds)

	@property
	def finished(self) -> bool:
		""" True once the scanner's cursor has reached the end of the text. Tokens may still be buffered. """
		self.__check_open()
		return self.__scanner.finished

	def __check_open(self):
		if not self.__is_open: raise UseAfterRelease(self.name)

	def __pull(self) -> Optional[Token]:
		if self.end_of_stream: return None
		token = self.__scanner.pull()
		if token is None: self.end_of_stream = True
		else: self.__pulled += 1
		return token

	def peek(self, n=1) -> Optional[Token]:
		"""
		Return the token `n` positions ahead of the read position without consuming it,
		or None if the text runs out first. Pulls from the scanner only as needed.
		"""
		self.__check_open()
		_check_depth(n)
		while len(self.__kinds) < n:
			token = self.__pull()
			if token is None: return None
			self.__kinds.append(token.kind)
			self.__semantics.append(token.semantic)
		self.__deepest = max(self.__deepest, n)
		return Token(self.__kinds[n-1], self.__semantics[n-1])

	def consume(self, n=1) -> Optional[Token]:
		"""
		Remove `n` tokens, buffered ones first, and return the last one removed.
		Returns None if the text runs out before `n` tokens could be removed.
		"""
		self.__check_open()
		_check_depth(n)
		token = None
		while n and self.__kinds:
			token = Token(self.__kinds.popleft(), self.__semantics.popleft())
			n -= 1
		while n:
			token = self.__pull()
			if token is None: return None
			n -= 1
		return token

	def tokens(self) -> list[Token]:
		""" Consume everything that's left. """
		return list(self)

	def __iter__(self):
		return iter(self.consume, None)

	def release(self):
		""" Irreversible teardown: drops the buffer, the scanner, and with it the text and rule table. """
		self.__check_open()
		if VERBOSE:
			print("Lexer %r: pulled %d token(s), deepest peek %d, %d left unconsumed." % (
				self.name, self.__pulled, self.__deepest, len(self.__kinds)
			), file=sys.stderr)
		self.__kinds.clear()
		self.__semantics.clear()
		self.__scanner = None
		self.__is_open = False

	def __enter__(self): return self
	def __exit__(self, exc_type, exc_val, exc_tb):
		if self.__is_open: self.release()
