"""
Scanning Interface Definitions.

A rule table is an ordered sequence of rules. Each rule pairs a pattern with either
a handler (which turns the matched text into a token) or nothing at all, in which
case the matched text is consumed but never emitted. Whitespace and comments are
the usual examples of the latter sort.

For compatibility with rule tables written as plain (pattern, handler) pairs, a
LexerFilter can name the handlers which are really suppression-only. Either way,
by the time a scanner sees the table, every entry is a Rule.
"""
import re, warnings
from collections.abc import Iterable
from typing import NamedTuple, Callable, Optional

from ..support.interfaces import InvalidArgument
from .patterns import LuaPattern

Handler = Callable[[str], tuple]

class Token(NamedTuple):
	"""
	For integration with the parsing mechanism, a token is defined as a 2-tuple
	consisting of "kind" and the semantic value the rule's handler provided.
	"""
	kind: str
	semantic: str

class LexerFilter(NamedTuple):
	""" Identifies which handlers, among a rule table, only suppress their matches. """
	space: Optional[Handler] = None
	comments: Optional[Handler] = None

	def suppresses(self, handler) -> bool:
		return handler is not None and (handler is self.space or handler is self.comments)

class Rule(NamedTuple):
	"""
	One entry of a rule table. `action` is None for a filtered rule.
	`anchored` is True if the pattern insists on matching right at the cursor;
	None means the scanner's policy decides.
	"""
	pattern: re.Pattern
	action: Optional[Handler]
	anchored: Optional[bool] = None

	@property
	def filtered(self) -> bool: return self.action is None

	def emit(self, lexeme:str) -> Token:
		kind, semantic = self.action(lexeme)
		assert kind is not None, "handler for %r produced no token kind"%self.pattern.pattern
		return Token(kind, semantic)


def compile_pattern(pattern) -> tuple[re.Pattern, Optional[bool]]:
	""" Accepts a regular expression (as text or compiled) or a translated Lua pattern. """
	if isinstance(pattern, LuaPattern): return pattern.regex, pattern.anchored or None
	if isinstance(pattern, re.Pattern): return pattern, None
	if isinstance(pattern, str): return re.compile(pattern), None
	raise InvalidArgument('pattern', 'a regular expression, compiled pattern, or Lua pattern', pattern)

def make_rule(pattern, action:Optional[Handler]) -> Rule:
	if action is not None and not callable(action):
		raise InvalidArgument('handler', 'callable or None', action)
	regex, anchored = compile_pattern(pattern)
	if regex.match('') is not None:
		warnings.warn("pattern %r can match the empty string; such matches are never taken."%regex.pattern)
	if anchored is None and regex.pattern[:1] in ('^', b'^'):
		warnings.warn("pattern %r starts with ^, which anchors to the start of the whole text, not to the cursor."%regex.pattern)
	return Rule(regex, action, anchored)

def coerce_rules(rules:Iterable, lexer_filter:Optional[LexerFilter]=None) -> tuple[Rule, ...]:
	"""
	Normalize a rule table: Rule objects pass through; (pattern, handler) pairs become
	Rule objects, filtered if the LexerFilter says their handler suppresses output.
	Declaration order is preserved, because it determines match precedence.
	"""
	if lexer_filter is not None and not isinstance(lexer_filter, LexerFilter):
		raise InvalidArgument('filter', 'a LexerFilter or None', lexer_filter)
	if isinstance(rules, (str, bytes)) or not isinstance(rules, Iterable):
		raise InvalidArgument('rules', 'a sequence of rules', rules)
	table = []
	for entry in rules:
		if isinstance(entry, Rule): table.append(entry)
		elif isinstance(entry, (tuple, list)) and len(entry) == 2:
			pattern, handler = entry
			if lexer_filter is not None and lexer_filter.suppresses(handler): handler = None
			elif handler is None: raise InvalidArgument('handler', 'callable', handler)
			table.append(make_rule(pattern, handler))
		else: raise InvalidArgument('rules', 'a sequence of Rule objects or (pattern, handler) pairs', entry)
	if not table: raise InvalidArgument('rules', 'a non-empty sequence of rules', rules)
	return tuple(table)
