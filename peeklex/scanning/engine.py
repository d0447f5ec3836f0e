"""
The generic ordered-choice scanner.

At each position, rules are tried in declaration order and the first one that
matches wins. There's no longest-match business and no backtracking to a later
rule once an earlier one succeeds: it's up to whoever writes the rule table to
put "==" ahead of "=", and keywords ahead of identifiers if they care.

The scanner is an explicit state object rather than a generator, so that it can
sit under a lookahead buffer or be drained eagerly with equal ease. All the state
there is: the text, the rule table, and a cursor which only ever moves forward.
"""
from typing import Optional

from ..support.interfaces import InvalidArgument, LexError
from ..support.failureprone import SourceText, excerpt
from .interface import Token, Rule, LexerFilter, coerce_rules

def _find(rule:Rule, text:str, cursor:int, anchored:bool):
	"""
	A rule matches only if it consumes at least one character.
	This algorithm deliberately ignores a zero-width match; otherwise the cursor would never move.
	"""
	if rule.anchored or (rule.anchored is None and anchored): match = rule.pattern.match(text, cursor)
	else: match = rule.pattern.search(text, cursor)
	if match is not None and match.end() > match.start(): return match

class Scanner:
	"""
	Construct with a text and an ordered rule table. Each call to `pull()` produces
	the next token (quietly consuming any filtered matches in between) or None once
	the text is used up. A scanner cannot be rewound: iterate it exactly once.

	With `anchored` (the default) every rule must match exactly at the cursor.
	Without it, a rule may match anywhere from the cursor onward and whatever it
	skips over is lost, which is how the rule tables of old behaved. Rules whose
	pattern is explicitly anchored are anchored either way.

	In a plain regular expression, `^` means the start of the whole text, not the
	cursor, so a rule like r'^\d+' can only ever match at offset zero. Leave it off
	(anchoring is the default) or write the rule as a Lua pattern instead.
	"""

	def __init__(self, text:str, rules, lexer_filter:Optional[LexerFilter]=None, *, anchored=True, name:str=None):
		if not isinstance(text, str): raise InvalidArgument('text', 'a string', text)
		self.name = name
		self.__text = text
		self.__size = len(text)
		self.__rules = coerce_rules(rules, lexer_filter)
		self.__anchored = anchored
		self.__blocked = None
		self.left = self.right = 0

	def scan_one_lexeme(self) -> Optional[tuple[Rule, str]]:
		"""
		Perform exactly one match cycle, filtered or not. Returns the winning rule and
		the matched text, or None at the end of the text. Raises LexError if no rule
		matches, and keeps raising it on every later call.
		"""
		if self.__blocked is not None: raise self.__blocked
		cursor = self.left = self.right
		if cursor >= self.__size: return None
		for rule in self.__rules:
			match = _find(rule, self.__text, cursor, self.__anchored)
			if match is not None:
				self.left, self.right = match.span()
				return rule, match.group()
		self.__blocked = self.__complain(cursor)
		raise self.__blocked

	def pull(self) -> Optional[Token]:
		""" The next token, or None when the text is exhausted. """
		while True:
			found = self.scan_one_lexeme()
			if found is None: return None
			rule, lexeme = found
			if not rule.filtered: return rule.emit(lexeme)

	def __iter__(self):
		return iter(self.pull, None)

	def has_more(self):
		return self.right < self.__size

	@property
	def finished(self) -> bool:
		""" True once the cursor has run off the end of the text. """
		return not self.has_more()

	def slice(self):
		""" Return a slice-object corresponding to the extent of matched text. """
		return slice(self.left, self.right)
	def match(self):
		""" Return the actual matched text """
		return self.__text[self.left:self.right]

	def __complain(self, cursor) -> LexError:
		source = SourceText(self.__text, filename=self.name)
		complaint = source.complaint(slice(cursor, cursor+1), "No rule matches here.")
		return LexError(cursor, self.name, excerpt(self.__text, cursor), complaint)
