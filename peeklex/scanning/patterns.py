"""
Rule tables for the scripting language were originally written with Lua patterns:
things like `^%s+`, `^[%a_][%w_]*`, or `^#.-\n`. Rather than make everyone rewrite
them, this module translates such patterns into Python regular expressions.

Lua patterns are a much smaller language than regular expressions, which makes the
translation a single left-to-right pass:

* Character classes `%a %c %d %g %l %p %s %u %w %x` and their upper-case complements.
* Escapes: `%` followed by any non-alphanumeric character stands for that character.
* Sets `[...]`, possibly negated with `^`, holding ranges, classes (complemented or not),
  and escapes. A backwards range like `z-a` is empty, as Lua has it.
* Quantifiers `*`, `+`, `?` and the lazy `-`, which apply to a single-character item.
* Anchors: `^` at the very beginning and `$` at the very end.
* Captures `(...)` and back-references `%1` through `%9`.

Position captures `()`, balanced matches `%b`, and frontiers `%f` have no
counterpart in the `re` module, so they raise PatternError.
"""

import re, string
from typing import NamedTuple

from ..support.interfaces import LanguageError, InvalidArgument

class PatternError(LanguageError):
	""" Malformed (or unsupported) Lua pattern. Parameters are the pattern and the offset of the trouble. """
	def __init__(self, pattern:str, position:int, gripe:str):
		super().__init__("%s (in Lua pattern %r at offset %d)"%(gripe, pattern, position))
		self.pattern, self.position = pattern, position

class LuaPattern(NamedTuple):
	source: str
	regex: re.Pattern
	anchored: bool

PUNCTUATION = ''.join('\\'+c for c in string.punctuation)

# Members of each class as they would appear inside a regex character set.
CLASS_MEMBERS = {
	'a': 'A-Za-z',
	'c': '\\x00-\\x1f\\x7f',
	'd': '0-9',
	'g': '\\x21-\\x7e',
	'l': 'a-z',
	'p': PUNCTUATION,
	's': '\\s',
	'u': 'A-Z',
	'w': 'A-Za-z0-9',
	'x': 'A-Fa-f0-9',
}
QUANTIFIERS = {'*':'*', '+':'+', '?':'?', '-':'*?'}

FLAGS = re.ASCII | re.DOTALL


def _class(pattern, at, letter:str) -> str:
	""" A single class, standing alone. """
	members = CLASS_MEMBERS.get(letter.lower())
	if members is None: raise PatternError(pattern, at, "Unknown character class %%%s."%letter)
	if letter.islower(): return '[%s]'%members
	return '[^%s]'%members

def _assemble(plain:list, complements:list, negated:bool) -> str:
	"""
	A regex set can't hold a complemented class next to other members, so a set
	with any of those becomes an alternation (or, if negated, a lookahead before `.`).
	"""
	if not complements:
		if not plain: return '.' if negated else '(?!)'
		return '[%s%s]'%('^' if negated else '', ''.join(plain))
	alternatives = ['[%s]'%''.join(plain)] if plain else []
	alternatives.extend('[^%s]'%members for members in complements)
	if negated: return '(?:(?!%s).)'%'|'.join(alternatives)
	return '(?:%s)'%'|'.join(alternatives)

def _set(pattern:str, at:int) -> tuple[str, int]:
	""" Translate a set starting at the `[` found at offset `at`. Returns the translation and the offset after `]`. """
	i = at + 1
	negated = pattern[i:i+1] == '^'
	if negated: i += 1
	plain, complements = [], []
	first = True
	while True:
		if i >= len(pattern): raise PatternError(pattern, at, "Unterminated set.")
		c = pattern[i]
		if c == ']' and not first: return _assemble(plain, complements, negated), i+1
		first = False
		if c == '%':
			if i+1 >= len(pattern): raise PatternError(pattern, i, "Pattern ends with %.")
			k = pattern[i+1]
			if k.isalpha():
				members = CLASS_MEMBERS.get(k.lower())
				if members is None: raise PatternError(pattern, i, "Unknown character class %%%s."%k)
				if k.islower(): plain.append(members)
				else: complements.append(members)
			else: plain.append(re.escape(k))
			i += 2
		elif pattern[i+1:i+2] == '-' and pattern[i+2:i+3] not in ('', ']'):
			last = pattern[i+2]
			# A backwards range is empty, as in Lua.
			if c <= last: plain.append('%s-%s'%(re.escape(c), re.escape(last)))
			i += 3
		else:
			plain.append(re.escape(c))
			i += 1

def translate(pattern:str) -> tuple[str, bool]:
	"""
	Translate the text of a Lua pattern into the text of an equivalent Python regular expression.
	Returns that text along with whether the pattern was anchored (began with `^`).
	The anchor itself is not part of the translation; it's the scanner's job to honor it.
	"""
	anchored = pattern.startswith('^')
	i = 1 if anchored else 0
	out = []
	quantifiable = False
	groups, open_groups = 0, []
	while i < len(pattern):
		c = pattern[i]
		if c in QUANTIFIERS and quantifiable:
			out.append(QUANTIFIERS[c])
			quantifiable = False
			i += 1
			continue
		quantifiable = True
		if c == '%':
			if i+1 >= len(pattern): raise PatternError(pattern, i, "Pattern ends with %.")
			k = pattern[i+1]
			if k == 'b': raise PatternError(pattern, i, "Balanced matches (%b) are not supported.")
			if k == 'f': raise PatternError(pattern, i, "Frontier patterns (%f) are not supported.")
			if k.isdigit():
				n = int(k)
				if n == 0 or n > groups or n in open_groups:
					raise PatternError(pattern, i, "Invalid capture index %%%s."%k)
				out.append('(?:\\%d)'%n)
				quantifiable = False
			elif k.isalpha(): out.append(_class(pattern, i, k))
			else: out.append(re.escape(k))
			i += 2
		elif c == '[':
			text, i = _set(pattern, i)
			out.append(text)
		elif c == '(':
			if pattern[i+1:i+2] == ')': raise PatternError(pattern, i, "Position captures are not supported.")
			groups += 1
			open_groups.append(groups)
			out.append('(')
			quantifiable = False
			i += 1
		elif c == ')':
			if not open_groups: raise PatternError(pattern, i, "Unbalanced ).")
			open_groups.pop()
			out.append(')')
			quantifiable = False
			i += 1
		elif c == '$' and i == len(pattern) - 1:
			out.append('\\Z')
			quantifiable = False
			i += 1
		elif c == '.':
			out.append('.')
			i += 1
		else:
			out.append(re.escape(c))
			i += 1
	if open_groups: raise PatternError(pattern, len(pattern), "Unfinished capture.")
	return ''.join(out), anchored

def lua(pattern:str) -> LuaPattern:
	""" Translate and compile a Lua pattern, for use in a rule table. """
	if not isinstance(pattern, str): raise InvalidArgument('pattern', 'a string', pattern)
	text, anchored = translate(pattern)
	try: regex = re.compile(text, FLAGS)
	except re.error as e: raise PatternError(pattern, 0, "Translation does not compile: %s."%e) from e
	return LuaPattern(pattern, regex, anchored)
