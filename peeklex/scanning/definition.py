""" Hook patterns up to token handlers, building an ordered rule table one rule at a time. """

from .interface import Rule, make_rule, compile_pattern
from .engine import Scanner
from ..lookahead import Lexer


class Definition:
	r"""
	For instance:
		d = Definition()
		d.ignore(r'\s+')
		d.token('number', r'\d+')
		@d.on(r'[A-Za-z_]\w*')
		def word(text): return ('keyword' if text in KEYWORDS else 'name'), text

	Rules are tried in the order they were defined.
	"""
	def __init__(self, name="Rule Table", *, anchored=True):
		self.name = name
		self.__rules = []
		self.__anchored = anchored
		self.__awaiting_action = False

	def rules(self) -> tuple[Rule, ...]:
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the final pattern!')
		return tuple(self.__rules)

	def scan(self, text, *, name=None):
		return Scanner(text, self.rules(), anchored=self.__anchored, name=name)

	def lexer(self, text, *, name=None):
		return Lexer(name or self.name, text, self.rules(), anchored=self.__anchored)

	def __install_rule(self, pattern, action):
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		self.__rules.append(make_rule(pattern, action))

	def token(self, kind:str, pattern):
		""" This says every member of the pattern has token kind=kind and semantic=matched text. """
		self.__install_rule(pattern, lambda text: (kind, text))

	def token_map(self, kind:str, pattern, fn:callable):
		""" Every member of the pattern has token kind=kind and semantic=fn(matched text). """
		self.__install_rule(pattern, lambda text: (kind, fn(text)))

	def ignore(self, pattern):
		""" Tell Scanner to consume, but never emit, what matches the pattern. """
		self.__install_rule(pattern, None)

	def on(self, pattern):
		""" Decorate a function from matched text to a (kind, semantic) pair. """
		if self.__awaiting_action: raise AssertionError('You forgot to provide the action for the previous pattern!')
		compile_pattern(pattern)
		self.__awaiting_action = True
		def decorator(fn):
			assert self.__awaiting_action
			self.__awaiting_action = False
			assert callable(fn)
			self.__install_rule(pattern, fn)
			return fn
		return decorator
