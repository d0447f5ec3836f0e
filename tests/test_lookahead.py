import io, unittest
from contextlib import redirect_stderr
from peeklex import lookahead
from peeklex.lookahead import Lexer
from peeklex.scanning.interface import LexerFilter, Token
from peeklex.scanning.patterns import lua
from peeklex.support.interfaces import InvalidArgument, LexError, UseAfterRelease

def number(text): return 'NUMBER', text
def ident(text): return 'ID', text
def space(text): return 'SPACE', text
def comment(text): return 'COMMENT', text

RULES = [
	(lua('^%s+'), space),
	(lua('^%-%-[^\n]*'), comment),
	(lua('^%d+'), number),
	(lua('^%a+'), ident),
]
FILTER = LexerFilter(space=space, comments=comment)

def make(text='12 ab 34'): return Lexer('test', text, RULES, FILTER)

class TestPeek(unittest.TestCase):
	def test_01_peek_is_idempotent(self):
		lexer = make()
		self.assertEqual(Token('ID', 'ab'), lexer.peek(2))
		self.assertEqual(Token('ID', 'ab'), lexer.peek(2))
		self.assertEqual(Token('NUMBER', '12'), lexer.peek())
		self.assertEqual(Token('NUMBER', '12'), lexer.peek(1))

	def test_02_peek_pulls_only_as_deep_as_asked(self):
		lexer = make()
		self.assertEqual(0, lexer.buffered)
		lexer.peek()
		self.assertEqual(1, lexer.buffered)
		lexer.peek(2)
		self.assertEqual(2, lexer.buffered)
		lexer.peek(1)
		self.assertEqual(2, lexer.buffered)
		self.assertFalse(lexer.end_of_stream)

	def test_03_peek_past_the_end(self):
		lexer = make()
		self.assertIsNone(lexer.peek(4))
		self.assertTrue(lexer.end_of_stream)
		self.assertEqual(3, lexer.buffered)
		self.assertEqual(Token('NUMBER', '34'), lexer.peek(3))

	def test_04_empty_source(self):
		lexer = make('')
		self.assertIsNone(lexer.peek())
		self.assertIsNone(lexer.consume())
		self.assertTrue(lexer.end_of_stream)

class TestConsume(unittest.TestCase):
	def test_01_single_token_advance(self):
		lexer = make()
		self.assertEqual(Token('NUMBER', '12'), lexer.consume())
		self.assertEqual(Token('ID', 'ab'), lexer.peek())

	def test_02_consume_returns_the_last_token_removed(self):
		self.assertEqual(Token('ID', 'ab'), make().consume(2))
		self.assertEqual(Token('NUMBER', '34'), make().consume(3))

	def test_03_consume_agrees_with_prior_peek(self):
		for k in range(1, 5):
			with self.subTest(k=k):
				expected = make().peek(k+1)
				lexer = make()
				lexer.consume(k)
				self.assertEqual(expected, lexer.peek(1))

	def test_04_consume_uses_the_buffer_first(self):
		lexer = make()
		lexer.peek(2)
		self.assertEqual(Token('NUMBER', '34'), lexer.consume(3))
		self.assertEqual(0, lexer.buffered)
		self.assertIsNone(lexer.peek())

	def test_05_consume_past_the_end(self):
		lexer = make()
		self.assertIsNone(lexer.consume(5))
		self.assertIsNone(lexer.peek())
		self.assertIsNone(lexer.consume())

	def test_06_tokens_drains_the_lexer(self):
		lexer = make()
		lexer.peek(2)
		self.assertEqual([('NUMBER', '12'), ('ID', 'ab'), ('NUMBER', '34')], lexer.tokens())
		self.assertEqual([], lexer.tokens())

class TestStreamProperties(unittest.TestCase):
	def test_01_filtered_tokens_are_invisible(self):
		text = '  -- leading comment\n12 ab -- and another\n\t34 --\ncd  '
		lexer = make(text)
		self.assertEqual(Token('NUMBER', '34'), lexer.peek(3))
		tokens = lexer.tokens()
		self.assertEqual(['NUMBER', 'ID', 'NUMBER', 'ID'], [t.kind for t in tokens])
		self.assertEqual(['12', 'ab', '34', 'cd'], [t.semantic for t in tokens])

	def test_02_exhaustion_is_monotonic(self):
		lexer = make()
		self.assertIsNone(lexer.peek(4))
		self.assertIsNone(lexer.peek(4))
		self.assertIsNone(lexer.peek(9))
		self.assertEqual(Token('NUMBER', '34'), lexer.consume(3))
		for n in (1, 2, 7):
			with self.subTest(n=n):
				self.assertIsNone(lexer.peek(n))
				self.assertIsNone(lexer.consume(n))
		self.assertTrue(lexer.end_of_stream)

	def test_03_finished_tracks_the_scanner(self):
		lexer = make('1 2')
		self.assertFalse(lexer.finished)
		lexer.peek(2)
		self.assertTrue(lexer.finished)
		self.assertEqual(2, lexer.buffered)

	def test_04_lex_error_propagates(self):
		lexer = make('12 ?')
		self.assertEqual(Token('NUMBER', '12'), lexer.peek())
		with self.assertRaises(LexError) as cm:
			lexer.peek(2)
		self.assertEqual(3, cm.exception.position)
		self.assertEqual(1, lexer.buffered)
		self.assertEqual(Token('NUMBER', '12'), lexer.consume())
		with self.assertRaises(LexError):
			lexer.consume()

	def test_05_depth_must_be_a_positive_integer(self):
		lexer = make()
		for bogus in (0, -1, 1.5, '2', True, None):
			with self.subTest(n=bogus):
				with self.assertRaises(InvalidArgument):
					lexer.peek(bogus)
				with self.assertRaises(InvalidArgument):
					lexer.consume(bogus)
		self.assertEqual(0, lexer.buffered)

	def test_06_construction_errors(self):
		with self.assertRaises(InvalidArgument) as cm:
			Lexer('test', None, RULES, FILTER)
		self.assertEqual('text', cm.exception.parameter)
		with self.assertRaises(InvalidArgument) as cm:
			Lexer('test', 'x', [], FILTER)
		self.assertEqual('rules', cm.exception.parameter)

class TestRelease(unittest.TestCase):
	def test_01_release_clears_state(self):
		lexer = make()
		lexer.peek(3)
		self.assertTrue(lexer.is_open)
		lexer.release()
		self.assertFalse(lexer.is_open)
		self.assertEqual(0, lexer.buffered)

	def test_02_use_after_release(self):
		lexer = make()
		lexer.release()
		with self.assertRaises(UseAfterRelease):
			lexer.peek()
		with self.assertRaises(UseAfterRelease):
			lexer.consume()
		with self.assertRaises(UseAfterRelease):
			lexer.release()
		with self.assertRaises(UseAfterRelease):
			lexer.finished

	def test_03_context_manager(self):
		with make() as lexer:
			self.assertEqual(Token('NUMBER', '12'), lexer.consume())
		self.assertFalse(lexer.is_open)

	def test_04_context_manager_tolerates_early_release(self):
		with make() as lexer:
			lexer.release()
		self.assertFalse(lexer.is_open)

	def test_05_verbose_statistics(self):
		lexer = make()
		lexer.peek(2)
		lexer.consume()
		lookahead.VERBOSE = True
		try:
			with redirect_stderr(io.StringIO()) as err:
				lexer.release()
		finally:
			lookahead.VERBOSE = False
		self.assertIn("pulled 2 token(s), deepest peek 2, 1 left unconsumed", err.getvalue())
