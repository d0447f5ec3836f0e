"""
This file aggregates the exception types which peeklex deals in.

Running out of input is not among them: the lookahead layer signals the end of
the token stream by returning None, and every caller is expected to check.
What remains are the genuinely exceptional conditions:

* somebody handed the lexer the wrong kind of thing (InvalidArgument),
* the rule table has a hole in it, so no rule matches at some position (LexError),
* somebody kept using a lexer after releasing it (UseAfterRelease).
"""

from typing import Optional

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the lexical machinery. """

class InvalidArgument(LanguageError, TypeError):
	"""
	Raised at construction (or call) time when an argument has the wrong type or shape.
	`parameter` names the offending parameter.
	"""
	def __init__(self, parameter:str, expected:str, got):
		super().__init__("argument %r must be %s, not %s"%(parameter, expected, type(got).__name__))
		self.parameter, self.expected = parameter, expected

class LexError(LanguageError):
	"""
	Raised if no rule matches at the scanner's current position.
	Parameters are:
		the string offset where it happened.
		the name of the scanner (for diagnostics only).
		a short excerpt of the text starting at the offending position.
	The message is a located complaint with the offending line illustrated.
	"""
	def __init__(self, position:int, name:Optional[str], context:str, complaint:str):
		super().__init__(complaint)
		self.position, self.name, self.context = position, name, context

class UseAfterRelease(LanguageError, RuntimeError):
	""" A released lexer has no state left to answer with. """
	def __init__(self, name):
		super().__init__("lexer %r was used after release()"%(name,))
		self.name = name
