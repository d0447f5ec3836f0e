"""
Tokenize an action-priority script and print the token stream, one token per line,
as the kind and the semantic value separated by a tab.

Handy for checking what a parser will actually be fed.
"""

import sys, argparse

from peeklex import lookahead
from peeklex.dialect import ovale
from peeklex.scanning.engine import Scanner
from peeklex.support.interfaces import LexError

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m peeklex', description=__doc__,)
	parser.add_argument('source_path', help='path to input file')
	parser.add_argument('-a', '--all', action='store_true', help='also show filtered lexemes (whitespace and comments).')
	parser.add_argument('-s', '--search', action='store_true', help='let rules skip ahead to their next match instead of matching at the cursor.')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk, mainly about lookahead statistics.")
	return parser.parse_args(argv)

def each_line(args, text):
	if args.all:
		scanner = Scanner(text, ovale.RULES, anchored=not args.search, name=args.source_path)
		while True:
			found = scanner.scan_one_lexeme()
			if found is None: return
			rule, lexeme = found
			yield "%s\t%r" % rule.emit(lexeme)
	else:
		with lookahead.Lexer(args.source_path, text, ovale.RULES, ovale.FILTER, anchored=not args.search) as lexer:
			for token in lexer: yield "%s\t%r" % token

def main(args):
	if args.verbose: lookahead.VERBOSE = True
	with open(args.source_path) as fh: text = fh.read()
	try:
		for line in each_line(args, text): print(line)
	except LexError as e:
		print(e.args[0], file=sys.stderr)
		return 1
	return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
