import io, os, tempfile, unittest
from contextlib import redirect_stdout, redirect_stderr
from peeklex import __main__ as cli, lookahead

class TestCommandLine(unittest.TestCase):
	def run_cli(self, text, *flags):
		with tempfile.TemporaryDirectory() as folder:
			path = os.path.join(folder, 'script.txt')
			with open(path, 'w') as fh: fh.write(text)
			out, err = io.StringIO(), io.StringIO()
			with redirect_stdout(out), redirect_stderr(err):
				status = cli.main(cli.parse_arguments([path, *flags]))
		return status, out.getvalue().splitlines(), err.getvalue()

	def test_01_tokens(self):
		status, lines, err = self.run_cli("Define(x 1) # done\n")
		self.assertEqual(0, status)
		self.assertEqual(["keyword\t'Define'", "(\t'('", "name\t'x'", "number\t'1'", ")\t')'"], lines)
		self.assertEqual('', err)

	def test_02_all_lexemes(self):
		status, lines, err = self.run_cli("Define(x 1) # done\n", '--all')
		self.assertEqual(0, status)
		self.assertIn("space\t' '", lines)
		self.assertIn("comment\t'# done'", lines)
		self.assertEqual(9, len(lines))

	def test_03_verbose(self):
		try:
			status, lines, err = self.run_cli("a b", '-v', '--search')
		finally:
			lookahead.VERBOSE = False
		self.assertEqual(0, status)
		self.assertEqual(2, len(lines))
		self.assertIn('pulled 2 token(s)', err)
