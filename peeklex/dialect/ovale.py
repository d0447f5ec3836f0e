"""
Lexical rules for the action-priority scripting language, such as:

	# Hunter spells and functions.
	Define(aimed_shot 19434)
		SpellInfo(aimed_shot focus=50)
		SpellAddBuff(aimed_shot lock_and_load_buff=-1 talent=lock_and_load_talent)

The table is written the way such tables always were: Lua patterns paired with
tokenizer functions, plus a LexerFilter naming the tokenizers for whitespace and
comments so that the lexer never emits them.

Punctuation tokens have a kind equal to their own text, so a parser can ask
for "(" directly. Two-character operators come ahead of the catch-all rule.
"""

from ..scanning.patterns import lua
from ..scanning.interface import LexerFilter
from ..lookahead import Lexer

KEYWORDS = frozenset([
	'and', 'if', 'not', 'or', 'unless',
])
DECLARATION_KEYWORDS = frozenset([
	'AddActionIcon', 'AddCheckBox', 'AddFunction', 'AddIcon', 'AddListItem',
	'Define', 'Include', 'ItemInfo', 'ItemList', 'ItemRequire',
	'ScoreSpells', 'SpellInfo', 'SpellList', 'SpellRequire',
])
SPELL_AURA_KEYWORDS = frozenset([
	'SpellAddBuff', 'SpellAddDebuff', 'SpellAddPetBuff', 'SpellAddPetDebuff',
	'SpellAddTargetBuff', 'SpellAddTargetDebuff', 'SpellDamageBuff', 'SpellDamageDebuff',
])
PARAMETER_KEYWORDS = frozenset([
	'checkbox', 'help', 'if_buff', 'if_equipped', 'if_spell', 'if_stance', 'if_target_debuff',
	'itemcount', 'itemset', 'level', 'listitem', 'pertrait', 'specialization', 'talent', 'trait', 'wait',
])
ALL_KEYWORDS = KEYWORDS | DECLARATION_KEYWORDS | SPELL_AURA_KEYWORDS | PARAMETER_KEYWORDS

def tokenize_whitespace(text): return 'space', text
def tokenize_comment(text): return 'comment', text
def tokenize_number(text): return 'number', text
def tokenize_name(text):
	return ('keyword' if text in ALL_KEYWORDS else 'name'), text
def tokenize_string(text):
	# Strip the quotation marks; the escapes stay as written.
	return 'string', text[1:-1]
def tokenize(text): return text, text

FILTER = LexerFilter(space=tokenize_whitespace, comments=tokenize_comment)

RULES = (
	(lua('^%s+'), tokenize_whitespace),
	(lua('^%d+%.?%d*'), tokenize_number),
	(lua('^[%a_][%w_]*'), tokenize_name),
	(lua('^(["\'])%1'), tokenize_string),
	(lua('^(["\']).-[^\\]%1'), tokenize_string),
	(lua('^#[^\n]*'), tokenize_comment),
	(lua('^!='), tokenize),
	(lua('^=='), tokenize),
	(lua('^<='), tokenize),
	(lua('^>='), tokenize),
	(lua('^%.%.'), tokenize),
	(lua('^.'), tokenize),
)

def lexer(text:str, name="script") -> Lexer:
	return Lexer(name, text, RULES, FILTER)
