# encoding: utf-8
from mo_parsing import Word
from mo_parsing.exceptions import ParseException as WordNotMatched
from mo_parsing.whitespaces import Whitespace

from mo_signature.exceptions import EmptyToken, InvalidTokenStart
from mo_signature.utils import (
    alphanums,
    alphas,
    identifier_symbols,
    is_alpha,
    is_identifier_symbol,
    space,
)

# SPACES ARE SIGNIFICANT: ONE SEPARATES A TYPE FROM ITS NAME
with Whitespace(""):
    identifier_word = Word(alphas + identifier_symbols, alphanums + identifier_symbols)
    type_word = Word(alphas, alphanums + space)


class Scanner(object):
    """
    One scanning mode: a mo-parsing Word, plus the predicate for the first
    character, so a bad start is reported before the Word is tried
    """

    __slots__ = ["name", "word", "is_start"]

    def __init__(self, name, word, is_start):
        self.name = name
        self.word = word
        self.is_start = is_start

    def parse(self, string, start=0):
        """
        :return: (token, end) WHERE string[start:end] == token
        """
        if start >= len(string):
            raise EmptyToken(self.name, start, string)
        if not self.is_start(string[start]):
            raise InvalidTokenStart("start of " + self.name, start, string)
        try:
            token = self.word.parse_string(string[start:])[0]
        except WordNotMatched:
            raise InvalidTokenStart("start of " + self.name, start, string)
        return token, start + len(token)

    def __str__(self):
        return self.name

    def __repr__(self):
        return "Scanner({0})".format(self.name)


# NAMES: ARGUMENTS, FUNCTIONS
IDENTIFIER = Scanner(
    "identifier", identifier_word, lambda c: is_alpha(c) or is_identifier_symbol(c)
)
# TYPES MAY ABSORB A SPACE, WHICH SEPARATES THE TYPE FROM AN ARGUMENT NAME
TYPE = Scanner("type", type_word, is_alpha)


def consume_token(string, start=0, mode=TYPE):
    """
    Scan one token, in IDENTIFIER or TYPE mode
    :return: (token, end)
    """
    return mode.parse(string, start)
