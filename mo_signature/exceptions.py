# encoding: utf-8
from mo_future import is_text
from mo_logs import Log

from mo_signature.utils import quote


class ParseException(Exception):
    """
    Raised when the signature text does not match the grammar.

    :param expr: short description of what was expected
    :param loc: index into `string` where the failure was detected
    :param string: the full text being parsed
    :param msg: optional override of the standard message
    """

    __slots__ = ["expr", "loc", "string", "msg"]

    expecting = "valid signature"

    def __init__(self, expr, loc, string, msg=""):
        if not is_text(string):
            Log.error("expecting string, not {{type}}", type=type(string).__name__)
        Exception.__init__(self)
        self.expr = expr or self.expecting
        self.loc = loc
        self.string = string
        self.msg = msg

    @property
    def remainder(self):
        return self.string[self.loc :]

    @property
    def found(self):
        return quote(self.remainder)

    @property
    def message(self):
        if self.msg:
            return "{0} (at char {1})".format(self.msg, self.loc)
        return "Expecting {0}, found {1} (at char {2})".format(
            self.expr, self.found, self.loc
        )

    def __str__(self):
        return self.message

    def __repr__(self):
        return "{0}({1!r}, {2}, {3!r})".format(
            self.__class__.__name__, self.expr, self.loc, self.string
        )


class EmptyToken(ParseException):
    expecting = "token"


class EmptyType(ParseException):
    expecting = "type"


class InvalidTokenStart(ParseException):
    expecting = "letter"


class UnterminatedArraySuffix(ParseException):
    expecting = "']'"


class ExpectedOpenParen(ParseException):
    expecting = "'('"


class ExpectedCloseParen(ParseException):
    expecting = "')'"


class MissingNameInArgument(ParseException):
    expecting = "argument name"


class MissingNameInComponents(ParseException):
    expecting = "named tuple components"


class UnexpectedNodeType(ParseException):
    expecting = "argument or tuple"


class UnexpectedTrailingInput(ParseException):
    expecting = "end of text"


class NestingTooDeep(ParseException):
    expecting = "shallower tuple nesting"
