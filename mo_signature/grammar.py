# encoding: utf-8
"""
Recursive descent over the signature grammar::

    argument_list := "(" named_type (delim named_type)* ")" ["[]"]
    named_type    := [identifier " "] argument_list [" " identifier]
                   | elementary [" " identifier]
    elementary    := type_token ("[" digit* "]")*

Every parser takes the full string and a start index, and returns the end
index of what it consumed; `string[end:]` is the unparsed remainder.
"""
from mo_signature import engine as engines
from mo_signature.exceptions import (
    EmptyType,
    ExpectedCloseParen,
    ExpectedOpenParen,
    NestingTooDeep,
    ParseException,
    UnterminatedArraySuffix,
)
from mo_signature.tokens import IDENTIFIER, TYPE, consume_token
from mo_signature.utils import is_digit, is_space

ARRAY_MARKER = "[]"


class Elementary(object):
    """
    Raw node for a non-tuple argument
    """

    __slots__ = ["name", "type"]

    def __init__(self, name, type):
        self.name = name
        self.type = type

    def __eq__(self, other):
        return (
            isinstance(other, Elementary)
            and self.name == other.name
            and self.type == other.type
        )

    def __repr__(self):
        return "Elementary({0!r}, {1!r})".format(self.name, self.type)


class Composite(object):
    """
    Raw node for a tuple argument; members are raw nodes in source order
    """

    __slots__ = ["name", "members", "is_array"]

    def __init__(self, name, members, is_array=False):
        self.name = name
        self.members = members
        self.is_array = is_array

    def __eq__(self, other):
        return (
            isinstance(other, Composite)
            and self.name == other.name
            and self.members == other.members
            and self.is_array == other.is_array
        )

    def __repr__(self):
        return "Composite({0!r}, {1!r}, is_array={2})".format(
            self.name, self.members, self.is_array
        )


def _type_token_end(string, start):
    # A TYPE TOKEN MAY HAVE SWALLOWED " name"; ONLY THE TYPE IS CONSUMED
    token, end = consume_token(string, start, TYPE)
    split = token.find(" ")
    if split != -1:
        end = start + split
    return end


def _array_suffix_end(string, start):
    end = start
    instrlen = len(string)
    while end < instrlen and string[end] == "[":
        end += 1
        while end < instrlen and is_digit(string[end]):
            end += 1
        if end >= instrlen or string[end] != "]":
            raise UnterminatedArraySuffix(None, end, string)
        end += 1
    return end


def _parse_name(string, start):
    """
    :return: (name, end) FOR AN EXPLICIT " name", OR (None, start)
    """
    if start < len(string) and is_space(string[start]):
        return consume_token(string, start + 1, IDENTIFIER)
    return None, start


def _prefix_name_end(string, start):
    """
    :return: (name, end) FOR "name (", WITH end AT THE "(", OR (None, start)
    """
    try:
        name, end = consume_token(string, start, IDENTIFIER)
    except ParseException:
        return None, start
    if string.startswith(" (", end):
        return name, end + 1
    return None, start


def _check_depth(string, start, depth, engine):
    if depth > engine.max_depth:
        raise NestingTooDeep(
            None,
            start,
            string,
            "Tuples nested deeper than {0} levels".format(engine.max_depth),
        )


def _expect_more(string, end):
    # A DELIMITER (OR THE OPEN PAREN) AT THE VERY END MEANS THE LIST WAS NEVER CLOSED
    if end >= len(string):
        raise ExpectedCloseParen(None, end, string)


def parse_elementary_type(string, start=0):
    """
    :return: (type, end) FOR AN ELEMENTARY TYPE WITH ANY ARRAY SUFFIXES
    """
    end = _type_token_end(string, start)
    end = _array_suffix_end(string, end)
    return string[start:end], end


def parse_elementary_type_named(string, start=0, position=0, engine=None):
    engine = engine or engines.CURRENT
    type_, end = parse_elementary_type(string, start)
    name, end = _parse_name(string, end)
    return Elementary(name or engine.synthesize_name(position), type_), end


def parse_composite_type(string, start=0, depth=0, engine=None):
    """
    :return: (members, end) WHERE members IS THE LIST OF MEMBER TYPES, ENDING
             WITH "[]" WHEN THE TUPLE IS AN ARRAY
    """
    engine = engine or engines.CURRENT
    if start >= len(string) or string[start] != "(":
        raise ExpectedOpenParen(None, start, string)
    _check_depth(string, start, depth + 1, engine)

    _expect_more(string, start + 1)
    member, end = parse_type(string, start + 1, depth + 1, engine)
    result = [member]
    while end < len(string) and string[end] != ")":
        _expect_more(string, end + 1)
        member, end = parse_type(string, end + 1, depth + 1, engine)
        result.append(member)
    if end >= len(string):
        raise ExpectedCloseParen(None, end, string)
    end += 1
    if string.startswith(ARRAY_MARKER, end):
        result.append(ARRAY_MARKER)
        end += len(ARRAY_MARKER)
    return result, end


def parse_composite_type_named(
    string, start=0, position=0, depth=0, engine=None, name=None
):
    """
    Tuple argument; an explicit name is written before the "(" (passed in
    as `name`) or after the closing ")" or "[]"
    """
    engine = engine or engines.CURRENT
    _check_depth(string, start, depth + 1, engine)
    members, is_array, end = parse_argument_list(string, start, depth + 1, engine)
    if not name:
        name, end = _parse_name(string, end)
    return Composite(name or engine.synthesize_name(position), members, is_array), end


def parse_type(string, start=0, depth=0, engine=None):
    """
    Plain type: any explicit argument name is consumed and discarded
    :return: (type, end) WHERE type IS A STRING, OR A LIST FOR TUPLES
    """
    engine = engine or engines.CURRENT
    if start >= len(string):
        raise EmptyType(None, start, string)
    _, start = _prefix_name_end(string, start)
    if string[start] == "(":
        result, end = parse_composite_type(string, start, depth, engine)
    else:
        result, end = parse_elementary_type(string, start)
    _, end = _parse_name(string, end)
    return result, end


def parse_type_named(string, start=0, position=0, depth=0, engine=None):
    """
    One member of an argument list; the argument is named `<name_prefix><position>`
    when the text does not name it
    :return: (node, end)
    """
    engine = engine or engines.CURRENT
    engine.debugActions.TRY(string, start, "type")
    try:
        if start >= len(string):
            raise EmptyType(None, start, string)
        name, type_start = _prefix_name_end(string, start)
        if string[type_start] == "(":
            node, end = parse_composite_type_named(
                string, type_start, position, depth, engine, name
            )
        else:
            node, end = parse_elementary_type_named(string, start, position, engine)
    except ParseException as cause:
        engine.debugActions.FAIL(string, start, "type", cause)
        raise
    engine.debugActions.MATCH(string, start, end, "type", node)
    return node, end


def parse_argument_list(string, start=0, depth=0, engine=None):
    """
    :return: (members, is_array, end)
    """
    engine = engine or engines.CURRENT
    if start >= len(string) or string[start] != "(":
        raise ExpectedOpenParen(None, start, string)

    position = 0
    _expect_more(string, start + 1)
    member, end = parse_type_named(string, start + 1, position, depth, engine)
    members = [member]
    while end < len(string) and string[end] != ")":
        position += 1
        _expect_more(string, end + 1)
        member, end = parse_type_named(string, end + 1, position, depth, engine)
        members.append(member)
    if end >= len(string):
        raise ExpectedCloseParen(None, end, string)
    end += 1

    is_array = string.startswith(ARRAY_MARKER, end)
    if is_array:
        end += len(ARRAY_MARKER)
    return members, is_array, end
