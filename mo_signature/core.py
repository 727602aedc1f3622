# encoding: utf-8
from mo_future import is_text
from mo_logs import Log

from mo_signature import engine as engines
from mo_signature.assemble import assemble
from mo_signature.exceptions import NestingTooDeep, UnexpectedTrailingInput
from mo_signature.grammar import parse_argument_list, parse_type as _parse_type
from mo_signature.results import Signature
from mo_signature.tokens import IDENTIFIER, consume_token
from mo_signature.utils import is_space


def _empty_arguments_end(string, start):
    """
    :return: END OF "()" (OR "(" SPACES ")"), OR None IF THERE ARE ARGUMENTS
    """
    if start >= len(string) or string[start] != "(":
        return None
    end = start + 1
    while end < len(string) and is_space(string[end]):
        end += 1
    if end < len(string) and string[end] == ")":
        return end + 1
    return None


def _expect_end(string, end):
    if end < len(string):
        raise UnexpectedTrailingInput(None, end, string)


def _too_deep(string):
    # THE INTERPRETER RAN OUT OF STACK BEFORE engine.max_depth WAS REACHED
    return NestingTooDeep(
        None, 0, string, "Tuples nested deeper than the interpreter allows"
    )


def parse_signature(string):
    """
    Parse a function signature, like ``transfer(address to,uint256 amount)``

    Arguments without a name in the text are named ``name0``, ``name1``, ...
    by their position in their own argument list.  Tuple arguments are
    written as parenthesized member lists, optionally followed by ``[]``,
    and named either after the list or before it: ``(uint256,address)[] pairs``
    or ``pairs (uint256,address)[]``.

    :param string: the signature text
    :return: Signature
    """
    if not is_text(string):
        Log.error("expecting string, not {{type}}", type=type(string).__name__)
    engine = engines.CURRENT

    name, end = consume_token(string, 0, IDENTIFIER)

    empty_end = _empty_arguments_end(string, end)
    if empty_end is not None:
        nodes, end = [], empty_end
    else:
        try:
            nodes, is_array, array_end = parse_argument_list(string, end, 0, engine)
        except RecursionError:
            raise _too_deep(string)
        if is_array:
            # THE ARGUMENT LIST ITSELF IS NOT A TUPLE
            _expect_end(string, array_end - 2)
        end = array_end
    _expect_end(string, end)

    try:
        return Signature(name, assemble(nodes, string))
    except RecursionError:
        raise _too_deep(string)


def parse_type(string):
    """
    Parse a single, unnamed type, like ``uint256[3][]`` or ``(address,bytes)[]``
    :return: the type string, or a list of member types for a tuple (ending
             with "[]" for a tuple array)
    """
    if not is_text(string):
        Log.error("expecting string, not {{type}}", type=type(string).__name__)
    try:
        result, end = _parse_type(string, 0, 0, engines.CURRENT)
    except RecursionError:
        raise _too_deep(string)
    _expect_end(string, end)
    return result
