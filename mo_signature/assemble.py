# encoding: utf-8
from mo_signature.exceptions import (
    MissingNameInArgument,
    MissingNameInComponents,
    UnexpectedNodeType,
)
from mo_signature.grammar import Composite, Elementary
from mo_signature.results import TUPLE, TUPLE_ARRAY, Argument


def assemble(nodes, string=""):
    """
    Convert raw parse nodes into Arguments, in the same order
    :param nodes: list of Elementary and Composite
    :param string: the parsed text, for error messages only
    :return: tuple of Argument
    """
    return tuple(_assemble_node(node, string) for node in nodes)


def _assemble_node(node, string):
    if isinstance(node, Elementary):
        if not node.name:
            raise MissingNameInArgument(
                None, 0, string, "No name in argument {0!r}".format(node)
            )
        return Argument(node.name, node.type)

    if isinstance(node, Composite):
        if not node.name or not node.members:
            raise MissingNameInComponents(
                None, 0, string, "No name in components {0!r}".format(node)
            )
        return Argument(
            node.name,
            TUPLE_ARRAY if node.is_array else TUPLE,
            assemble(node.members, string),
        )

    raise UnexpectedNodeType(
        None,
        0,
        string,
        "Failed to assemble arguments: unexpected {0}".format(type(node).__name__),
    )
