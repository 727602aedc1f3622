# encoding: utf-8
from mo_dots import Data

TUPLE = "tuple"
TUPLE_ARRAY = "tuple[]"
FUNCTION = "function"


class Argument(object):
    """Describes one function argument, or one member of a tuple argument.

    ``components`` is empty unless ``type`` is ``tuple`` or ``tuple[]``.
    ``internal_type`` always mirrors ``type``.

    Example::

        sig = parse_signature("f((uint256,address)[] pairs)")
        arg = sig.inputs[0]
        arg.name           # -> 'pairs'
        arg.type           # -> 'tuple[]'
        str(arg)           # -> '(uint256,address)[]'
        arg.__data__()     # -> {"name": "pairs", "type": "tuple[]", "internalType": "tuple[]", "components": [...]}
    """

    __slots__ = ["_name", "_type", "_components"]

    def __init__(self, name, type, components=()):
        self._name = name
        self._type = type
        self._components = tuple(components)

    @property
    def name(self):
        return self._name

    @property
    def type(self):
        return self._type

    @property
    def internal_type(self):
        return self._type

    @property
    def components(self):
        return self._components

    @property
    def is_tuple(self):
        return self._type in (TUPLE, TUPLE_ARRAY)

    @property
    def canonical(self):
        if not self.is_tuple:
            return self._type
        output = "(" + ",".join(c.canonical for c in self._components) + ")"
        if self._type == TUPLE_ARRAY:
            output += "[]"
        return output

    def __data__(self):
        output = Data(name=self._name, type=self._type, internalType=self._type)
        if self._components:
            output.components = [c.__data__() for c in self._components]
        return output

    def __eq__(self, other):
        return (
            isinstance(other, Argument)
            and self._name == other._name
            and self._type == other._type
            and self._components == other._components
        )

    def __hash__(self):
        return hash((self._name, self._type, self._components))

    def __str__(self):
        return self.canonical

    def __repr__(self):
        if self._components:
            return "Argument({0!r}, {1!r}, {2!r})".format(
                self._name, self._type, list(self._components)
            )
        return "Argument({0!r}, {1!r})".format(self._name, self._type)


class Signature(object):
    """The parsed function: its name and its ordered arguments"""

    __slots__ = ["_name", "_inputs"]

    def __init__(self, name, inputs=()):
        self._name = name
        self._inputs = tuple(inputs)

    @property
    def name(self):
        return self._name

    @property
    def kind(self):
        return FUNCTION

    @property
    def inputs(self):
        return self._inputs

    @property
    def canonical(self):
        return self._name + "(" + ",".join(i.canonical for i in self._inputs) + ")"

    def __data__(self):
        return Data(
            name=self._name,
            type=FUNCTION,
            inputs=[i.__data__() for i in self._inputs],
        )

    def __eq__(self, other):
        return (
            isinstance(other, Signature)
            and self._name == other._name
            and self._inputs == other._inputs
        )

    def __hash__(self):
        return hash((self._name, self._inputs))

    def __str__(self):
        return self.canonical

    def __repr__(self):
        return "Signature({0!r}, {1!r})".format(self._name, list(self._inputs))
