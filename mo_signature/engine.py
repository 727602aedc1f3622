# encoding: utf-8
import sys
from collections import namedtuple

from mo_dots import Data
from mo_logs import Log

from mo_signature.utils import quote

CURRENT = None

DEFAULT_MAX_DEPTH = 64
DEFAULT_NAME_PREFIX = "name"
# PYTHON STACK FRAMES SPENT PER LEVEL OF TUPLE NESTING, WITH ROOM TO SPARE
FRAMES_PER_LEVEL = 8


class Engine:
    """
    Settings for parsing signatures.  Creating an Engine makes it the current
    one; use it as a context manager (or call `release()`) to restore the
    previous engine.

    Example::

        with Engine(max_depth=4):
            parse_signature("f((((uint256))))")
    """

    def __init__(self, max_depth=DEFAULT_MAX_DEPTH, name_prefix=DEFAULT_NAME_PREFIX):
        global CURRENT
        self.config = Data()
        self.set_max_depth(max_depth)
        self.set_name_prefix(name_prefix)
        self.debugActions = DebugActions(noop, noop, noop)
        self.previous = CURRENT  # WE MAINTAIN A STACK OF ENGINES
        CURRENT = self

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        global CURRENT
        CURRENT = self.previous
        self.previous = None

    def release(self):
        """
        ENSURE self IS NOT CURRENT
        """
        global CURRENT
        if not self.previous:
            Log.error("expecting engine to be released just once")

        CURRENT = self.previous
        self.previous = None

    @property
    def max_depth(self):
        return self.config.max_depth

    @property
    def name_prefix(self):
        return self.config.name_prefix

    def set_max_depth(self, depth):
        if not isinstance(depth, int) or depth < 1:
            Log.error("expecting positive max_depth, not {{depth}}", depth=depth)
        limit = sys.getrecursionlimit() // FRAMES_PER_LEVEL
        if depth > limit:
            Log.error(
                "expecting max_depth of at most {{limit}}, not {{depth}}",
                limit=limit,
                depth=depth,
            )
        self.config.max_depth = depth
        return self

    def set_name_prefix(self, prefix):
        if not prefix:
            Log.error("expecting a non-empty name prefix")
        self.config.name_prefix = prefix
        return self

    def synthesize_name(self, position):
        return self.config.name_prefix + str(position)

    def set_debug_actions(
        self, startAction=None, successAction=None, exceptionAction=None
    ):
        """
        Enable display of debugging messages while matching argument types.
        """
        self.debugActions = DebugActions(
            startAction or _defaultStartDebugAction,
            successAction or _defaultSuccessDebugAction,
            exceptionAction or _defaultExceptionDebugAction,
        )
        return self


def _defaultStartDebugAction(instring, loc, expr):
    Log.note(
        "Match {{expr}} at loc {{loc}} {{found}}",
        expr=expr,
        loc=loc,
        found=quote(instring[loc:]),
    )


def _defaultSuccessDebugAction(instring, startloc, endloc, expr, node):
    Log.note("Matched {{expr}} -> {{node}}", expr=expr, node=repr(node))


def _defaultExceptionDebugAction(instring, loc, expr, exc):
    Log.note("Exception raised: {{message}}", message=str(exc))


def noop(*args):
    return


DebugActions = namedtuple("DebugActions", ["TRY", "MATCH", "FAIL"])

Engine()
