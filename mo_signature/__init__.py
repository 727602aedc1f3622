# encoding: utf-8
from mo_signature.core import parse_signature, parse_type
from mo_signature.engine import Engine
from mo_signature.exceptions import (
    EmptyToken,
    EmptyType,
    ExpectedCloseParen,
    ExpectedOpenParen,
    InvalidTokenStart,
    MissingNameInArgument,
    MissingNameInComponents,
    NestingTooDeep,
    ParseException,
    UnexpectedNodeType,
    UnexpectedTrailingInput,
    UnterminatedArraySuffix,
)
from mo_signature.results import Argument, Signature
from mo_signature.tokens import IDENTIFIER, TYPE, Scanner, consume_token

__all__ = [
    "Argument",
    "EmptyToken",
    "EmptyType",
    "Engine",
    "ExpectedCloseParen",
    "ExpectedOpenParen",
    "IDENTIFIER",
    "InvalidTokenStart",
    "MissingNameInArgument",
    "MissingNameInComponents",
    "NestingTooDeep",
    "ParseException",
    "Signature",
    "Scanner",
    "TYPE",
    "UnexpectedNodeType",
    "UnexpectedTrailingInput",
    "UnterminatedArraySuffix",
    "consume_token",
    "parse_signature",
    "parse_type",
]
