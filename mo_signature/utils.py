# encoding: utf-8
import string

alphas = string.ascii_uppercase + string.ascii_lowercase
nums = "0123456789"
alphanums = alphas + nums
identifier_symbols = "$_"
space = " "


def is_alpha(c):
    return len(c) == 1 and c in alphas


def is_digit(c):
    return len(c) == 1 and c in nums


def is_space(c):
    return c == space


def is_identifier_symbol(c):
    return len(c) == 1 and c in identifier_symbols


def quote(value, length=30):
    """
    SHORT, QUOTED VERSION OF THE UNPARSED TEXT, FOR ERROR MESSAGES
    """
    if not value:
        return "end of text"
    if len(value) > length:
        value = value[:length] + "..."
    return '"' + value + '"'
