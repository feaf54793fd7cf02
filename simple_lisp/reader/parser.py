"""
  Lisp Reader: tokenizer and recursive-descent parser

- Emits Python primitives instead of Cons cells:

    - numbers -> float
    - symbols -> Symbol (lowercased)
    - lists -> Python list
    - 'x -> [Symbol("quote"), x]

  There are no string literals, comments or dotted pairs; every token is
  a parenthesis, a quote marker, or a whitespace-delimited atom.
"""

from __future__ import annotations

import re

from simple_lisp import SExpression
from simple_lisp.errors import LispSyntaxError, UnmatchedParenthesis, UnexpectedParenthesis, DanglingQuote
from simple_lisp.types.symbol import Symbol


LPAREN = "("
RPAREN = ")"
QUOTE = "'"

# ASCII decimal literals only: no radix prefixes, no inf/nan words, no digit separators
NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_PAD_RE = re.compile(r"([()'])")


def tokenize(source: str) -> list[str]:
    """Split source text into parenthesis, quote and atom tokens."""
    return _PAD_RE.sub(r" \1 ", source).split()


def parse_atom(token: str) -> SExpression:
    """Classify an atom token as a number or a symbol."""
    if NUMBER_RE.fullmatch(token):
        return float(token)
    return Symbol(token)


def parse_one(tokens: list[str], index: int = 0) -> tuple[SExpression, int]:
    """Parse the expression starting at tokens[index].

    Returns the expression and the index of the first unconsumed token.
    """
    if index >= len(tokens):
        raise LispSyntaxError("Unexpected end of input")
    token = tokens[index]

    if token == LPAREN:
        items: list[SExpression] = []
        i = index + 1
        while i < len(tokens) and tokens[i] != RPAREN:
            expr, i = parse_one(tokens, i)
            items.append(expr)
        if i >= len(tokens):
            raise UnmatchedParenthesis("Unmatched opening parenthesis")
        return items, i + 1

    if token == RPAREN:
        raise UnexpectedParenthesis("Unexpected closing parenthesis")

    if token == QUOTE:
        if index + 1 >= len(tokens) or tokens[index + 1] == RPAREN:
            raise DanglingQuote("Quote with no following expression")
        expr, next_index = parse_one(tokens, index + 1)
        return [Symbol("quote"), expr], next_index

    return parse_atom(token), index + 1


def parse_all(tokens: list[str]) -> list[SExpression]:
    """Parse every top-level expression in the token list."""
    exprs: list[SExpression] = []
    i = 0
    while i < len(tokens):
        expr, i = parse_one(tokens, i)
        exprs.append(expr)
    return exprs


def read(source: str) -> list[SExpression]:
    """Tokenize and parse source text into a list of expressions."""
    return parse_all(tokenize(source))
