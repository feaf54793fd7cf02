class LispError(Exception):
    """ Base class for all simple-lisp errors"""
    pass


class LispSyntaxError(LispError, SyntaxError):
    """ Raised when source text cannot be read"""


class UnmatchedParenthesis(LispSyntaxError):
    """ Raised when an opened list is never closed"""


class UnexpectedParenthesis(LispSyntaxError):
    """ Raised when a ')' appears with no matching '('"""


class DanglingQuote(LispSyntaxError):
    """ Raised when a quote marker has no following expression"""


class LispEvalError(LispError):
    """ Base class for errors raised while evaluating an expression"""


class UnboundSymbol(LispEvalError):
    """ Raised when a symbol is used as a value before it is bound"""


class CallableUsedAsValue(LispEvalError):
    """ Raised when a function is referenced as a plain value instead of called"""


class NotAFunction(LispEvalError):
    """ Raised when the head of a call form is not a function"""


class Uninterpretable(LispEvalError):
    """ Raised for an expression the evaluator has no rule for"""


class MalformedForm(LispEvalError):
    """ Raised when a special form has the wrong shape"""


class ArityError(LispEvalError):
    """ Raised when the number of arguments passed to a primitive is incorrect"""


class LispTypeError(LispEvalError):
    """ Raised when the types of arguments passed to a primitive are incorrect"""


class DivisionByZero(LispEvalError, ZeroDivisionError):
    """ Raised when / is given a zero divisor"""


class EmptyListError(LispEvalError, IndexError):
    """ Raised when car is applied to an empty list"""
