from __future__ import annotations


class NilType:
    """The empty value. Falsey, and equal only to itself."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "NIL"
    def __bool__(self): return False

    def __copy__(self): return self
    def __deepcopy__(self, memo): return self


Nil = NilType()


def is_true(value) -> bool:
    """Lisp truthiness: everything except False and Nil is true."""
    return value is not False and value is not Nil
