from __future__ import annotations


class NilType:
    """The empty list. Its head and tail are itself."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def car(self) -> NilType:
        return self

    @property
    def cdr(self) -> NilType:
        return self

    def __iter__(self):
        return iter(())

    def __repr__(self): return "nil"
    def __bool__(self): return False

    # Nil is equal only to Nil
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(NilType)


Nil = NilType()
