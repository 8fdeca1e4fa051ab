from __future__ import annotations


class Symbol(str):
    """Interned-name marker for host values.

    Behaves as a plain ``str`` everywhere except seeding, where it is encoded
    with its own type tag so ``Symbol("a")`` and ``"a"`` give different seeds.
    Used as a mapping key it renders to its name, exactly like the string.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Symbol({str.__repr__(self)})"
