"""Core ECS types: entity limits, component signatures and the system base."""

from __future__ import annotations

from collections.abc import Iterator

from sortedcontainers import SortedSet

Entity = int
ComponentType = int

MAX_ENTITIES = 100_000
MAX_COMPONENTS = 32


class ECSError(Exception):
    """Raised when the entity-component-system is used incorrectly."""


class Signature:
    """A fixed-width bit set recording which component types are present."""

    __slots__ = ("_bits",)

    def __init__(self, bits: int = 0) -> None:
        if not 0 <= bits < (1 << MAX_COMPONENTS):
            raise ValueError(f"signature bits must fit in {MAX_COMPONENTS} bits")
        self._bits = bits

    @classmethod
    def from_positions(cls, *args: int) -> Signature:
        """Build a signature with the given bit positions set."""
        signature = cls()
        for position in args:
            signature.set(position)
        return signature

    @staticmethod
    def _check(position: int) -> None:
        if not 0 <= position < MAX_COMPONENTS:
            raise IndexError(
                f"bit position {position} outside 0..{MAX_COMPONENTS - 1}"
            )

    def set(self, position: int, value: bool = True) -> None:
        """Set or clear the bit at ``position``."""
        self._check(position)
        if value:
            self._bits |= 1 << position
        else:
            self._bits &= ~(1 << position)

    def reset(self) -> None:
        """Clear every bit."""
        self._bits = 0

    def test(self, position: int) -> bool:
        """Return whether the bit at ``position`` is set."""
        self._check(position)
        return bool(self._bits >> position & 1)

    def __and__(self, other: object) -> Signature:
        if not isinstance(other, Signature):
            return NotImplemented
        return Signature(self._bits & other._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signature):
            return NotImplemented
        return self._bits == other._bits

    __hash__ = None  # mutable

    def __int__(self) -> int:
        return self._bits

    def __bool__(self) -> bool:
        return self._bits != 0

    def __iter__(self) -> Iterator[int]:
        """Yield the positions of the set bits in ascending order."""
        return (p for p in range(MAX_COMPONENTS) if self._bits >> p & 1)

    def __copy__(self) -> Signature:
        return Signature(self._bits)

    def __repr__(self) -> str:
        return f"Signature({self._bits:0{MAX_COMPONENTS}b})"


class System:
    """Base class for systems; holds the ordered set of matching entities."""

    def __init__(self) -> None:
        self.entities: SortedSet = SortedSet()