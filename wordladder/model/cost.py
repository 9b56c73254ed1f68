"""Multi-resolution path cost.

``PathMultiCost`` keeps one counter per edit granularity. Bucket 0 counts
1-letter steps, bucket 1 counts 2-letter steps and so on up to bucket
``MAX_DIMENSION - 1``, which also collects every larger edit. Costs compare
lexicographically from the most significant bucket down, so one coarse step
outweighs any number of finer ones.

Bucket values live in a bounded unsigned scalar described by ``CostScalar``.
Addition saturates at the scalar maximum instead of overflowing. Saturation is
lossy: addition preserves the order (``a <= b`` implies ``a + c <= b + c``)
only while no bucket of either sum hits the maximum.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property, total_ordering
from typing import Any, Iterable, Tuple

import numpy as np

#: Number of buckets in a cost vector.
MAX_DIMENSION = 20


@dataclass(frozen=True)
class CostScalar:
    """Bounded scalar used for the buckets of a cost vector.

    Exposes the capabilities the cost algebra relies on: a zero, a minimum
    and a maximum bound, a total order (plain integer order) and saturating
    addition.

    Attributes:
        name: numpy dtype name, e.g. ``"uint8"``.
        min_value: Smallest representable value.
        max_value: Largest representable value.
    """

    name: str
    min_value: int
    max_value: int

    @classmethod
    def from_dtype(cls, dtype: Any) -> "CostScalar":
        """Build a scalar from a numpy unsigned integer dtype.

        Args:
            dtype: Anything ``numpy.dtype`` accepts (``np.uint8``, ``"uint16"``).

        Returns:
            The scalar with the dtype's bounds.

        Raises:
            ValueError: If the dtype is not an unsigned integer type.
        """
        try:
            dt = np.dtype(dtype)
        except TypeError:
            raise ValueError(f"Unknown cost dtype '{dtype}'") from None
        if dt.kind != "u":
            raise ValueError(
                f"Cost dtype must be an unsigned integer type, got '{dt.name}'"
            )
        info = np.iinfo(dt)
        return cls(name=dt.name, min_value=int(info.min), max_value=int(info.max))

    @property
    def zero(self) -> int:
        return 0

    def clamp(self, value: int) -> int:
        """Clamp ``value`` into ``[min_value, max_value]``."""
        if value > self.max_value:
            return self.max_value
        if value < self.min_value:
            return self.min_value
        return value

    def saturating_add(self, a: int, b: int) -> int:
        """Return ``a + b`` clamped to the scalar maximum.

        Clamping discards the excess, so two sums that saturate compare equal
        in this bucket whatever their operands were.
        """
        total = a + b
        return self.max_value if total > self.max_value else total


#: Default bucket scalar: eight-bit counters.
UINT8 = CostScalar.from_dtype(np.uint8)


@total_ordering
@dataclass(frozen=True)
class PathMultiCost:
    """Cost of a word path, one counter per edit granularity.

    Attributes:
        buckets: ``MAX_DIMENSION`` counters, least significant first.
        scalar: Scalar that bounds every counter.
    """

    buckets: Tuple[int, ...]
    scalar: CostScalar = UINT8

    def __post_init__(self) -> None:
        if len(self.buckets) != MAX_DIMENSION:
            raise ValueError(
                f"Expected {MAX_DIMENSION} buckets, got {len(self.buckets)}"
            )
        for value in self.buckets:
            if not self.scalar.min_value <= value <= self.scalar.max_value:
                raise ValueError(
                    f"Bucket value {value} out of range for {self.scalar.name}"
                )

    @classmethod
    def zero(cls, scalar: CostScalar = UINT8) -> "PathMultiCost":
        """Return the additive identity (all buckets zero)."""
        return cls((scalar.zero,) * MAX_DIMENSION, scalar)

    @classmethod
    def new(
        cls, value: int, bucket_index: int, scalar: CostScalar = UINT8
    ) -> "PathMultiCost":
        """Return a cost holding ``value`` in a single bucket.

        ``bucket_index`` is clamped into ``[0, MAX_DIMENSION - 1]``; the last
        bucket is the catch-all for edits of ``MAX_DIMENSION`` letters or more.
        ``value`` saturates at the scalar bounds.
        """
        index = min(max(bucket_index, 0), MAX_DIMENSION - 1)
        data = [scalar.zero] * MAX_DIMENSION
        data[index] = scalar.clamp(value)
        return cls(tuple(data), scalar)

    @classmethod
    def from_buckets(
        cls, values: Iterable[int], scalar: CostScalar = UINT8
    ) -> "PathMultiCost":
        """Build a cost from leading bucket values, least significant first.

        Missing buckets are zero. Values past ``MAX_DIMENSION`` are ignored.
        """
        data = [scalar.clamp(int(v)) for v in list(values)[:MAX_DIMENSION]]
        data.extend([scalar.zero] * (MAX_DIMENSION - len(data)))
        return cls(tuple(data), scalar)

    @classmethod
    def min_value(cls, scalar: CostScalar = UINT8) -> "PathMultiCost":
        """Smallest cost: the scalar minimum in the least significant bucket."""
        return cls.new(scalar.min_value, 0, scalar)

    @classmethod
    def max_value(cls, scalar: CostScalar = UINT8) -> "PathMultiCost":
        """Largest cost: every bucket at the scalar maximum."""
        return cls((scalar.max_value,) * MAX_DIMENSION, scalar)

    @cached_property
    def _order_key(self) -> Tuple[int, ...]:
        return self.buckets[::-1]

    def _check_scalar(self, other: "PathMultiCost") -> None:
        if other.scalar != self.scalar:
            raise TypeError(
                f"Cannot combine {self.scalar.name} and {other.scalar.name} costs"
            )

    def __add__(self, other: Any) -> "PathMultiCost":
        if not isinstance(other, PathMultiCost):
            return NotImplemented
        self._check_scalar(other)
        add = self.scalar.saturating_add
        return PathMultiCost(
            tuple(add(a, b) for a, b in zip(self.buckets, other.buckets)),
            self.scalar,
        )

    def __radd__(self, other: Any) -> "PathMultiCost":
        # Lets sum() and code seeded with the integer 0 accumulate costs.
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PathMultiCost):
            return NotImplemented
        self._check_scalar(other)
        return self._order_key < other._order_key

    def is_zero(self) -> bool:
        return not any(self.buckets)

    def to_sparse(self) -> Tuple[Tuple[int, int], ...]:
        """Return ``(value, granularity)`` for each non-zero bucket.

        Granularity is the number of letters changed in one step
        (``bucket_index + 1``). The most significant bucket comes first.
        """
        return tuple(
            (value, index + 1)
            for index, value in reversed(list(enumerate(self.buckets)))
            if value
        )

    def __str__(self) -> str:
        sparse = self.to_sparse()
        if not sparse:
            return "0 mutation"
        return " + ".join(
            f"{value} {granularity}-letter mutation" for value, granularity in sparse
        )

    def __repr__(self) -> str:
        return f"PathMultiCost({list(self.to_sparse())}, scalar={self.scalar.name})"
