"""Multi-dimensional values stored as a flat list of cells."""

from __future__ import annotations

import copy
from enum import Enum, auto
from math import prod
from typing import Any, Generic, Sequence, TypeVar

C = TypeVar("C")


class TypeInvalidAccess(Enum):
    """Ways in which reading a memory element can be invalid."""

    MISSING_INPUTS = auto()
    MISSING_INPUT_TAGS = auto()
    NO_INITIALIZED_COMPONENT = auto()
    NO_INITIALIZED_SIGNAL = auto()


class TypeAssignmentError(Enum):
    """Ways in which assigning to a memory element can be invalid."""

    MULTIPLE_ASSIGNMENTS = auto()
    ASSIGNMENT_OUTPUT = auto()
    NO_INITIALIZED_COMPONENT = auto()


class MemorySliceError(Exception):
    """Base class of the errors raised by memory slices."""


class OutOfBoundsError(MemorySliceError):
    """An access falls outside the dimensions of the slice."""


class MismatchedDimensionsError(MemorySliceError):
    """The dimensions of the assigned values do not fit the target."""

    def __init__(self, given: int, expected: int) -> None:
        super().__init__(f"dimension {given} does not match expected {expected}")
        self.given = given
        self.expected = expected


class MismatchedDimensionsWeakError(MismatchedDimensionsError):
    """A smaller array was assigned; the values were written anyway."""


class MemorySlice(Generic[C]):
    """Values of a (possibly multi-dimensional) element, stored row-major.

    ``route`` holds the dimensions; the number of values is their product.
    """

    def __init__(self, route: Sequence[int], values: Sequence[C]) -> None:
        self.route: list[int] = list(route)
        self.values: list[C] = list(values)
        self.number_inserts = 0

    @classmethod
    def single(cls, initial_value: C) -> "MemorySlice[C]":
        """A slice with no dimensions holding one value."""
        return cls.with_route([], initial_value)

    @classmethod
    def with_route(cls, route: Sequence[int], initial_value: C) -> "MemorySlice[C]":
        """A slice of the given dimensions with every cell set to ``initial_value``."""
        length = prod(route)
        return cls(route, [copy.copy(initial_value) for _ in range(length)])

    def _initial_cell(self, access: Sequence[int]) -> int:
        if len(access) > len(self.route):
            raise OutOfBoundsError("access has more indices than dimensions")
        cell = 0
        cell_jump = len(self.values)
        for index, dimension in zip(access, self.route):
            if index >= dimension:
                raise OutOfBoundsError(f"index {index} out of dimension {dimension}")
            cell_jump //= dimension
            cell += cell_jump * index
        return cell

    def check_correct_dims(
        self, access: Sequence[int], new_values: "MemorySlice[C]", is_strict: bool
    ) -> None:
        """Raise if ``new_values`` cannot be stored at ``access``.

        A smaller array raises :class:`MismatchedDimensionsWeakError` unless
        ``is_strict``, in which case it raises :class:`MismatchedDimensionsError`.
        """
        if len(access) + len(new_values.route) > len(self.route):
            raise OutOfBoundsError("assigned value has too many dimensions")
        for index, dimension in zip(access, self.route):
            if index >= dimension:
                raise OutOfBoundsError(f"index {index} out of dimension {dimension}")
        remaining = self.route[len(access):]
        for given, expected in zip(new_values.route, remaining):
            if given < expected:
                if is_strict:
                    raise MismatchedDimensionsError(given, expected)
                raise MismatchedDimensionsWeakError(given, expected)
            if given > expected:
                raise MismatchedDimensionsError(given, expected)

    def _write(self, cell: int, new_values: "MemorySlice[C]") -> None:
        for offset, value in enumerate(new_values.values):
            self.values[cell + offset] = copy.copy(value)

    def insert_values(
        self, access: Sequence[int], new_values: "MemorySlice[C]", is_strict: bool
    ) -> None:
        """Store ``new_values`` starting at ``access``.

        When a smaller array is assigned non-strictly the values are still
        written before :class:`MismatchedDimensionsWeakError` is raised.
        """
        try:
            self.check_correct_dims(access, new_values, is_strict)
        except MismatchedDimensionsWeakError:
            self._write(self._initial_cell(access), new_values)
            raise
        cell = self._initial_cell(access)
        self.number_inserts += new_values.number_of_cells()
        self._write(cell, new_values)

    def insert_value_by_index(self, index: int, new_value: C) -> None:
        """Store one value at flat position ``index``."""
        if not 0 <= index < self.number_of_cells():
            raise OutOfBoundsError(f"index {index} out of {self.number_of_cells()} cells")
        self.number_inserts += 1
        self.values[index] = new_value

    def get_access_index(self, index: int) -> list[int]:
        """Translate a flat position into one index per dimension."""
        number_cells = self.number_of_cells()
        if index > number_cells:
            raise OutOfBoundsError(f"index {index} out of {number_cells} cells")
        access = []
        rest = index
        for dimension in self.route:
            number_cells //= dimension
            access.append(rest // number_cells)
            rest %= number_cells
        return access

    def access_values(self, access: Sequence[int]) -> "MemorySlice[C]":
        """Return the sub-slice selected by a (possibly partial) access."""
        if not access:
            return self.copy()
        if len(access) > len(self.route):
            raise OutOfBoundsError("access has more indices than dimensions")
        size = self.route[len(access):]
        number_of_cells = prod(size)
        initial_cell = self._initial_cell(access)
        values = [
            copy.copy(value)
            for value in self.values[initial_cell:initial_cell + number_of_cells]
        ]
        return MemorySlice(size, values)

    def access_value_by_index(self, index: int) -> C:
        """Return the value at flat position ``index``."""
        if not 0 <= index < self.number_of_cells():
            raise OutOfBoundsError(f"index {index} out of {self.number_of_cells()} cells")
        return copy.copy(self.values[index])

    def _full_access_cell(self, access: Sequence[int]) -> int:
        if len(access) != len(self.route):
            raise ValueError(
                f"access of length {len(access)} does not name a single value "
                f"of a slice with {len(self.route)} dimensions"
            )
        return self._initial_cell(access)

    def get_single_value(self, access: Sequence[int]) -> C:
        """Return the value named by a complete access."""
        return self.values[self._full_access_cell(access)]

    def set_single_value(self, access: Sequence[int], value: C) -> None:
        """Replace the value named by a complete access."""
        self.values[self._full_access_cell(access)] = value

    def number_of_cells(self) -> int:
        return len(self.values)

    def number_of_inserts(self) -> int:
        return self.number_inserts

    def is_single(self) -> bool:
        return not self.route

    def unwrap_to_single(self) -> C:
        """Return the only value of a slice without dimensions."""
        if not self.is_single():
            raise ValueError("memory slice holds more than one value")
        return self.values[-1]

    def copy(self) -> "MemorySlice[C]":
        result = MemorySlice(self.route, [copy.copy(v) for v in self.values])
        result.number_inserts = self.number_inserts
        return result

    def __str__(self) -> str:
        if not self.values:
            return "[]"
        if len(self.values) == 1:
            return str(self.values[0])
        return "[" + ",".join(str(value) for value in self.values) + "]"

    def __repr__(self) -> str:
        return f"MemorySlice(route={self.route!r}, values={self.values!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, MemorySlice):
            return NotImplemented
        return (
            self.route == other.route
            and self.values == other.values
            and self.number_inserts == other.number_inserts
        )

    __hash__ = None  # type: ignore[assignment]