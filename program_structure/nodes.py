"""Basic building blocks of the syntax tree: metadata, types and operators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from math import prod
from typing import Sequence


class TypeReduction(Enum):
    VARIABLE = auto()
    COMPONENT = auto()
    SIGNAL = auto()
    TAG = auto()


@dataclass
class TypeKnowledge:
    """What an expression reduces to, once type analysis has decided it."""

    _reduces_to: TypeReduction | None = None

    @property
    def reduces_to(self) -> TypeReduction:
        if self._reduces_to is None:
            raise ValueError("reduces_to knowledge looked at before being initialized")
        return self._reduces_to

    def set_reduces_to(self, reduces_to: TypeReduction) -> None:
        self._reduces_to = reduces_to

    def is_var(self) -> bool:
        return self.reduces_to is TypeReduction.VARIABLE

    def is_component(self) -> bool:
        return self.reduces_to is TypeReduction.COMPONENT

    def is_signal(self) -> bool:
        return self.reduces_to is TypeReduction.SIGNAL

    def is_tag(self) -> bool:
        return self.reduces_to is TypeReduction.TAG


@dataclass
class MemoryKnowledge:
    """Concrete dimensions and memory address learned about an element."""

    _concrete_dimensions: tuple[int, ...] | None = None
    _full_length: int | None = None
    _abstract_memory_address: int | None = None

    def set_concrete_dimensions(self, value: Sequence[int]) -> None:
        self._concrete_dimensions = tuple(value)
        self._full_length = prod(self._concrete_dimensions)

    def set_abstract_memory_address(self, value: int) -> None:
        self._abstract_memory_address = value

    @property
    def concrete_dimensions(self) -> tuple[int, ...]:
        if self._concrete_dimensions is None:
            raise ValueError("concrete dimensions looked at before being initialized")
        return self._concrete_dimensions

    @property
    def full_length(self) -> int:
        if self._full_length is None:
            raise ValueError("full length looked at before being initialized")
        return self._full_length

    @property
    def abstract_memory_address(self) -> int:
        if self._abstract_memory_address is None:
            raise ValueError("abstract memory address looked at before being initialized")
        return self._abstract_memory_address


@dataclass
class Meta:
    """Position and analysis data attached to every node."""

    start: int
    end: int
    elem_id: int = 0
    file_id: int | None = None
    component_inference: str | None = None
    type_knowledge: TypeKnowledge = field(default_factory=TypeKnowledge)
    memory_knowledge: MemoryKnowledge = field(default_factory=MemoryKnowledge)
    location: range = field(init=False)

    def __post_init__(self) -> None:
        self.location = range(self.start, self.end)

    def change_location(self, location: range, file_id: int | None) -> None:
        self.location = location
        self.file_id = file_id

    @property
    def location_start(self) -> int:
        return self.location.start

    @property
    def location_end(self) -> int:
        return self.location.stop

    def require_file_id(self) -> int:
        """Return the file id, raising if it was never set."""
        if self.file_id is None:
            raise ValueError("empty file id accessed")
        return self.file_id

    def file_location(self) -> range:
        return self.location


class SignalType(Enum):
    OUTPUT = auto()
    INPUT = auto()
    INTERMEDIATE = auto()


class VariableKind(Enum):
    VAR = auto()
    SIGNAL = auto()
    COMPONENT = auto()
    ANONYMOUS_COMPONENT = auto()


@dataclass(frozen=True)
class VariableType:
    """The declared type of a symbol; signals carry a signal type and tags."""

    kind: VariableKind
    signal_type: SignalType | None = None
    tags: tuple[str, ...] = ()

    @classmethod
    def var(cls) -> "VariableType":
        return cls(VariableKind.VAR)

    @classmethod
    def signal(cls, signal_type: SignalType, tags: Sequence[str] = ()) -> "VariableType":
        return cls(VariableKind.SIGNAL, signal_type, tuple(tags))

    @classmethod
    def component(cls) -> "VariableType":
        return cls(VariableKind.COMPONENT)

    @classmethod
    def anonymous_component(cls) -> "VariableType":
        return cls(VariableKind.ANONYMOUS_COMPONENT)


class AssignOp(Enum):
    ASSIGN_VAR = auto()
    ASSIGN_SIGNAL = auto()
    ASSIGN_CONSTRAINT_SIGNAL = auto()

    def is_signal_operator(self) -> bool:
        return self in (AssignOp.ASSIGN_SIGNAL, AssignOp.ASSIGN_CONSTRAINT_SIGNAL)


class ExpressionInfixOpcode(Enum):
    MUL = auto()
    DIV = auto()
    ADD = auto()
    SUB = auto()
    POW = auto()
    INT_DIV = auto()
    MOD = auto()
    SHIFT_L = auto()
    SHIFT_R = auto()
    LESSER_EQ = auto()
    GREATER_EQ = auto()
    LESSER = auto()
    GREATER = auto()
    EQ = auto()
    NOT_EQ = auto()
    BOOL_OR = auto()
    BOOL_AND = auto()
    BIT_OR = auto()
    BIT_AND = auto()
    BIT_XOR = auto()


class ExpressionPrefixOpcode(Enum):
    SUB = auto()
    BOOL_NOT = auto()
    COMPLEMENT = auto()