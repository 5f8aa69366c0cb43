"""Scoped symbol tables for variables, signals and components."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

CC = TypeVar("CC")
SC = TypeVar("SC")
VC = TypeVar("VC")


class NonExistentSymbolError(LookupError):
    """The requested symbol is not defined in the environment."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"symbol {symbol!r} does not exist")
        self.symbol = symbol


def _union(
    left: dict[str, VC], right: dict[str, VC], using: Callable[[VC, VC], VC]
) -> dict[str, VC]:
    rest = dict(right)
    result: dict[str, VC] = {}
    for key, value in left.items():
        if key in rest:
            result[key] = using(value, rest.pop(key))
        else:
            result[key] = value
    for key, value in rest.items():
        result.setdefault(key, value)
    return result


class Environment(Generic[CC, SC, VC]):
    """Components, signals and a stack of variable blocks.

    Variables live in nested blocks; lookups search from the innermost
    block outwards. A fresh environment holds one empty block.
    """

    def __init__(self) -> None:
        self._components: dict[str, CC] = {}
        self._inputs: dict[str, SC] = {}
        self._outputs: dict[str, SC] = {}
        self._intermediates: dict[str, SC] = {}
        self._variables: list[dict[str, VC]] = [{}]

    @classmethod
    def merge(
        cls,
        left: "Environment[CC, SC, VC]",
        right: "Environment[CC, SC, VC]",
        using: Callable[[VC, VC], VC],
    ) -> "Environment[CC, SC, VC]":
        """Combine two environments.

        Components and signals of ``right`` override those of ``left``.
        Variable blocks are paired from the innermost outwards and merged
        with ``using`` where both define a variable; blocks without a
        partner are dropped.
        """
        result: Environment[CC, SC, VC] = cls()
        result._components = {**left._components, **right._components}
        result._inputs = {**left._inputs, **right._inputs}
        result._outputs = {**left._outputs, **right._outputs}
        result._intermediates = {**left._intermediates, **right._intermediates}
        paired = zip(reversed(left._variables), reversed(right._variables))
        merged = [_union(lb, rb, using) for lb, rb in paired]
        merged.reverse()
        result._variables = merged
        return result

    def has_symbol(self, symbol: str) -> bool:
        return (
            self.has_signal(symbol)
            or self.has_component(symbol)
            or self.has_variable(symbol)
        )

    # Variables

    def _block_with(self, symbol: str) -> dict[str, VC] | None:
        for block in reversed(self._variables):
            if symbol in block:
                return block
        return None

    def add_variable_block(self) -> None:
        self._variables.append({})

    def remove_variable_block(self) -> None:
        if not self._variables:
            raise IndexError("no variable block to remove")
        self._variables.pop()

    def add_variable(self, name: str, content: VC) -> None:
        """Define ``name`` in the innermost block."""
        if not self._variables:
            raise IndexError("no variable block to add to")
        self._variables[-1][name] = content

    def has_variable(self, symbol: str) -> bool:
        return self._block_with(symbol) is not None

    def get_variable(self, symbol: str) -> VC | None:
        block = self._block_with(symbol)
        return None if block is None else block[symbol]

    def require_variable(self, symbol: str) -> VC:
        block = self._block_with(symbol)
        if block is None:
            raise NonExistentSymbolError(symbol)
        return block[symbol]

    def set_variable(self, symbol: str, content: VC) -> None:
        """Replace the content of the innermost visible ``symbol``."""
        block = self._block_with(symbol)
        if block is None:
            raise NonExistentSymbolError(symbol)
        block[symbol] = content

    def remove_variable(self, symbol: str) -> None:
        block = self._block_with(symbol)
        if block is not None:
            del block[symbol]

    # Components

    def add_component(self, name: str, content: CC) -> None:
        self._components[name] = content

    def remove_component(self, name: str) -> None:
        self._components.pop(name, None)

    def has_component(self, symbol: str) -> bool:
        return symbol in self._components

    def get_component(self, symbol: str) -> CC | None:
        return self._components.get(symbol)

    def require_component(self, symbol: str) -> CC:
        if symbol not in self._components:
            raise NonExistentSymbolError(symbol)
        return self._components[symbol]

    @property
    def components(self) -> dict[str, CC]:
        return self._components

    # Signals

    def add_input(self, name: str, content: SC) -> None:
        self._inputs[name] = content

    def remove_input(self, name: str) -> None:
        self._inputs.pop(name, None)

    def add_output(self, name: str, content: SC) -> None:
        self._outputs[name] = content

    def remove_output(self, name: str) -> None:
        self._outputs.pop(name, None)

    def add_intermediate(self, name: str, content: SC) -> None:
        self._intermediates[name] = content

    def remove_intermediate(self, name: str) -> None:
        self._intermediates.pop(name, None)

    def has_input(self, symbol: str) -> bool:
        return symbol in self._inputs

    def has_output(self, symbol: str) -> bool:
        return symbol in self._outputs

    def has_intermediate(self, symbol: str) -> bool:
        return symbol in self._intermediates

    def has_signal(self, symbol: str) -> bool:
        return (
            self.has_input(symbol)
            or self.has_output(symbol)
            or self.has_intermediate(symbol)
        )

    def get_input(self, symbol: str) -> SC | None:
        return self._inputs.get(symbol)

    def get_output(self, symbol: str) -> SC | None:
        return self._outputs.get(symbol)

    def get_intermediate(self, symbol: str) -> SC | None:
        return self._intermediates.get(symbol)

    def _signal_table(self, symbol: str) -> dict[str, SC] | None:
        for table in (self._inputs, self._outputs, self._intermediates):
            if symbol in table:
                return table
        return None

    def get_signal(self, symbol: str) -> SC | None:
        """Look the signal up among inputs, then outputs, then intermediates."""
        table = self._signal_table(symbol)
        return None if table is None else table[symbol]

    @staticmethod
    def _require(table: dict[str, SC], symbol: str) -> SC:
        if symbol not in table:
            raise NonExistentSymbolError(symbol)
        return table[symbol]

    def require_input(self, symbol: str) -> SC:
        return self._require(self._inputs, symbol)

    def require_output(self, symbol: str) -> SC:
        return self._require(self._outputs, symbol)

    def require_intermediate(self, symbol: str) -> SC:
        return self._require(self._intermediates, symbol)

    def require_signal(self, symbol: str) -> SC:
        table = self._signal_table(symbol)
        if table is None:
            raise NonExistentSymbolError(symbol)
        return table[symbol]