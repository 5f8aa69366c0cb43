# program_structure

Data structures that a compiler front end for an arithmetic-circuit language
builds and works on.

- **Syntax tree.** Expression nodes and their builders live in
  `program_structure.expressions` (`InfixOp`, `Variable`, `Call`,
  `AnonymousComp`, `Tuple`, ... and `build_infix`, `build_variable`, ...).
  Statement nodes and builders live in `program_structure.statements`
  (`IfThenElse`, `While`, `Substitution`, `LogCall`, ... and
  `build_block`, `build_log_call`, ...). `build_log_call` cuts long log
  strings into pieces of at most 230 characters. Shared pieces — `Meta`,
  `VariableType`, `SignalType`, `AssignOp` and the operator enums — are in
  `program_structure.nodes`. Every node has `fill(file_id, next_id)`, which
  numbers it and its children depth-first and returns the next free id.
- **Desugaring.** `program_structure.shortcuts` rewrites `x += e`, `x++`,
  `x--` and `for` loops (`assign_with_op_shortcut`, `plusplus`, `subsub`,
  `for_into_while`) and splits multi-symbol declarations into single
  declarations (`split_declaration_into_single_nodes`,
  `split_declaration_into_single_nodes_and_multisubstitution`).
- **Top level.** `program_structure.program` has the pragma classes,
  `Template`, `Function`, `AST`, and `build_ast`, which returns the tree
  together with a report for every repeated pragma.
- **Diagnostics.** `ReportCode` (`str()` gives codes such as `P1008`),
  `Report` with primary and secondary labels and notes, `Report.render`,
  and `print_reports`, all rendered against a `FileLibrary` of source files.
  `program_structure.ast_reports` builds the standard parse reports.
- **Program archive.** `Merger` collects the templates and functions of
  several files, reporting duplicated names. `ProgramArchive.create` merges
  every file, numbers the main call and raises `ProgramArchiveError`
  (carrying the reports) if any name clashes. `TemplateData` records each
  template's input and output signals with their dimensions and tags.
- **Utilities.** `Environment`, a scoped table of variables, signals and
  components; `MemorySlice`, a multi-dimensional value stored row-major;
  `UsefulConstants`, the field prime for `bn128`, `bls12381`, `goldilocks`,
  `grumpkin`, `pallas`, `vesta` or `secq256r1`.

## Install

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Examples

Rendering a report against a source file:

```python
import sys

from program_structure.error_code import ReportCode
from program_structure.error_definition import Report, print_reports
from program_structure.file_definition import FileLibrary

library = FileLibrary()
file_id = library.add_file("main.circom", "template A() {\n  signal input x\n}\n")

report = Report.error("Missing semicolon", ReportCode.MISSING_SEMICOLON)
report.add_primary(range(17, 31), file_id, "A semicolon is needed here")
print_reports([report], library, sys.stderr)
```

Working with a memory slice:

```python
from program_structure.memory_slice import MemorySlice

grid = MemorySlice.with_route([3, 4], 0)
row = MemorySlice.with_route([4], 4)
grid.insert_values([2], row, False)
assert grid.get_single_value([2, 1]) == 4
assert grid.number_of_inserts() == 4
```

Scoped variables:

```python
from program_structure.environment import Environment

env = Environment()
env.add_variable("x", 1)
env.add_variable_block()
env.add_variable("x", 2)
assert env.get_variable("x") == 2
env.remove_variable_block()
assert env.get_variable("x") == 1
```

## Errors

Look-ups that a compiler treats as fatal raise exceptions:
`MemorySliceError` subclasses (`OutOfBoundsError`,
`MismatchedDimensionsError`, `MismatchedDimensionsWeakError`) for slice
access, `NonExistentSymbolError` from the `require_*` methods of
`Environment`, `ReportError` when a report's labels do not fit its file, and
`ProgramArchiveError` when definitions clash while an archive is built.

## What this package does not do

It holds and checks the structures only. There is no lexer or parser that
turns source text into a syntax tree, no type checker, no constraint
generator, and no command-line program; trees are built by calling the
builder functions directly.