# dklang

Tools for the bytecode of the dk language:

- `dklang.vm` runs bytecode on a virtual machine with an accumulator, a
  256-slot stack and a word-addressed memory of 1,024,000 words.
- `dklang.code_gen` turns the same bytecode into x86-64 NASM-style assembly.
- `dklang.symbol_table` keeps named integer symbols in insertion order.
- `dklang.tokens` defines the dk token types and keyword table.
- `dklang.util` has small containers (a fixed-slot hash map, an integer stack,
  a bump-allocating memory arena), numeric helpers and file helpers.

The package has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Bytecode

A program is a sequence of integers, four per instruction: an opcode from
`dklang.vm.OpCode` followed by three operands. Only the first operand is used
by any instruction.

| Opcode | Effect on the virtual machine |
| --- | --- |
| `NOP` | nothing |
| `LOAD n` | `ACC = n` |
| `PUSH` | push `ACC` onto the stack |
| `POP` | pop the stack into `ACC` |
| `LOADS n` | `ACC = stack[n]` |
| `ADD` | `ACC` = sum of the top two stack values; the stack is then cleared |
| `SUB n`, `MUL n`, `DIV n` | `ACC -= n`, `ACC *= n`, `ACC /= n` (division truncates toward zero) |
| `INC`, `DEC` | add or subtract 1 from `ACC` |
| `STORE n` | `memory[n] = ACC` |
| `JMP n`, `JZ n`, `JNZ n` | jump to word address `n` (always, if `ACC == 0`, if `ACC != 0`) |
| `CALL n`, `RET` | push the return address and jump; pop it and jump back |
| `DUMP` | write `ACC: <value>` |
| `EXIT` | write `EXIT: <value>` and stop |
| `HALT` | stop |

Arithmetic wraps to signed 64 bits. Unknown opcodes are skipped.

## Running bytecode

```python
from dklang.vm import VM, OpCode

program = [
    OpCode.LOAD, 2, 0, 0,
    OpCode.PUSH, 0, 0, 0,
    OpCode.LOAD, 40, 0, 0,
    OpCode.PUSH, 0, 0, 0,
    OpCode.ADD, 0, 0, 0,
    OpCode.DUMP, 0, 0, 0,
    OpCode.HALT, 0, 0, 0,
]

vm = VM()
vm.execute(program)     # writes "ACC: 42"
print(vm.acc)           # 42
print(vm.format_state(color=False))
```

`VM(out=stream)` sends the output of `DUMP`, `EXIT` and `print_state()` to
`stream` instead of standard output. `print_state()` writes the state with ANSI
colours, and `format_state(color=...)` returns it as a string. `reset()` clears
the registers, memory and stack. `inst_to_str(opcode)` returns an opcode's
mnemonic, or `"UNKNOWN"`.

Errors are raised as exceptions:

- `StackOverflowError` when `PUSH` or `CALL` meets a full stack;
- `StackUnderflowError` when `POP`, `ADD` or `RET` lacks stack values, or
  `LOADS` names a slot outside the stack;
- `VMError` (the base of both) when the program counter leaves memory, a
  `STORE` address is outside memory, or `DIV` divides by zero;
- `ValueError` when a program is larger than memory.

## Generating assembly

```python
from dklang.code_gen import generate_assembly
from dklang.vm import OpCode

print(generate_assembly([
    OpCode.LOAD, 1, 0, 0,
    OpCode.LOAD, 2, 0, 0,
    OpCode.ADD, 0, 0, 0,
    OpCode.DUMP, 0, 0, 0,
]))
```

The listing starts with `%include "backend/x86_64/std.S"` and a `_start`
label. `LOAD` becomes a `push`. `ADD`, `SUB`, `MUL` and `DIV` pop two values and
push the result. `DUMP` calls `.sys_dump`, and `EXIT` calls `.exit_with_value`.
All other opcodes produce no code. In this listing the arithmetic works on the
machine stack, so it does not follow the virtual machine's accumulator rules.
`iter_assembly` yields the same lines one at a time, without newlines.

## Symbols

```python
from dklang.symbol_table import SymbolTable

table = SymbolTable()
table.add("x", 10)
assert "x" in table
print(table.get("x").value)   # 10
table.print()                 # "\tSymbol: x, value: 10"
```

Duplicate names are allowed, and `get` returns the first match. `get` raises
`KeyError` and `get_by_index` raises `IndexError` when nothing matches.
`remove` deletes the first match by moving the last symbol into its place, and
does nothing for an unknown name.

## Tokens

`dklang.tokens.TokenType` lists the token kinds. `KEYWORDS` maps keyword text
such as `"if"`, `"i32"` or `"@"` to its type, and `keyword_type(text)` returns
that type or `None`. `Token(type, data)` holds a kind and its bytes, with
`size` and `text()`.

## What this package does not do

The package has no lexer or parser for dk source text. Bytecode must be built
as a list of integers. There is also no command-line program, so the virtual
machine and the assembly generator are used from Python only. The generated
assembly relies on an external `backend/x86_64/std.S` that this package does not
provide, and the package does not assemble or link it.