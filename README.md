# abikit

Tools for working with Ethereum contract ABIs: parameter types, tokens,
function selectors and the JSON parameter descriptions found in `.abi` files.

## Installation

```
pip install abikit
```

The only runtime dependency is `pycryptodome`, used for Keccak-256.

## Parameter types

`abikit.param_type.ParamType` is a frozen dataclass with a `kind`
(`abikit.param_type.Kind`) and, depending on the kind, a `size`, an `inner`
element type or a tuple of `components`. It is built with the static
constructors `address()`, `bytes_()`, `int_(size)`, `uint(size)`, `bool_()`,
`string()`, `array(inner)`, `fixed_bytes(size)`, `fixed_array(inner, size)`
and `tuple_(components)`.

```python
from abikit.param_type import ParamType, write_for_abi
from abikit.reader import read_param_type, load_param_types

kind = read_param_type("(uint256,bytes32)[]")
str(kind)                    # "(uint256,bytes32)[]"
write_for_abi(kind, False)   # "tuple[]"
kind.is_dynamic()            # True

str(ParamType.fixed_array(ParamType.bool_(), 3))   # "bool[3]"

load_param_types('["address", "uint[3]", "bool[][5]"]')
```

`int` and `uint` without a width read as 256 bits, and `tuple` alone reads
as an empty tuple. Type names that match none of the known types are read
as `uint8`, the way Solidity enums show up in exported library functions.
`ParamType.is_empty_bytes_valid_encoding()` is true only for zero-length
fixed bytes and fixed arrays.

## Tokens

`abikit.token.Token` holds a value together with its `TokenKind`:
addresses and byte strings as `bytes`, integers as an `int` in the range of
an unsigned 256-bit word (signed values in two's complement), and arrays and
tuples as tuples of tokens.

```python
from abikit.param_type import ParamType
from abikit.token import Token, types_check

values = [Token.uint(0), Token.bool_(False)]
types_check(values, [ParamType.uint(32), ParamType.bool_()])   # True
Token.fixed_bytes(b"\x00\x00\x00").type_check(ParamType.fixed_bytes(4))  # True
Token.array([Token.bool_(True)]).is_dynamic()                  # True
```

Integer tokens match integer types of any width; fixed bytes match fixed
byte types at least as long as the value. The `as_address()`, `as_bytes()`,
`as_uint()`, `as_array()` and similar methods return the value if the token
is of that kind and `None` otherwise. `str(token)` gives a text form: hex
for addresses, bytes and integers, `[...]` for arrays and `(...)` for tuples.

`abikit.tokenizer.Tokenizer` parses text into tokens of a given type:

```python
from abikit.tokenizer import Tokenizer

Tokenizer().tokenize_array("[1,0]", ParamType.bool_())
Tokenizer().tokenize(ParamType.uint(256), "0x10")
```

Addresses, bytes and fixed bytes are hex, with or without `0x`; booleans are
`true`/`1` or `false`/`0`; integers are decimal or `0x` hex, and signed
integers may start with `-`. Arrays are written `[a,b]` and tuples `(a,b)`,
nested as needed.

## Signatures

```python
from abikit.signature import short_signature, long_signature
from abikit.param_type import ParamType

short_signature("baz", [ParamType.uint(32), ParamType.bool_()]).hex()  # "cdcd77c0"
```

`long_signature` returns the full 32-byte Keccak-256 hash.

## Functions and JSON specs

```python
from abikit.function import Function
from abikit.param import Param

param = Param.from_json('{"name": "foo", "type": "tuple[]", "components": [{"type": "address"}]}')
param.to_json()

func = Function.from_dict({"type": "function", "name": "foo()", "inputs": [], "outputs": []})
func.name               # "foo": anything from "(" on is dropped
func.signature()        # "foo()"
func.short_signature()  # the 4-byte selector
```

`Param` has a required name; `TupleParam` is a tuple member whose name is
optional. Both read and write the `name`, `type`, `internalType` and
`components` fields, and reject duplicated fields in JSON text.
`abikit.param` also has `inner_tuple`, `set_tuple_components` and
`param_type_to_dict`. `abikit.util` has `pad_u32` and `sanitize_name`.

`abikit.state_mutability.StateMutability` holds `PURE`, `VIEW`,
`NONPAYABLE` (the default) and `PAYABLE`. `abikit.log` has `RawLog`
(32-byte topics plus data, also built with `RawLog.from_pair`), `LogParam`
and `Log`.

## What it does not do

abikit does not encode tokens into ABI call data or decode call data or
return data back into tokens, so functions have no input encoding or output
decoding. It does not read whole contract ABI files, events or constructors,
and it has no topic filters or log parsing: `RawLog` and `Log` only hold
data. There is no command-line tool.

## Errors

Failures raise subclasses of `abikit.errors.AbiError`:
`InvalidNameError` for type names that cannot be read (such as a bad size in
`uintx`), and `InvalidDataError` for values and JSON that do not match what
their types require. Token constructors, `RawLog` and `pad_u32` raise
`ValueError` for values out of range.

## Running the tests

```
pip install abikit[test]
pytest
```