"""Built-in primitives and the contexts that declare them."""

import sys
from typing import TextIO

from .ast import Type, IntType, ClosureType
from .env import Env
from .errors import PrimitiveMisuse
from .values import VInt, Value, VNative, VString

PRELUDE_TYPES: dict[str, Type] = {
  "print": ClosureType(IntType(), IntType()),
}


def make_print(stream: TextIO | None = None) -> VNative:
  """Build the `print` native: writes an Int or Str and returns it unchanged."""

  def native_print(value: Value) -> Value:
    out = stream if stream is not None else sys.stdout
    match value:
      case VInt(n):
        out.write(f"{n}\n")
      case VString(s):
        out.write(f"{s}\n")
      case _:
        raise PrimitiveMisuse("print", value)
    return value

  return VNative("print", native_print)


def prelude_types() -> Env[Type]:
  return Env.of(PRELUDE_TYPES)


def prelude_values(stream: TextIO | None = None) -> Env[Value]:
  return Env.of({"print": make_print(stream)})
