"""Runtime values produced by the evaluator."""

from collections.abc import Callable
from dataclasses import dataclass, field

from .ast import Expr
from .env import Env


@dataclass(frozen=True, slots=True)
class VInt:
  """Integer value."""

  value: int


@dataclass(frozen=True, slots=True)
class VString:
  """String value."""

  value: str


@dataclass(frozen=True, slots=True)
class VClosure:
  """Function value capturing the environment it was defined in."""

  param: str
  body: Expr
  context: "Env[Value]" = field(compare=False)


@dataclass(frozen=True, slots=True)
class VForall:
  """Suspended generic value; the body runs when it is type-applied."""

  body: Expr
  context: "Env[Value]" = field(compare=False)


@dataclass(frozen=True, slots=True)
class VNative:
  """Host-provided primitive function."""

  name: str
  fn: "Callable[[Value], Value]" = field(compare=False)


# Value union type
Value = VInt | VString | VClosure | VForall | VNative


def value_to_str(v: Value) -> str:
  match v:
    case VInt(value):
      return str(value)
    case VString(value):
      return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    case VClosure(param, _, _):
      return f"<closure \\{param}>"
    case VForall():
      return "<forall>"
    case VNative(name, _):
      return f"<native {name}>"
  raise ValueError(f"Unknown value: {v!r}")
