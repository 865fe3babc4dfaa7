"""AST node definitions for the fcore calculus."""

from dataclasses import dataclass

# === Types ===


@dataclass(frozen=True, slots=True)
class IntType:
  """The base integer type."""


@dataclass(frozen=True, slots=True)
class StrType:
  """The base string type."""


@dataclass(frozen=True, slots=True)
class ClosureType:
  """Function type: param -> body."""

  param: "Type"
  body: "Type"


@dataclass(frozen=True, slots=True)
class ForallType:
  """Universal type: forall param. body"""

  param: str
  body: "Type"


@dataclass(frozen=True, slots=True)
class TypeVar:
  """Reference to a type variable bound by an enclosing forall."""

  name: str


# Type union
Type = IntType | StrType | ClosureType | ForallType | TypeVar


# === Expressions ===


@dataclass(frozen=True, slots=True)
class IntLiteral:
  """Integer literal like 42."""

  value: int


@dataclass(frozen=True, slots=True)
class StringLiteral:
  """String literal like "hello"."""

  value: str


@dataclass(frozen=True, slots=True)
class VarExpr:
  """Variable reference."""

  name: str


@dataclass(frozen=True, slots=True)
class AbsExpr:
  """Annotated function abstraction: \\param: param_type. body"""

  param: str
  param_type: Type
  body: "Expr"


@dataclass(frozen=True, slots=True)
class AppExpr:
  """Function application: abs arg"""

  abs: "Expr"
  arg: "Expr"


@dataclass(frozen=True, slots=True)
class TypeAbsExpr:
  """Generic abstraction over a type variable: /\\param. body"""

  param: str
  body: "Expr"


@dataclass(frozen=True, slots=True)
class TypeAppExpr:
  """Instantiation of a generic expression: abs [arg]"""

  abs: "Expr"
  arg: Type


# Expression union type
Expr = IntLiteral | StringLiteral | VarExpr | AbsExpr | AppExpr | TypeAbsExpr | TypeAppExpr


# === Display ===


def type_to_str(t: Type) -> str:
  """Render a type, e.g. `forall a. a -> a`."""
  match t:
    case IntType():
      return "Int"
    case StrType():
      return "Str"
    case TypeVar(name):
      return name
    case ClosureType(param, body):
      param_str = type_to_str(param)
      # Arrows associate to the right
      if isinstance(param, (ClosureType, ForallType)):
        param_str = f"({param_str})"
      return f"{param_str} -> {type_to_str(body)}"
    case ForallType(param, body):
      return f"forall {param}. {type_to_str(body)}"
  raise ValueError(f"Unknown type: {t!r}")


def _is_atom(e: Expr) -> bool:
  return isinstance(e, (IntLiteral, StringLiteral, VarExpr))


def expr_to_str(e: Expr) -> str:
  """Render an expression, e.g. `(/\\a. \\x: a. x) [Int] 4`."""
  match e:
    case IntLiteral(value):
      return str(value)
    case StringLiteral(value):
      return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    case VarExpr(name):
      return name
    case AbsExpr(param, param_type, body):
      return f"\\{param}: {type_to_str(param_type)}. {expr_to_str(body)}"
    case TypeAbsExpr(param, body):
      return f"/\\{param}. {expr_to_str(body)}"
    case AppExpr(abs, arg):
      abs_str = expr_to_str(abs)
      if isinstance(abs, (AbsExpr, TypeAbsExpr)):
        abs_str = f"({abs_str})"
      arg_str = expr_to_str(arg)
      if not _is_atom(arg):
        arg_str = f"({arg_str})"
      return f"{abs_str} {arg_str}"
    case TypeAppExpr(abs, arg):
      abs_str = expr_to_str(abs)
      if isinstance(abs, (AbsExpr, TypeAbsExpr)):
        abs_str = f"({abs_str})"
      return f"{abs_str} [{type_to_str(arg)}]"
  raise ValueError(f"Unknown expression: {e!r}")
