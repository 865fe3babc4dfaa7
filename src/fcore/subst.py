"""Type substitution and alpha-equivalence for the fcore calculus."""

import itertools

from .ast import (
  Expr,
  Type,
  AbsExpr,
  AppExpr,
  VarExpr,
  IntLiteral,
  TypeAbsExpr,
  TypeAppExpr,
  StringLiteral,
  IntType,
  StrType,
  TypeVar,
  ForallType,
  ClosureType,
)

_fresh_counter = itertools.count(1)


def free_type_vars(t: Type) -> frozenset[str]:
  """Return the names of type variables not bound by a forall in `t`."""
  match t:
    case TypeVar(name):
      return frozenset((name,))
    case ClosureType(param, body):
      return free_type_vars(param) | free_type_vars(body)
    case ForallType(param, body):
      return free_type_vars(body) - {param}
    case IntType() | StrType():
      return frozenset()
  raise ValueError(f"Unknown type: {t!r}")


def type_var_names(t: Type) -> frozenset[str]:
  """Return every type variable name in `t`, free or bound."""
  match t:
    case TypeVar(name):
      return frozenset((name,))
    case ClosureType(param, body):
      return type_var_names(param) | type_var_names(body)
    case ForallType(param, body):
      return type_var_names(body) | {param}
    case IntType() | StrType():
      return frozenset()
  raise ValueError(f"Unknown type: {t!r}")


def fresh_name(base: str, avoid: frozenset[str] | set[str] = frozenset()) -> str:
  """Derive a name like a'3 from `base` that is not in `avoid`."""
  root = base.split("'", 1)[0]
  while True:
    candidate = f"{root}'{next(_fresh_counter)}"
    if candidate not in avoid:
      return candidate


def replace_type(t: Type, name: str, replacement: Type) -> Type:
  """Replace free occurrences of type variable `name` in `t` with `replacement`.

  A forall binding `name` shadows it, so its body is left alone. A forall
  whose binder is free in `replacement` is renamed first so that the
  replacement's variables are not captured.
  """
  match t:
    case TypeVar(var):
      return replacement if var == name else t
    case ClosureType(param, body):
      return ClosureType(replace_type(param, name, replacement), replace_type(body, name, replacement))
    case ForallType(param, body):
      if param == name:
        return t
      replacement_free = free_type_vars(replacement)
      if param in replacement_free and name in free_type_vars(body):
        renamed = fresh_name(param, replacement_free | type_var_names(body) | {name})
        body = replace_type(body, param, TypeVar(renamed))
        param = renamed
      return ForallType(param, replace_type(body, name, replacement))
    case IntType() | StrType():
      return t
  raise ValueError(f"Unknown type: {t!r}")


def types_equal(a: Type, b: Type) -> bool:
  """Compare two types up to renaming of forall-bound variables."""
  return _alpha_equal(a, b, {}, {}, 0)


def _alpha_equal(a: Type, b: Type, left: dict[str, int], right: dict[str, int], depth: int) -> bool:
  # Bound variables are compared by the depth of their binder, free ones by name
  match a, b:
    case TypeVar(x), TypeVar(y):
      x_level = left.get(x)
      y_level = right.get(y)
      if x_level is None and y_level is None:
        return x == y
      return x_level == y_level
    case ClosureType(a_param, a_body), ClosureType(b_param, b_body):
      return _alpha_equal(a_param, b_param, left, right, depth) and _alpha_equal(a_body, b_body, left, right, depth)
    case ForallType(a_param, a_body), ForallType(b_param, b_body):
      return _alpha_equal(
        a_body,
        b_body,
        {**left, a_param: depth},
        {**right, b_param: depth},
        depth + 1,
      )
    case IntType(), IntType():
      return True
    case StrType(), StrType():
      return True
  return False


def expr_type_var_names(expr: Expr) -> frozenset[str]:
  """Return every type variable name mentioned by the annotations and binders of `expr`."""
  match expr:
    case IntLiteral() | StringLiteral() | VarExpr():
      return frozenset()
    case AbsExpr(_, param_type, body):
      return type_var_names(param_type) | expr_type_var_names(body)
    case AppExpr(abs, arg):
      return expr_type_var_names(abs) | expr_type_var_names(arg)
    case TypeAbsExpr(param, body):
      return expr_type_var_names(body) | {param}
    case TypeAppExpr(abs, arg):
      return expr_type_var_names(abs) | type_var_names(arg)
  raise ValueError(f"Unknown expression: {expr!r}")


def replace_type_in_expr(expr: Expr, name: str, replacement: Type) -> Expr:
  """Replace free occurrences of type variable `name` in the annotations of `expr`.

  A type abstraction binding `name` shadows it. One whose binder is free in
  `replacement` is renamed first, as `replace_type` does for foralls.
  """
  match expr:
    case IntLiteral() | StringLiteral() | VarExpr():
      return expr
    case AbsExpr(param, param_type, body):
      return AbsExpr(param, replace_type(param_type, name, replacement), replace_type_in_expr(body, name, replacement))
    case AppExpr(abs, arg):
      return AppExpr(replace_type_in_expr(abs, name, replacement), replace_type_in_expr(arg, name, replacement))
    case TypeAbsExpr(param, body):
      if param == name:
        return expr
      replacement_free = free_type_vars(replacement)
      if param in replacement_free:
        renamed = fresh_name(param, replacement_free | expr_type_var_names(body) | {name})
        body = replace_type_in_expr(body, param, TypeVar(renamed))
        param = renamed
      return TypeAbsExpr(param, replace_type_in_expr(body, name, replacement))
    case TypeAppExpr(abs, arg):
      return TypeAppExpr(replace_type_in_expr(abs, name, replacement), replace_type(arg, name, replacement))
  raise ValueError(f"Unknown expression: {expr!r}")
