"""Type checker for the fcore calculus.

Types are synthesized bottom-up from fully annotated binders; there is no
unification. Type variables introduced by a type abstraction are not kept
in any context, and type arguments are accepted as written.
"""

import logging

from .ast import (
  Expr,
  Type,
  AbsExpr,
  AppExpr,
  IntType,
  StrType,
  TypeVar,
  VarExpr,
  ForallType,
  IntLiteral,
  ClosureType,
  TypeAbsExpr,
  TypeAppExpr,
  StringLiteral,
  expr_to_str,
  type_to_str,
)
from .env import Env
from .errors import NotGeneric, NotAFunction, TypeMismatch, UnboundVariable
from .subst import (
  fresh_name,
  replace_type,
  types_equal,
  free_type_vars,
  expr_type_var_names,
  replace_type_in_expr,
)

logger = logging.getLogger(__name__)

TypeContext = Env[Type]


class TypeChecker:
  """Synthesizes the type of an expression under a type context."""

  def infer(self, expr: Expr, context: TypeContext) -> Type:
    result = self._infer(expr, context)
    if logger.isEnabledFor(logging.DEBUG):
      logger.debug("%s : %s", expr_to_str(expr), type_to_str(result))
    return result

  def _infer(self, expr: Expr, context: TypeContext) -> Type:
    match expr:
      case IntLiteral(_):
        return IntType()

      case StringLiteral(_):
        return StrType()

      case VarExpr(name):
        try:
          return context.lookup(name)
        except KeyError:
          raise UnboundVariable(name, "check") from None

      case AbsExpr(param, param_type, body):
        body_type = self.infer(body, context.extend(param, param_type))
        return ClosureType(param_type, body_type)

      case AppExpr(abs, arg):
        # Same order as evaluation: argument first
        arg_type = self.infer(arg, context)
        abs_type = self.infer(abs, context)
        match abs_type:
          case ClosureType(param_type, body_type):
            if not types_equal(param_type, arg_type):
              raise TypeMismatch(param_type, arg_type)
            return body_type
          case _:
            raise NotAFunction(abs_type)

      case TypeAbsExpr(param, body):
        context_free = frozenset().union(*(free_type_vars(t) for t in context.values()))
        if param in context_free:
          # Rename the binder so it cannot capture a type variable of an enclosing term binder
          renamed = fresh_name(param, context_free | expr_type_var_names(body))
          body = replace_type_in_expr(body, param, TypeVar(renamed))
          param = renamed
        return ForallType(param, self.infer(body, context))

      case TypeAppExpr(abs, arg):
        abs_type = self.infer(abs, context)
        match abs_type:
          case ForallType(param, body_type):
            return replace_type(body_type, param, arg)
          case _:
            raise NotGeneric(abs_type)

    raise ValueError(f"Unknown expression: {expr!r}")


def infer(expr: Expr, context: TypeContext | None = None) -> Type:
  """Synthesize the type of `expr`; an omitted context means no bindings."""
  return TypeChecker().infer(expr, context if context is not None else Env.empty())
