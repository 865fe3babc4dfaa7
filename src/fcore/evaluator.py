"""Call-by-value evaluator for the fcore calculus.

Type annotations and type arguments are erased: they never influence the
value an expression evaluates to.
"""

import logging

from .ast import (
  Expr,
  AbsExpr,
  AppExpr,
  VarExpr,
  IntLiteral,
  TypeAbsExpr,
  TypeAppExpr,
  StringLiteral,
)
from .env import Env
from .errors import NotCallable, UnboundVariable, InvalidTypeApplication
from .values import VInt, Value, VForall, VNative, VString, VClosure, value_to_str

logger = logging.getLogger(__name__)

ValueContext = Env[Value]


class Evaluator:
  """Reduces an expression to a value under a value context."""

  def evaluate(self, expr: Expr, context: ValueContext) -> Value:
    match expr:
      case IntLiteral(value):
        return VInt(value)

      case StringLiteral(value):
        return VString(value)

      case VarExpr(name):
        try:
          return context.lookup(name)
        except KeyError:
          raise UnboundVariable(name, "eval") from None

      case AbsExpr(param, _, body):
        return VClosure(param, body, context)

      case AppExpr(abs, arg):
        arg_value = self.evaluate(arg, context)
        abs_value = self.evaluate(abs, context)
        return self.apply(abs_value, arg_value)

      case TypeAbsExpr(_, body):
        return VForall(body, context)

      case TypeAppExpr(abs, _):
        abs_value = self.evaluate(abs, context)
        match abs_value:
          case VForall(body, captured):
            return self.evaluate(body, captured)
          case _:
            raise InvalidTypeApplication(abs_value)

    raise ValueError(f"Unknown expression: {expr!r}")

  def apply(self, abs_value: Value, arg_value: Value) -> Value:
    """Apply a function value to an already evaluated argument."""
    match abs_value:
      case VClosure(param, body, captured):
        # The defining environment, never the caller's
        return self.evaluate(body, captured.extend(param, arg_value))
      case VNative(name, fn):
        logger.debug("calling native %s with %s", name, value_to_str(arg_value))
        return fn(arg_value)
      case _:
        raise NotCallable(abs_value)


def evaluate(expr: Expr, context: ValueContext | None = None) -> Value:
  """Evaluate `expr`; an omitted context means no bindings."""
  return Evaluator().evaluate(expr, context if context is not None else Env.empty())
