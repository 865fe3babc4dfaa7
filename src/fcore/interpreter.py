"""Check-then-evaluate pipeline for embedding fcore programs."""

import logging
from dataclasses import dataclass
from typing import TextIO

from .ast import Expr, Type, type_to_str
from .env import Env
from .errors import FcoreError
from .values import Value, value_to_str
from .checker import TypeChecker
from .prelude import prelude_types, prelude_values
from .evaluator import Evaluator

logger = logging.getLogger(__name__)


@dataclass
class InterpreterConfig:
  """Options for an `Interpreter`."""

  typecheck: bool = True  # Reject ill-typed programs before evaluating them
  stream: TextIO | None = None  # Output for the prelude natives (None: sys.stdout)


@dataclass
class CheckResult:
  """Result of type checking."""

  success: bool
  type: Type | None = None
  error: FcoreError | None = None


@dataclass
class RunResult:
  """Result of running a program."""

  success: bool
  value: Value | None = None
  type: Type | None = None  # None when type checking was skipped or failed
  error: FcoreError | None = None


class Interpreter:
  """Orchestrates type checking and evaluation over seeded contexts."""

  def __init__(
    self,
    config: InterpreterConfig | None = None,
    types: Env[Type] | None = None,
    values: Env[Value] | None = None,
  ) -> None:
    self.config = config if config is not None else InterpreterConfig()
    self.types = types if types is not None else prelude_types()
    self.values = values if values is not None else prelude_values(self.config.stream)

  def check(self, expr: Expr) -> CheckResult:
    """Type check an expression without evaluating it."""
    try:
      expr_type = TypeChecker().infer(expr, self.types)
    except FcoreError as e:
      logger.info("type check failed: %s", e)
      return CheckResult(success=False, error=e)
    return CheckResult(success=True, type=expr_type)

  def run(self, expr: Expr) -> RunResult:
    """Type check (unless disabled) and then evaluate an expression."""
    expr_type = None
    if self.config.typecheck:
      checked = self.check(expr)
      if not checked.success:
        return RunResult(success=False, error=checked.error)
      expr_type = checked.type
      logger.debug("checked program type: %s", type_to_str(expr_type))

    try:
      value = Evaluator().evaluate(expr, self.values)
    except FcoreError as e:
      logger.info("evaluation failed: %s", e)
      return RunResult(success=False, type=expr_type, error=e)

    logger.debug("program evaluated to %s", value_to_str(value))
    return RunResult(success=True, value=value, type=expr_type)


def check_expr(expr: Expr) -> CheckResult:
  """Convenience function to type check against the prelude."""
  return Interpreter().check(expr)


def run_expr(expr: Expr, config: InterpreterConfig | None = None) -> RunResult:
  """Convenience function to check and run against the prelude."""
  return Interpreter(config).run(expr)
