"""Errors raised by the type checker, the evaluator and the primitives."""

from .ast import Type, type_to_str
from .values import Value, value_to_str


class FcoreError(Exception):
  """Base class for every error the checker or the evaluator can raise."""

  pass


class CheckError(FcoreError):
  """Raised when a program is rejected by the type checker."""

  pass


class EvalError(FcoreError):
  """Raised when evaluation cannot continue."""

  pass


class UnboundVariable(FcoreError):
  """A variable is not bound in the active environment.

  `phase` is "check" when raised by the type checker and "eval" when
  raised by the evaluator.
  """

  def __init__(self, name: str, phase: str) -> None:
    super().__init__(f"Unbound variable '{name}'")
    self.name = name
    self.phase = phase


class TypeMismatch(CheckError):
  """An argument type differs from the function's parameter type."""

  def __init__(self, expected: Type, actual: Type) -> None:
    super().__init__(f"Argument type mismatch: expected {type_to_str(expected)}, got {type_to_str(actual)}")
    self.expected = expected
    self.actual = actual


class NotAFunction(CheckError):
  """An applied expression does not have a function type."""

  def __init__(self, type: Type) -> None:
    super().__init__(f"Cannot apply non-function of type {type_to_str(type)}")
    self.type = type


class NotGeneric(CheckError):
  """A type-applied expression does not have a forall type."""

  def __init__(self, type: Type) -> None:
    super().__init__(f"Cannot type-apply non-generic of type {type_to_str(type)}")
    self.type = type


class NotCallable(EvalError):
  """An applied value is neither a closure nor a native."""

  def __init__(self, value: Value) -> None:
    super().__init__(f"Value {value_to_str(value)} is not callable")
    self.value = value


class InvalidTypeApplication(EvalError):
  """A type-applied value is not a suspended generic."""

  def __init__(self, value: Value) -> None:
    super().__init__(f"Invalid type application of {value_to_str(value)}")
    self.value = value


class PrimitiveMisuse(EvalError):
  """A native primitive received a value it does not handle."""

  def __init__(self, primitive: str, value: Value) -> None:
    super().__init__(f"Primitive '{primitive}' cannot handle {value_to_str(value)}")
    self.primitive = primitive
    self.value = value
