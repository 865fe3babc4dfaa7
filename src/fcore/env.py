"""Persistent environments shared by the type checker and the evaluator.

An `Env` is a chain of single-binding frames. Extending an environment
allocates one new frame pointing at its parent, so every environment a
closure has captured stays valid and unchanged while other branches of
the walk extend the same parent.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


@dataclass(frozen=True, slots=True)
class _Frame:
  name: str
  value: Any
  parent: "_Frame | None"


class Env(Generic[T]):
  """Immutable name -> value mapping with structural sharing."""

  __slots__ = ("_head",)

  def __init__(self, head: "_Frame | None" = None) -> None:
    self._head = head

  @classmethod
  def empty(cls) -> "Env[T]":
    return cls()

  @classmethod
  def of(cls, bindings: Mapping[str, T] | None = None, **kwargs: T) -> "Env[T]":
    """Build an environment from a mapping and/or keyword arguments."""
    env: Env[T] = cls()
    for name, value in {**(bindings or {}), **kwargs}.items():
      env = env.extend(name, value)
    return env

  def extend(self, name: str, value: T) -> "Env[T]":
    """Return a new environment with `name` bound to `value`; `self` is unchanged."""
    return Env(_Frame(name, value, self._head))

  def lookup(self, name: str) -> T:
    frame = self._head
    while frame is not None:
      if frame.name == name:
        return frame.value
      frame = frame.parent
    raise KeyError(name)

  def get(self, name: str, default: T | None = None) -> T | None:
    try:
      return self.lookup(name)
    except KeyError:
      return default

  def items(self) -> Iterator[tuple[str, T]]:
    """Visible bindings, innermost first; shadowed frames are skipped."""
    seen: set[str] = set()
    frame = self._head
    while frame is not None:
      if frame.name not in seen:
        seen.add(frame.name)
        yield frame.name, frame.value
      frame = frame.parent

  def names(self) -> list[str]:
    """Visible names, innermost binding first."""
    return [name for name, _ in self.items()]

  def values(self) -> Iterator[T]:
    for _, value in self.items():
      yield value

  def __contains__(self, name: object) -> bool:
    return isinstance(name, str) and self.get(name, _MISSING) is not _MISSING

  def __len__(self) -> int:
    return sum(1 for _ in self.items())

  def __iter__(self) -> Iterator[str]:
    for name, _ in self.items():
      yield name

  def __repr__(self) -> str:
    inner = ", ".join(f"{name}={value!r}" for name, value in self.items())
    return f"Env({inner})"
