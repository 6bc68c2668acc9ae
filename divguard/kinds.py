from __future__ import annotations

from dataclasses import dataclass


class ErrorKind:
    """Base error kind."""

    name: str = "error"
    jvm_class: str = "java.lang.RuntimeException"

    def is_arithmetic(self) -> bool:
        return False

    def detail(self) -> str:
        return ""

    def __repr__(self) -> str:
        return self.__class__.__name__


@dataclass(frozen=True)
class DivisionByZero(ErrorKind):
    name: str = "DivisionByZero"
    jvm_class: str = "java.lang.ArithmeticException"

    def is_arithmetic(self) -> bool:
        return True

    def detail(self) -> str:
        return "/ by zero"


@dataclass(frozen=True)
class OutOfBounds(ErrorKind):
    index: int
    length: int
    name: str = "OutOfBounds"
    jvm_class: str = "java.lang.ArrayIndexOutOfBoundsException"

    def detail(self) -> str:
        return f"Index {self.index} out of bounds for length {self.length}"
