"""Concrete actions built by the evaluator."""

import sys
from dataclasses import dataclass
from typing import ClassVar

from ..types import Action


@dataclass(frozen=True)
class EmitText(Action):
    """Writes a label."""

    text: str

    def __call__(self) -> None:
        sys.stdout.write(self.text)


@dataclass(frozen=True)
class EmitNumber(Action):
    """Writes the decimal text of a number. Used when no rule matches."""

    is_default: ClassVar[bool] = True

    number: int

    def __call__(self) -> None:
        sys.stdout.write(str(self.number))


@dataclass(frozen=True)
class Then(Action):
    """Runs ``first`` and then ``second``."""

    first: Action
    second: Action

    def __call__(self) -> None:
        self.first()
        self.second()
