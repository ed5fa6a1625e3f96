"""Type definitions for the FizzBuzz evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from ._errors import InvalidRuleError


class Action(ABC):
    """
    A deferred, zero-argument computation that writes output when invoked.

    Actions are continuations: they describe what to print once every rule
    for a number has been checked. Building one never writes anything.
    """

    # Set on the number emitter; a matching rule replaces a default action
    # instead of running after it.
    is_default: ClassVar[bool] = False

    @abstractmethod
    def __call__(self) -> None:
        """Write this action's output."""
        pass


@dataclass(frozen=True)
class Rule:
    """A divisor and the label printed for its multiples."""

    divisor: int
    label: str

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful divisor
        if isinstance(self.divisor, bool) or not isinstance(self.divisor, int):
            raise InvalidRuleError(
                f"Rule divisor must be an int, got {type(self.divisor).__name__}",
                divisor=self.divisor,
            )
        if self.divisor <= 0:
            raise InvalidRuleError(
                f"Rule divisor must be positive, got {self.divisor}",
                divisor=self.divisor,
            )
        if not isinstance(self.label, str):
            raise InvalidRuleError(
                f"Rule label must be a str, got {type(self.label).__name__}",
                divisor=self.divisor,
            )


# Order matters: labels of matching rules are printed in this order
DEFAULT_RULES: tuple[Rule, ...] = (Rule(3, "fizz"), Rule(5, "buzz"))

FIZZBUZZ_RANGE = range(1, 21)
