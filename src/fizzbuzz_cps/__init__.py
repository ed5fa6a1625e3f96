"""FizzBuzz built from composed continuations."""

from ._errors import FizzBuzzError, InvalidRuleError
from ._internal.actions import EmitNumber, EmitText, Then
from ._version import __version__
from .evaluator import classify, evaluate, run
from .types import DEFAULT_RULES, FIZZBUZZ_RANGE, Action, Rule

__all__ = [
    # Main exports
    "classify",
    "evaluate",
    "run",
    # Types
    "Rule",
    "Action",
    "EmitText",
    "EmitNumber",
    "Then",
    "DEFAULT_RULES",
    "FIZZBUZZ_RANGE",
    # Errors
    "FizzBuzzError",
    "InvalidRuleError",
    "__version__",
]
