"""FizzBuzz evaluation by composing deferred actions."""

import logging
import sys
from collections.abc import Iterable

from ._internal.actions import EmitNumber, EmitText, Then
from .types import DEFAULT_RULES, FIZZBUZZ_RANGE, Action, Rule

logger = logging.getLogger(__name__)


def classify(number: int, rule: Rule, fallback: Action) -> Action:
    """
    Decide what to print for ``number`` given one rule.

    Nothing is written here; the returned action does the writing when
    invoked.

    Args:
        number: The value being tested
        rule: Divisor and label to test against
        fallback: Action resolved by the rules checked so far

    Returns:
        ``fallback`` itself when the rule does not match. Otherwise an action
        printing the label, preceded by ``fallback`` unless it is the default
        number emitter.
    """
    if number % rule.divisor != 0:
        logger.debug("%r does not match %d, keeping %r", rule, number, fallback)
        return fallback

    label = EmitText(rule.label)
    result: Action = label if fallback.is_default else Then(fallback, label)
    logger.debug("%r matches %d, resolved to %r", rule, number, result)
    return result


def evaluate(number: int, rules: Iterable[Rule] = DEFAULT_RULES) -> Action:
    """
    Build the action printing the FizzBuzz output for ``number``.

    Starts from printing the number and threads the current action through
    ``classify`` for each rule in order, so matching labels are printed in
    rule order and the number only when nothing matched.

    Args:
        number: The value to evaluate
        rules: Rules to apply, in order

    Returns:
        The fully resolved action for ``number``
    """
    action: Action = EmitNumber(number)
    for rule in rules:
        action = classify(number, rule, action)

    logger.debug("Resolved %d to %r", number, action)
    return action


def run() -> None:
    """Print the FizzBuzz output for 1 through 20, one line per number."""
    logger.debug(
        "Running FizzBuzz for %d..%d", FIZZBUZZ_RANGE.start, FIZZBUZZ_RANGE.stop - 1
    )
    for number in FIZZBUZZ_RANGE:
        evaluate(number)()
        sys.stdout.write("\n")
    logger.debug("FizzBuzz run complete")
