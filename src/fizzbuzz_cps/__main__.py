"""Command-line entry point: ``python -m fizzbuzz_cps``."""

import sys

from .evaluator import run


def main() -> int:
    """Print FizzBuzz for 1 through 20 and return the exit status."""
    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
