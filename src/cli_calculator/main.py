"""
Command-line entrypoint.

This script:
- Parses and validates command-line options
- Configures logging
- Runs the interactive calculator on stdin/stdout until the user quits
"""
import argparse
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, ValidationError, field_validator

from cli_calculator.cli.repl import InteractiveCalculator
from cli_calculator.common.logger import configure_logging


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    log_level : str
        Verbosity of the application logger.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    def normalize_log_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Interactive calculator: enter '<number> <operator> <number>', or 'q' to quit"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the ``cli-calculator`` console script.

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    calculator = InteractiveCalculator()
    return calculator.run()


if __name__ == "__main__":
    sys.exit(main())
