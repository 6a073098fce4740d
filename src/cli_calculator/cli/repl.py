"""Interactive read-evaluate-print loop."""
import sys
from typing import Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cli_calculator.common.errors import CalculatorError
from cli_calculator.common.evaluator import ExpressionEvaluator
from cli_calculator.common.logger import logger
from cli_calculator.common.models import CalculationResult, ParsedExpression
from cli_calculator.common.parser import ExpressionParser


class InteractiveCalculator(BaseModel):
    """
    Interactive calculator reading one calculation per line.

    Each iteration:
        - Writes the prompt to stdout
        - Reads one line from stdin
        - Stops on the quit command or at end of input
        - Prints ``<num1> <operator> <num2> = <result>`` to stdout,
          or ``Error: <description>`` to stderr, then loops again
    """

    # Make the Pydantic instance immutable (read-only) while the loop runs
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(
        default="Please enter your calculation (e.g. 5 + 5) or 'q' to quit:",
        description="Instruction line written before each read",
    )
    farewell: str = Field(default="Thanks for using.", description="Message written on quit")
    quit_command: str = Field(default="q", min_length=1, description="Input that ends the session")

    @field_validator("quit_command")
    def quit_command_must_not_be_blank(cls, v: str) -> str:
        """Strip the quit command and ensure it is not blank."""
        if not v.strip():
            raise ValueError("Quit command cannot be blank")
        return v.strip()

    def is_quit(self, line: str) -> bool:
        """
        Check whether a line asks to end the session.

        :param str line: Raw input line

        :return: True if the trimmed, lower-cased line is the quit command
        :rtype: bool
        """
        return line.strip().lower() == self.quit_command.lower()

    def process_line(self, line: str) -> CalculationResult:
        """
        Parse then evaluate a single input line.

        :param str line: Raw input line

        :return: The evaluated calculation
        :rtype: CalculationResult
        :raises CalculatorError: If parsing or evaluation fails
        """
        expression: ParsedExpression = ExpressionParser.parse(line)
        return ExpressionEvaluator.calculate(expression)

    def run(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> int:
        """
        Run the loop until the user quits or the input is exhausted.

        I/O errors raised by the input stream are not handled here.

        :param stdin: Stream to read calculations from, defaults to sys.stdin
        :param stdout: Stream for prompts and results, defaults to sys.stdout
        :param stderr: Stream for error lines, defaults to sys.stderr

        :return: Process exit status
        :rtype: int
        """
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        stderr = stderr if stderr is not None else sys.stderr

        logger.info("🧮 Calculator session started")

        while True:
            print(self.prompt, file=stdout, flush=True)
            line: str = stdin.readline()

            # readline() returns "" only at end of input
            if not line:
                logger.info("📭 End of input reached")
                print(self.farewell, file=stdout)
                break

            if self.is_quit(line):
                print(self.farewell, file=stdout)
                break

            try:
                calculation: CalculationResult = self.process_line(line)
            except CalculatorError as exc:
                logger.debug(f"❌ Rejected {line.strip()!r}: {exc}")
                print(f"Error: {exc}", file=stderr, flush=True)
                continue

            print(calculation.format(), file=stdout, flush=True)

        logger.info("🏁 Calculator session ended")
        return 0
