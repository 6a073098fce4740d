"""Parse a line of user input into a validated calculation."""
from typing import List

from cli_calculator.common.errors import NotANumberError, UnknownOperatorError, WrongArityError
from cli_calculator.common.logger import logger
from cli_calculator.common.models import ParsedExpression
from cli_calculator.common.operators import OPERATORS


class ExpressionParser:
    """
    Parse ``<number> <operator> <number>`` input lines.

    Design constraints:
        - No eval(), no dynamic code execution
        - Pure functions: no state is kept between calls

    Algorithm:
        1. Tokenize based on whitespace
        2. Check that exactly three tokens were produced
        3. Convert the first and last tokens to floats
        4. Check the middle token against the supported operators

    Examples:
        - "5 + 5" -> ParsedExpression(operand1=5.0, operand2=5.0, operator="+")
        - "1e3 / -2.5" -> ParsedExpression(operand1=1000.0, operand2=-2.5, operator="/")
    """

    @staticmethod
    def tokenize(raw: str) -> List[str]:
        """
        Split an input line into tokens.

        Tokens must be whitespace-separated (e.g., "3 + 4"), runs of
        whitespace never produce empty tokens.

        :param str raw: Raw input line

        :return: List of tokens
        :rtype: List[str]
        """
        return raw.split()

    @staticmethod
    def to_number(token: str) -> float:
        """
        Convert an operand token to a float.

        Supports integers, decimals, scientific notation and signs.
        Only ASCII digits are accepted, digit-group underscores ("1_000")
        and other scripts' digits ("٣") are rejected.

        :param str token: Operand token

        :return: Parsed value
        :rtype: float
        :raises NotANumberError: If the token is not a number
        """
        if not token.isascii() or "_" in token:
            raise NotANumberError(token)
        try:
            return float(token)
        except ValueError as exc:
            raise NotANumberError(token) from exc

    @staticmethod
    def parse(raw: str) -> ParsedExpression:
        """
        Parse an input line into two operands and an operator.

        :param str raw: Raw input line, e.g. "5 + 5"

        :return: Validated calculation
        :rtype: ParsedExpression
        :raises WrongArityError: If the line does not contain exactly 3 tokens
        :raises NotANumberError: If an operand is not a number
        :raises UnknownOperatorError: If the operator is not one of + - * /
        """
        tokens: List[str] = ExpressionParser.tokenize(raw)

        if len(tokens) != 3:
            raise WrongArityError(len(tokens))

        left, op, right = tokens
        operand1: float = ExpressionParser.to_number(left)
        operand2: float = ExpressionParser.to_number(right)

        if op not in OPERATORS:
            raise UnknownOperatorError(op)

        logger.debug(f"🔎 Parsed {raw.strip()!r} into {operand1}, {op!r}, {operand2}")
        return ParsedExpression(operand1=operand1, operand2=operand2, operator=op)
