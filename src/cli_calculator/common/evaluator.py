"""Evaluate parsed calculations."""
from cli_calculator.common.errors import DivisionByZeroError, UnsupportedOperatorError
from cli_calculator.common.logger import logger
from cli_calculator.common.models import CalculationResult, ParsedExpression
from cli_calculator.common.operators import OPERATORS, Operator, OperatorFn


class ExpressionEvaluator:
    """
    Apply an arithmetic operator to two operands.

    The evaluator checks the operator itself instead of trusting the
    caller to have validated it.
    """

    @staticmethod
    def evaluate(a: float, b: float, op: Operator) -> float:
        """
        Compute ``a <op> b``.

        :param float a: Left operand
        :param float b: Right operand
        :param Operator op: Operator symbol, one of + - * /

        :return: Computed result
        :rtype: float
        :raises DivisionByZeroError: If op is "/" and b is exactly zero
        :raises UnsupportedOperatorError: If op is not a supported operator
        """
        if not isinstance(op, str) or op not in OPERATORS:
            raise UnsupportedOperatorError(op)

        # Exact comparison, -0.0 counts as zero too
        if op == "/" and b == 0.0:
            raise DivisionByZeroError()

        fn: OperatorFn = OPERATORS[op]
        return fn(a, b)

    @staticmethod
    def calculate(expression: ParsedExpression) -> CalculationResult:
        """
        Evaluate a parsed calculation and wrap it with its result.

        :param ParsedExpression expression: Calculation returned by the parser

        :return: The calculation together with its result
        :rtype: CalculationResult
        """
        result: float = ExpressionEvaluator.evaluate(
            expression.operand1, expression.operand2, expression.operator
        )
        logger.debug(f"🧮 Evaluated {expression} = {result}")
        return CalculationResult(expression=expression, result=result)
