"""Pydantic models for parsed calculations and their results."""
from pydantic import BaseModel, ConfigDict, Field

from cli_calculator.common.operators import Operator


class ParsedExpression(BaseModel):
    """
    Represents a validated ``<number> <operator> <number>`` request.

    Pydantic rejects any operator outside the four supported symbols,
    so an instance always holds a valid operator.
    """

    # Built once per input line and never changed afterwards
    model_config = ConfigDict(frozen=True)

    operand1: float = Field(..., description="Left operand")
    operand2: float = Field(..., description="Right operand")
    operator: Operator = Field(..., description="Arithmetic operator symbol")

    def __str__(self) -> str:
        return f"{self.operand1} {self.operator} {self.operand2}"


class CalculationResult(BaseModel):
    """Represents the result of an evaluated calculation."""

    model_config = ConfigDict(frozen=True)

    expression: ParsedExpression = Field(..., description="Calculation that was evaluated")
    result: float = Field(..., description="Numeric result of the calculation")

    def format(self) -> str:
        """
        Render the calculation the way the interactive loop prints it.

        :return: Line of the form ``<num1> <operator> <num2> = <result>``
        :rtype: str
        """
        return f"{self.expression} = {self.result}"
