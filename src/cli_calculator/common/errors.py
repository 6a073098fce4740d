"""Errors raised while parsing and evaluating calculations."""


class CalculatorError(Exception):
    """Base class for every recoverable calculator error."""


class ParseError(CalculatorError):
    """Raised when a line of input cannot be turned into a calculation."""


class WrongArityError(ParseError):
    """The input does not split into exactly three tokens."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            f"Invalid input: expected '<number> <operator> <number>', got {count} token(s)"
        )


class NotANumberError(ParseError):
    """An operand token is not a valid floating-point number."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid number: {token!r}")


class UnknownOperatorError(ParseError):
    """The operator token is not one of + - * /."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Invalid operator {operator!r}. Use +, -, *, /")


class EvalError(CalculatorError):
    """Raised when a parsed calculation cannot be evaluated."""


class DivisionByZeroError(EvalError):
    def __init__(self) -> None:
        super().__init__("Cannot divide by zero")


class UnsupportedOperatorError(EvalError):
    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Invalid operator {operator!r}")
