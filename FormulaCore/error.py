# error.py
"""Error types for the formula calculator.

Every error carries a four digit code (see ERROR_MESSAGES) and, once it has
passed through MathEngine.evaluate, the formula that caused it.
"""


class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def __str__(self):
        return self.message


class FormulaParseError(MathError):
    pass

class CalculationError(MathError):
    pass


# -----------------------------
# Parse errors
# -----------------------------

class EmptyInputError(FormulaParseError):
    def __init__(self):
        super().__init__("Input cannot be empty or whitespace", code="3001")


class InvalidNumberError(FormulaParseError):
    def __init__(self, text):
        super().__init__(f"Invalid number format: '{text}'", code="3002")
        self.text = text


class MissingOpenParenError(FormulaParseError):
    def __init__(self, text):
        super().__init__(f"Missing opening parenthesis in: '{text}'", code="3010")


class MissingCloseParenError(FormulaParseError):
    def __init__(self, text):
        super().__init__(f"Missing closing parenthesis in: '{text}'", code="3009")


class MismatchedParenError(FormulaParseError):
    def __init__(self, text):
        super().__init__(f"Mismatched parentheses in: '{text}'", code="3011")


class TooManyCloseParenError(FormulaParseError):
    def __init__(self):
        super().__init__("Mismatched parentheses: too many closing parentheses", code="3012")


class UnclosedParenError(FormulaParseError):
    def __init__(self):
        super().__init__("Mismatched parentheses: unclosed opening parentheses", code="3013")


class EmptyKeywordError(FormulaParseError):
    def __init__(self, text):
        super().__init__(f"Missing function name in: '{text}'", code="3014")


class UnknownFunctionError(FormulaParseError):
    def __init__(self, keyword):
        super().__init__(f"Unknown function: '{keyword}'", code="3004")
        self.keyword = keyword


class ParameterCountError(FormulaParseError):
    def __init__(self, keyword, expected, actual):
        super().__init__(
            f"Function '{keyword}' expects {expected} parameters but got {actual}",
            code="3005")
        self.keyword = keyword
        self.expected = expected
        self.actual = actual


class NestingTooDeepError(FormulaParseError):
    def __init__(self, limit):
        super().__init__(f"Formula is nested deeper than {limit} levels", code="3006")
        self.limit = limit


# -----------------------------
# Evaluation errors
# -----------------------------

class DivisionByZeroError(CalculationError):
    def __init__(self):
        super().__init__("Division by zero", code="3003")






Error_Dictionary = {

    "1" : "Missing Files",
    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "1000" : "Configuration file missing: ", # + path

    "3001" : "Empty formula.",
    "3002" : "Invalid number: ", # + literal
    "3003" : "Division by Zero",
    "3004" : "Unknown function: ", # + keyword
    "3005" : "Wrong number of parameters: ", # + keyword
    "3006" : "Formula nested too deep.",
    "3009" : "Missing ')'. ",
    "3010" : "Missing '('. ",
    "3011" : "Mismatched parentheses: ", # + formula
    "3012" : "Too many ')'.",
    "3013" : "Unclosed '('.",
    "3014" : "Missing function name: ", # + formula
    "3026" : "Number too big.",

    "5000" : "Invalid setting: ", # + key

    "9999" : "Unexpected Error: " #+error
}


def describe(code):
    """Return 'Main Error - Message' for a four digit error code."""
    group = Error_Dictionary.get(code[:1], Error_Dictionary["9"])
    return f"{group} - {ERROR_MESSAGES.get(code, ERROR_MESSAGES['9999'])}"
