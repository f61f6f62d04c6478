class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class SyntaxError(MathError):
    pass

class CalculationError(MathError):
    pass

class SolverError(MathError):
    pass

class InvalidCharacterError(SyntaxError):
    def __init__(self, message="Invalid Character", code="3100", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidSyntaxError(SyntaxError):
    def __init__(self, message="Invalid Syntax", code="3101", equation=None):
        super().__init__(message, code=code, equation=equation)

class DivisionByZeroError(CalculationError):
    def __init__(self, message="Division by Zero Not Defined", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)

class ZeroRaisedToZeroError(CalculationError):
    def __init__(self, message="Zero Raised to Zero Not Defined", code="3102", equation=None):
        super().__init__(message, code=code, equation=equation)

class NothingToSimplify(SolverError):
    """No rewrite rule applies. The driver echoes the input instead of reporting it."""
    def __init__(self, message="Nothing to simplify", code="3103", equation=None):
        super().__init__(message, code=code, equation=equation)

#Error Messages are structured in:
# 1. Digit: Main Error (3 = Engine, 4 = UI, 9 = Unexpected)
# 2. Digit: Specification
# 3. and 4. Digit: Error Number

ERROR_MESSAGES = {

    "3003" : "Division by Zero Not Defined",
    "3100" : "Invalid Character",
    "3101" : "Invalid Syntax",
    "3102" : "Zero Raised to Zero Not Defined",
    "3103" : "Nothing to simplify",
    "3104" : "Expression could not be reduced to terms: ", # + Node

    "4002" : "Calculation already Running!",
    "4501" : "Not all Settings could be saved: ", # + Error raising setting

    "9999" : "Unexpected Error: " #+error
}
