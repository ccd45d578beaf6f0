"""
Script-level errors raised by the value model.

Each error carries the category name a learner sees in a transcript
("TypeError: Assignment to constant variable."), while still being a
normal Python exception of the closest built-in category.
"""


class ScriptError(Exception):
    """Base class for errors raised by value operations and bindings."""

    kind = "Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def describe(self) -> str:
        return f"{self.kind}: {self.message}"


class ScriptTypeError(ScriptError, TypeError):
    kind = "TypeError"


class ScriptReferenceError(ScriptError, NameError):
    kind = "ReferenceError"


class ScriptSyntaxError(ScriptError):
    kind = "SyntaxError"


class ScriptRangeError(ScriptError, ArithmeticError):
    kind = "RangeError"


class DataCloneError(ScriptError):
    """Raised when a value cannot be structurally cloned."""

    kind = "DataCloneError"
