class SymbexError(Exception):
    """ Base class for all Symbex errors"""
    pass

class SymbexSyntaxError(SymbexError):
    """ Raised when source text cannot be read into a value"""

    def __init__(self, message: str, position: int | None = None):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position

class UnexpectedCloseParen(SymbexSyntaxError):
    """ Raised when a ')' has no matching '('"""

class UnexpectedEndOfInput(SymbexSyntaxError):
    """ Raised when the input ends inside an open list"""

class TrailingInput(SymbexSyntaxError):
    """ Raised when a single-form read finds more than one top-level form"""

class SymbexTypeError(SymbexError):
    """ Raised when something that is not a value or an operator reaches the runtime"""

class SymbexNameError(SymbexError):
    """ Raised when a name is removed before it is defined, or is not a usable name"""
