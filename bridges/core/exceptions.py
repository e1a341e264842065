"""
Exceptions raised by the Bridges puzzle engine.
"""


class BridgesError(ValueError):
    """Base class for all puzzle data errors"""


class PlacementError(BridgesError):
    """An island or bridge cannot be created or placed on a board"""


class BoardFormatError(BridgesError):
    """
    Error while reading a board file.

    Carries the line number of the input at which the error was detected.
    """

    def __init__(self, message: str, lineno: int):
        self.message = message
        self.lineno = lineno
        super().__init__(f"{self.__class__.__name__} at line {lineno}: {message}")


class BoardSyntaxError(BoardFormatError):
    """The input does not follow the board file grammar"""


class BoardSemanticError(BoardFormatError):
    """The input is well formed but describes an invalid board"""


class GenerationError(RuntimeError):
    """The generator ran out of tries without producing a board"""
