"""
Reader for the Bridges board file format.

The format consists of three sections::

    FIELD
    <width> x <height> | <island count>

    ISLANDS
    ( <x>, <y> | <required bridges> )
    ...

    BRIDGES
    ( <island index>, <island index> | <true|false> )
    ...

Whitespace and line breaks are not significant and '#' starts a comment
running to the end of the line. The BRIDGES section is optional; its
island indices refer to the islands in the order they were read.
"""

import re
from pathlib import Path
from typing import IO, List, NamedTuple, Optional, Union

from ..core.board import Board
from ..core.bridge import Bridge
from ..core.island import Island
from ..core.exceptions import BoardSemanticError, BoardSyntaxError, PlacementError


_TOKEN_RE = re.compile(r"""
    (?P<newline>\n)
  | (?P<space>[ \t\r\f\v]+)
  | (?P<comment>\#[^\n]*)
  | (?P<number>-?(?:\d+\.?\d*|\.\d+))
  | (?P<word>[A-Za-z_][A-Za-z0-9_.\-]*)
  | (?P<char>.)
""", re.VERBOSE)


class Token(NamedTuple):
    kind: str  # 'number', 'word' or 'char'
    text: str
    lineno: int


def tokenize(text: str) -> List[Token]:
    """Split the input into numbers, words and single characters."""
    tokens = []
    lineno = 1
    for match in _TOKEN_RE.finditer(text):
        kind = match.lastgroup
        if kind == 'newline':
            lineno += 1
        elif kind in ('number', 'word', 'char'):
            tokens.append(Token(kind, match.group(), lineno))
    return tokens


class BoardReader:
    """
    Read a board from text.

    The source is either a string or a readable text stream. The board is
    read once; further calls to read() return the same board.
    """

    def __init__(self, source: Union[str, IO[str]]):
        text = source if isinstance(source, str) else source.read()
        self._tokens = tokenize(text)
        self._position = 0
        self._last_lineno = text.count('\n') + 1 if not self._tokens else 1
        self._board: Optional[Board] = None
        self._expected_island_count = 0

    @classmethod
    def read_file(cls, path: Union[str, Path]) -> Board:
        """Read a board from a file. I/O errors are propagated."""
        with open(path, 'r') as f:
            return cls(f).read()

    def read(self) -> Board:
        """
        Parse the input and return the board.

        Raises:
            BoardSyntaxError: If the input does not follow the format
            BoardSemanticError: If the input describes an invalid board
        """
        if self._board is not None:
            return self._board

        self._read_field_section()
        self._read_island_section()

        island_count = self._board.get_island_count()
        if island_count != self._expected_island_count:
            raise BoardSemanticError(
                f"Expected {self._expected_island_count} islands, got {island_count}.",
                self._last_lineno
            )

        self._read_bridges_section()
        return self._board

    # Sections

    def _read_field_section(self):
        self._expect("FIELD")
        width = self._parse_integer()
        self._expect("x")
        height = self._parse_integer()
        self._expect("|")
        island_count = self._parse_integer()

        try:
            self._board = Board(width, height)
        except PlacementError as e:
            raise BoardSemanticError(str(e), self._last_lineno) from e

        self._expected_island_count = island_count

    def _read_island_section(self):
        self._expect("ISLANDS")

        while True:
            token = self._parse_string()
            if token is None:
                return
            if token == "BRIDGES":
                self._push_back()
                return
            if token != "(":
                raise BoardSyntaxError(
                    f"Expected 'BRIDGES', '(' or end of file. Got '{token}' instead.",
                    self._last_lineno
                )

            x = self._parse_integer()
            self._expect(",")
            y = self._parse_integer()
            self._expect("|")
            required = self._parse_integer()
            self._expect(")")

            try:
                self._board.add_island(Island(x, y, required))
            except PlacementError as e:
                raise BoardSemanticError(str(e), self._last_lineno) from e

    def _read_bridges_section(self):
        token = self._parse_string()
        if token is None:
            return
        if token != "BRIDGES":
            raise BoardSyntaxError(
                f"Expected 'BRIDGES' or end of file. Got '{token}' instead.",
                self._last_lineno
            )

        islands = self._board.get_islands()
        while True:
            token = self._parse_string()
            if token is None:
                return
            if token != "(":
                raise BoardSyntaxError(
                    f"Expected '(' or end of file. Got '{token}' instead.",
                    self._last_lineno
                )

            index1 = self._parse_integer()
            self._expect(",")
            index2 = self._parse_integer()
            self._expect("|")
            is_double = self._parse_boolean()
            self._expect(")")

            if not (0 <= index1 < len(islands) and 0 <= index2 < len(islands)):
                raise BoardSemanticError(
                    f"At least one invalid island index: {index1}, {index2}.",
                    self._last_lineno
                )

            try:
                self._board.add_bridge(Bridge(islands[index1], islands[index2], is_double))
            except PlacementError as e:
                raise BoardSemanticError(str(e), self._last_lineno) from e

    # Tokens

    def _next_token(self) -> Optional[Token]:
        if self._position >= len(self._tokens):
            return None
        token = self._tokens[self._position]
        self._position += 1
        self._last_lineno = token.lineno
        return token

    def _push_back(self):
        self._position -= 1

    def _parse_string(self) -> Optional[str]:
        """Return the next word or character, or None at the end of input."""
        token = self._next_token()
        if token is None:
            return None
        if token.kind == 'number':
            raise BoardSyntaxError(
                f"Failed to parse string (got number {token.text} instead).", token.lineno
            )
        return token.text

    def _parse_integer(self) -> int:
        token = self._next_token()
        if token is None:
            raise BoardSyntaxError("Failed to parse integer (reached end of file).", self._last_lineno)
        if token.kind == 'word':
            raise BoardSyntaxError(
                f"Failed to parse integer (got string \"{token.text}\" instead).", token.lineno
            )
        if token.kind == 'char':
            raise BoardSyntaxError(
                f"Failed to parse integer (got character '{token.text}' instead).", token.lineno
            )

        value = float(token.text)
        if not value.is_integer():
            raise BoardSyntaxError(
                f"Failed to parse integer (got float '{token.text}' instead).", token.lineno
            )
        return int(value)

    def _parse_boolean(self) -> bool:
        token = self._parse_string()
        if token == "true":
            return True
        if token == "false":
            return False
        raise BoardSyntaxError(f"Failed to parse boolean (got '{token}' instead).", self._last_lineno)

    def _expect(self, expected: str):
        token = self._parse_string()
        if token != expected:
            raise BoardSyntaxError(f"Expected '{expected}' (got '{token}' instead).", self._last_lineno)


def read(source: Union[str, IO[str]]) -> Board:
    """Read a board from a string or a text stream."""
    return BoardReader(source).read()


def read_file(path: Union[str, Path]) -> Board:
    """Read a board from a file."""
    return BoardReader.read_file(path)
