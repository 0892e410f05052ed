# Copyright 2026 exspork Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent parser for TypeScript declaration files.

Recognises the restricted declaration form::

    export function name(arg: type, ...): returnType;

Each public ``parse_*`` function takes source text and returns a pair of the
unconsumed remainder and the parsed value, so callers can chain them.
Failures raise a :class:`ParseError` subclass and never return partial
results.
"""

from exspork.model.entities import Argument, DeclarationFile, Function
from exspork.parser.resolver import resolve_type
from exspork.parser.scanner import Scanner

# ###############
# Public Interface
# ###############


class ParseError(Exception):
    """Raised when the parser encounters a syntactically invalid construct.

    Attributes:
        line: 1-based line number of the error.
        column: 1-based column number of the error.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.line = line
        self.column = column


class MalformedDeclarationError(ParseError):
    """A required literal or a required name/type token was not found."""


class UnterminatedArgumentListError(ParseError):
    """Input ended inside an argument list before the closing ')'."""


class UnterminatedSignatureError(ParseError):
    """Input ended before a signature delimiter ('(', ':' or ';') was found."""


class TrailingContentError(ParseError):
    """Content that is not a declaration remained after the last declaration."""


def parse_argument(source: str) -> tuple[str, Argument]:
    """Parse a single ``name: type`` argument.

    The delimiter that ends the type (``,`` or ``)``) is left unconsumed.

    Returns:
        The unconsumed remainder of *source* and the parsed Argument.

    Raises:
        ParseError: If the argument is malformed or unterminated.
    """
    parser = _Parser(source)
    argument = parser.parse_argument()
    return parser.rest(), argument


def parse_argument_list(source: str) -> tuple[str, tuple[Argument, ...]]:
    """Parse a parenthesised, comma-separated argument list (possibly empty).

    Raises:
        ParseError: If any argument is malformed or the list is unterminated.
    """
    parser = _Parser(source)
    arguments = parser.parse_argument_list()
    return parser.rest(), arguments


def parse_function(source: str) -> tuple[str, Function]:
    """Parse one ``export function`` declaration, including its trailing ';'.

    Raises:
        ParseError: If any part of the declaration is missing or malformed.
    """
    parser = _Parser(source)
    function = parser.parse_function()
    return parser.rest(), function


def parse_declarations(source: str) -> tuple[str, tuple[Function, ...]]:
    """Parse a sequence of declarations, stopping where no declaration starts.

    Text that does not begin with ``export function`` ends the sequence and is
    returned unconsumed; it is not an error. Once a declaration has started,
    any failure inside it propagates and discards all parsed functions.

    Returns:
        The unconsumed remainder and the functions in source order.

    Raises:
        ParseError: If a started declaration is malformed.
    """
    parser = _Parser(source)
    functions = parser.parse_declarations()
    return parser.rest(), functions


def parse(source: str) -> DeclarationFile:
    """Parse a whole declaration file into a DeclarationFile model.

    Unlike :func:`parse_declarations`, the entire input must be consumed;
    only trailing whitespace may follow the last declaration.

    Args:
        source: The full text of a .d.ts file.

    Returns:
        A DeclarationFile holding every function in source order.

    Raises:
        ParseError: If a declaration is malformed or other content remains.
    """
    parser = _Parser(source)
    functions = parser.parse_declarations()
    parser.expect_end()
    return DeclarationFile(functions=functions)


# ################
# Implementation
# ################

_ARGUMENT_NAME_DELIMITERS = ":,);"
_ARGUMENT_TYPE_DELIMITERS = ",);"
_FUNCTION_NAME_DELIMITERS = "(;"
_RETURN_TYPE_DELIMITERS = ";"


class _Parser:
    """Recursive-descent parser over a character scanner."""

    def __init__(self, source: str) -> None:
        self._scanner = Scanner(source)

    def rest(self) -> str:
        """Return the unconsumed input."""
        return self._scanner.rest()

    # ------------------------------------------------------------------
    # Error and expectation helpers
    # ------------------------------------------------------------------

    def _error(
        self,
        error_type: type[ParseError],
        message: str,
        position: int | None = None,
    ) -> ParseError:
        """Build an error of *error_type* located at *position* (default: the cursor)."""
        line, column = self._scanner.location(position)
        return error_type(message, line, column)

    def _found(self) -> str:
        """Describe the current character for error messages."""
        if self._scanner.at_end():
            return "end of input"
        return repr(self._scanner.current())

    def _expect(self, literal: str, unterminated: type[ParseError]) -> None:
        """Consume *literal* or raise.

        Raises *unterminated* at end of input and MalformedDeclarationError otherwise.
        """
        if self._scanner.match_literal(literal):
            return
        if self._scanner.at_end():
            raise self._error(unterminated, f"Expected {literal!r}, reached end of input")
        raise self._error(MalformedDeclarationError, f"Expected {literal!r}, got {self._found()}")

    def _expect_keyword(self, keyword: str) -> None:
        """Consume *keyword* followed by at least one whitespace character."""
        self._expect(keyword, UnterminatedSignatureError)
        if self._scanner.skip_whitespace() == 0:
            if self._scanner.at_end():
                raise self._error(
                    UnterminatedSignatureError,
                    f"Expected whitespace after {keyword!r}, reached end of input",
                )
            raise self._error(
                MalformedDeclarationError,
                f"Expected whitespace after {keyword!r}, got {self._found()}",
            )

    def _at_declaration_start(self) -> bool:
        """Return True if ``export function`` starts after optional whitespace.

        Consumes nothing.
        """
        start = self._scanner.position
        self._scanner.skip_whitespace()
        committed = (
            self._scanner.match_literal("export")
            and self._scanner.skip_whitespace() > 0
            and self._scanner.match_literal("function")
            and self._scanner.skip_whitespace() > 0
        )
        self._scanner.reset(start)
        return committed

    # ------------------------------------------------------------------
    # Arguments
    # ------------------------------------------------------------------

    def parse_argument(self) -> Argument:
        """Parse: <name> : <type>, leaving the following ',' or ')' unconsumed."""
        self._scanner.skip_whitespace()
        name_start = self._scanner.position
        raw_name = self._scanner.take_until(_ARGUMENT_NAME_DELIMITERS)
        if raw_name is None:
            raise self._error(
                UnterminatedArgumentListError,
                "Expected ':' after argument name, reached end of input",
                name_start,
            )
        if self._scanner.current() != ":":
            raise self._error(
                MalformedDeclarationError,
                f"Expected ':' after argument name, got {self._found()}",
            )
        name = raw_name.strip()
        if not name:
            raise self._error(MalformedDeclarationError, "Expected argument name before ':'", name_start)
        self._scanner.advance()  # consume ':'

        type_start = self._scanner.position
        raw_type = self._scanner.take_until(_ARGUMENT_TYPE_DELIMITERS)
        if raw_type is None:
            raise self._error(
                UnterminatedArgumentListError,
                f"Expected ',' or ')' after type of argument {name!r}, reached end of input",
                type_start,
            )
        if self._scanner.current() == ";":
            raise self._error(
                MalformedDeclarationError,
                f"Expected ',' or ')' after type of argument {name!r}, got ';'",
            )
        type_token = raw_type.strip()
        if not type_token:
            raise self._error(MalformedDeclarationError, f"Expected type for argument {name!r}", type_start)
        return Argument(name=name, type=resolve_type(type_token))

    def parse_argument_list(self) -> tuple[Argument, ...]:
        """Parse: ( [<argument> (, <argument>)*] )"""
        self._scanner.skip_whitespace()
        self._expect("(", UnterminatedArgumentListError)
        self._scanner.skip_whitespace()
        if self._scanner.match_literal(")"):
            return ()
        arguments: list[Argument] = []
        while True:
            arguments.append(self.parse_argument())
            if self._scanner.match_literal(","):
                continue
            self._expect(")", UnterminatedArgumentListError)
            return tuple(arguments)

    # ------------------------------------------------------------------
    # Function declarations
    # ------------------------------------------------------------------

    def parse_function(self) -> Function:
        """Parse: export function <name> ( <args> ) : <type> ;"""
        self._scanner.skip_whitespace()
        self._expect_keyword("export")
        self._expect_keyword("function")

        name_start = self._scanner.position
        raw_name = self._scanner.take_until(_FUNCTION_NAME_DELIMITERS)
        if raw_name is None:
            raise self._error(
                UnterminatedSignatureError,
                "Expected '(' after function name, reached end of input",
                name_start,
            )
        if self._scanner.current() != "(":
            raise self._error(MalformedDeclarationError, f"Expected '(' after function name, got {self._found()}")
        name = raw_name.strip()
        if not name:
            raise self._error(MalformedDeclarationError, "Expected function name before '('", name_start)

        arguments = self.parse_argument_list()

        self._scanner.skip_whitespace()
        self._expect(":", UnterminatedSignatureError)
        self._scanner.skip_whitespace()

        type_start = self._scanner.position
        raw_type = self._scanner.take_until(_RETURN_TYPE_DELIMITERS)
        if raw_type is None:
            raise self._error(
                UnterminatedSignatureError,
                f"Expected ';' after return type of {name!r}, reached end of input",
                type_start,
            )
        type_token = raw_type.strip()
        if not type_token:
            raise self._error(MalformedDeclarationError, f"Expected return type for {name!r}", type_start)
        self._scanner.advance()  # consume ';'

        return Function(name=name, args=arguments, return_type=resolve_type(type_token))

    # ------------------------------------------------------------------
    # Declaration files
    # ------------------------------------------------------------------

    def parse_declarations(self) -> tuple[Function, ...]:
        """Parse declarations until the input no longer starts one."""
        functions: list[Function] = []
        while self._at_declaration_start():
            start = self._scanner.position
            function = self.parse_function()
            if self._scanner.position == start:
                break
            functions.append(function)
        return tuple(functions)

    def expect_end(self) -> None:
        """Raise TrailingContentError unless only whitespace remains."""
        self._scanner.skip_whitespace()
        if self._scanner.at_end():
            return
        remainder = self._scanner.rest().splitlines()[0]
        if len(remainder) > 40:
            remainder = remainder[:40] + "..."
        raise self._error(
            TrailingContentError,
            f"Expected 'export function' declaration, got {remainder!r}",
        )
