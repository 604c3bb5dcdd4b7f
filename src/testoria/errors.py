"""Core exception hierarchy.

This module defines the error types used across the library to report
rejected model operations (name collisions and unresolved identities)
and element catalog loading failures in a structured way.

Operation errors are expected and recoverable: callers are meant to
match on the error kind, never on the message text.
"""

from os import linesep
from typing import TYPE_CHECKING, Any, TypedDict

from yaml import dump
from yaml.error import MarkedYAMLError, YAMLError

if TYPE_CHECKING:
    from pathlib import Path
    from typing import Self

if TYPE_CHECKING:
    from pydantic import ValidationError

if TYPE_CHECKING:
    from testoria.schema import ScenarioId, SuiteId

SNIPPET_ELLIPSIS = f' ...{linesep}'
SNIPPET_INDENT = 2

FORMAT_FILENAME = '<unicode string>'
FORMAT_INDENT = 4


class ErrorContext(TypedDict, total=False):
    """Container describing contextual information for error formatting.

    All fields are optional; the formatter adapts output based on
    provided values.
    """

    #: Name of the source file where the error occurred.
    filename: str | None

    #: Line number in the source file.
    line_num: int | None
    #: Column number in the source file.
    column_num: int | None

    #: Underlying exception that triggered formatting.
    error: Exception | None

    #: Data associated with the error, rendered as a YAML snippet.
    element: Any


class ErrorFormatter:
    """Utility class for formatting library errors.

    Produces human-readable messages with optional source location
    and a YAML snippet of the offending data.
    """

    @classmethod
    def format(cls, message: str, context: ErrorContext | None = None) -> str:
        """Format an error message using contextual information.

        Args:
            message: Base human-readable error message.
            context: Optional error context with location and data.

        Returns:
            A fully formatted error message suitable for display.
        """
        if not context:
            return message

        message += linesep
        message += cls.get_location_string(context, indent=FORMAT_INDENT)
        message += cls.get_snippet_string(context, indent=FORMAT_INDENT * 2)

        return message

    @classmethod
    def get_location_string(cls, context: ErrorContext, *,
                            indent: str | int | None = None) -> str:
        """Format source location information.

        Args:
            context: Error context containing location metadata.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted location string, or an empty string when the
            error is not bound to a source file.
        """
        indent = cls._ensure_indent(indent)

        filename = context.get('filename')
        line_num = context.get('line_num')
        if not filename and line_num is None:
            return ''

        message = f'{indent}in "{filename or FORMAT_FILENAME}"'
        if line_num is not None:
            message += f', line {line_num + 1}'
            if (column_num := context.get('column_num')) is not None:
                message += f', column {column_num + 1}'
        message += linesep

        return message

    @classmethod
    def get_snippet_string(cls, context: ErrorContext, *,
                           indent: str | int | None = None) -> str:
        """Generate a formatted snippet illustrating the error context.

        Args:
            context: Error context containing data or a YAML error.
            indent: Optional indentation (string or number of spaces).

        Returns:
            A formatted multi-line snippet string, or an empty string
            if no snippet data is available.
        """
        indent = cls._ensure_indent(indent)

        error = context.get('error')
        if isinstance(error, MarkedYAMLError) and error.problem_mark is not None:
            snippet = error.problem_mark.get_snippet(indent=0) or ''
            return cls._make_indent(snippet, indent)

        if (element := context.get('element')) is not None:
            snippet = f'{indent}{SNIPPET_ELLIPSIS}'
            snippet += cls._make_yaml(element, indent)
            return snippet + linesep

        return ''

    @classmethod
    def _make_yaml(cls, value: Any, indent: str = '') -> str:  # noqa: ANN401
        """Serialize a value to a YAML-formatted string.

        Args:
            value: Plain data to serialize.
            indent: Optional indentation prefix.

        Returns:
            A YAML-formatted string representation of the value.
        """
        data = dump(
            value,
            indent=SNIPPET_INDENT,
            sort_keys=False,
            allow_unicode=True,
        )

        return cls._make_indent(data, indent)

    @staticmethod
    def _make_indent(value: str, indent: str) -> str:
        """Apply indentation to a multi-line string.

        Empty or whitespace-only lines are omitted.
        """
        if not indent:
            return value

        return linesep.join(
            f'{indent}{line}'
            for line in value.splitlines()
            if line.strip()
        )

    @staticmethod
    def _ensure_indent(indent: str | int | None = None) -> str:
        """Normalize indentation input."""
        if isinstance(indent, int) and indent > 0:
            return ' ' * indent

        if isinstance(indent, str):
            return indent

        return ''


class ModelError(Exception, ErrorFormatter):
    """Base exception for all testoria errors.

    All custom exceptions raised by the library inherit from this class
    to allow unified error handling by callers.
    """

    def __init__(self, message: str, *,
                 context: ErrorContext | None = None) -> None:
        """Initialize an error.

        Args:
            message: Human-readable error description.
            context: Error context containing optional location and data.
        """
        self.message = message
        self.context = context

        super().__init__(message)

    def __str__(self) -> str:
        """String representation."""
        return self.format(self.message, self.context)


class ModelOperationError(ModelError):
    """Rejected operation of the test model manager.

    Operation errors are deterministic given the current state. They
    compare equal when they are of the same kind and carry the same
    payload.
    """

    def __init__(self, message: str, *payload: Any,  # noqa: ANN401
                 context: ErrorContext | None = None) -> None:
        """Initialize an operation error.

        Args:
            message: Human-readable error description.
            payload: Values identifying the failure.
            context: Error context containing the offending data.
        """
        self.payload = payload

        super().__init__(message, context=context)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModelOperationError):
            return NotImplemented
        return type(self) is type(other) and self.payload == other.payload

    def __hash__(self) -> int:
        return hash((type(self), self.payload))


class RecurringSuiteName(ModelOperationError):
    """A suite with the same name already exists."""

    def __init__(self, name: str) -> None:
        self.name = name

        super().__init__(
            f'Suite "{name}" already exists',
            name,
            context=ErrorContext(element={'suite': {'name': name}}),
        )


class RecurringScenarioName(ModelOperationError):
    """A scenario with the same name already exists in the suite."""

    def __init__(self, suite_name: str, scenario_name: str) -> None:
        self.suite_name = suite_name
        self.scenario_name = scenario_name

        super().__init__(
            f'Scenario "{scenario_name}" already exists in suite "{suite_name}"',
            suite_name,
            scenario_name,
            context=ErrorContext(element={
                'suite': {
                    'name': suite_name,
                    'scenarios': [{'name': scenario_name}],
                },
            }),
        )


class SuiteNotFound(ModelOperationError):
    """No suite is registered under the identifier."""

    def __init__(self, suite_id: 'SuiteId') -> None:
        self.suite_id = suite_id

        super().__init__(
            f'Suite "{suite_id.value}" not found',
            suite_id,
            context=ErrorContext(element={'suite': suite_id.model_dump()}),
        )


class ScenarioNotFound(ModelOperationError):
    """No scenario is registered under the compound identifier.

    Raised as well when the suite half of the identifier does not
    resolve to an existing suite.
    """

    def __init__(self, scenario_id: 'ScenarioId') -> None:
        self.scenario_id = scenario_id

        super().__init__(
            f'Scenario "{scenario_id.value}" not found in suite "{scenario_id.suite_id}"',
            scenario_id,
            context=ErrorContext(element={'scenario': scenario_id.model_dump()}),
        )


class CatalogError(ModelError):
    """Error raised when an element catalog cannot be loaded.

    Covers malformed YAML, entries violating the element schema and
    duplicated element identifiers.
    """

    @classmethod
    def from_yaml_error(cls, error: YAMLError, *,
                        path: 'Path | None' = None) -> 'Self':
        """Create a catalog error from a YAML reading or parsing failure.

        Marked errors keep the position of the problem. Other YAML errors,
        such as non-printable characters rejected by the reader, carry
        their own description.

        Args:
            error: Exception raised by the YAML reader or parser.
            path: Catalog file path.

        Returns:
            CatalogError describing the YAML problem.
        """
        error_context = ErrorContext(
            filename=str(path) if path else None,
            error=error,
        )

        problem = str(error)
        if isinstance(error, MarkedYAMLError):
            problem = error.problem
            if error.problem_mark is not None:
                error_context.update(
                    line_num=error.problem_mark.line,
                    column_num=error.problem_mark.column,
                )
                if not path:
                    error_context['filename'] = error.problem_mark.name

        message = 'Invalid YAML'
        if problem:
            message += f'{linesep}{' ' * FORMAT_INDENT}{problem}'

        return cls(message, context=error_context)

    @classmethod
    def from_read_error(cls, error: OSError | UnicodeDecodeError,
                        path: 'Path') -> 'Self':
        """Create a catalog error from a file reading failure.

        Args:
            error: Exception raised while reading or decoding the file.
            path: Catalog file path.

        Returns:
            CatalogError bound to the catalog file.
        """
        message = 'Can not read catalog'
        if isinstance(error, UnicodeDecodeError):
            message = 'Catalog is not valid UTF-8'

        return cls(
            f'{message}{linesep}{' ' * FORMAT_INDENT}{error}',
            context=ErrorContext(filename=str(path), error=error),
        )

    @classmethod
    def from_pydantic_error(cls, error: 'ValidationError', *,
                            data: Any = None,  # noqa: ANN401
                            path: 'Path | None' = None) -> 'Self':
        """Create a catalog error from a Pydantic validation failure.

        The snippet is narrowed to the first catalog entry reported
        by the validation error when it can be located.

        Args:
            error: ValidationError raised while validating the catalog.
            data: Raw catalog data.
            path: Catalog file path.

        Returns:
            CatalogError describing the first validation issue.
        """
        error_context = ErrorContext(
            filename=str(path) if path else None,
            error=error,
        )

        for item in error.errors(include_url=False, include_input=False):
            location = item['loc']
            message = (item.get('msg') or 'Validation error').strip()
            if location and isinstance(location[0], int) and isinstance(data, list):
                index = location[0]
                if 0 <= index < len(data):
                    error_context['element'] = [data[index]]
            field = '.'.join(str(part) for part in location)
            if field:
                message = f'{message} at "{field}"'
            return cls(message, context=error_context)

        return cls('Validation error', context=error_context)
