"""
Airspace file driver.

Detects whether a file is OpenAir or TNP from its first recognisable line,
then feeds every following line to that dialect's line parser.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..models.airspace import Airspace
from ..models.airspace_database import AirspaceSink
from ..utils.line_reader import LineReader, TextFileLineReader
from ..utils.operation import NullOperation, OperationEnvironment
from .errors import AirspaceLineError, ParseAbortedError, UnknownFileTypeError
from .openair import parse_line_openair
from .pending import PendingAirspace
from .tnp import TnpState, after_prefix_ci, parse_line_tnp

logger = logging.getLogger(__name__)

PROGRESS_RANGE = 1024
PROGRESS_INTERVAL = 256

COMMENT_MARKER = '*'


class AirspaceFileType(Enum):
    UNKNOWN = "unknown"
    OPENAIR = "openair"
    TNP = "tnp"


class FailureReason(Enum):
    UNKNOWN_FILE_TYPE = "unknown file type"
    USER_ABORT = "aborted after a line error"
    LINE_SOURCE_ERROR = "line source error"


@dataclass
class ParseResult:
    """Outcome of parsing one airspace file."""

    success: bool = True
    file_type: AirspaceFileType = AirspaceFileType.UNKNOWN
    error: Optional[FailureReason] = None
    error_message: Optional[str] = None
    airspace_count: int = 0
    lines_read: int = 0
    skipped_lines: List[Tuple[int, str]] = field(default_factory=list)

    def fail(self, reason: FailureReason, message: str) -> 'ParseResult':
        self.success = False
        self.error = reason
        self.error_message = message
        return self

    def __bool__(self) -> bool:
        return self.success

    def __str__(self) -> str:
        if self.success:
            return f"{self.file_type.value}: {self.airspace_count} airspaces, {len(self.skipped_lines)} lines skipped"
        return f"Failed ({self.error.value}): {self.error_message}"


def detect_file_type(line: str) -> AirspaceFileType:
    """
    Identify the dialect from a single line.

    Args:
        line: A non-empty line, comments stripped

    Returns:
        TNP for INCLUDE= or TYPE= lines, OPENAIR for an AC directive,
        UNKNOWN otherwise
    """
    if after_prefix_ci(line, 'INCLUDE=') is not None or after_prefix_ci(line, 'TYPE=') is not None:
        return AirspaceFileType.TNP

    rest = after_prefix_ci(line, 'AC')
    if rest is not None and (rest == '' or rest[0] == ' '):
        return AirspaceFileType.OPENAIR

    return AirspaceFileType.UNKNOWN


def strip_comment(line: str) -> str:
    comment = line.find(COMMENT_MARKER)
    if comment >= 0:
        line = line[:comment]
    return line.rstrip()


class _CountingSink(AirspaceSink):
    def __init__(self, sink: AirspaceSink):
        self.sink = sink
        self.count = 0

    def insert(self, airspace: Airspace) -> None:
        self.sink.insert(airspace)
        self.count += 1


class AirspaceParser:
    """
    Reads OpenAir and TNP airspace files into a sink.

    Example:
        database = AirspaceDatabase()
        result = AirspaceParser(database).parse_file('germany.txt')
        if result:
            print(database.airspaces.by_class('CTR').count())
    """

    def __init__(self, sink: AirspaceSink):
        """
        Args:
            sink: Receives each finished airspace, e.g. an AirspaceDatabase
        """
        self.sink = sink

    def parse(self, reader: LineReader, operation: Optional[OperationEnvironment] = None) -> ParseResult:
        """
        Parse all lines of a reader.

        Lines that fail to parse are reported to the operation environment,
        which decides whether to skip them or abort.

        Args:
            reader: Source of lines
            operation: Progress and error collaborator, NullOperation if None

        Returns:
            ParseResult, falsy if the file type was not recognised, the
            parse was aborted or the reader failed
        """
        if operation is None:
            operation = NullOperation()

        result = ParseResult()
        sink = _CountingSink(self.sink)
        pending = PendingAirspace()
        tnp_state = TnpState()

        line_parsers: Dict[AirspaceFileType, Callable[[str], None]] = {
            AirspaceFileType.OPENAIR: lambda text: parse_line_openair(text, pending, sink),
            AirspaceFileType.TNP: lambda text: parse_line_tnp(text, pending, sink, tnp_state),
        }

        operation.set_progress_range(PROGRESS_RANGE)
        file_size = reader.size()

        line_number = 0
        try:
            while True:
                raw = reader.read()
                if raw is None:
                    break
                line_number += 1

                if line_number % PROGRESS_INTERVAL == 0 and file_size > 0:
                    operation.set_progress_position(reader.tell() * PROGRESS_RANGE // file_size)

                line = strip_comment(raw)
                if not line:
                    continue

                if result.file_type == AirspaceFileType.UNKNOWN:
                    result.file_type = detect_file_type(line)
                    if result.file_type == AirspaceFileType.UNKNOWN:
                        continue
                    logger.info(f"Detected {result.file_type.value} airspace file at line {line_number}")

                try:
                    line_parsers[result.file_type](line)
                except AirspaceLineError as e:
                    logger.debug(f"Line {line_number}: {e}")
                    result.skipped_lines.append((line_number, line))
                    if not operation.show_parse_warning(line_number, line):
                        result.lines_read = line_number
                        result.airspace_count = sink.count
                        return result.fail(FailureReason.USER_ABORT,
                                           f"Parse error at line {line_number}: \"{line}\"")
        except OSError as e:
            logger.error(f"Error reading airspace file at line {line_number}: {e}")
            operation.set_error_message(str(e))
            result.lines_read = line_number
            result.airspace_count = sink.count
            return result.fail(FailureReason.LINE_SOURCE_ERROR, str(e))

        result.lines_read = line_number

        if result.file_type == AirspaceFileType.UNKNOWN:
            message = "Unknown airspace filetype"
            operation.set_error_message(message)
            return result.fail(FailureReason.UNKNOWN_FILE_TYPE, message)

        if not pending.waiting:
            pending.add_polygon(sink)

        result.airspace_count = sink.count
        logger.info(f"Parsed {result.airspace_count} airspaces from {line_number} lines "
                    f"({len(result.skipped_lines)} skipped)")
        return result

    def parse_file(self, path: Union[str, Path], operation: Optional[OperationEnvironment] = None,
                   encoding: str = 'utf-8') -> ParseResult:
        """
        Parse an airspace file on disk.

        Args:
            path: Path to the file
            operation: Progress and error collaborator
            encoding: Text encoding of the file

        Returns:
            ParseResult of the parse, failing with LINE_SOURCE_ERROR if the
            file cannot be opened
        """
        logger.info(f"Parsing airspace file {path}")
        try:
            reader = TextFileLineReader(path, encoding=encoding)
        except OSError as e:
            logger.error(f"Cannot open airspace file {path}: {e}")
            if operation is None:
                operation = NullOperation()
            operation.set_error_message(str(e))
            return ParseResult().fail(FailureReason.LINE_SOURCE_ERROR, str(e))

        with reader:
            return self.parse(reader, operation)

    def parse_or_raise(self, reader: LineReader, operation: Optional[OperationEnvironment] = None) -> ParseResult:
        """
        Like parse(), but raise on failure.

        Raises:
            UnknownFileTypeError: If neither dialect was detected
            ParseAbortedError: If the operation aborted after a bad line
            OSError: If the reader failed
        """
        result = self.parse(reader, operation)
        if result.error == FailureReason.UNKNOWN_FILE_TYPE:
            raise UnknownFileTypeError(result.error_message)
        if result.error == FailureReason.USER_ABORT:
            line_number, line = result.skipped_lines[-1]
            raise ParseAbortedError(result.error_message, line_number, line)
        if result.error == FailureReason.LINE_SOURCE_ERROR:
            raise OSError(result.error_message)
        return result
