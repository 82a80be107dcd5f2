"""
Progress and error reporting collaborators for long running operations.
"""

import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class OperationEnvironment:
    """
    Receives progress and error notifications from the parser.

    The default implementation ignores progress and continues past every
    line that fails to parse. Subclasses override what they need.
    """

    def set_progress_range(self, range_: int) -> None:
        pass

    def set_progress_position(self, position: int) -> None:
        pass

    def set_error_message(self, message: str) -> None:
        pass

    def show_parse_warning(self, line_number: int, line: str) -> bool:
        """
        Called when a line could not be parsed.

        Args:
            line_number: 1-based line number in the file
            line: The line text (comments stripped)

        Returns:
            True to skip the line and continue, False to abort the parse
        """
        return True


class NullOperation(OperationEnvironment):
    """Silent environment: no progress output, every bad line is skipped."""
    pass


class LoggingOperation(OperationEnvironment):
    """
    Operation environment that reports through the logging module.

    Parse warnings are logged and collected; the parse is aborted on the
    first bad line when `abort_on_error` is set.
    """

    def __init__(self, abort_on_error: bool = False):
        self.abort_on_error = abort_on_error
        self.progress_range = 0
        self.progress_position = 0
        self.error_message: Optional[str] = None
        self.warnings: List[Tuple[int, str]] = []

    def set_progress_range(self, range_: int) -> None:
        self.progress_range = range_

    def set_progress_position(self, position: int) -> None:
        self.progress_position = position
        logger.debug(f"Progress {position}/{self.progress_range}")

    def set_error_message(self, message: str) -> None:
        self.error_message = message
        logger.error(message)

    def show_parse_warning(self, line_number: int, line: str) -> bool:
        self.warnings.append((line_number, line))
        if self.abort_on_error:
            logger.error(f"Parse error at line {line_number}: \"{line}\", aborting")
            return False
        logger.warning(f"Parse error at line {line_number}: \"{line}\", line skipped")
        return True
