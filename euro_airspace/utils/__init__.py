"""
Utilities shared by the airspace parsers: unit conversion, line sources
and progress/error reporting.
"""

from .units import Unit, UnitSetting, to_sys_unit, to_user_unit
from .line_reader import LineReader, TextFileLineReader, StringLineReader
from .operation import OperationEnvironment, NullOperation, LoggingOperation

__all__ = [
    'Unit',
    'UnitSetting',
    'to_sys_unit',
    'to_user_unit',
    'LineReader',
    'TextFileLineReader',
    'StringLineReader',
    'OperationEnvironment',
    'NullOperation',
    'LoggingOperation',
]
