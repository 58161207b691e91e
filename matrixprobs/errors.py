#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Exceptions raised while tallying and reporting.
"""

__all__ = ["MatrixProbsError", "ConfigurationError", "SinkOpenError",
           "HeaderFormatError", "MalformedRowError", "RowFormatError",
           "InvalidValueError"]


class MatrixProbsError(Exception):
    """Base class of all the errors raised by the package."""


class ConfigurationError(MatrixProbsError):
    """The requested configuration cannot be run."""


class SinkOpenError(MatrixProbsError):
    """An output file could not be created.

    Arguments:
        path: Path of the output file.
        reason: The underlying error (usually an `OSError`).
    """

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__("failed to open '{0}': {1}".format(path, reason))


class HeaderFormatError(MatrixProbsError):
    """The header line is missing or malformed."""


class MalformedRowError(MatrixProbsError):
    """A sample does not have one value per variable."""


class RowFormatError(MalformedRowError):
    """A data line has the wrong number of fields.

    Arguments:
        line_num: The 1-based line number in the input.
        expected: The expected number of fields.
        actual: The number of fields found.
    """

    def __init__(self, line_num, expected, actual):
        self.line_num = line_num
        self.expected = expected
        self.actual = actual
        super().__init__("expected line {0} to have {1} fields, found {2}"
                         .format(line_num, expected, actual))


class InvalidValueError(MatrixProbsError):
    """A value is not exactly 0 or 1.

    Arguments:
        value: The offending value (or token).
        line_num: The 1-based line number in the input, if known.
    """

    def __init__(self, value, line_num=None):
        self.value = value
        self.line_num = line_num
        msg = "invalid value {0!r}".format(value)
        if line_num is not None:
            msg += " on line {0}".format(line_num)
        super().__init__(msg)
