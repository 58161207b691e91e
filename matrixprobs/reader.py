#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Reading read matrices.

A read matrix is a tab-separated text file. The first line is a
header: its first field must be `read` and the remaining fields name
the indicator variables. Every other line starts with the name of a
read followed by one `0` or `1` token per variable.
"""

import logging
import itertools

from .errors import HeaderFormatError, RowFormatError, InvalidValueError
from .tally import TallyState


__all__ = ["parse_header", "parse_row", "iter_rows", "tally_stream"]


log = logging.getLogger(__name__)

DELIMITER = "\t"

READ_FIELD = "read"

_TOKENS = {"0": 0, "1": 1}


def _split_line(line):
    return line.rstrip("\r\n").split(DELIMITER)


def parse_header(line):
    """Parse the header line.

    Arguments:
        line: The first line of the input.

    Returns:
        A list with the names of the variables.
    """
    fields = _split_line(line)
    if len(fields) < 2:
        raise HeaderFormatError("too few fields")
    if fields[0] != READ_FIELD:
        raise HeaderFormatError("first field should be named '{0}'"
                                .format(READ_FIELD))
    return fields[1:]


def parse_row(line, num_fields, line_num):
    """Parse a data line.

    Arguments:
        line: The text of the line.
        num_fields: The number of variables declared in the header.
        line_num: The 1-based line number, used in error messages.

    Returns:
        A tuple with the read name and a list with the values.
    """
    fields = _split_line(line)
    if len(fields) != num_fields + 1:
        raise RowFormatError(line_num, num_fields + 1, len(fields))
    values = []
    for token in fields[1:]:
        try:
            values.append(_TOKENS[token])
        except KeyError:
            raise InvalidValueError(token, line_num) from None
    return fields[0], values


def iter_rows(lines, num_fields, limit=0):
    """Iterate over the data lines of a read matrix.

    Arguments:
        lines: An iterator over the lines that follow the header.
        num_fields: The number of variables declared in the header.
        limit: Maximum number of data lines to read. Zero means all.
            Lines beyond the limit are not consumed from `lines`.

    Yields:
        Tuples with the 1-based line number, the read name and a list
        with the values.
    """
    if limit > 0:
        lines = itertools.islice(lines, limit)
    for line_num, line in enumerate(lines, start=2):
        read_name, values = parse_row(line, num_fields, line_num)
        yield line_num, read_name, values


def tally_stream(lines, calc_joints=True, limit=0):
    """Tally a read matrix.

    Arguments:
        lines: An iterable over the lines of the input, e.g. an open
            text file. It is consumed once.
        calc_joints: Whether the pairwise co-occurrences should be
            counted.
        limit: Maximum number of data lines to read. Zero means all.

    Returns:
        A frozen :class:`matrixprobs.tally.TallyState`.
    """
    lines = iter(lines)
    header = next(lines, None)
    if header is None:
        raise HeaderFormatError("empty input")
    var_names = parse_header(header)
    log.info("number of fields: %d", len(var_names))
    log.debug("%s joint counts",
              "computing" if calc_joints else "skipping")
    state = TallyState(var_names, calc_joints)
    for _, _, values in iter_rows(lines, state.num_fields, limit):
        state.add_sample(values)
    if limit > 0 and state.num_reads == limit:
        log.info("stopped at the limit of %d reads", limit)
    log.info("tallied %d reads", state.num_reads)
    return state.freeze()
