#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Command-line interface.

Usage: matrixprobs [options] < matrix.tsv
"""

import sys
import logging
import argparse
from contextlib import ExitStack

from . import __version__
from .config import Config
from .errors import MatrixProbsError, ConfigurationError, SinkOpenError
from .reader import tally_stream
from .report import write_marginals, write_joints, write_conditionals


__all__ = ["main", "run"]


log = logging.getLogger(__name__)

_WRITERS = {
    "marginals": write_marginals,
    "joints": write_joints,
    "conditionals": write_conditionals,
}


def build_parser():
    parser = argparse.ArgumentParser(
        prog="matrixprobs",
        usage="matrixprobs [options] < matrix.tsv",
        description="Compute marginal, conditional, and joint "
                    "probabilities from a read matrix of indicator "
                    "variables.")
    parser.add_argument("--marginals", metavar="FILE",
                        help="file to write marginal probabilities to")
    parser.add_argument("--joints", metavar="FILE",
                        help="file to write joint probabilities to")
    parser.add_argument("--conditionals", metavar="FILE",
                        help="file to write conditional probabilities to")
    parser.add_argument("--limit", type=int, default=0,
                        help="limit the number of data lines to consider "
                             "(default = 0 = unlimited)")
    parser.add_argument("--input", metavar="FILE",
                        help="read the matrix from FILE instead of stdin")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true",
                           help="log debugging messages")
    verbosity.add_argument("-q", "--quiet", action="store_true",
                           help="only log warnings and errors")
    parser.add_argument("--version", action="version",
                        version="%(prog)s " + __version__)
    return parser


def setup_logging(level=logging.INFO):
    logger = logging.getLogger("matrixprobs")
    logger.setLevel(level)
    logger.propagate = False
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger


def open_sinks(config, stack):
    """Create the requested output files.

    Arguments:
        config: A :class:`matrixprobs.config.Config`.
        stack: A `contextlib.ExitStack` that will close the files.

    Returns:
        A list of (report name, path, file) tuples.
    """
    sinks = []
    for name, path in config.sinks:
        try:
            fd = stack.enter_context(open(path, "w"))
        except OSError as e:
            raise SinkOpenError(path, e) from e
        sinks.append((name, path, fd))
    return sinks


def _open_input(path):
    try:
        return open(path)
    except OSError as e:
        raise MatrixProbsError("failed to open input '{0}': {1}"
                               .format(path, e)) from e


def run(config, input_fd=None, input_path=None):
    """Tally a read matrix and write the requested reports.

    The output files are created before any input is read.

    Arguments:
        config: A :class:`matrixprobs.config.Config`.
        input_fd: A readable text file with the read matrix. Defaults
            to the standard input.
        input_path: Path of the read matrix, used instead of
            `input_fd` if given.

    Returns:
        The frozen :class:`matrixprobs.tally.TallyState`.
    """
    config.validate()
    with ExitStack() as stack:
        sinks = open_sinks(config, stack)
        if input_path is not None:
            input_fd = stack.enter_context(_open_input(input_path))
        elif input_fd is None:
            input_fd = sys.stdin
        state = tally_stream(input_fd, calc_joints=config.calc_joints,
                             limit=config.limit)
        for name, path, fd in sinks:
            num_lines = _WRITERS[name](state, fd)
            log.info("wrote %d lines to %s", num_lines, path)
    return state


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    elif args.quiet:
        setup_logging(logging.WARNING)
    else:
        setup_logging(logging.INFO)
    try:
        run(Config.from_args(args), input_path=args.input)
    except ConfigurationError as e:
        log.error("%s", e)
        parser.print_help(sys.stderr)
        return 1
    except MatrixProbsError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
