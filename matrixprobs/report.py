#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Marginal, joint and conditional probability reports.

The functions in this module only read a
:class:`matrixprobs.tally.TallyState`, so the three reports can be
produced in any order. Undefined probabilities (a division by a zero
count) are represented as NaN and written as `NaN`.
"""

import math
import logging

import numpy as np


__all__ = ["marginal_probs", "joint_probs", "cond_probs",
           "marginal_lines", "joint_lines", "cond_lines",
           "write_marginals", "write_joints", "write_conditionals"]


log = logging.getLogger(__name__)

NAN_STR = "NaN"


def _require_joints(state):
    if state.joints is None:
        raise ValueError("The joint counts were not computed")


def _format_prob(prob, digits):
    if math.isnan(prob):
        return NAN_STR
    return "%0.*f" % (digits, prob)


def marginal_probs(state):
    """Marginal probabilities.

    Returns:
        A numpy array with P(i) for each variable i. All the entries
        are NaN if no reads were tallied.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return state.marginals / np.float64(state.num_reads)


def joint_probs(state):
    """Joint probabilities.

    Returns:
        A square numpy array with P(i, j) in entry (i, j).
    """
    _require_joints(state)
    with np.errstate(divide="ignore", invalid="ignore"):
        return state.joints / np.float64(state.num_reads)


def cond_probs(state):
    """Conditional probabilities.

    Entry (i, j) is P(j | i), computed as P(i, j) / P(i) (not directly
    from the counts, so that the rounding matches the joint and
    marginal reports). Rows of variables that were never 1 are NaN.

    Returns:
        A square numpy array.
    """
    joint = joint_probs(state)
    marginal = marginal_probs(state)
    with np.errstate(divide="ignore", invalid="ignore"):
        cond = joint / marginal[:, np.newaxis]
    cond[state.marginals == 0, :] = np.nan
    return cond


def marginal_lines(state):
    """Lines of the marginal probabilities report."""
    probs = marginal_probs(state)
    for i, name in enumerate(state.var_names):
        yield "P( %s ) = %s ; %d\n" % (
            name, _format_prob(probs[i], 6), state.marginals[i])


def joint_lines(state):
    """Lines of the joint probabilities report.

    One line for each ordered pair of variables, row-major.
    """
    probs = joint_probs(state)
    for i, i_name in enumerate(state.var_names):
        for j, j_name in enumerate(state.var_names):
            yield "P( %s , %s ) = %s ; %d\n" % (
                i_name, j_name, _format_prob(probs[i, j], 8),
                state.joints[i, j])


def cond_lines(state):
    """Lines of the conditional probabilities report.

    The line for the pair (i, j) gives P(j | i) followed by the joint
    count of (i, j) and the marginal count of i.
    """
    probs = cond_probs(state)
    for i, i_name in enumerate(state.var_names):
        for j, j_name in enumerate(state.var_names):
            yield "P( %s | %s ) = %s ; %d , %d\n" % (
                j_name, i_name, _format_prob(probs[i, j], 8),
                state.joints[i, j], state.marginals[i])


def _write_lines(lines, fd):
    # Render everything first so that a failure leaves no partial report.
    lines = list(lines)
    log.debug("rendered %d lines", len(lines))
    fd.write("".join(lines))
    return len(lines)


def write_marginals(state, fd):
    """Write the marginal probabilities report.

    Arguments:
        state: A :class:`matrixprobs.tally.TallyState`.
        fd: A writable text file.

    Returns:
        The number of lines written.
    """
    return _write_lines(marginal_lines(state), fd)


def write_joints(state, fd):
    """Write the joint probabilities report (see :func:`write_marginals`)."""
    return _write_lines(joint_lines(state), fd)


def write_conditionals(state, fd):
    """Write the conditional probabilities report (see :func:`write_marginals`)."""
    return _write_lines(cond_lines(state), fd)
