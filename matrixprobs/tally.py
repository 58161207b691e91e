#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Occurrence and co-occurrence counts of indicator variables.
"""

import logging
from functools import reduce

import numpy as np

from .errors import HeaderFormatError, MalformedRowError, InvalidValueError


__all__ = ["TallyState", "tally_sample", "merge_tallies"]


log = logging.getLogger(__name__)


def _is_indicator(value):
    # bool is a subclass of int, but True/False are not accepted as 1/0.
    return (isinstance(value, (int, np.integer)) and
            not isinstance(value, bool) and
            (value == 0 or value == 1))


class TallyState(object):
    """Running counts of a set of indicator variables.

    The counts are updated one sample at a time with :meth:`add_sample`.
    Once all the samples have been added, :meth:`freeze` makes the
    count arrays read-only.

    Arguments:
        var_names: A sequence with the names of the variables. Names
            are kept verbatim and duplicates get their own counts.
        calc_joints: Whether the pairwise co-occurrences should be
            counted. If `False`, :attr:`joints` is `None` and updating
            the state takes time linear in the number of variables.

    Attributes:
        var_names: A list with the names of the variables.
        num_fields: The number of variables.
        num_reads: The number of samples added so far.
        marginals: A numpy array with the number of samples in which
            each variable was 1.
        joints: A square numpy array where entry (i, j) counts the
            samples in which both variables i and j were 1, or `None`.
    """

    def __init__(self, var_names, calc_joints=True):
        self.var_names = list(var_names)
        if not self.var_names:
            raise HeaderFormatError("at least one variable is required")
        self.num_fields = len(self.var_names)
        self.num_reads = 0
        self.marginals = np.zeros(self.num_fields, dtype=np.int64)
        if calc_joints:
            self.joints = np.zeros((self.num_fields, self.num_fields),
                                   dtype=np.int64)
        else:
            self.joints = None
        self._row = np.zeros(self.num_fields, dtype=np.int64)
        self._frozen = False

    def __repr__(self):
        return ("TallyState(var_names=%r, num_reads=%d)" %
                (self.var_names, self.num_reads))

    @property
    def calc_joints(self):
        """Whether the pairwise co-occurrences are being counted."""
        return self.joints is not None

    @property
    def frozen(self):
        return self._frozen

    def add_sample(self, values):
        """Tally one sample.

        Arguments:
            values: A sequence with one value per variable, each
                one being exactly the integer 0 or 1.

        Returns:
            The state itself, updated in-place.

        Raises:
            MalformedRowError: The number of values does not match
                the number of variables.
            InvalidValueError: A value is not 0 or 1.
        """
        self._check_not_frozen()
        if len(values) != self.num_fields:
            raise MalformedRowError("expected {0} values, got {1}"
                                    .format(self.num_fields, len(values)))
        # Validate the whole row before touching the counts.
        for i, value in enumerate(values):
            if not _is_indicator(value):
                raise InvalidValueError(value)
            self._row[i] = value
        self.marginals += self._row
        if self.joints is not None:
            # All ordered pairs, including (i, i), so the diagonal
            # repeats the marginal counts.
            self.joints += np.outer(self._row, self._row)
        self.num_reads += 1
        return self

    def merge(self, other):
        """Add the counts of another state over the same variables.

        Arguments:
            other: A :class:`TallyState` with the same variable names
                and the same `calc_joints` setting.

        Returns:
            The state itself, updated in-place.
        """
        self._check_not_frozen()
        if other.var_names != self.var_names:
            raise ValueError("Cannot merge tallies of different variables")
        if other.calc_joints != self.calc_joints:
            raise ValueError("Cannot merge tallies with and without "
                             "joint counts")
        self.marginals += other.marginals
        if self.joints is not None:
            self.joints += other.joints
        self.num_reads += other.num_reads
        return self

    def freeze(self):
        """Make the counts read-only.

        Returns:
            The state itself.
        """
        if not self._frozen:
            self.marginals.flags.writeable = False
            if self.joints is not None:
                self.joints.flags.writeable = False
            self._frozen = True
            log.debug("froze the counts of %d reads", self.num_reads)
        return self

    def _check_not_frozen(self):
        if self._frozen:
            raise RuntimeError("The tally state is frozen")


def tally_sample(var_names, sample, calc_joints=True):
    """Tally a whole sample at once.

    Produces the same counts as adding the rows of `sample` one at a
    time with :meth:`TallyState.add_sample`.

    Arguments:
        var_names: A sequence with the names of the variables.
        sample: A two-dimensional numpy array of integers. Each column
            corresponds to a variable and each row to a sample.
        calc_joints: Whether the pairwise co-occurrences should be
            counted.

    Returns:
        A new (not frozen) :class:`TallyState`.
    """
    state = TallyState(var_names, calc_joints)
    sample = np.asarray(sample)
    if sample.ndim != 2 or sample.shape[1] != state.num_fields:
        raise MalformedRowError("expected a two-dimensional array with {0} "
                                "columns, got shape {1}"
                                .format(state.num_fields, sample.shape))
    if sample.size > 0:
        if not np.issubdtype(sample.dtype, np.integer):
            raise InvalidValueError(sample.flat[0])
        invalid = (sample != 0) & (sample != 1)
        if invalid.any():
            raise InvalidValueError(sample[invalid][0])
        sample = sample.astype(np.int64)
        state.marginals += sample.sum(axis=0)
        if calc_joints:
            state.joints += sample.T.dot(sample)
    state.num_reads = sample.shape[0]
    return state


def merge_tallies(states):
    """Merge partial tallies computed over disjoint sets of samples.

    Arguments:
        states: A non-empty sequence of :class:`TallyState` instances
            over the same variables.

    Returns:
        A new (not frozen) :class:`TallyState` with the summed counts.
    """
    states = list(states)
    if not states:
        raise ValueError("Nothing to merge")
    first = states[0]
    merged = reduce(lambda merged, state: merged.merge(state), states,
                    TallyState(first.var_names, first.calc_joints))
    log.debug("merged %d tallies with %d reads in total",
              len(states), merged.num_reads)
    return merged
