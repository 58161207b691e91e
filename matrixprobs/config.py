#
#  Copyright 2015 Yasser Gonzalez Fernandez
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#

"""Run configuration.
"""

from collections import namedtuple

from .errors import ConfigurationError


__all__ = ["Config"]


_ConfigBase = namedtuple("_ConfigBase",
                         ["limit", "marginals", "joints", "conditionals"])


class Config(_ConfigBase):
    """Immutable configuration of a run.

    Arguments:
        limit: Maximum number of data rows to read (0 means unlimited).
        marginals: Path of the marginal probabilities file, or `None`
            if the report is not requested.
        joints: Path of the joint probabilities file, or `None`.
        conditionals: Path of the conditional probabilities file,
            or `None`.

    All the arguments are available as (read-only) attributes.
    """

    __slots__ = ()

    def __new__(cls, limit=0, marginals=None, joints=None,
                conditionals=None):
        return super().__new__(cls, limit, marginals or None,
                               joints or None, conditionals or None)

    @classmethod
    def from_args(cls, args):
        """Build a configuration from parsed command-line arguments.

        Arguments:
            args: An `argparse.Namespace` with `limit`, `marginals`,
                `joints` and `conditionals` attributes.
        """
        return cls(args.limit, args.marginals, args.joints,
                   args.conditionals)

    @property
    def calc_joints(self):
        """Whether the pairwise co-occurrences have to be counted."""
        return self.joints is not None or self.conditionals is not None

    @property
    def sinks(self):
        """The requested reports as a list of (name, path) tuples."""
        return [(name, getattr(self, name))
                for name in ("marginals", "joints", "conditionals")
                if getattr(self, name) is not None]

    def validate(self):
        """Check that the configuration can be run.

        Returns:
            The configuration itself.

        Raises:
            ConfigurationError: No report was requested or the
                limit is negative.
        """
        if not self.sinks:
            raise ConfigurationError("Must specify at least one of "
                                     "--marginals, --joints, and/or "
                                     "--conditionals")
        if self.limit < 0:
            raise ConfigurationError("the limit must be a non-negative "
                                     "integer, got {0}".format(self.limit))
        return self
