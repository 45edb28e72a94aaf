# SPDX-License-Identifier: MIT


class AlmanacError(Exception):
    """Base class for errors raised by almanac."""


class PersistenceError(AlmanacError):
    """A write to the preferences store did not complete."""


class RuleTableError(AlmanacError, ValueError):
    """An almanac rule data file is malformed."""


class InvalidExpenseError(AlmanacError, ValueError):
    """Expense input was rejected before anything was recorded."""
