"""Error types raised by the numeric core.

Both subclass ``ValueError`` so existing ``except ValueError`` handlers
keep catching them.
"""


class InvalidInputError(ValueError):
    """Input violates an operation's contract.

    Raised for empty sequences, mismatched vector lengths, non-finite
    values and non-positive temperatures.
    """


class DegenerateResultError(ValueError):
    """Operation has no finite result for this input (e.g. normalizing a zero vector)."""
