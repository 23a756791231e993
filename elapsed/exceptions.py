class LogicError(RuntimeError):
    """A checker was used in a way its preconditions forbid.

    Raised for an inverted interval, a missing interval, or a non-numeric
    amount. Bad argument values (non-positive amounts, unknown units) raise
    the builtin ``ValueError`` instead.
    """
