"""Base enforcement utility.

``require()`` is the single enforcement mechanism used by the chooser.
It fails fast: no recovery, no fallback, no silence.
"""

from chooser.failure import InvalidArgument


def require(condition: bool, message: str, error_class: type = InvalidArgument) -> None:
    """Enforce a choice invariant.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.

    message : str
        Error message explaining the violation.

    error_class : type, optional
        Exception class raised with ``message`` (default InvalidArgument).

    Raises
    ------
    InvalidArgument
        Or ``error_class``, if condition is False.

    Examples
    --------
    >>> require(mode in ("line", "json"), f"unsupported mode '{mode}'")
    """
    if not condition:
        raise error_class(message)
