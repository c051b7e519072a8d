"""Centralized failure types for choice violations.

Every violation raises an ``InvalidArgument`` subclass, so callers can
handle a bad choice or an incomplete option mapping uniformly.
"""


class InvalidArgument(ValueError):
    """Raised when a choice or an option mapping is not acceptable.

    Subclasses ``ValueError`` so existing ``except ValueError`` handlers
    keep working.

    Key distinction:
    - UnsupportedChoice: the selected tag is not a legal variant
    - MissingOptions: a call site forgot to handle a legal variant
    - UnknownOptions: a call site handles a variant that does not exist
    """
    pass


class UnsupportedChoice(InvalidArgument):
    """Raised by ``Chooser.choose`` for a tag outside the supported set."""
    pass


class MissingOptions(InvalidArgument):
    """Raised when an option mapping omits one or more supported tags."""

    def __init__(self, missing: tuple) -> None:
        self.missing = tuple(missing)
        super().__init__(f"missing required options {_listed(self.missing)}")


class UnknownOptions(InvalidArgument):
    """Raised when an option mapping carries tags that are not supported."""

    def __init__(self, unknown: tuple) -> None:
        self.unknown = tuple(unknown)
        super().__init__(f"unsupported options {_listed(self.unknown)}")


def _listed(tags) -> str:
    """Render tags the way error messages show them: ``['a', 'b']``."""
    return str([str(tag) for tag in tags])
