"""Exhaustive runtime selection between mutually-exclusive variants.

A ``Chooser`` is built once with the closed set of supported tags. Call
sites that need variant-specific behaviour ask the resulting ``Choice`` to
pick from a locally built mapping; the mapping must name every supported
tag and nothing else, so adding a variant without updating a call site
fails loudly at the first use instead of falling through silently.

Usage
-----
    codec = Chooser(["line", "json"])
    choice = codec.choose(config.codec, "codec")

    decoder = choice.value_from({
        "line": LineDecoder,
        "json": JsonDecoder,
    })
"""

import logging
from collections.abc import Hashable, Iterable, Mapping
from enum import Enum
from typing import Any, Optional

from chooser.failure import MissingOptions, UnknownOptions, UnsupportedChoice


class Chooser:
    """Immutable holder of a closed set of supported choices.

    Parameters
    ----------
    supported_choices : iterable of hashable
        Legal variant tags. Copied on construction; duplicates collapse and
        the first occurrence fixes the order used in error messages.

    logger : logging.Logger, optional
        Receives the error line emitted when ``choose`` rejects a tag.
        Defaults to this module's logger.
    """

    def __init__(self, supported_choices: Iterable[Hashable], logger: Optional[logging.Logger] = None):
        self._supported = tuple(dict.fromkeys(supported_choices))
        self._lookup = frozenset(self._supported)
        self._logger = logger if logger is not None else logging.getLogger(__name__)

    @classmethod
    def from_enum(cls, enum_cls: type[Enum], logger: Optional[logging.Logger] = None) -> "Chooser":
        """Build a Chooser whose supported choices are the members of ``enum_cls``."""
        return cls(list(enum_cls), logger=logger)

    @property
    def supported_choices(self) -> tuple:
        return self._supported

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def __contains__(self, choice) -> bool:
        try:
            return choice in self._lookup
        except TypeError:
            # unhashable candidates can never be supported
            return False

    def __iter__(self):
        return iter(self._supported)

    def __len__(self) -> int:
        return len(self._supported)

    def __repr__(self) -> str:
        return f"Chooser({list(self._supported)!r})"

    def choose(self, choice: Hashable, error_name: str = "choice",
               error_class: type[Exception] = UnsupportedChoice) -> "Choice":
        """Select one of the supported choices.

        Parameters
        ----------
        choice : hashable
            Candidate tag.

        error_name : str, optional
            Name of this choice, used only in the error message.

        error_class : type, optional
            Exception class raised when ``choice`` is not supported.

        Returns
        -------
        Choice
            Bound to ``choice`` and to this Chooser.

        Raises
        ------
        UnsupportedChoice
            Or ``error_class``, when ``choice`` is not supported. The same
            message is logged at ERROR level before raising.
        """
        if choice not in self:
            message = (
                f"unsupported {error_name} '{choice}'; "
                f"expected one of {[str(c) for c in self._supported]}"
            )
            self._logger.error(message)
            raise error_class(message)

        return Choice(self, choice)

    def validate(self, defined_choices: Iterable[Hashable]) -> None:
        """Check that ``defined_choices`` is exactly the supported set.

        Used by ``Choice.value_from`` so every reachable call site
        implements every supported choice. Missing tags are reported before
        unknown ones. Nothing is logged.

        Raises
        ------
        MissingOptions
            If a supported choice is absent.
        UnknownOptions
            If an unsupported choice is present.
        """
        defined = tuple(dict.fromkeys(defined_choices))
        defined_lookup = frozenset(defined)

        missing = tuple(c for c in self._supported if c not in defined_lookup)
        if missing:
            raise MissingOptions(missing)

        unknown = tuple(c for c in defined if c not in self._lookup)
        if unknown:
            raise UnknownOptions(unknown)


class Choice:
    """A value chosen from the set supported by its ``Chooser``.

    Only ``Chooser.choose`` should construct these; the tag is checked
    there and never again.
    """

    __slots__ = ("_chooser", "_choice")

    def __init__(self, chooser: Chooser, choice: Hashable):
        object.__setattr__(self, "_chooser", chooser)
        object.__setattr__(self, "_choice", choice)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def chooser(self) -> Chooser:
        return self._chooser

    @property
    def choice(self) -> Hashable:
        return self._choice

    def value_from(self, options: Mapping[Hashable, Any]) -> Any:
        """With the current choice, select one of the provided options.

        Parameters
        ----------
        options : mapping
            Options to choose between, keyed by tag. Providing a different
            set of keys than the Chooser supports is an error; this ensures
            that all reachable code implements all supported choices.

        Returns
        -------
        object
            ``options[self.choice]``

        Raises
        ------
        MissingOptions, UnknownOptions
            Propagated unchanged from ``Chooser.validate``.
        """
        self._chooser.validate(options.keys())
        return options[self._choice]

    __getitem__ = value_from

    def __eq__(self, other):
        if not isinstance(other, Choice):
            return NotImplemented
        return self._chooser is other._chooser and self._choice == other._choice

    def __hash__(self):
        return hash((id(self._chooser), self._choice))

    def __repr__(self) -> str:
        return f"Choice({self._choice!r})"
