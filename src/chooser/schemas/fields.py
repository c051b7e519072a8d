"""Derive supported choices from enumerated configuration fields.

A config field annotated ``Literal["line", "json"]`` (or with an ``Enum``)
already names the closed set of variants. These helpers turn that
annotation into a ``Chooser`` so the schema stays the single source of
truth for what "exhaustive" means at every call site.
"""

import logging
import types
from enum import Enum
from typing import Literal, Optional, Union, get_args, get_origin

from pydantic import BaseModel

from chooser.base import require
from chooser.core import Chooser, Choice


def _strip_optional(annotation):
    """Return the single non-None member of an Optional annotation."""
    if get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def field_choices(model: type[BaseModel], field_name: str) -> tuple:
    """Return the enumerated values of a pydantic model field.

    Parameters
    ----------
    model : type[BaseModel]
        Schema class (an instance is accepted too).

    field_name : str
        Name of a field annotated with ``Literal[...]`` or an ``Enum``
        subclass, optionally wrapped in ``Optional``.

    Returns
    -------
    tuple
        Values in declaration order. For Enum fields these are the members,
        or their values when the model sets ``use_enum_values``.

    Raises
    ------
    InvalidArgument
        If the field does not exist or is not enumerated.
    """
    if not isinstance(model, type):
        model = type(model)

    fields = model.model_fields
    require(
        field_name in fields,
        f"{model.__name__} has no field '{field_name}'"
    )

    annotation = _strip_optional(fields[field_name].annotation)

    if get_origin(annotation) is Literal:
        return get_args(annotation)

    require(
        isinstance(annotation, type) and issubclass(annotation, Enum),
        f"{model.__name__}.{field_name} is not an enumerated field: {annotation!r}"
    )

    if model.model_config.get("use_enum_values"):
        return tuple(member.value for member in annotation)
    return tuple(annotation)


def chooser_for(model: type[BaseModel], field_name: str,
                logger: Optional[logging.Logger] = None) -> Chooser:
    """Build a Chooser over the enumerated values of ``model.field_name``."""
    return Chooser(field_choices(model, field_name), logger=logger)


def choose_field(config: BaseModel, field_name: str, error_name: Optional[str] = None,
                 logger: Optional[logging.Logger] = None) -> Choice:
    """Choose the value currently held by ``config.field_name``.

    Enum members left in place by an unvalidated default are compared by
    value when the model sets ``use_enum_values``.

    Examples
    --------
    >>> decoder = choose_field(cfg, "codec")[{
    ...     "line": LineDecoder,
    ...     "json": JsonDecoder,
    ... }]
    """
    model = type(config)
    chooser = chooser_for(model, field_name, logger=logger)

    value = getattr(config, field_name)
    if isinstance(value, Enum) and model.model_config.get("use_enum_values"):
        value = value.value

    return chooser.choose(value, error_name or field_name)
