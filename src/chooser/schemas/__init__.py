"""Pydantic integration for chooser.

Exports
-------
ChooserBaseModel : class
    Strict base model for configuration schemas
field_choices : function
    Enumerated values of a Literal/Enum field
chooser_for : function
    Chooser built from a model field
choose_field : function
    Choice bound to the value a config instance holds
"""

from chooser.schemas.base import ChooserBaseModel
from chooser.schemas.fields import field_choices, chooser_for, choose_field

__all__ = [
    'ChooserBaseModel',
    'field_choices',
    'chooser_for',
    'choose_field',
]
