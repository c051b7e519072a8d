"""Base Pydantic model for configs whose enumerated fields feed a Chooser.

Defaults are validated like any other input, so an Enum default is
normalised the same way as an explicit value and ``choose`` sees one
consistent representation per field.
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict

from chooser.core import Choice
from chooser.schemas.fields import choose_field


class ChooserBaseModel(BaseModel):
    """Base model for configuration schemas.

    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Validates defaults (Enum defaults honour ``use_enum_values``)

    Usage
    -----
        class InputConfig(ChooserBaseModel):
            codec: Literal["line", "json"] = "line"

        decoder = InputConfig().choose("codec")[{
            "line": LineDecoder,
            "json": JsonDecoder,
        }]
    """

    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        validate_default=True,    # Normalise defaults like explicit values
        str_strip_whitespace=True,
    )

    def choose(self, field_name: str, error_name: Optional[str] = None,
               logger: Optional[logging.Logger] = None) -> Choice:
        """Choice bound to the value this config holds for ``field_name``."""
        return choose_field(self, field_name, error_name=error_name, logger=logger)
