"""Base classes for parser options.

This module defines the foundation classes for the option dataclasses used
by the bbmark parsers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from bbmark.constants import DEFAULT_MAX_INPUT_LENGTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    max_input_length : int or None, default None
        Maximum number of characters accepted by ``parse``. None disables
        the check. Bounding the input also bounds parse time.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    max_input_length: int | None = field(
        default=DEFAULT_MAX_INPUT_LENGTH,
        metadata={
            "help": "Maximum input length in characters (None for unlimited)",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base parser options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_input_length is not None and self.max_input_length < 0:
            raise ValueError(f"max_input_length must be non-negative, got {self.max_input_length}")
