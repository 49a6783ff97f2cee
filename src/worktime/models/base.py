"""Base model for all data models in the work-time calculator.

This module provides a base Pydantic model with common configuration
shared by the session, break and policy models.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Arbitrary types support for Duration values
    - Rejection of unknown fields

    Example:
        >>> class Shift(BaseDataModel):
        ...     label: str
        ...     hours: int
        >>> shift = Shift(label="early", hours=8)
        >>> shift.model_dump()
        {'label': 'early', 'hours': 8}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Duration
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        extra="forbid",
        frozen=False,
    )
