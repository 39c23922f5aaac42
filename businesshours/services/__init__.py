"""
Service layer - entry points that coerce input and delegate to the domain.
"""

from .business_hours import (
    add_business_hours,
    business_hours_in_interval,
    is_within_business_hours,
)

__all__ = ["add_business_hours", "business_hours_in_interval", "is_within_business_hours"]
