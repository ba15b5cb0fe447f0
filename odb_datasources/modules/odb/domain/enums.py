"""
ODB Enumerations

Closed string sets reported by the ODB API. The service may add values
before this package learns about them, so every enumeration accepts an
unrecognised value and keeps it as an ``UNKNOWN`` member carrying the raw
string.
"""

from enum import Enum
from typing import Any, Optional, Type, TypeVar

E = TypeVar("E", bound="OpenStrEnum")

UNKNOWN_MEMBER_NAME = "UNKNOWN"


class OpenStrEnum(str, Enum):
    """String enum whose lookups never fail on unrecognised values."""

    @classmethod
    def _missing_(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return None
        member = str.__new__(cls, value)
        member._name_ = UNKNOWN_MEMBER_NAME
        member._value_ = value
        return member

    @property
    def is_known(self) -> bool:
        return self._name_ != UNKNOWN_MEMBER_NAME

    @classmethod
    def parse(cls: Type[E], value: Optional[str]) -> Optional[E]:
        """Map a wire value to a member; ``None`` stays ``None``."""
        if value is None:
            return None
        return cls(value)

    def __str__(self) -> str:
        return str(self.value)


class ResourceStatus(OpenStrEnum):
    AVAILABLE = "AVAILABLE"
    FAILED = "FAILED"
    PROVISIONING = "PROVISIONING"
    TERMINATED = "TERMINATED"
    TERMINATING = "TERMINATING"
    UPDATING = "UPDATING"
    MAINTENANCE_IN_PROGRESS = "MAINTENANCE_IN_PROGRESS"


class ManagedResourceStatus(OpenStrEnum):
    ENABLED = "ENABLED"
    ENABLING = "ENABLING"
    DISABLED = "DISABLED"
    DISABLING = "DISABLING"


class LicenseModel(OpenStrEnum):
    BRING_YOUR_OWN_LICENSE = "BRING_YOUR_OWN_LICENSE"
    LICENSE_INCLUDED = "LICENSE_INCLUDED"


class ComputeModel(OpenStrEnum):
    ECPU = "ECPU"
    OCPU = "OCPU"


class DayOfWeekName(OpenStrEnum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class MonthName(OpenStrEnum):
    JANUARY = "JANUARY"
    FEBRUARY = "FEBRUARY"
    MARCH = "MARCH"
    APRIL = "APRIL"
    MAY = "MAY"
    JUNE = "JUNE"
    JULY = "JULY"
    AUGUST = "AUGUST"
    SEPTEMBER = "SEPTEMBER"
    OCTOBER = "OCTOBER"
    NOVEMBER = "NOVEMBER"
    DECEMBER = "DECEMBER"


class PreferenceType(OpenStrEnum):
    NO_PREFERENCE = "NO_PREFERENCE"
    CUSTOM_PREFERENCE = "CUSTOM_PREFERENCE"


class VpcEndpointType(OpenStrEnum):
    SERVICENETWORK = "SERVICENETWORK"
