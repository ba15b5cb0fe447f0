import pytest

from odb_datasources.modules.odb.domain.enums import (
    DayOfWeekName,
    LicenseModel,
    ResourceStatus,
    UNKNOWN_MEMBER_NAME,
)


def test_known_value_maps_to_member():
    status = ResourceStatus("AVAILABLE")

    assert status is ResourceStatus.AVAILABLE
    assert status.is_known is True
    assert status == "AVAILABLE"


def test_unknown_value_is_preserved():
    status = ResourceStatus("QUARANTINED")

    assert isinstance(status, ResourceStatus)
    assert status.is_known is False
    assert status.name == UNKNOWN_MEMBER_NAME
    assert status.value == "QUARANTINED"
    assert str(status) == "QUARANTINED"


def test_unknown_values_compare_by_raw_string():
    assert LicenseModel("PAY_AS_YOU_GO") == LicenseModel("PAY_AS_YOU_GO")
    assert LicenseModel("PAY_AS_YOU_GO") != LicenseModel.LICENSE_INCLUDED
    assert len({DayOfWeekName("FUNDAY"), DayOfWeekName("FUNDAY")}) == 1


def test_unknown_values_are_not_added_to_members():
    ResourceStatus("QUARANTINED")

    assert "QUARANTINED" not in ResourceStatus.__members__
    assert len(list(ResourceStatus)) == 7


def test_parse_keeps_none():
    assert ResourceStatus.parse(None) is None
    assert ResourceStatus.parse("FAILED") is ResourceStatus.FAILED


def test_non_string_values_are_rejected():
    with pytest.raises(ValueError):
        ResourceStatus(42)
