from unittest.mock import AsyncMock

import pytest
from botocore.exceptions import ClientError

from odb_datasources.core.exceptions import LookupFailedError, TagLookupFailedError
from odb_datasources.modules.odb.adapters.network_peering_connection import (
    OdbNetworkPeeringConnectionDataSource,
)
from odb_datasources.modules.odb.domain.enums import ResourceStatus
from tests.utils import NETWORK_ARN, PEERING_ARN, PEERING_ID


@pytest.fixture
def data_source(client_factory, odb_client, peering_payload):
    odb_client.get_odb_peering_connection = AsyncMock(
        return_value={"odbPeeringConnection": peering_payload}
    )
    return OdbNetworkPeeringConnectionDataSource(client_factory=client_factory)


@pytest.mark.asyncio
async def test_read_peering_connection(data_source, odb_client, peering_payload):
    record = await data_source.read(PEERING_ID)

    assert record.id == PEERING_ID
    assert record.arn == PEERING_ARN
    assert record.display_name == "prod-peering"
    assert record.status is ResourceStatus.AVAILABLE
    assert record.status_reason == "ready"
    assert record.odb_network_arn == NETWORK_ARN
    assert record.peer_network_arn == peering_payload["peerNetworkArn"]
    assert record.odb_peering_connection_type == "VPC"
    assert record.created_at == "2025-06-01T12:30:45Z"
    assert record.percent_progress == 100.0

    odb_client.get_odb_peering_connection.assert_awaited_once_with(
        odbPeeringConnectionId=PEERING_ID
    )
    odb_client.list_tags_for_resource.assert_awaited_once_with(resourceArn=PEERING_ARN)


@pytest.mark.asyncio
async def test_tag_response_without_tags_member(data_source, odb_client):
    odb_client.list_tags_for_resource.return_value = {}

    record = await data_source.read(PEERING_ID)

    assert record.tags is None


@pytest.mark.asyncio
async def test_lookup_failure(data_source, odb_client):
    odb_client.get_odb_peering_connection.side_effect = ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "gone"}},
        "GetOdbPeeringConnection",
    )

    with pytest.raises(LookupFailedError) as exc_info:
        await data_source.read(PEERING_ID)

    assert f"Network Peering Connection Data Source ({PEERING_ID})" in exc_info.value.message


@pytest.mark.asyncio
async def test_tag_failure(data_source, odb_client):
    odb_client.list_tags_for_resource.side_effect = ClientError(
        {"Error": {"Code": "InternalServerException", "Message": "boom"}},
        "ListTagsForResource",
    )

    with pytest.raises(TagLookupFailedError) as exc_info:
        await data_source.read(PEERING_ID)

    assert "boom" in exc_info.value.diagnostic.detail


@pytest.mark.asyncio
async def test_unexpected_value_type_is_a_lookup_failure(data_source, peering_payload):
    peering_payload["percentProgress"] = "not-a-number"

    with pytest.raises(LookupFailedError) as exc_info:
        await data_source.read(PEERING_ID)

    assert "unexpected response shape" in exc_info.value.message


def test_schema_describes_every_attribute(data_source):
    properties = data_source.schema()["properties"]

    assert properties["percent_progress"]["description"] == (
        "Progress of the odb network peering connection."
    )
    assert all(prop.get("description") for prop in properties.values())
