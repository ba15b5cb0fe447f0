from typing import Any, Dict, Mapping, Optional, Type

from odb_datasources.modules.odb.domain.flatten import flatten_odb_peering_connection
from odb_datasources.modules.odb.domain.models import OdbPeeringConnectionRecord
from odb_datasources.modules.odb.domain.plugin import OdbDataSource

TYPE_NAME = "aws_odb_network_peering_connection"
DS_NAME = "Network Peering Connection Data Source"


class OdbNetworkPeeringConnectionDataSource(OdbDataSource):
    response_key = "odbPeeringConnection"
    arn_key = "odbPeeringConnectionArn"

    @property
    def type_name(self) -> str:
        return TYPE_NAME

    @property
    def display_name(self) -> str:
        return DS_NAME

    @property
    def record_model(self) -> Type[OdbPeeringConnectionRecord]:
        return OdbPeeringConnectionRecord

    async def _get_resource(self, client: Any, identifier: str) -> Dict[str, Any]:
        return await client.get_odb_peering_connection(odbPeeringConnectionId=identifier)

    def _flatten(
        self,
        resource: Mapping[str, Any],
        identifier: str,
        tags: Optional[Mapping[str, Any]],
    ) -> OdbPeeringConnectionRecord:
        return flatten_odb_peering_connection(resource, identifier, tags)
