from typing import Any, Dict, Mapping, Optional, Type

from odb_datasources.modules.odb.domain.flatten import flatten_cloud_autonomous_vm_cluster
from odb_datasources.modules.odb.domain.models import CloudAutonomousVmClusterRecord
from odb_datasources.modules.odb.domain.plugin import OdbDataSource

TYPE_NAME = "aws_odb_cloud_autonomous_vm_cluster"
DS_NAME = "Cloud Autonomous Vm Cluster Data Source"


class CloudAutonomousVmClusterDataSource(OdbDataSource):
    """Looks up an Autonomous VM cluster on Exadata infrastructure."""

    response_key = "cloudAutonomousVmCluster"
    arn_key = "cloudAutonomousVmClusterArn"

    @property
    def type_name(self) -> str:
        return TYPE_NAME

    @property
    def display_name(self) -> str:
        return DS_NAME

    @property
    def record_model(self) -> Type[CloudAutonomousVmClusterRecord]:
        return CloudAutonomousVmClusterRecord

    async def _get_resource(self, client: Any, identifier: str) -> Dict[str, Any]:
        return await client.get_cloud_autonomous_vm_cluster(
            cloudAutonomousVmClusterId=identifier
        )

    def _flatten(
        self,
        resource: Mapping[str, Any],
        identifier: str,
        tags: Optional[Mapping[str, Any]],
    ) -> CloudAutonomousVmClusterRecord:
        return flatten_cloud_autonomous_vm_cluster(resource, identifier, tags)
