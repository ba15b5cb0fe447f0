"""
ODB Data Source Records

Immutable output records produced by the ODB data sources. Field names are
the attribute names exposed to callers; wire (API) names are mapped in
``flatten.py``.
"""

from enum import Enum
from typing import Annotated, Any, Dict, FrozenSet, Iterable, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from odb_datasources.modules.odb.domain.enums import (
    ComputeModel,
    DayOfWeekName,
    LicenseModel,
    ManagedResourceStatus,
    MonthName,
    PreferenceType,
    ResourceStatus,
    VpcEndpointType,
)


def _sorted_values(values: Iterable[Any]) -> List[Any]:
    """Sets have no order; state output sorts them so repeated reads are identical."""
    return [v.value if isinstance(v, Enum) else v for v in sorted(values)]


_set_serializer = PlainSerializer(_sorted_values, return_type=list, when_used="json")

StringSet = Annotated[FrozenSet[str], _set_serializer]
IntSet = Annotated[FrozenSet[int], _set_serializer]
DayOfWeekSet = Annotated[FrozenSet[DayOfWeekName], _set_serializer]
MonthSet = Annotated[FrozenSet[MonthName], _set_serializer]


class OdbRecord(BaseModel):
    """Base for all ODB records: frozen, strict about unknown attributes."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def to_state(self) -> Dict[str, Any]:
        """JSON-compatible representation written to the state sink."""
        return self.model_dump(mode="json")


class DataSourceConfig(BaseModel):
    """Input attributes shared by every ODB data source."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    id: str = Field(..., min_length=1, description="Identifier of the ODB resource.")
    region: Optional[str] = Field(
        default=None, description="Region override; defaults to AWS_DEFAULT_REGION."
    )


# --- Cloud Autonomous VM Cluster ---


class MaintenanceWindowRecord(OdbRecord):
    """Scheduling policy for maintenance. ``None`` sets were not reported."""

    days_of_week: Optional[DayOfWeekSet] = Field(
        default=None, description="Days of the week when maintenance can be performed."
    )
    hours_of_day: Optional[IntSet] = Field(
        default=None, description="Hours of the day when maintenance can start."
    )
    lead_time_in_weeks: Optional[int] = Field(
        default=None, description="Weeks of notice before maintenance starts."
    )
    months: Optional[MonthSet] = Field(
        default=None, description="Months when maintenance can be performed."
    )
    preference: Optional[PreferenceType] = Field(
        default=None, description="Maintenance scheduling preference."
    )
    weeks_of_month: Optional[IntSet] = Field(
        default=None, description="Weeks of the month when maintenance can be performed."
    )


class CloudAutonomousVmClusterRecord(OdbRecord):
    arn: Optional[str] = Field(default=None, description="ARN of the Autonomous VM cluster.")
    id: str = Field(..., description="Unique identifier of the Autonomous VM cluster.")
    cloud_exadata_infrastructure_id: Optional[str] = Field(
        default=None, description="Exadata infrastructure hosting the Autonomous VM cluster."
    )
    autonomous_data_storage_percentage: Optional[float] = Field(
        default=None, description="Percentage of Autonomous Database storage in use."
    )
    autonomous_data_storage_size_in_tbs: Optional[float] = Field(
        default=None, description="Storage allocated to Autonomous Databases, in TB."
    )
    available_autonomous_data_storage_size_in_tbs: Optional[float] = Field(
        default=None, description="Storage still available for Autonomous Databases, in TB."
    )
    available_container_databases: Optional[int] = Field(
        default=None, description="Number of Autonomous Container Databases that can still be created."
    )
    available_cpus: Optional[float] = Field(
        default=None, description="Number of CPU cores available for allocation."
    )
    compute_model: Optional[ComputeModel] = Field(
        default=None, description="Compute model of the Autonomous VM cluster (ECPU or OCPU)."
    )
    cpu_core_count: Optional[int] = Field(
        default=None, description="Total number of CPU cores in the cluster."
    )
    cpu_core_count_per_node: Optional[int] = Field(
        default=None, description="Number of CPU cores enabled per node."
    )
    cpu_percentage: Optional[float] = Field(
        default=None, description="Percentage of total CPU cores in use."
    )
    created_at: str = Field(
        ..., description="Creation time of the Autonomous VM cluster (RFC 3339, or NA)."
    )
    data_storage_size_in_gbs: Optional[float] = Field(
        default=None, description="Data storage size, in GB."
    )
    data_storage_size_in_tbs: Optional[float] = Field(
        default=None, description="Data storage size, in TB."
    )
    odb_node_storage_size_in_gbs: Optional[int] = Field(
        default=None, description="Local node storage allocated to the cluster, in GB."
    )
    db_servers: Optional[StringSet] = Field(
        default=None, description="Database servers hosting the Autonomous VM cluster."
    )
    description: Optional[str] = Field(
        default=None, description="User-provided description of the Autonomous VM cluster."
    )
    display_name: Optional[str] = Field(
        default=None, description="Display name of the Autonomous VM cluster."
    )
    domain: Optional[str] = Field(default=None, description="Domain name of the cluster.")
    exadata_storage_in_tbs_lowest_scaled_value: Optional[float] = Field(
        default=None, description="Lowest value Exadata storage can be scaled down to, in TB."
    )
    hostname: Optional[str] = Field(default=None, description="Host name of the cluster.")
    is_mtls_enabled_vm_cluster: Optional[bool] = Field(
        default=None, description="Whether mutual TLS authentication is enabled."
    )
    license_model: Optional[LicenseModel] = Field(
        default=None, description="Oracle license model of the cluster."
    )
    max_acds_lowest_scaled_value: Optional[int] = Field(
        default=None,
        description="Lowest value the maximum number of Autonomous Container Databases can be scaled down to.",
    )
    memory_per_oracle_compute_unit_in_gbs: Optional[int] = Field(
        default=None, description="Memory per Oracle compute unit, in GB."
    )
    memory_size_in_gbs: Optional[int] = Field(
        default=None, description="Total memory of the cluster, in GB."
    )
    node_count: Optional[int] = Field(default=None, description="Number of database nodes.")
    non_provisionable_autonomous_container_databases: Optional[int] = Field(
        default=None, description="Number of Autonomous Container Databases that cannot be provisioned."
    )
    oci_resource_anchor_name: Optional[str] = Field(
        default=None, description="Name of the OCI resource anchor."
    )
    oci_url: Optional[str] = Field(
        default=None, description="URL of the cluster in the OCI console."
    )
    ocid: Optional[str] = Field(default=None, description="OCI identifier of the cluster.")
    odb_network_id: Optional[str] = Field(
        default=None, description="ODB network the cluster is attached to."
    )
    percent_progress: Optional[float] = Field(
        default=None, description="Progress of the current operation, as a percentage."
    )
    provisionable_autonomous_container_databases: Optional[int] = Field(
        default=None, description="Number of Autonomous Container Databases that can be provisioned."
    )
    provisioned_autonomous_container_databases: Optional[int] = Field(
        default=None, description="Number of Autonomous Container Databases already provisioned."
    )
    provisioned_cpus: Optional[float] = Field(
        default=None, description="Number of CPU cores provisioned."
    )
    reclaimable_cpus: Optional[float] = Field(
        default=None, description="Number of CPU cores that can be reclaimed."
    )
    reserved_cpus: Optional[float] = Field(
        default=None, description="Number of CPU cores reserved for system operations."
    )
    scan_listener_port_non_tls: Optional[int] = Field(
        default=None, description="SCAN listener port for non-TLS connections."
    )
    scan_listener_port_tls: Optional[int] = Field(
        default=None, description="SCAN listener port for TLS connections."
    )
    shape: Optional[str] = Field(default=None, description="Exadata shape of the cluster.")
    status: Optional[ResourceStatus] = Field(
        default=None, description="Status of the Autonomous VM cluster."
    )
    reason: Optional[str] = Field(
        default=None, description="Additional information about the current status."
    )
    time_database_ssl_certificate_expires: str = Field(
        ..., description="Expiry time of the database SSL certificate (RFC 3339, or NA)."
    )
    time_ords_certificate_expires: str = Field(
        ..., description="Expiry time of the ORDS certificate (RFC 3339, or NA)."
    )
    time_zone: Optional[str] = Field(default=None, description="Time zone of the cluster.")
    total_autonomous_data_storage_in_tbs: Optional[float] = Field(
        default=None, description="Total Autonomous Database storage, in TB."
    )
    total_container_databases: Optional[int] = Field(
        default=None, description="Total number of Autonomous Container Databases."
    )
    total_cpus: Optional[float] = Field(default=None, description="Total number of CPU cores.")
    maintenance_window: Optional[MaintenanceWindowRecord] = Field(
        default=None, description="Maintenance window of the Autonomous VM cluster."
    )
    tags: Optional[Dict[str, str]] = Field(
        default=None, description="Tags of the Autonomous VM cluster; unset when it has none."
    )


# --- ODB Network ---


class OciDnsForwardingConfigRecord(OdbRecord):
    domain_name: Optional[str] = None
    oci_dns_listener_ip: Optional[str] = None


class ServiceNetworkEndpointRecord(OdbRecord):
    vpc_endpoint_id: Optional[str] = None
    vpc_endpoint_type: Optional[VpcEndpointType] = None


class ManagedS3BackupAccessRecord(OdbRecord):
    status: Optional[ManagedResourceStatus] = None
    ipv4_addresses: Optional[Tuple[str, ...]] = None


class ZeroEtlAccessRecord(OdbRecord):
    status: Optional[ManagedResourceStatus] = None
    cidr: Optional[str] = None


class S3AccessRecord(OdbRecord):
    status: Optional[ManagedResourceStatus] = None
    ipv4_addresses: Optional[Tuple[str, ...]] = None
    domain_name: Optional[str] = None
    s3_policy_document: Optional[str] = None


class ManagedServicesRecord(OdbRecord):
    service_network_arn: Optional[str] = None
    resource_gateway_arn: Optional[str] = None
    managed_service_ipv4_cidrs: Optional[Tuple[str, ...]] = None
    service_network_endpoint: Optional[ServiceNetworkEndpointRecord] = None
    managed_s3_backup_access: Optional[ManagedS3BackupAccessRecord] = None
    zero_etl_access: Optional[ZeroEtlAccessRecord] = None
    s3_access: Optional[S3AccessRecord] = None


class OdbNetworkRecord(OdbRecord):
    arn: Optional[str] = Field(default=None, description="ARN of the odb network.")
    id: str = Field(..., description="Unique identifier of the odb network.")
    display_name: Optional[str] = Field(
        default=None, description="Display name of the odb network."
    )
    availability_zone_id: Optional[str] = Field(
        default=None, description="Availability zone ID of the odb network."
    )
    availability_zone: Optional[str] = Field(
        default=None, description="Availability zone of the odb network."
    )
    backup_subnet_cidr: Optional[str] = Field(
        default=None, description="CIDR range of the backup subnet."
    )
    client_subnet_cidr: Optional[str] = Field(
        default=None, description="CIDR range of the client subnet."
    )
    custom_domain_name: Optional[str] = Field(
        default=None, description="Custom domain name of the odb network."
    )
    default_dns_prefix: Optional[str] = Field(
        default=None, description="Default DNS prefix of the odb network."
    )
    oci_network_anchor_id: Optional[str] = Field(
        default=None, description="Identifier of the OCI network anchor."
    )
    oci_network_anchor_url: Optional[str] = Field(
        default=None, description="URL of the OCI network anchor."
    )
    oci_resource_anchor_name: Optional[str] = Field(
        default=None, description="Name of the OCI resource anchor."
    )
    oci_vcn_id: Optional[str] = Field(default=None, description="Identifier of the OCI VCN.")
    oci_vcn_url: Optional[str] = Field(default=None, description="URL of the OCI VCN.")
    percent_progress: Optional[float] = Field(
        default=None, description="Progress of the odb network."
    )
    peered_cidrs: Optional[Tuple[str, ...]] = Field(
        default=None, description="CIDR ranges peered with the odb network."
    )
    status: Optional[ResourceStatus] = Field(
        default=None, description="Status of the odb network."
    )
    status_reason: Optional[str] = Field(
        default=None, description="Additional information about the current status."
    )
    created_at: str = Field(
        ..., description="Created time of the odb network (RFC 3339, or NA)."
    )
    managed_services: Optional[ManagedServicesRecord] = Field(
        default=None, description="Managed AWS services integrated with the odb network."
    )
    oci_dns_forwarding_configs: Optional[Tuple[OciDnsForwardingConfigRecord, ...]] = Field(
        default=None, description="DNS forwarding rules of the OCI DNS resolver."
    )
    tags: Optional[Dict[str, str]] = Field(
        default=None, description="Tags of the odb network; unset when it has none."
    )


# --- ODB Peering Connection ---


class OdbPeeringConnectionRecord(OdbRecord):
    id: str = Field(..., description="Network Peering Connection identifier.")
    arn: Optional[str] = Field(
        default=None, description="ARN of the odb network peering connection."
    )
    display_name: Optional[str] = Field(
        default=None, description="Display name of the odb network peering connection."
    )
    status: Optional[ResourceStatus] = Field(
        default=None, description="Status of the odb network peering connection."
    )
    status_reason: Optional[str] = Field(
        default=None, description="Reason for the current status of the odb network peering connection."
    )
    odb_network_arn: Optional[str] = Field(
        default=None, description="ARN of the odb network."
    )
    peer_network_arn: Optional[str] = Field(
        default=None, description="ARN of the peer network peering connection."
    )
    odb_peering_connection_type: Optional[str] = Field(
        default=None, description="Type of the odb peering connection."
    )
    created_at: str = Field(
        ..., description="Created time of the odb network peering connection (RFC 3339, or NA)."
    )
    percent_progress: Optional[float] = Field(
        default=None, description="Progress of the odb network peering connection."
    )
    tags: Optional[Dict[str, str]] = Field(
        default=None, description="Tags of the odb network peering connection; unset when it has none."
    )
