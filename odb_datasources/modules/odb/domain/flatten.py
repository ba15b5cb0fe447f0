"""
ODB Response Flattening

Hand-written mappings from ODB API payloads (botocore JSON, lowerCamelCase
members, ``datetime`` timestamps) to the immutable records in ``models.py``.

Rules shared by every mapping:
- values are copied by name, no unit conversion;
- timestamps are formatted as RFC 3339, absent ones become ``NOT_AVAILABLE_VALUE``;
- a missing collection stays ``None``, it is never replaced by an empty one.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

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
from odb_datasources.modules.odb.domain.models import (
    CloudAutonomousVmClusterRecord,
    MaintenanceWindowRecord,
    ManagedS3BackupAccessRecord,
    ManagedServicesRecord,
    OciDnsForwardingConfigRecord,
    OdbNetworkRecord,
    OdbPeeringConnectionRecord,
    S3AccessRecord,
    ServiceNetworkEndpointRecord,
    ZeroEtlAccessRecord,
)
from odb_datasources.shared.core.constants import NOT_AVAILABLE_VALUE


def format_timestamp(value: Optional[datetime]) -> str:
    """
    RFC 3339 with second precision: ``Z`` for UTC, numeric offset otherwise.
    Naive datetimes are treated as UTC.
    """
    if value is None:
        return NOT_AVAILABLE_VALUE
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.replace(microsecond=0)
    if value.utcoffset() == timedelta(0):
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")
    return value.isoformat()


def flatten_tags(tags: Optional[Mapping[str, Any]]) -> Optional[Dict[str, str]]:
    """No tags (``None`` or empty) leaves the tag map unset."""
    if not tags:
        return None
    return {str(k): str(v) for k, v in tags.items()}


def _frozenset(values: Optional[Iterable[Any]]) -> Optional[FrozenSet[Any]]:
    if values is None:
        return None
    return frozenset(values)


def _tuple(values: Optional[Iterable[Any]]) -> Optional[Tuple[Any, ...]]:
    if values is None:
        return None
    return tuple(values)


def flatten_maintenance_window(
    window: Optional[Mapping[str, Any]],
) -> Optional[MaintenanceWindowRecord]:
    """
    Flatten a maintenance window.

    Day and month entries arrive as ``{"name": ...}`` objects and keep only
    the name; hours and weeks pass through. A collection that was not
    reported stays ``None``; a reported empty collection becomes an empty set.
    """
    if window is None:
        return None

    days_of_week = None
    if window.get("daysOfWeek") is not None:
        days_of_week = frozenset(
            DayOfWeekName.parse(day.get("name")) for day in window["daysOfWeek"]
        )

    months = None
    if window.get("months") is not None:
        months = frozenset(MonthName.parse(month.get("name")) for month in window["months"])

    return MaintenanceWindowRecord(
        days_of_week=days_of_week,
        hours_of_day=_frozenset(window.get("hoursOfDay")),
        lead_time_in_weeks=window.get("leadTimeInWeeks"),
        months=months,
        preference=PreferenceType.parse(window.get("preference")),
        weeks_of_month=_frozenset(window.get("weeksOfMonth")),
    )


def flatten_cloud_autonomous_vm_cluster(
    cluster: Mapping[str, Any],
    identifier: str,
    tags: Optional[Mapping[str, Any]] = None,
) -> CloudAutonomousVmClusterRecord:
    c = cluster
    return CloudAutonomousVmClusterRecord(
        arn=c.get("cloudAutonomousVmClusterArn"),
        id=c.get("cloudAutonomousVmClusterId") or identifier,
        cloud_exadata_infrastructure_id=c.get("cloudExadataInfrastructureId"),
        autonomous_data_storage_percentage=c.get("autonomousDataStoragePercentage"),
        autonomous_data_storage_size_in_tbs=c.get("autonomousDataStorageSizeInTBs"),
        available_autonomous_data_storage_size_in_tbs=c.get(
            "availableAutonomousDataStorageSizeInTBs"
        ),
        available_container_databases=c.get("availableContainerDatabases"),
        available_cpus=c.get("availableCpus"),
        compute_model=ComputeModel.parse(c.get("computeModel")),
        cpu_core_count=c.get("cpuCoreCount"),
        cpu_core_count_per_node=c.get("cpuCoreCountPerNode"),
        cpu_percentage=c.get("cpuPercentage"),
        created_at=format_timestamp(c.get("createdAt")),
        data_storage_size_in_gbs=c.get("dataStorageSizeInGBs"),
        data_storage_size_in_tbs=c.get("dataStorageSizeInTBs"),
        odb_node_storage_size_in_gbs=c.get("dbNodeStorageSizeInGBs"),
        db_servers=_frozenset(c.get("dbServers")),
        description=c.get("description"),
        display_name=c.get("displayName"),
        domain=c.get("domain"),
        exadata_storage_in_tbs_lowest_scaled_value=c.get(
            "exadataStorageInTBsLowestScaledValue"
        ),
        hostname=c.get("hostname"),
        is_mtls_enabled_vm_cluster=c.get("isMtlsEnabledVmCluster"),
        license_model=LicenseModel.parse(c.get("licenseModel")),
        max_acds_lowest_scaled_value=c.get("maxAcdsLowestScaledValue"),
        memory_per_oracle_compute_unit_in_gbs=c.get("memoryPerOracleComputeUnitInGBs"),
        memory_size_in_gbs=c.get("memorySizeInGBs"),
        node_count=c.get("nodeCount"),
        non_provisionable_autonomous_container_databases=c.get(
            "nonProvisionableAutonomousContainerDatabases"
        ),
        oci_resource_anchor_name=c.get("ociResourceAnchorName"),
        oci_url=c.get("ociUrl"),
        ocid=c.get("ocid"),
        odb_network_id=c.get("odbNetworkId"),
        percent_progress=c.get("percentProgress"),
        provisionable_autonomous_container_databases=c.get(
            "provisionableAutonomousContainerDatabases"
        ),
        provisioned_autonomous_container_databases=c.get(
            "provisionedAutonomousContainerDatabases"
        ),
        provisioned_cpus=c.get("provisionedCpus"),
        reclaimable_cpus=c.get("reclaimableCpus"),
        reserved_cpus=c.get("reservedCpus"),
        scan_listener_port_non_tls=c.get("scanListenerPortNonTls"),
        scan_listener_port_tls=c.get("scanListenerPortTls"),
        shape=c.get("shape"),
        status=ResourceStatus.parse(c.get("status")),
        reason=c.get("statusReason"),
        time_database_ssl_certificate_expires=format_timestamp(
            c.get("timeDatabaseSslCertificateExpires")
        ),
        time_ords_certificate_expires=format_timestamp(
            c.get("timeOrdsCertificateExpires")
        ),
        time_zone=c.get("timeZone"),
        total_autonomous_data_storage_in_tbs=c.get("totalAutonomousDataStorageInTBs"),
        total_container_databases=c.get("totalContainerDatabases"),
        total_cpus=c.get("totalCpus"),
        maintenance_window=flatten_maintenance_window(c.get("maintenanceWindow")),
        tags=flatten_tags(tags),
    )


def flatten_dns_forwarding_configs(
    configs: Optional[Iterable[Mapping[str, Any]]],
) -> Optional[Tuple[OciDnsForwardingConfigRecord, ...]]:
    if configs is None:
        return None
    return tuple(
        OciDnsForwardingConfigRecord(
            domain_name=cfg.get("domainName"),
            oci_dns_listener_ip=cfg.get("ociDnsListenerIp"),
        )
        for cfg in configs
    )


def flatten_managed_services(
    services: Optional[Mapping[str, Any]],
) -> Optional[ManagedServicesRecord]:
    if services is None:
        return None

    endpoint = services.get("serviceNetworkEndpoint")
    backup = services.get("managedS3BackupAccess")
    zero_etl = services.get("zeroEtlAccess")
    s3 = services.get("s3Access")

    return ManagedServicesRecord(
        service_network_arn=services.get("serviceNetworkArn"),
        resource_gateway_arn=services.get("resourceGatewayArn"),
        managed_service_ipv4_cidrs=_tuple(services.get("managedServicesIpv4Cidrs")),
        service_network_endpoint=(
            ServiceNetworkEndpointRecord(
                vpc_endpoint_id=endpoint.get("vpcEndpointId"),
                vpc_endpoint_type=VpcEndpointType.parse(endpoint.get("vpcEndpointType")),
            )
            if endpoint is not None
            else None
        ),
        managed_s3_backup_access=(
            ManagedS3BackupAccessRecord(
                status=ManagedResourceStatus.parse(backup.get("status")),
                ipv4_addresses=_tuple(backup.get("ipv4Addresses")),
            )
            if backup is not None
            else None
        ),
        zero_etl_access=(
            ZeroEtlAccessRecord(
                status=ManagedResourceStatus.parse(zero_etl.get("status")),
                cidr=zero_etl.get("cidr"),
            )
            if zero_etl is not None
            else None
        ),
        s3_access=(
            S3AccessRecord(
                status=ManagedResourceStatus.parse(s3.get("status")),
                ipv4_addresses=_tuple(s3.get("ipv4Addresses")),
                domain_name=s3.get("domainName"),
                s3_policy_document=s3.get("s3PolicyDocument"),
            )
            if s3 is not None
            else None
        ),
    )


def flatten_odb_network(
    network: Mapping[str, Any],
    identifier: str,
    tags: Optional[Mapping[str, Any]] = None,
) -> OdbNetworkRecord:
    n = network
    return OdbNetworkRecord(
        arn=n.get("odbNetworkArn"),
        id=n.get("odbNetworkId") or identifier,
        display_name=n.get("displayName"),
        availability_zone_id=n.get("availabilityZoneId"),
        availability_zone=n.get("availabilityZone"),
        backup_subnet_cidr=n.get("backupSubnetCidr"),
        client_subnet_cidr=n.get("clientSubnetCidr"),
        custom_domain_name=n.get("customDomainName"),
        default_dns_prefix=n.get("defaultDnsPrefix"),
        oci_network_anchor_id=n.get("ociNetworkAnchorId"),
        oci_network_anchor_url=n.get("ociNetworkAnchorUrl"),
        oci_resource_anchor_name=n.get("ociResourceAnchorName"),
        oci_vcn_id=n.get("ociVcnId"),
        oci_vcn_url=n.get("ociVcnUrl"),
        percent_progress=n.get("percentProgress"),
        peered_cidrs=_tuple(n.get("peeredCidrs")),
        status=ResourceStatus.parse(n.get("status")),
        status_reason=n.get("statusReason"),
        created_at=format_timestamp(n.get("createdAt")),
        managed_services=flatten_managed_services(n.get("managedServices")),
        oci_dns_forwarding_configs=flatten_dns_forwarding_configs(
            n.get("ociDnsForwardingConfigs")
        ),
        tags=flatten_tags(tags),
    )


def flatten_odb_peering_connection(
    connection: Mapping[str, Any],
    identifier: str,
    tags: Optional[Mapping[str, Any]] = None,
) -> OdbPeeringConnectionRecord:
    p = connection
    return OdbPeeringConnectionRecord(
        id=p.get("odbPeeringConnectionId") or identifier,
        arn=p.get("odbPeeringConnectionArn"),
        display_name=p.get("displayName"),
        status=ResourceStatus.parse(p.get("status")),
        status_reason=p.get("statusReason"),
        odb_network_arn=p.get("odbNetworkArn"),
        peer_network_arn=p.get("peerNetworkArn"),
        odb_peering_connection_type=p.get("odbPeeringConnectionType"),
        created_at=format_timestamp(p.get("createdAt")),
        percent_progress=p.get("percentProgress"),
        tags=flatten_tags(tags),
    )
