"""
Data Source Service

Runs one data source read and hands the result to the state sink.
Handles:
- Input validation before any remote call.
- Resolving the data source through the registry.
- Writing the record only when the whole read succeeded.
"""

from typing import Any, Dict, List, Optional, Protocol, Tuple

import structlog

from odb_datasources.core.exceptions import Diagnostic, ReadError
from odb_datasources.modules.odb.domain.models import OdbRecord
from odb_datasources.modules.odb.domain.plugin import ClientFactory, ConfigInput, validate_config
from odb_datasources.modules.odb.domain.registry import DataSourceRegistry, default_registry

logger = structlog.get_logger()


class StateSink(Protocol):
    """Receives fully populated records; never sees partial ones."""

    def write(self, type_name: str, identifier: str, record: OdbRecord) -> None: ...


class InMemoryStateStore:
    """Keeps the latest state per (type name, identifier)."""

    def __init__(self) -> None:
        self._state: Dict[Tuple[str, str], Dict[str, Any]] = {}

    def write(self, type_name: str, identifier: str, record: OdbRecord) -> None:
        self._state[(type_name, identifier)] = record.to_state()

    def get(self, type_name: str, identifier: str) -> Optional[Dict[str, Any]]:
        return self._state.get((type_name, identifier))


class DataSourceService:
    def __init__(
        self,
        sink: StateSink,
        registry: Optional[DataSourceRegistry] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.sink = sink
        self.registry = registry or default_registry()
        self.client_factory = client_factory
        self.diagnostics: List[Diagnostic] = []

    async def read(self, type_name: str, config: ConfigInput) -> OdbRecord:
        """
        Read one data source and write the record to the sink.

        On a read failure the error's diagnostic is recorded, nothing is
        written and the error is re-raised.
        """
        cfg = validate_config(config)
        data_source = self.registry.create(type_name, client_factory=self.client_factory)

        try:
            record = await data_source.read(cfg)
        except ReadError as e:
            self.diagnostics.extend(e.diagnostics)
            logger.warning(
                "odb_read_aborted",
                data_source=data_source.type_name,
                identifier=cfg.id,
                code=e.code,
            )
            raise

        self.sink.write(data_source.type_name, cfg.id, record)
        return record
