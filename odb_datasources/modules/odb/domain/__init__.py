from .plugin import OdbDataSource
from .registry import DataSourceRegistry, default_registry
from .service import DataSourceService, InMemoryStateStore, StateSink

__all__ = [
    "OdbDataSource",
    "DataSourceRegistry",
    "default_registry",
    "DataSourceService",
    "InMemoryStateStore",
    "StateSink",
]
