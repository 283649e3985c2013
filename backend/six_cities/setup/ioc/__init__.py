"""Dependency injection setup."""

from six_cities.setup.ioc.container import (
    AppProvider,
    InMemoryStorageProvider,
    StorageProvider,
    build_container,
)

__all__ = [
    "AppProvider",
    "InMemoryStorageProvider",
    "StorageProvider",
    "build_container",
]
