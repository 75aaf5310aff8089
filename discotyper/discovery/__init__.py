"""Google Discovery document models and loading."""

from discotyper.discovery.loader import DiscoveryLoader
from discotyper.discovery.models import (
    Auth,
    DirectoryItem,
    DirectoryList,
    JsonSchema,
    OAuth2,
    RestDescription,
    RestMethod,
    RestResource,
    SchemaRef,
    Scope,
)

__all__ = [
    'DiscoveryLoader',
    'Auth',
    'DirectoryItem',
    'DirectoryList',
    'JsonSchema',
    'OAuth2',
    'RestDescription',
    'RestMethod',
    'RestResource',
    'SchemaRef',
    'Scope',
]
