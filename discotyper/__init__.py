"""discotyper - Generate TypeScript typings from Google Discovery documents.

discotyper reads the machine-readable descriptions Google publishes for its
REST APIs and writes, per API, a TypeScript declaration file for the Google
API JavaScript client together with a usage stub that exercises every
method.

Quick Start:
    >>> from discotyper import Codegen, GeneratorConfig
    >>>
    >>> config = GeneratorConfig(service='drive', output='./out')
    >>> Codegen(config).generate()

CLI Usage:
    $ discotyper generate --service drive --out ./out
    $ discotyper generate --url https://www.googleapis.com/discovery/v1/apis/drive/v3/rest
"""

from importlib.metadata import PackageNotFoundError, version as _package_version

from discotyper.codegen.codegen import Codegen
from discotyper.codegen.declarations import render_declaration_file
from discotyper.codegen.stubs import render_usage_stub
from discotyper.codegen.types import render_type
from discotyper.config import GeneratorConfig, get_config
from discotyper.discovery.loader import DiscoveryLoader
from discotyper.exceptions import (
    ConfigurationError,
    DiscotyperError,
    DiscoveryLoadError,
    DiscoveryValidationError,
    MissingPropertyError,
    OutputError,
    SchemaError,
    SchemaReferenceError,
    ServiceNotFoundError,
    UnknownTypeError,
)

__all__ = [
    # Main classes
    'Codegen',
    'DiscoveryLoader',
    'render_declaration_file',
    'render_usage_stub',
    'render_type',
    # Configuration
    'GeneratorConfig',
    'get_config',
    # Exceptions
    'DiscotyperError',
    'SchemaError',
    'MissingPropertyError',
    'SchemaReferenceError',
    'UnknownTypeError',
    'DiscoveryLoadError',
    'DiscoveryValidationError',
    'ServiceNotFoundError',
    'ConfigurationError',
    'OutputError',
]

try:
    __version__ = _package_version('discotyper')
except PackageNotFoundError:
    __version__ = 'unknown'
