"""Code generation module for discotyper.

This module provides the Codegen class that drives generation for one or
many APIs: it loads the Discovery directory and documents, normalizes them,
and writes the declaration file, the usage stub and the templated project
files for every API.
"""

import logging

from upath import UPath

from discotyper.codegen.declarations import render_declaration_file
from discotyper.codegen.stubs import render_usage_stub
from discotyper.codegen.templates import TemplateSet
from discotyper.codegen.utils import sort_keys
from discotyper.codegen.writer import FileEmitter, StringEmitter, TypescriptWriter
from discotyper.config import GeneratorConfig
from discotyper.discovery.loader import DiscoveryLoader
from discotyper.discovery.models import DirectoryItem, RestDescription, RestResource
from discotyper.exceptions import (
    DiscoveryLoadError,
    DiscoveryValidationError,
    SchemaError,
    ServiceNotFoundError,
    UnknownTypeError,
)

logger = logging.getLogger(__name__)

DECLARATION_FILENAME = 'index.d.ts'


def _sort_resource(resource: RestResource) -> RestResource:
    return resource.model_copy(
        update={
            'methods': sort_keys(resource.methods),
            'resources': sort_keys(
                {
                    name: _sort_resource(child)
                    for name, child in (resource.resources or {}).items()
                }
            )
            if resource.resources is not None
            else None,
        }
    )


def normalize_description(api: RestDescription) -> RestDescription:
    """Return a copy of ``api`` with lower-cased identifiers and sorted maps.

    Name and version are lower-cased; resources (recursively), methods,
    schemas, global parameters and OAuth2 scopes are ordered by key.
    """
    update = {
        'name': api.name.lower(),
        'version': api.version.lower(),
        'schemas': sort_keys(api.schemas),
        'parameters': sort_keys(api.parameters),
        'resources': sort_keys(
            {name: _sort_resource(resource) for name, resource in api.resources.items()}
        )
        if api.resources is not None
        else None,
    }

    if api.auth and api.auth.oauth2 and api.auth.oauth2.scopes:
        oauth2 = api.auth.oauth2.model_copy(
            update={'scopes': sort_keys(api.auth.oauth2.scopes)}
        )
        update['auth'] = api.auth.model_copy(update={'oauth2': oauth2})

    return api.model_copy(update=update)


def select_preferred(items: list[DirectoryItem]) -> DirectoryItem:
    """The preferred version of an API, or else the lowest version."""
    for item in items:
        if item.preferred:
            return item
    return sorted(items, key=lambda item: item.version)[0]


def typings_name(api_name: str) -> str:
    return f'gapi.client.{api_name}'


class Codegen:
    """Generates TypeScript typings for Google APIs.

    Example:
        >>> from discotyper.config import GeneratorConfig
        >>> from discotyper.codegen.codegen import Codegen
        >>>
        >>> codegen = Codegen(GeneratorConfig(output='./out', service='drive'))
        >>> codegen.generate()
        # Creates ./out/gapi.client.drive/index.d.ts and friends

    Attributes:
        config: The run configuration.
        generated: ``name:version`` of every API written so far.
        skipped: Sources of every API that could not be generated.
    """

    def __init__(
        self,
        config: GeneratorConfig,
        loader: DiscoveryLoader | None = None,
        templates: TemplateSet | None = None,
    ):
        """Initialize the generator.

        Args:
            config: Run configuration.
            loader: Optional custom loader. Defaults to a DiscoveryLoader
                using the configured timeout.
            templates: Optional pre-built templates. Defaults to the bundled
                templates, overridden by ``config.templates_dir``.
        """
        self.config = config
        self._loader = loader or DiscoveryLoader(timeout=config.timeout)
        self._templates = templates or TemplateSet.load(config.templates_dir)
        self.output = UPath(config.output)
        self.generated: list[str] = []
        self.skipped: list[str] = []

    def generate(self) -> list[UPath]:
        """Generate typings for the configured URL, or else from the directory."""
        if self.config.url:
            return self.process_service(self.config.url, actual_version=True) or []
        return self.discover(self.config.service, self.config.all_versions)

    def discover(self, service: str | None = None, all_versions: bool = False) -> list[UPath]:
        """Generate typings for every API in the Discovery directory.

        Args:
            service: Only consider APIs with this name.
            all_versions: Also generate non-preferred versions.

        Raises:
            ServiceNotFoundError: If no API matches.
            DiscoveryLoadError: If the directory itself cannot be loaded.
        """
        logger.info('Discovering Google services...')
        directory = self._loader.load_directory(self.config.directory_url)

        apis = [
            item
            for item in directory.items
            if (service is None or item.name == service)
            and item.name not in self.config.excluded_apis
        ]
        if not apis:
            raise ServiceNotFoundError(service)

        grouped: dict[str, list[DirectoryItem]] = {}
        for item in apis:
            grouped.setdefault(item.name, []).append(item)

        written: list[UPath] = []
        for items in grouped.values():
            preferred = select_preferred(items)
            written.extend(
                self.process_service(preferred.discoveryRestUrl, preferred.preferred) or []
            )

            if all_versions:
                for item in items:
                    if item is not preferred:
                        written.extend(
                            self.process_service(item.discoveryRestUrl, item.preferred) or []
                        )

        return written

    def typings_directory(self, api_name: str, version: str | None = None) -> UPath:
        directory = self.output / typings_name(api_name)
        if version is not None:
            directory = directory / version
        return directory

    def process_service(self, url: str, actual_version: bool) -> list[UPath] | None:
        """Generate all files for the API described at ``url``.

        Failures that only concern this API (unreachable or invalid document,
        structural schema problems) are logged and reported as None so that
        callers can carry on with other APIs.

        Args:
            url: URL or path of the Discovery document.
            actual_version: Whether this is the preferred version, written to
                an unversioned directory.

        Returns:
            The written files, or None if the API was skipped.
        """
        try:
            api = self._loader.load(url)
        except (DiscoveryLoadError, DiscoveryValidationError) as e:
            logger.warning('Could not process service %s: %s', url, e)
            self.skipped.append(url)
            return None

        api = normalize_description(api)
        logger.info(
            'Generating %s definitions... %s', api.id or api.name, ', '.join(api.labels or [])
        )

        directory = self.typings_directory(api.name, None if actual_version else api.version)

        try:
            written = self._write_api(directory, api, actual_version, url)
        except (SchemaError, UnknownTypeError) as e:
            logger.warning('Skipping %s %s: %s', api.name, api.version, e)
            self.skipped.append(url)
            return None

        self.generated.append(f'{api.name}:{api.version}')
        return written

    def _write_api(
        self, directory: UPath, api: RestDescription, actual_version: bool, url: str
    ) -> list[UPath]:
        # render everything before touching the filesystem
        declarations = StringEmitter()
        render_declaration_file(
            api, TypescriptWriter.for_emitter(declarations), source_url=url, config=self.config
        )
        stub = StringEmitter()
        render_usage_stub(api, TypescriptWriter.for_emitter(stub))

        files = {
            DECLARATION_FILENAME: declarations.getvalue(),
            f'{typings_name(api.name)}-tests.ts': stub.getvalue(),
        }

        written = []
        for filename, content in files.items():
            emitter = FileEmitter(directory / filename)
            emitter.write(content)
            emitter.end()
            written.append(emitter.path)

        written.extend(self._templates.write_all(directory, api, actual_version))
        return written
