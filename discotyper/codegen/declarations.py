"""Declaration file generation.

The DeclarationEmitter walks one REST description and writes the
``index.d.ts`` for it: one interface per non-empty schema, one interface per
resource (children before their parents) and the ``gapi.client.load``
overloads.
"""

import logging
from collections.abc import Mapping

from discotyper.codegen.nodes import SchemaTable
from discotyper.codegen.types import (
    Block,
    Inline,
    RenderedField,
    RenderedType,
    render_fields,
    render_type,
    write_fields,
)
from discotyper.codegen.utils import (
    convert_version,
    method_name,
    ordered_items,
    resource_type_name,
)
from discotyper.codegen.writer import TypescriptWriter
from discotyper.config import GeneratorConfig
from discotyper.discovery.models import (
    JsonSchema,
    RestDescription,
    RestMethod,
    RestResource,
)
from discotyper.exceptions import MissingPropertyError

logger = logging.getLogger(__name__)

GAPI_CLIENT_URL = 'https://github.com/google/google-api-javascript-client'
DEFINITELY_TYPED_URL = 'https://github.com/DefinitelyTyped/DefinitelyTyped'


class DeclarationEmitter:
    """Writes the TypeScript declaration file of one API.

    Attributes:
        api: The (normalized) REST description.
        table: The API's schemas, used to resolve references.
        source_url: Where the description was loaded from, for the header.
        config: Generator configuration (header authors, excluded resources).
    """

    def __init__(
        self,
        api: RestDescription,
        source_url: str = '',
        config: GeneratorConfig | None = None,
    ):
        self.api = api
        self.table = SchemaTable.from_description(api)
        self.source_url = source_url
        self.config = config or GeneratorConfig()

    @property
    def request_type(self) -> str:
        # an API schema called "Request" would shadow gapi.client.Request
        return 'client.Request' if 'Request' in self.table else 'Request'

    def emit(self, writer: TypescriptWriter) -> None:
        api = self.api
        logger.debug('Writing declarations for %s %s', api.name, api.version)

        self._write_header(writer)
        writer.reference_types('gapi.client')

        def client_namespace(out: TypescriptWriter) -> None:
            out.comment(f'Load {api.title or api.name} {api.version}')
            out.method(
                'function load',
                [('name', Inline(f'"{api.name}"')), ('version', Inline(f'"{api.version}"'))],
                'PromiseLike<void>',
                single_line=True,
            )
            out.method(
                'function load',
                [
                    ('name', Inline(f'"{api.name}"')),
                    ('version', Inline(f'"{api.version}"')),
                    ('callback', Inline('() => any')),
                ],
                'void',
                single_line=True,
            )
            out.end_line()
            out.namespace(api.name, self._write_api_namespace)

        writer.declare_namespace('gapi.client', client_namespace)

    def _write_header(self, writer: TypescriptWriter) -> None:
        api = self.api
        package = ' '.join(
            part
            for part in (
                api.ownerName,
                api.title,
                api.version,
                convert_version(api.version),
            )
            if part
        )
        writer.write_line(f'// Type definitions for non-npm package {package}')
        writer.write_line(f'// Project: {api.documentationLink or ""}')
        for index, author in enumerate(self.config.definitions_by):
            prefix = '// Definitions by: ' if index == 0 else '//                 '
            writer.write_line(prefix + author)
        writer.write_line(f'// Definitions: {DEFINITELY_TYPED_URL}')
        writer.write_line(f'// TypeScript Version: {self.config.typescript_version}')
        writer.write_line()
        writer.write_line('// IMPORTANT')
        writer.write_line(
            f'// These definitions are for the Google API Javascript Client: {GAPI_CLIENT_URL}'
        )
        writer.write_line(
            '// This file was generated by discotyper. Please do not edit it manually.'
        )
        writer.write_line(f'// Generated from: {self.source_url}')
        writer.write_line()

    def _write_api_namespace(self, writer: TypescriptWriter) -> None:
        for name, schema in self.table.items():
            if not schema.is_empty():
                self._write_schema(writer, name, schema)

        self._write_resources(writer, self.api.resources)

        for name, _ in ordered_items(self.api.resources):
            if name in self.config.excluded_resources:
                continue
            writer.end_line()
            writer.write_line(f'const {name}: {resource_type_name(name)};')

    def _write_schema(self, writer: TypescriptWriter, name: str, schema: JsonSchema) -> None:
        fields = render_fields(schema.properties, self.table)
        if schema.additionalProperties is not None:
            fields.append(
                RenderedField(
                    '[key: string]', render_type(schema.additionalProperties, self.table)
                )
            )
        writer.interface(name, lambda out: write_fields(out, fields))

    def _write_resources(
        self, writer: TypescriptWriter, resources: Mapping[str, RestResource] | None
    ) -> None:
        for resource_name, resource in ordered_items(resources):
            # children first: the parent interface refers to their names
            self._write_resources(writer, resource.resources)

            def body(out: TypescriptWriter, resource: RestResource = resource) -> None:
                for _, method in ordered_items(resource.methods):
                    self._write_method(out, method)

                for child_name, _ in ordered_items(resource.resources):
                    out.property(child_name, Inline(resource_type_name(child_name)))

            writer.interface(resource_type_name(resource_name), body)

    def _write_method(self, writer: TypescriptWriter, method: RestMethod) -> None:
        if not method.id:
            raise MissingPropertyError('id', 'method')

        parameters: list[tuple[str, RenderedType]] = [
            ('request', self._request_parameter(method))
        ]
        if method.request is not None and method.request.field_ref:
            parameters.append(('body', self._reference_or_any(method.request.field_ref)))
        return_type = self._return_type(method)

        writer.comment(method.description)
        writer.method(method_name(method.id), parameters, return_type)

    def _request_parameter(self, method: RestMethod) -> Block:
        merged = {**(self.api.parameters or {}), **(method.parameters or {})}
        fields = render_fields(merged, self.table)
        return Block(lambda out: out.anonymous_type(lambda w: write_fields(w, fields)))

    def _reference_or_any(self, name: str) -> Inline:
        return Inline('any' if self.table.is_empty(name) else name)

    def _return_type(self, method: RestMethod) -> str:
        if method.response is None:
            return f'{self.request_type}<void>'

        name = method.response.field_ref
        if name and not self.table.is_empty(name):
            return f'{self.request_type}<{name}>'
        return f'{self.request_type}<{{}}>'


def render_declaration_file(
    api: RestDescription,
    writer: TypescriptWriter,
    source_url: str = '',
    config: GeneratorConfig | None = None,
) -> None:
    """Write the complete declaration file for ``api`` and end the writer."""
    DeclarationEmitter(api, source_url=source_url, config=config).emit(writer)
    writer.end()
