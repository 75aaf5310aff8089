"""Usage stub generation.

The stub file calls every method of every resource with literal arguments
synthesized from the method's parameter and request schemas. The stub is
compiled against the generated declarations by the typings test suite.

Unlike the type renderer, which refers to named schemas by name, value
synthesis has to expand references. A SchemaGuard tracks the schemas being
expanded on the current path so that recursive schemas terminate with an
``undefined`` placeholder.
"""

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from discotyper.codegen.nodes import (
    ArrayNode,
    ObjectMapNode,
    ObjectShapeNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaTable,
    classify_schema,
)
from discotyper.codegen.utils import format_property_name, ordered_items
from discotyper.codegen.writer import TypescriptWriter
from discotyper.discovery.models import JsonSchema, RestDescription, RestResource
from discotyper.exceptions import SchemaError, UnknownTypeError

logger = logging.getLogger(__name__)

LITERALS = {
    'number': '42',
    'integer': '42',
    'any': '42',
    'boolean': 'true',
    'string': '"Test string"',
    'object': '{}',
}

BANNER = """/* This is stub file for gapi.client.{name} definition tests */
/* IMPORTANT.
* This file was automatically generated by discotyper. Please do not edit it manually.
**/"""

MAP_PLACEHOLDER_KEY = 'A'


class SchemaGuard:
    """Names of the schemas currently being expanded."""

    def __init__(self):
        self._active: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return name in self._active

    def __len__(self) -> int:
        return len(self._active)

    @contextmanager
    def entering(self, name: str) -> Iterator[None]:
        self._active.add(name)
        try:
            yield
        finally:
            self._active.discard(name)


class StubGenerator:
    """Synthesizes example values and the usage stub file for one API.

    Each instance owns its guard, so one generator must not be shared
    between APIs.
    """

    def __init__(self, api: RestDescription):
        self.api = api
        self.table = SchemaTable.from_description(api)
        self.guard = SchemaGuard()

    def write_value(self, writer: TypescriptWriter, schema: JsonSchema) -> None:
        node = classify_schema(schema)

        if isinstance(node, ReferenceNode):
            self.write_schema_ref(writer, node.name)
        elif isinstance(node, ArrayNode):

            def items(out: TypescriptWriter) -> None:
                out.begin_new_line()
                self.write_value(out, node.items)

            writer.scope(items, '[', ']')
        elif isinstance(node, ObjectShapeNode):
            writer.scope(lambda out: self.write_properties(out, node.properties))
        elif isinstance(node, ObjectMapNode):

            def entry(out: TypescriptWriter) -> None:
                out.begin_new_line(f'{MAP_PLACEHOLDER_KEY}: ')
                self.write_value(out, node.values)

            writer.scope(entry)
        elif isinstance(node, PrimitiveNode):
            if node.kind not in LITERALS:
                raise UnknownTypeError(node.kind)
            writer.write(LITERALS[node.kind])
        else:
            raise SchemaError(f'Unrenderable schema node {node!r}')

    def write_schema_ref(self, writer: TypescriptWriter, name: str) -> None:
        if name in self.guard:
            writer.write('undefined')
            return

        schema = self.table.resolve(name)
        with self.guard.entering(name):
            self.write_value(writer, schema)

    def write_properties(
        self, writer: TypescriptWriter, properties: Mapping[str, JsonSchema]
    ) -> None:
        for name, schema in ordered_items(properties):
            writer.begin_new_line(f'{format_property_name(name)}: ')
            self.write_value(writer, schema)
            writer.write(',')

    def emit(self, writer: TypescriptWriter) -> None:
        api = self.api
        logger.debug('Writing usage stub for %s %s', api.name, api.version)

        writer.write(BANNER.format(name=api.name))
        writer.write_line()
        writer.begin_line("gapi.load('client', () => ")
        writer.scope(self._write_client_loaded)
        writer.end_line(');')

    def _write_client_loaded(self, writer: TypescriptWriter) -> None:
        api = self.api
        writer.end_line()
        writer.comment('now we can use gapi.client')
        writer.begin_line(f"gapi.client.load('{api.name}', '{api.version}', () => ")
        writer.scope(self._write_api_loaded)
        writer.end_line(');')
        writer.end_line()
        writer.begin_line('async function run() ')
        writer.scope(self._write_run)

    def _write_api_loaded(self, writer: TypescriptWriter) -> None:
        writer.end_line()
        writer.comment(f'now we can use gapi.client.{self.api.name}')
        writer.end_line()

        auth = self.api.auth
        if auth and auth.oauth2 and auth.oauth2.scopes:
            self._write_authorization(writer)

        writer.begin_line('run();')

    def _write_authorization(self, writer: TypescriptWriter) -> None:
        scopes = self.api.auth.oauth2.scopes

        writer.comment(
            "don't forget to authenticate your client before sending any request to resources:"
        )
        writer.comment('declare client_id registered in Google Developers Console')
        writer.write_line("const client_id = '<<PUT YOUR CLIENT ID HERE>>';")
        writer.begin_line('const scope = ')

        def scope_list(out: TypescriptWriter) -> None:
            for scope, info in ordered_items(scopes):
                out.end_line()
                out.comment(info.description)
                out.begin_line(f"'{scope}',")

        writer.scope(scope_list, '[', ']')
        writer.end_line(';')
        writer.write_line('const immediate = true;')
        writer.begin_new_line(
            'gapi.auth.authorize({ client_id, scope, immediate }, authResult => '
        )

        def on_success(out: TypescriptWriter) -> None:
            out.end_line()
            out.comment('handle successful authorization')
            out.begin_line('run();')

        def on_error(out: TypescriptWriter) -> None:
            out.end_line()
            out.comment('handle authorization error', avoid_trailing_newline=True)

        def callback(out: TypescriptWriter) -> None:
            out.begin_new_line('if (authResult && !authResult.error) ')
            out.scope(on_success)
            out.write(' else ')
            out.scope(on_error)

        writer.scope(callback)
        writer.end_line(');')

    def _write_run(self, writer: TypescriptWriter) -> None:
        for name, resource in ordered_items(self.api.resources):
            self._write_resource_calls(writer, f'gapi.client.{self.api.name}', name, resource)

    def _write_resource_calls(
        self,
        writer: TypescriptWriter,
        ancestors: str,
        resource_name: str,
        resource: RestResource,
    ) -> None:
        for name, method in ordered_items(resource.methods):
            writer.end_line()
            writer.comment(method.description)
            writer.begin_line(f'await {ancestors}.{resource_name}.{name}(')

            if method.parameters:
                writer.scope(lambda out: self.write_properties(out, method.parameters))
            else:
                writer.write('{}')

            if method.request is not None and method.request.field_ref:
                writer.write(', ')
                self.write_schema_ref(writer, method.request.field_ref)

            writer.write(');')

        for child_name, child in ordered_items(resource.resources):
            self._write_resource_calls(writer, f'{ancestors}.{resource_name}', child_name, child)


def render_usage_stub(api: RestDescription, writer: TypescriptWriter) -> None:
    """Write the usage stub file for ``api`` and end the writer."""
    StubGenerator(api).emit(writer)
    writer.end()
