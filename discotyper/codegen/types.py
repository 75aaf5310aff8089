"""Rendering of Discovery schemas into TypeScript type expressions.

This module provides:
- Inline and Block, the two shapes a rendered type can take
- render_type for turning a schema into a rendered type
- render_fields / write_fields for the property lists shared by interfaces,
  anonymous object types and method request parameters

Named schemas are never inlined: a reference renders as the schema name (or
``any`` when the referenced schema is empty), which keeps recursive schemas
finite.
"""

import dataclasses
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING

from discotyper.codegen.nodes import (
    ArrayNode,
    ObjectMapNode,
    ObjectShapeNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaTable,
    classify_schema,
)
from discotyper.codegen.utils import ordered_items
from discotyper.discovery.models import JsonSchema
from discotyper.exceptions import SchemaError

if TYPE_CHECKING:
    from discotyper.codegen.writer import TypescriptWriter

__all__ = [
    'Block',
    'Inline',
    'PRIMITIVE_TYPES',
    'RenderedField',
    'RenderedType',
    'render_fields',
    'render_type',
    'write_fields',
    'write_type',
]

PRIMITIVE_TYPES = {
    'integer': 'number',
    'object': 'any',
    'any': 'any',
    'string': 'string',
}


@dataclasses.dataclass(frozen=True)
class Inline:
    """A single-token type expression such as ``string`` or ``Foo[]``."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclasses.dataclass(frozen=True)
class Block:
    """A type whose body spans several lines and is written on demand."""

    emit: Callable[['TypescriptWriter'], None]


RenderedType = Inline | Block


@dataclasses.dataclass(frozen=True)
class RenderedField:
    name: str
    type: RenderedType
    required: bool = True
    description: str | None = None


def write_type(writer: 'TypescriptWriter', rendered: RenderedType) -> None:
    if isinstance(rendered, Inline):
        writer.write(rendered.text)
    elif isinstance(rendered, Block):
        rendered.emit(writer)
    else:
        raise TypeError(f'Cannot write {type(rendered).__name__} as a type')


def render_fields(
    properties: Mapping[str, JsonSchema] | None, table: SchemaTable
) -> list[RenderedField]:
    """Render every property, in lexicographic key order."""
    return [
        RenderedField(
            name=name,
            type=render_type(schema, table),
            required=bool(schema.required),
            description=schema.description,
        )
        for name, schema in ordered_items(properties)
    ]


def write_fields(writer: 'TypescriptWriter', fields: list[RenderedField]) -> None:
    for field in fields:
        if field.description:
            writer.comment(field.description)
        writer.property(field.name, field.type, field.required)


def _array_block(item: Block) -> Block:
    def emit(writer: 'TypescriptWriter') -> None:
        writer.write('Array<')
        write_type(writer, item)
        writer.write('>')

    return Block(emit)


def _object_block(fields: list[RenderedField]) -> Block:
    def emit(writer: 'TypescriptWriter') -> None:
        writer.anonymous_type(lambda w: write_fields(w, fields))

    return Block(emit)


def _map_block(value: RenderedType) -> Block:
    def emit(writer: 'TypescriptWriter') -> None:
        writer.write('Record<string, ')
        write_type(writer, value)
        writer.write('>')

    return Block(emit)


def render_type(schema: JsonSchema, table: SchemaTable) -> RenderedType:
    """Render a schema as a TypeScript type.

    Nested schemas are rendered eagerly, so any structural problem anywhere
    below ``schema`` is raised before a single character is written.

    Args:
        schema: The schema to render.
        table: The schemas of the API, used to resolve references.

    Returns:
        An Inline for primitives, references and arrays of those, a Block
        for anything that needs a multi-line body.

    Raises:
        SchemaError: If the schema (or a nested one) is malformed or refers
            to an unknown schema.
    """
    node = classify_schema(schema)

    if isinstance(node, ArrayNode):
        item = render_type(node.items, table)
        if isinstance(item, Inline):
            return Inline(f'{item.text}[]')
        return _array_block(item)

    if isinstance(node, ObjectShapeNode):
        fields = render_fields(node.properties, table)
        if node.additional_properties is not None:
            fields.append(
                RenderedField(
                    '[key: string]', render_type(node.additional_properties, table)
                )
            )
        return _object_block(fields)

    if isinstance(node, ObjectMapNode):
        return _map_block(render_type(node.values, table))

    if isinstance(node, PrimitiveNode):
        name = PRIMITIVE_TYPES.get(node.kind, node.kind)
        return Inline(f'{name} | {name}[]' if node.repeated else name)

    if isinstance(node, ReferenceNode):
        if table.is_empty(node.name):
            return Inline('any')
        return Inline(node.name)

    raise SchemaError(f'Unrenderable schema node {node!r}')
