"""Structural view of Discovery schemas.

A raw ``JsonSchema`` can carry any combination of ``type``, ``items``,
``properties``, ``additionalProperties`` and ``$ref``. ``classify_schema``
reduces it to exactly one of the node variants below, using the same
priority order everywhere, so that renderers only ever dispatch on the
variant and never on field presence.
"""

import dataclasses
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from discotyper.discovery.models import JsonSchema, RestDescription
from discotyper.exceptions import MissingPropertyError, SchemaError, SchemaReferenceError

__all__ = [
    'ArrayNode',
    'ObjectMapNode',
    'ObjectShapeNode',
    'PrimitiveNode',
    'ReferenceNode',
    'SchemaNode',
    'SchemaTable',
    'classify_schema',
]


@dataclasses.dataclass(frozen=True)
class PrimitiveNode:
    kind: str  # 'string', 'number', 'integer', 'boolean', 'any', 'object', ...
    repeated: bool = False


@dataclasses.dataclass(frozen=True)
class ArrayNode:
    items: JsonSchema


@dataclasses.dataclass(frozen=True)
class ObjectShapeNode:
    properties: Mapping[str, JsonSchema]
    additional_properties: JsonSchema | None = None


@dataclasses.dataclass(frozen=True)
class ObjectMapNode:
    values: JsonSchema


@dataclasses.dataclass(frozen=True)
class ReferenceNode:
    name: str


SchemaNode = PrimitiveNode | ArrayNode | ObjectShapeNode | ObjectMapNode | ReferenceNode


def classify_schema(schema: JsonSchema) -> SchemaNode:
    """Reduce a schema to the single variant that determines its rendering.

    Raises:
        MissingPropertyError: For an array without ``items``.
        SchemaError: When the schema has neither a ``type`` nor a ``$ref``.
    """
    if schema.type == 'array':
        if schema.items is None:
            raise MissingPropertyError('items', 'array')
        return ArrayNode(schema.items)

    if schema.type == 'object' and schema.properties is not None:
        return ObjectShapeNode(schema.properties, schema.additionalProperties)

    if schema.type == 'object' and schema.additionalProperties is not None:
        return ObjectMapNode(schema.additionalProperties)

    if schema.type:
        return PrimitiveNode(schema.type, bool(schema.repeated))

    if schema.field_ref:
        return ReferenceNode(schema.field_ref)

    raise SchemaError('Unrenderable schema node: expected a type or a $ref')


@dataclasses.dataclass(frozen=True)
class SchemaTable:
    """Read-only mapping of schema name to schema for one API document."""

    schemas: Mapping[str, JsonSchema] = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'schemas', MappingProxyType(dict(self.schemas)))

    @classmethod
    def from_description(cls, api: RestDescription) -> 'SchemaTable':
        return cls(api.schemas or {})

    def __contains__(self, name: object) -> bool:
        return name in self.schemas

    def __len__(self) -> int:
        return len(self.schemas)

    def items(self) -> Iterator[tuple[str, JsonSchema]]:
        """Schemas in lexicographic name order."""
        for name in sorted(self.schemas):
            yield name, self.schemas[name]

    def resolve(self, name: str) -> JsonSchema:
        try:
            return self.schemas[name]
        except KeyError:
            raise SchemaReferenceError(name, 'schema is not defined in this API')

    def is_empty(self, name: str) -> bool:
        """True when the named schema has no properties and no value type."""
        return self.resolve(name).is_empty()
