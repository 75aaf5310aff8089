"""Code generation module for discotyper.

Main Components:
    - Codegen: Orchestrates loading and generation for one or many APIs
    - render_type: Turns a Discovery schema into a TypeScript type
    - DeclarationEmitter: Writes the ``index.d.ts`` of one API
    - StubGenerator: Writes the usage stub exercising every method
    - TemplateSet: Renders readme/tsconfig/tslint files
    - TypescriptWriter: Indentation-aware TypeScript writer

Example:
    >>> from discotyper.codegen import Codegen
    >>> from discotyper.config import GeneratorConfig
    >>>
    >>> codegen = Codegen(GeneratorConfig(url='./drive.json', output='./out'))
    >>> codegen.generate()
"""

from discotyper.codegen.codegen import Codegen, normalize_description
from discotyper.codegen.declarations import DeclarationEmitter, render_declaration_file
from discotyper.codegen.nodes import (
    ArrayNode,
    ObjectMapNode,
    ObjectShapeNode,
    PrimitiveNode,
    ReferenceNode,
    SchemaNode,
    SchemaTable,
    classify_schema,
)
from discotyper.codegen.stubs import SchemaGuard, StubGenerator, render_usage_stub
from discotyper.codegen.templates import TemplateSet
from discotyper.codegen.types import Block, Inline, RenderedType, render_type, write_type
from discotyper.codegen.writer import (
    FileEmitter,
    IndentedTextWriter,
    StringEmitter,
    TextEmitter,
    TypescriptWriter,
)

__all__ = [
    # Orchestration
    'Codegen',
    'normalize_description',
    # Schema structure
    'SchemaNode',
    'PrimitiveNode',
    'ArrayNode',
    'ObjectShapeNode',
    'ObjectMapNode',
    'ReferenceNode',
    'SchemaTable',
    'classify_schema',
    # Type rendering
    'Inline',
    'Block',
    'RenderedType',
    'render_type',
    'write_type',
    # Declarations and stubs
    'DeclarationEmitter',
    'render_declaration_file',
    'SchemaGuard',
    'StubGenerator',
    'render_usage_stub',
    'TemplateSet',
    # Output
    'TextEmitter',
    'StringEmitter',
    'FileEmitter',
    'IndentedTextWriter',
    'TypescriptWriter',
]
