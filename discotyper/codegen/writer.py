"""Text emitters and indentation-aware writers for generated TypeScript.

This module provides the TextEmitter interface with in-memory and file-backed
implementations, and the writers the renderers drive:

- IndentedTextWriter keeps track of the indentation level and newlines.
- TypescriptWriter knows the handful of TypeScript constructs the generators
  emit (namespaces, interfaces, anonymous types, properties, methods and
  doc comments).
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from pathlib import Path

from upath import UPath

from discotyper.codegen.types import Block, Inline, RenderedType, write_type
from discotyper.codegen.utils import format_comment_lines, format_property_name
from discotyper.exceptions import OutputError

logger = logging.getLogger(__name__)


class TextEmitter(ABC):
    """Abstract sink for generated text.

    Writers only ever append to an emitter, in order, and call ``end`` once
    when the document is complete.
    """

    @abstractmethod
    def write(self, chunk: str) -> None:
        pass

    @abstractmethod
    def end(self) -> None:
        """Finish the document (flush/close)."""
        pass


class StringEmitter(TextEmitter):
    """Collects generated text in memory."""

    def __init__(self):
        self._chunks: list[str] = []

    def write(self, chunk: str) -> None:
        self._chunks.append(chunk)

    def end(self) -> None:
        pass

    def getvalue(self) -> str:
        return ''.join(self._chunks)

    def __str__(self) -> str:
        return self.getvalue()


class FileEmitter(TextEmitter):
    """Writes generated text to a file once the document is complete.

    Nothing touches the filesystem before ``end`` is called, so a render
    that raises half way never leaves a truncated file behind.
    """

    def __init__(self, path: str | Path | UPath):
        self.path = UPath(path)
        self._chunks: list[str] = []
        self.closed = False

    def write(self, chunk: str) -> None:
        if self.closed:
            raise OutputError(str(self.path), cause=ValueError('emitter is closed'))
        self._chunks.append(chunk)

    def end(self) -> None:
        if self.closed:
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(''.join(self._chunks), encoding='utf-8')
        except OSError as e:
            raise OutputError(str(self.path), cause=e)
        self.closed = True
        logger.debug('Wrote %s', self.path)


class IndentedTextWriter:
    def __init__(self, emitter: TextEmitter, new_line: str = '\n', tab: str = '    '):
        self.emitter = emitter
        self.new_line = new_line
        self.tab = tab
        self.indent = 0

    def write(self, chunk: str) -> None:
        self.emitter.write(chunk)

    def start_indented_line(self, chunk: str = '') -> None:
        self.write(self.tab * self.indent + chunk)

    def write_line(self, chunk: str = '') -> None:
        self.start_indented_line(chunk + self.new_line)

    def end(self) -> None:
        self.emitter.end()


WriterCallback = Callable[['TypescriptWriter'], None]


class TypescriptWriter:
    """Writes TypeScript declarations through an IndentedTextWriter.

    Example:
        >>> emitter = StringEmitter()
        >>> writer = TypescriptWriter(IndentedTextWriter(emitter))
        >>> writer.interface('Foo', lambda w: w.property('bar', Inline('string'), False))
        >>> emitter.getvalue()
        'interface Foo {\\n    bar?: string;\\n}\\n'
    """

    def __init__(self, writer: IndentedTextWriter):
        self.writer = writer

    @classmethod
    def for_emitter(cls, emitter: TextEmitter) -> 'TypescriptWriter':
        return cls(IndentedTextWriter(emitter))

    def _braces(self, text: str, context: WriterCallback) -> None:
        self.writer.write_line(text + ' {')
        self.writer.indent += 1
        context(self)
        self.writer.indent -= 1
        self.writer.write_line('}')

    def reference_types(self, type_name: str) -> None:
        self.writer.write_line(f'/// <reference types="{type_name}" />')

    def namespace(self, name: str, context: WriterCallback) -> None:
        self._braces(f'namespace {name}', context)

    def declare_namespace(self, name: str, context: WriterCallback) -> None:
        self.writer.write_line()
        self._braces(f'declare namespace {name}', context)

    def interface(self, name: str, context: WriterCallback) -> None:
        self._braces(f'interface {name}', context)

    def anonymous_type(self, context: WriterCallback) -> None:
        self.end_line('{')
        self.writer.indent += 1
        context(self)
        self.writer.indent -= 1
        self.writer.start_indented_line('}')

    def scope(
        self, context: WriterCallback, start_tag: str = '{', end_tag: str = '}'
    ) -> None:
        self.writer.write(start_tag)
        self.writer.indent += 1
        context(self)
        self.writer.indent -= 1
        self.writer.write(self.writer.new_line)
        self.writer.start_indented_line(end_tag)

    def begin_new_line(self, chunk: str = '') -> None:
        self.writer.write(self.writer.new_line)
        self.writer.start_indented_line(chunk)

    def begin_line(self, chunk: str = '') -> None:
        self.writer.start_indented_line(chunk)

    def end_line(self, chunk: str = '') -> None:
        self.writer.write(chunk)
        self.writer.write(self.writer.new_line)

    def write_line(self, chunk: str = '') -> None:
        self.writer.write_line(chunk)

    def write(self, chunk: str | RenderedType = '') -> None:
        if isinstance(chunk, str):
            self.writer.write(chunk)
        else:
            write_type(self, chunk)

    def property(self, name: str, type_: RenderedType, required: bool = True) -> None:
        prefix = f'{format_property_name(name)}{"" if required else "?"}: '
        if isinstance(type_, Inline):
            self.writer.write_line(f'{prefix}{type_.text};')
        elif isinstance(type_, Block):
            self.writer.start_indented_line(prefix)
            type_.emit(self)
            self.end_line(';')
        else:
            raise TypeError(f'Cannot write property of type {type(type_).__name__}')

    def comment(self, text: str | None = '', avoid_trailing_newline: bool = False) -> None:
        lines = format_comment_lines(text)
        if not lines:
            return

        if len(lines) == 1:
            if avoid_trailing_newline:
                self.begin_line(f'/** {lines[0]} */')
            else:
                self.write_line(f'/** {lines[0]} */')
            return

        self.write_line('/**')
        for line in lines:
            self.write_line(f' * {line}' if line else ' *')
        if avoid_trailing_newline:
            self.begin_line(' */')
        else:
            self.write_line(' */')

    def method(
        self,
        name: str,
        parameters: Sequence[tuple[str, RenderedType]],
        return_type: str,
        single_line: bool = False,
    ) -> None:
        self.writer.start_indented_line(f'{name}(')

        for index, (parameter, type_) in enumerate(parameters):
            self.write(f'{parameter}: ')
            self.write(type_)

            if index + 1 < len(parameters):
                self.write(',')
                if single_line:
                    self.write(' ')
                else:
                    self.begin_new_line()

        self.writer.write(f'): {return_type};')
        self.end_line()

    def end(self) -> None:
        self.writer.end()
