import re
from collections.abc import Iterator, Mapping
from typing import TypeVar

__all__ = (
    'capitalize',
    'convert_version',
    'format_comment_lines',
    'format_property_name',
    'method_name',
    'ordered_items',
    'parse_version',
    'resource_type_name',
    'sort_keys',
)

T = TypeVar('T')

COMMENT_MAX_LINE = 150

IRREGULAR_SPACES = (
    '\u000b',  # line tabulation
    '\u000c',  # form feed
    '\u00a0',  # no-break space
    '\u0085',  # next line
    '\u1680',  # ogham space mark
    '\u180e',  # mongolian vowel separator
    '\ufeff',  # zero width no-break space (BOM)
    '\u2000',  # en quad
    '\u2001',  # em quad
    '\u2002',  # en space
    '\u2003',  # em space
    '\u2004',  # three-per-em space
    '\u2005',  # four-per-em space
    '\u2006',  # six-per-em space
    '\u2007',  # figure space
    '\u2008',  # punctuation space
    '\u2009',  # thin space
    '\u200a',  # hair space
    '\u200b',  # zero width space
    '\u2028',  # line separator
    '\u2029',  # paragraph separator
    '\u202f',  # narrow no-break space
    '\u205f',  # medium mathematical space
    '\u3000',  # ideographic space
)

_IRREGULAR_SPACES_RE = re.compile('[' + ''.join(IRREGULAR_SPACES) + ']')
_LINE_BREAK_RE = re.compile('\r\n|\r|\n|\u240a')


def capitalize(input_string):
    if not input_string:
        return ''
    return input_string[0].upper() + input_string[1:]


def format_property_name(name: str) -> str:
    """Quote property names that are not valid TypeScript identifiers."""
    if '.' in name or '-' in name or '@' in name:
        return f'"{name}"'
    return name


def resource_type_name(resource_name: str) -> str:
    return capitalize(resource_name) + 'Resource'


def method_name(method_id: str) -> str:
    """Last segment of a dotted method id, e.g. ``drive.files.get`` -> ``get``."""
    return method_id.split('.')[-1]


def ordered_items(record: Mapping[str, T] | None) -> Iterator[tuple[str, T]]:
    """Iterate over a mapping in lexicographic key order."""
    if not record:
        return
    for key in sorted(record):
        yield key, record[key]


def sort_keys(record: Mapping[str, T] | None) -> dict[str, T] | None:
    if record is None:
        return None
    return dict(ordered_items(record))


def _wrap_line(line: str) -> list[str]:
    if len(line) <= COMMENT_MAX_LINE:
        return [line]

    lines = []
    current = ''
    for word in line.split(' '):
        if len(current) + len(word) > COMMENT_MAX_LINE:
            lines.append(current)
            current = word
        elif current == '':
            current = word
        else:
            current += ' ' + word
    lines.append(current)
    return lines


def format_comment_lines(text: str | None) -> list[str]:
    """Split a description into the lines of a doc comment.

    Lines longer than 150 characters are wrapped on spaces, ``*`` is escaped
    as ``&#42;`` and irregular unicode spaces become plain spaces.
    """
    if not text:
        return []

    lines = []
    for line in _LINE_BREAK_RE.split(text.strip()):
        lines.extend(_wrap_line(line))

    return [
        _IRREGULAR_SPACES_RE.sub(' ', line.replace('*', '&#42;').strip())
        for line in lines
    ]


def parse_version(version: str) -> str | None:
    """Turn a Discovery version into a package version.

    ``v1`` -> ``1``, ``v1.2beta3`` -> ``1.2-beta3``, ``vm_beta`` -> ``0-m_beta``.
    Returns None when the version has no ``v`` marker at all.
    """
    match = re.search(r'v(\d+)?(?:\.(\d+))?(.*)?', version)
    if not match:
        return None

    major, minor, patch = match.groups()
    result = major or '0'
    if minor:
        result += f'.{minor}'
    if patch:
        result += f'-{patch}'
    return result


def convert_version(version: str) -> str:
    """Major.minor pair used in declaration headers, ``v1`` -> ``1.0``."""
    match = re.search(r'v(\d+)?\.?(\d+)?', version)
    if not match:
        return '0.0'
    major, minor = match.groups()
    return f'{major or 0}.{minor or 0}'
