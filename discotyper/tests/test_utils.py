"""Test utility functions."""

from discotyper.codegen.utils import (
    IRREGULAR_SPACES,
    capitalize,
    convert_version,
    format_comment_lines,
    format_property_name,
    method_name,
    ordered_items,
    parse_version,
    resource_type_name,
    sort_keys,
)


class TestNames:
    """Test identifier helpers."""

    def test_capitalize(self):
        assert capitalize('widgets') == 'Widgets'
        assert capitalize('aBc') == 'ABc'
        assert capitalize('') == ''
        assert capitalize(None) == ''

    def test_resource_type_name(self):
        assert resource_type_name('widgets') == 'WidgetsResource'
        assert resource_type_name('projectLocations') == 'ProjectLocationsResource'

    def test_method_name(self):
        assert method_name('drive.files.get') == 'get'
        assert method_name('list') == 'list'

    def test_format_property_name_plain(self):
        """Valid identifiers are written as is."""
        assert format_property_name('name') == 'name'
        assert format_property_name('camelCase_1') == 'camelCase_1'

    def test_format_property_name_quoted(self):
        """Names with dots, dashes or at signs are quoted."""
        assert format_property_name('$.xgafv') == '"$.xgafv"'
        assert format_property_name('x-goog-api') == '"x-goog-api"'
        assert format_property_name('@type') == '"@type"'


class TestOrdering:
    """Test ordered_items and sort_keys."""

    def test_ordered_items(self):
        assert list(ordered_items({'b': 2, 'a': 1, 'c': 3})) == [
            ('a', 1),
            ('b', 2),
            ('c', 3),
        ]

    def test_ordered_items_empty(self):
        assert list(ordered_items(None)) == []
        assert list(ordered_items({})) == []

    def test_sort_keys(self):
        assert list(sort_keys({'zeta': 1, 'alpha': 2})) == ['alpha', 'zeta']
        assert sort_keys(None) is None
        assert sort_keys({}) == {}


class TestFormatCommentLines:
    """Test doc comment formatting."""

    def test_empty(self):
        assert format_comment_lines(None) == []
        assert format_comment_lines('') == []

    def test_single_line(self):
        assert format_comment_lines('  Gets a widget.  ') == ['Gets a widget.']

    def test_line_breaks(self):
        """All flavours of line break split the text."""
        assert format_comment_lines('a\r\nb\rc\nd\u240ae') == ['a', 'b', 'c', 'd', 'e']

    def test_blank_lines_are_kept(self):
        assert format_comment_lines('First line\n\nThird line') == [
            'First line',
            '',
            'Third line',
        ]

    def test_asterisk_is_escaped(self):
        """An asterisk could close the comment early."""
        assert format_comment_lines('Use */ carefully') == ['Use &#42;/ carefully']

    def test_irregular_spaces(self):
        assert len(IRREGULAR_SPACES) == 24
        assert format_comment_lines('a\u00a0b\u2003c\u3000d') == ['a b c d']

    def test_long_line_is_wrapped(self):
        """Lines over 150 characters are wrapped on word boundaries."""
        text = ' '.join(['word'] * 40)

        lines = format_comment_lines(text)

        assert lines == [' '.join(['word'] * 30), ' '.join(['word'] * 10)]
        assert all(len(line) <= 150 for line in lines)

    def test_short_line_is_not_wrapped(self):
        text = 'x' * 150
        assert format_comment_lines(text) == [text]


class TestVersions:
    """Test version conversions."""

    def test_parse_version(self):
        assert parse_version('v1') == '1'
        assert parse_version('v2beta1') == '2-beta1'
        assert parse_version('v1.2beta3') == '1.2-beta3'
        assert parse_version('v1.1') == '1.1'

    def test_parse_version_without_major(self):
        assert parse_version('vm_beta') == '0-m_beta'

    def test_parse_version_without_marker(self):
        assert parse_version('alpha') is None

    def test_convert_version(self):
        assert convert_version('v1') == '1.0'
        assert convert_version('v1.2') == '1.2'
        assert convert_version('v2beta1') == '2.0'

    def test_convert_version_without_marker(self):
        assert convert_version('alpha') == '0.0'
