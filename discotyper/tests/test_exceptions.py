"""Test suite for discotyper exceptions."""

import pytest

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


class TestDiscotyperError:
    """Tests for the base DiscotyperError exception."""

    def test_basic_message(self):
        error = DiscotyperError('Something went wrong')
        assert error.message == 'Something went wrong'
        assert str(error) == 'Something went wrong'

    def test_can_be_caught_as_exception(self):
        with pytest.raises(Exception):
            raise DiscotyperError('Test error')

    @pytest.mark.parametrize(
        'error',
        [
            SchemaError('x'),
            MissingPropertyError('items', 'array'),
            SchemaReferenceError('Foo'),
            UnknownTypeError('date'),
            DiscoveryLoadError('src'),
            DiscoveryValidationError('src'),
            ServiceNotFoundError(),
            ConfigurationError('x'),
            OutputError('out'),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, DiscotyperError)


class TestSchemaErrors:
    """Tests for structural schema errors."""

    def test_missing_property(self):
        error = MissingPropertyError('items', 'array')

        assert isinstance(error, SchemaError)
        assert str(error) == "Expected property 'items' on array type but was None"

    def test_reference_error(self):
        error = SchemaReferenceError('Foo', 'schema is not defined in this API')

        assert isinstance(error, SchemaError)
        assert error.reference == 'Foo'
        assert str(error) == (
            "Failed to resolve reference 'Foo': schema is not defined in this API"
        )

    def test_reference_error_without_reason(self):
        assert str(SchemaReferenceError('Foo')) == "Failed to resolve reference 'Foo'"

    def test_unknown_type_is_not_a_schema_error(self):
        error = UnknownTypeError('date')

        assert not isinstance(error, SchemaError)
        assert str(error) == 'Unknown scalar type date'


class TestLoadErrors:
    """Tests for loading errors."""

    def test_load_error_with_cause(self):
        cause = FileNotFoundError('nope')
        error = DiscoveryLoadError('api.json', cause=cause)

        assert error.cause is cause
        assert str(error) == "Failed to load discovery document from 'api.json': nope"

    def test_validation_error(self):
        error = DiscoveryValidationError('api.json', errors=['Field required', 'Bad'])

        assert error.errors == ['Field required', 'Bad']
        assert str(error) == (
            "Discovery document validation failed for 'api.json': Field required; Bad"
        )

    def test_validation_error_without_errors(self):
        error = DiscoveryValidationError('api.json')
        assert error.errors == []

    def test_service_not_found(self):
        assert str(ServiceNotFoundError()) == "Can't find services"
        assert str(ServiceNotFoundError('drive')) == "Can't find services matching 'drive'"


class TestConfigurationAndOutputErrors:
    """Tests for configuration and output errors."""

    def test_configuration_error(self):
        error = ConfigurationError('Invalid configuration', 'cfg.yaml', 'timeout')
        assert str(error) == "Invalid configuration in 'cfg.yaml' (field: timeout)"

    def test_configuration_error_message_only(self):
        assert str(ConfigurationError('Broken')) == 'Broken'

    def test_output_error(self):
        error = OutputError('/out/index.d.ts', cause=PermissionError('denied'))
        assert str(error) == "Failed to write output to '/out/index.d.ts': denied"
