"""Custom exceptions for discotyper.

This module defines a hierarchy of exceptions used throughout discotyper to
provide clear, actionable error messages for the different ways a Discovery
document can fail to turn into type declarations.
"""


class DiscotyperError(Exception):
    """Base exception for all discotyper errors.

    All exceptions raised by discotyper inherit from this class, making it
    easy to catch every generation failure with a single except clause.

    Example:
        try:
            codegen.generate()
        except DiscotyperError as e:
            print(f"discotyper error: {e}")
    """

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class SchemaError(DiscotyperError):
    """The Discovery document violates an assumed structural invariant.

    Fatal to the generation of the current API. The orchestrator skips the
    API and moves on to the next one.
    """

    pass


class MissingPropertyError(SchemaError):
    """A property required by the renderer is absent.

    Attributes:
        property_name: The missing property, e.g. ``items``.
        parent_type: The kind of node that should carry it, e.g. ``array``.
    """

    def __init__(self, property_name: str, parent_type: str):
        self.property_name = property_name
        self.parent_type = parent_type
        super().__init__(
            f"Expected property '{property_name}' on {parent_type} type but was None"
        )


class SchemaReferenceError(SchemaError):
    """A ``$ref`` names a schema that is not in the schema table.

    Attributes:
        reference: The schema name that could not be resolved.
        reason: Explanation of why the reference couldn't be resolved.
    """

    def __init__(self, reference: str, reason: str | None = None):
        self.reference = reference
        self.reason = reason
        message = f"Failed to resolve reference '{reference}'"
        if reason:
            message += f': {reason}'
        super().__init__(message)


class UnknownTypeError(DiscotyperError):
    """No literal value can be synthesized for a schema type.

    Attributes:
        type_name: The offending ``type`` value.
    """

    def __init__(self, type_name: str | None):
        self.type_name = type_name
        super().__init__(f'Unknown scalar type {type_name}')


class DiscoveryLoadError(DiscotyperError):
    """Failed to load a Discovery document or directory listing.

    Attributes:
        source: The source path or URL that failed to load.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, source: str, cause: Exception | None = None):
        self.source = source
        self.cause = cause
        message = f"Failed to load discovery document from '{source}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)


class DiscoveryValidationError(DiscotyperError):
    """The loaded JSON does not look like a Discovery document.

    Attributes:
        source: The source path or URL of the invalid document.
        errors: List of validation error messages.
    """

    def __init__(self, source: str, errors: list[str] | None = None):
        self.source = source
        self.errors = errors or []
        message = f"Discovery document validation failed for '{source}'"
        if errors:
            message += f': {"; ".join(errors)}'
        super().__init__(message)


class ServiceNotFoundError(DiscotyperError):
    """The directory listing holds no API matching the request.

    Attributes:
        service: The requested service name, or None for "any".
    """

    def __init__(self, service: str | None = None):
        self.service = service
        message = "Can't find services"
        if service:
            message += f" matching '{service}'"
        super().__init__(message)


class ConfigurationError(DiscotyperError):
    """Error in configuration.

    Attributes:
        config_path: The path to the configuration file, if applicable.
        field: The specific configuration field that is invalid.
    """

    def __init__(
        self, message: str, config_path: str | None = None, field: str | None = None
    ):
        self.config_path = config_path
        self.field = field
        full_message = message
        if config_path:
            full_message = f"{message} in '{config_path}'"
        if field:
            full_message += f' (field: {field})'
        super().__init__(full_message)


class OutputError(DiscotyperError):
    """Error writing generated output.

    Attributes:
        output_path: The path where output was being written.
        cause: The underlying exception that caused the failure.
    """

    def __init__(self, output_path: str, cause: Exception | None = None):
        self.output_path = output_path
        self.cause = cause
        message = f"Failed to write output to '{output_path}'"
        if cause:
            message += f': {cause}'
        super().__init__(message)
