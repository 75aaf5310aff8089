import os
from pathlib import Path

import yaml
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from discotyper.exceptions import ConfigurationError

DEFAULT_FILENAMES = ['discotyper.yaml', 'discotyper.yml']

DEFAULT_DIRECTORY_URL = 'https://www.googleapis.com/discovery/v1/apis'


class GeneratorConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='DISCOTYPER_')

    output: str = Field('./out', description='Output directory for the generated typings.')

    directory_url: str = Field(
        DEFAULT_DIRECTORY_URL,
        description='URL of the Discovery directory listing all available APIs.',
    )

    service: str | None = Field(
        None, description='Only generate typings for the API with this name.'
    )

    url: str | None = Field(
        None,
        description='Generate typings for a single Discovery document instead of the directory.',
    )

    all_versions: bool = Field(
        False, description='Also generate typings for non-preferred API versions.'
    )

    excluded_apis: list[str] = Field(
        default_factory=lambda: ['replicapool', 'replicapoolupdater'],
        description='APIs that are never generated.',
    )

    excluded_resources: list[str] = Field(
        default_factory=lambda: ['debugger'],
        description='Top-level resources that are not exposed as namespace constants.',
    )

    typescript_version: str = Field(
        '3.7', description='Minimum TypeScript version written to declaration headers.'
    )

    definitions_by: list[str] = Field(
        default_factory=list,
        description='Authors listed in the "Definitions by" header of each declaration file.',
    )

    templates_dir: str | None = Field(
        None, description='Directory with templates overriding the bundled ones.'
    )

    timeout: float = Field(30.0, description='HTTP timeout in seconds.')


def load_yaml(path: str | Path) -> dict:
    return yaml.safe_load(Path(path).read_text()) or {}


def _validate(data: dict, source: Path | str) -> GeneratorConfig:
    try:
        return GeneratorConfig(**data)
    except ValidationError as e:
        field = '.'.join(str(part) for part in e.errors()[0]['loc']) or None
        raise ConfigurationError('Invalid configuration', str(source), field)


def get_config(path: str | None = None) -> GeneratorConfig:
    """Load configuration from a file or fall back to defaults.

    Lookup order: the explicit ``path``, ``discotyper.yaml``/``.yml`` in the
    working directory, ``[tool.discotyper]`` in ``pyproject.toml``, and
    finally the defaults (environment variables still apply).
    """
    if path:
        if not Path(path).exists():
            raise ConfigurationError('Configuration file not found', path)
        return _validate(load_yaml(path), path)

    cwd = os.getcwd()

    for filename in DEFAULT_FILENAMES:
        candidate = Path(cwd) / filename
        if candidate.exists():
            return _validate(load_yaml(candidate), candidate)

    pyproject_path = Path(cwd) / 'pyproject.toml'

    if pyproject_path.exists():
        import tomllib

        pyproject = tomllib.loads(pyproject_path.read_text())
        tools = pyproject.get('tool', {})

        if 'discotyper' in tools:
            return _validate(tools['discotyper'], pyproject_path)

    return GeneratorConfig()
