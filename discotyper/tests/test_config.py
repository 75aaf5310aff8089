"""Test configuration loading."""

import pytest
import yaml

from discotyper.config import DEFAULT_DIRECTORY_URL, GeneratorConfig, get_config, load_yaml
from discotyper.exceptions import ConfigurationError


class TestGeneratorConfig:
    """Test GeneratorConfig defaults and environment overrides."""

    def test_defaults(self):
        config = GeneratorConfig()

        assert config.output == './out'
        assert config.directory_url == DEFAULT_DIRECTORY_URL
        assert config.service is None
        assert config.url is None
        assert config.all_versions is False
        assert config.excluded_apis == ['replicapool', 'replicapoolupdater']
        assert config.excluded_resources == ['debugger']
        assert config.typescript_version == '3.7'
        assert config.definitions_by == []
        assert config.templates_dir is None
        assert config.timeout == 30.0

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv('DISCOTYPER_SERVICE', 'drive')
        monkeypatch.setenv('DISCOTYPER_ALL_VERSIONS', 'true')
        monkeypatch.setenv('DISCOTYPER_EXCLUDED_APIS', '["a", "b"]')

        config = GeneratorConfig()

        assert config.service == 'drive'
        assert config.all_versions is True
        assert config.excluded_apis == ['a', 'b']

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            GeneratorConfig(timeout='soon')


class TestGetConfig:
    """Test configuration file discovery."""

    def test_explicit_path(self, tmp_path):
        path = tmp_path / 'custom.yaml'
        path.write_text(yaml.safe_dump({'service': 'drive', 'output': './types'}))

        config = get_config(str(path))

        assert config.service == 'drive'
        assert config.output == './types'

    def test_explicit_path_missing(self, tmp_path):
        path = tmp_path / 'missing.yaml'

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))

        assert exc_info.value.config_path == str(path)
        assert 'Configuration file not found' in exc_info.value.message

    def test_default_file_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / 'discotyper.yml').write_text('typescript_version: "4.5"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().typescript_version == '4.5'

    def test_pyproject(self, tmp_path, monkeypatch):
        (tmp_path / 'pyproject.toml').write_text(
            '[tool.discotyper]\n'
            'output = "./typings"\n'
            'definitions_by = ["Alice"]\n'
        )
        monkeypatch.chdir(tmp_path)

        config = get_config()

        assert config.output == './typings'
        assert config.definitions_by == ['Alice']

    def test_yaml_wins_over_pyproject(self, tmp_path, monkeypatch):
        (tmp_path / 'discotyper.yaml').write_text('output: ./from-yaml\n')
        (tmp_path / 'pyproject.toml').write_text('[tool.discotyper]\noutput = "./from-toml"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().output == './from-yaml'

    def test_pyproject_without_section(self, tmp_path, monkeypatch):
        (tmp_path / 'pyproject.toml').write_text('[project]\nname = "x"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config() == GeneratorConfig()

    def test_defaults_without_files(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert get_config().output == './out'

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')

        assert load_yaml(path) == {}
        assert get_config(str(path)) == GeneratorConfig()

    def test_invalid_field(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text('timeout: soon\n')

        with pytest.raises(ConfigurationError) as exc_info:
            get_config(str(path))

        assert exc_info.value.field == 'timeout'
        assert exc_info.value.config_path == str(path)
