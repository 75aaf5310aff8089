"""Auxiliary project files rendered from jinja2 templates.

Besides the declarations and the usage stub, every generated typings package
ships a readme, a tsconfig and a tslint configuration. Those only depend on
the API's name, title, version and description, so they are plain templates.
A TemplateSet is built once per run and handed to the Codegen.
"""

import dataclasses
import logging
from pathlib import Path

from jinja2 import (
    ChoiceLoader,
    Environment,
    FileSystemLoader,
    Template,
    TemplateNotFound,
)
from upath import UPath

from discotyper.codegen.utils import parse_version
from discotyper.codegen.writer import FileEmitter
from discotyper.discovery.models import RestDescription
from discotyper.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).parent.parent / 'templates'

# output file name -> template name
TEMPLATE_FILES = {
    'readme.md': 'readme.md.jinja',
    'tsconfig.json': 'tsconfig.json.jinja',
    'tslint.json': 'tslint.json.jinja',
}


@dataclasses.dataclass
class TemplateSet:
    environment: Environment
    templates: dict[str, Template]

    @classmethod
    def load(cls, override_dir: str | Path | None = None) -> 'TemplateSet':
        """Compile all templates, preferring files from ``override_dir``.

        Raises:
            ConfigurationError: If a template cannot be found.
        """
        loaders = []
        if override_dir:
            loaders.append(FileSystemLoader(str(override_dir)))
        loaders.append(FileSystemLoader(str(BUNDLED_TEMPLATES_DIR)))

        environment = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        try:
            templates = {
                filename: environment.get_template(template_name)
                for filename, template_name in TEMPLATE_FILES.items()
            }
        except TemplateNotFound as e:
            raise ConfigurationError(
                f"Can't find {e.name} file template",
                str(override_dir) if override_dir else None,
                'templates_dir',
            )

        return cls(environment=environment, templates=templates)

    def render(
        self, filename: str, api: RestDescription, actual_version: bool = True
    ) -> str:
        return self.templates[filename].render(
            api=api,
            actual_version=actual_version,
            typings_name=f'gapi.client.{api.name}',
            package_version=parse_version(api.version),
        )

    def write_all(
        self, directory: UPath, api: RestDescription, actual_version: bool = True
    ) -> list[UPath]:
        written = []
        for filename in self.templates:
            emitter = FileEmitter(directory / filename)
            emitter.write(self.render(filename, api, actual_version))
            emitter.end()
            written.append(emitter.path)
        return written
