import logging
import traceback
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn

from discotyper.codegen.codegen import Codegen
from discotyper.config import get_config
from discotyper.exceptions import DiscotyperError

console = Console()
app = typer.Typer(
    name='discotyper',
    help='Generate TypeScript typings from Google Discovery documents',
    no_args_is_help=True,
)


@app.command()
def generate(
    config: Annotated[
        str | None,
        typer.Option(
            '--config', '-c', help='Path to configuration file (YAML)'
        ),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option('--url', '-u', help='Process only the Discovery document at this URL'),
    ] = None,
    service: Annotated[
        str | None,
        typer.Option('--service', '-s', help='Process only the API with this name'),
    ] = None,
    all_versions: Annotated[
        bool,
        typer.Option('--all', '-a', help='Include non-preferred API versions'),
    ] = False,
    out: Annotated[
        Path | None,
        typer.Option(
            '--out',
            '-o',
            help='Output directory',
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option('--verbose', '-v', help='Show debug logging')
    ] = False,
) -> None:
    """Generate TypeScript typings.

    Command line options override values from the configuration file.

    Examples:
        discotyper generate --out ./types
        discotyper generate --service drive --out ./types
        discotyper generate -u https://www.googleapis.com/discovery/v1/apis/drive/v3/rest
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        settings = get_config(config)

        overrides = {}
        if url is not None:
            overrides['url'] = url
        if service is not None:
            overrides['service'] = service
        if all_versions:
            overrides['all_versions'] = True
        if out is not None:
            overrides['output'] = str(out)
        if overrides:
            settings = settings.model_copy(update=overrides)

        console.print(f'Output directory: {settings.output}')

        with Progress(
            SpinnerColumn(),
            TextColumn('[progress.description]{task.description}'),
            console=console,
        ) as progress:
            task = progress.add_task('Generating typings...', total=None)

            codegen = Codegen(settings)
            written = codegen.generate()

            progress.update(task, description='Generation completed!')

        console.print('[dim]Generated APIs:[/dim]')
        for api in codegen.generated:
            console.print(f'  - {api}')
        for source in codegen.skipped:
            console.print(f'  [yellow]skipped[/yellow] {source}')
        console.print(f'[green]Done[/green], {len(written)} files written')

    except DiscotyperError as e:
        console.print(f'[red]Error:[/red] {e.message}')
        raise typer.Exit(1)
    except Exception as e:
        console.print(f'[red]Error:[/red] {str(e)}')
        traceback.print_exc()
        raise typer.Exit(1)


@app.command()
def version() -> None:
    """Show the version of discotyper."""
    from discotyper import __version__

    console.print(f'discotyper version: {__version__}')


if __name__ == '__main__':
    app()
