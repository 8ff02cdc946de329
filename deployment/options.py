from pathlib import Path

import click

from deployment.constants import LUMINA_PARAMS_FILEPATH

params_option = click.option(
    "--params",
    "-p",
    "params_filepath",
    help="Filepath of the deployment params YAML file.",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=LUMINA_PARAMS_FILEPATH,
    show_default=True,
)

registry_option = click.option(
    "--registry",
    "-r",
    "registry_filepath",
    help="Filepath of the registry to write deployments to; defaults to the params artifacts.",
    type=click.Path(dir_okay=False, path_type=Path),
    required=False,
)

verify_option = click.option(
    "--verify",
    help="Verify deployed contracts on the block explorer.",
    is_flag=True,
)

autosign_option = click.option(
    "--autosign",
    help="Automatically sign transactions.",
    is_flag=True,
)

replace_option = click.option(
    "--replace",
    help="Replace registry entries of a previous deployment on the same chain.",
    is_flag=True,
)
