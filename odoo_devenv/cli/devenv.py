import sys
import click
import logging

from ..odoo import Environment
from ..docker.bootstrap import Bootstrap, current_stage
from ..docker.user_entrypoint import POST_INSTALL_FLAG
from ..exceptions import BootstrapError
from ..utilities.logging import setup_logger, LOG_LEVELS
from .click.scaffold import scaffold
from .click.versions import versions


_logger = logging.getLogger(__name__)


@click.group(
    invoke_without_command=True,
    help=(
        "Install docker if needed, prepare the odoo versions and their "
        "addons directories then restart the docker compose services."
    )
)
@click.option(
    '-f',
    '--fresh',
    is_flag=True,
    default=False,
    help="Remove the volumes before starting the services again",
)
@click.option(
    '-d',
    '--delete-only',
    is_flag=True,
    default=False,
    help="Remove all containers and volumes, then exit",
)
@click.option(
    '-r',
    '--restart-only',
    is_flag=True,
    default=False,
    help="Restart the services, then exit",
)
@click.option(
    POST_INSTALL_FLAG,
    'post_install',
    is_flag=True,
    default=False,
    hidden=True,
)
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Defaults to the PYTHON_LOG environment variable or INFO",
)
@click.pass_context
def command(ctx, fresh, delete_only, restart_only, post_install, log_level):
    ctx.ensure_object(dict)

    try:
        setup_logger(log_level)
        env = Environment()
    except BootstrapError as exc:
        click.echo("ERROR: {}".format(exc), err=True)
        sys.exit(exc.exit_code)

    env.context.fresh = fresh
    env.context.delete_only = delete_only
    env.context.restart_only = restart_only

    ctx.obj['env'] = env

    if ctx.invoked_subcommand is not None:
        return

    bootstrap = Bootstrap(env)

    try:
        ret = bootstrap.run(current_stage(reentry=post_install))
    except BootstrapError as exc:
        click.echo("ERROR: {}".format(exc), err=True)
        sys.exit(exc.exit_code)

    sys.exit(ret)


command.add_command(versions)
command.add_command(scaffold)


def main(args=None):
    """
    Console script entry point.

    Usage errors exit with 1 instead of click's default of 2.
    """
    try:
        ret = command.main(args=args, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        sys.exit(1)
    except click.Abort:
        click.echo("Aborted!", err=True)
        sys.exit(1)

    sys.exit(ret or 0)
