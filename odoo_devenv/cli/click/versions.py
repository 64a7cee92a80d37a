import sys
import click


@click.command(
    help="Print the odoo versions derived from the upstream repository."
)
@click.option(
    '--save',
    is_flag=True,
    default=False,
    help="Also write the versions in the environment file",
)
@click.pass_context
def versions(ctx, save):
    env = ctx.obj['env']

    if save:
        triple = env.versions.derive()
    else:
        triple = env.versions.latest()

    if triple is None:
        click.echo("Could not determine the Odoo versions.", err=True)
        sys.exit(1)

    for key, value in triple.to_env().items():
        print("{}={}".format(key, value))
