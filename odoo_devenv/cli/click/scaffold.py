import click


@click.command(
    help="Create the addons directories of the versions in the env file."
)
@click.pass_context
def scaffold(ctx):
    env = ctx.obj['env']

    for path in env.addons.scaffold():
        print(path)
