from os import environ
from pathlib import Path

from ..env import EnvironmentVariables
from ..exceptions import ConfigurationError


class Context(object):
    """
    The context in which you use the Environment.

    The context loads the environment variables configured in the
    running environment and is completed by the flags passed on the
    command line.

    Attributes:

        project_path (Path): Directory in which the docker-compose file is
            looked for. The environment file and the addons directories are
            created relative to this path.

        env_file (Path): The file storing the odoo versions.

        fresh (bool): Remove the volumes when the services are shut down
            before being started again.

        delete_only (bool): Shut down the services, remove their volumes
            and stop there.

        restart_only (bool): Restart the services and stop there.

        sudo_user (str): The user that called sudo, if any. It gets added
            to the docker group after docker is installed.
    """
    def __init__(
        self,
        project_path=None,
        env_file=None,
        odoo_repository='https://github.com/odoo/odoo.git',
        github_api='https://api.github.com',
        docker_script_url='https://get.docker.com',
        compose_plugin_dir='/usr/local/lib/docker/cli-plugins',
        http_timeout=5,
        sudo_user=None,
        fresh=False,
        delete_only=False,
        restart_only=False,
    ):
        if project_path is None:
            project_path = Path.cwd()

        project_path = Path(project_path)

        if env_file is None:
            env_file = '.env'

        self.project_path = project_path
        self.env_file = project_path / env_file
        self.odoo_repository = odoo_repository
        self.github_api = github_api.rstrip('/')
        self.docker_script_url = docker_script_url
        self.compose_plugin_dir = Path(compose_plugin_dir)
        self.http_timeout = http_timeout
        self.sudo_user = sudo_user
        self.fresh = fresh
        self.delete_only = delete_only
        self.restart_only = restart_only

    def flags(self):
        """
        Command line flags reproducing this context in a new process.
        """
        flags = []

        if self.fresh:
            flags.append('-f')
        if self.delete_only:
            flags.append('-d')
        if self.restart_only:
            flags.append('-r')

        return flags

    @classmethod
    def from_env(klass, envvars=None):
        """
        Creates a ``Context`` from environment variables.
        """
        if envvars is None:
            envvars = EnvironmentVariables()

        args = {}

        if envvars.DEVENV_PROJECT_PATH:
            args['project_path'] = Path(envvars.DEVENV_PROJECT_PATH)

        args['env_file'] = envvars.DEVENV_ENV_FILE
        args['odoo_repository'] = envvars.DEVENV_ODOO_REPOSITORY
        args['github_api'] = envvars.DEVENV_GITHUB_API
        args['docker_script_url'] = envvars.DEVENV_DOCKER_SCRIPT_URL
        args['compose_plugin_dir'] = envvars.DEVENV_COMPOSE_PLUGIN_DIR
        try:
            args['http_timeout'] = envvars.DEVENV_HTTP_TIMEOUT
        except ValueError:
            raise ConfigurationError(
                "Invalid value for DEVENV_HTTP_TIMEOUT: {!r}, expected a "
                "number of seconds".format(
                    environ.get('DEVENV_HTTP_TIMEOUT')
                )
            ) from None

        args['sudo_user'] = envvars.SUDO_USER

        return Context(**args)
