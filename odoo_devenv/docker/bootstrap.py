"""
Bootstrap
=========

The bootstrap goes through up to three stages, each one running in its
own process:

1. ``DETECT``: called by the user. Checks if docker and its compose
   plugin are installed and calls the ``ELEVATE`` stage through sudo when
   one of them is missing.

2. ``ELEVATE``: running as root. Installs what is missing and exits.

3. ``REENTER``: called through ``sg docker`` after docker got installed,
   so the docker socket can be used without logging in again.

Quick actions (delete or restart) skip all of that and only require a
working docker compose.
"""
import enum
import logging

from ..compat import is_root
from ..exceptions import ComposeUnavailable, DaemonUnreachable
from . import sudo_entrypoint
from .user_entrypoint import call_sudo_entrypoint, call_group_entrypoint


_logger = logging.getLogger(__name__)


DAEMON_UNREACHABLE_MESSAGE = """Cannot connect to the Docker daemon.
This can happen if the service is not running or if you haven't re-logged \
in after a previous installation.
Please try the following:
1. Ensure the Docker service is running: sudo systemctl start docker
2. If that doesn't work, please log out and log back in."""


class Stage(enum.Enum):
    DETECT = 'detect'
    ELEVATE = 'elevate'
    REENTER = 'reenter'


def current_stage(reentry=False):
    if is_root():
        return Stage.ELEVATE
    if reentry:
        return Stage.REENTER
    return Stage.DETECT


class Bootstrap(object):

    def __init__(self, env):
        self.environment = env

    @property
    def context(self):
        return self.environment.context

    @property
    def docker(self):
        return self.environment.docker

    def run(self, stage):
        """
        Run the bootstrap from the given stage.

        Returns:
            int: The returncode of the program.
        """
        if self.context.delete_only or self.context.restart_only:
            return self.quick_action()

        if stage is Stage.ELEVATE:
            return sudo_entrypoint.install(self.environment)

        if stage is Stage.REENTER:
            _logger.info("Running post-installation tasks with new permissions...")
            return self.finish()

        return self.detect()

    def quick_action(self):
        if not self.docker.compose_available():
            raise ComposeUnavailable(
                "Docker Compose is not available or the Docker daemon is "
                "not running.\nCannot perform a quick delete/restart. "
                "Please ensure Docker is installed and running."
            )

        if self.context.delete_only:
            _logger.info("Removing all containers and volumes...")
            self.docker.down(volumes=True)
            _logger.info(
                "All services and associated volumes have been "
                "successfully deleted."
            )
            return 0

        _logger.info("Stopping and starting services...")
        self.docker.down()
        self.docker.up()
        _logger.info("All services have been restarted.")

        return 0

    def detect(self):
        needs_docker = not self.docker.installed()

        if needs_docker:
            _logger.info("Docker is not installed.")

        needs_compose = not self.docker.compose_available()

        if needs_compose and not needs_docker:
            _logger.info("Docker Compose plugin is not installed.")

        if needs_docker or needs_compose:
            _logger.info(
                "Installation of Docker and/or Docker Compose is required."
            )
            self.elevate()

            if needs_docker:
                return self.reenter()

            _logger.info("Docker Compose installation finished. Continuing...")

        _logger.info("Docker and Docker Compose are installed.")

        if not self.docker.daemon_running():
            raise DaemonUnreachable(DAEMON_UNREACHABLE_MESSAGE)

        _logger.info("Successfully connected to the Docker daemon.")

        ret = self.finish()
        _logger.info(
            "Don't forget to restart the servers with 'odoo-devenv -r' "
            "after adding new modules."
        )
        return ret

    def elevate(self):
        return call_sudo_entrypoint(self.environment)

    def reenter(self):
        return call_group_entrypoint(self.environment)

    def finish(self):
        self.environment.setup()

        _logger.info("All done!")
        _logger.info(
            "You can place your addons in the created directories for "
            "each version."
        )

        return 0
