import logging

from .context import Context
from .addons import AddonsApi
from .docker import DockerApi
from .versions import VersionApi


_logger = logging.getLogger(__name__)


class Environment(object):
    """
    Development environment object.

    The environment is a container that store all the information
    required to prepare a local odoo development environment.

    It can be used to find the odoo versions to run, to create the
    addons directories of those versions, or to drive the docker compose
    services of the project.

    Attributes:
        context (Context): The context to use

        docker (DockerApi): Access to the docker cli

        versions (VersionApi): Derive and store the odoo versions

        addons (AddonsApi): Create the addons directories
    """

    def __init__(
        self,
        context=None,
    ):
        """
        Initialize an environment.

        Parameters:
            context (Context): The context to use.
        """
        if context is None:
            context = Context.from_env()

        self.context = context
        self.docker = DockerApi(self)
        self.versions = VersionApi(self)
        self.addons = AddonsApi(self)

    def manage_services(self):
        """
        Restart the docker compose services of the project.

        The services are shut down first, with their volumes if the
        context asks for a fresh start, then started again with rebuilt
        images. Nothing happens without a docker-compose file.
        """
        manifest = self.docker.manifest()

        if manifest is None:
            _logger.info(
                "No local docker-compose.yml or docker-compose.yaml found. "
                "Skipping service management."
            )
            return False

        _logger.info(
            "Found %s. Shutting down existing services to avoid conflicts...",
            manifest.name
        )

        if self.context.fresh:
            _logger.info("Removing volumes for a fresh start...")

        self.docker.down(volumes=self.context.fresh)
        _logger.info("Local services have been shut down.")

        _logger.info("Starting services with the latest configuration...")
        self.docker.up(build=True)
        _logger.info("Docker Compose services have been started.")

        return True

    def setup(self):
        """
        Derive the odoo versions, create the addons directories and
        restart the services.

        Returns:
            VersionTriple: The versions used, or None if none are known.
        """
        versions = self.versions.derive()

        # Fallback on the versions of a previous run
        if versions is None:
            versions = self.versions.load()

        self.addons.scaffold(versions)

        self.manage_services()

        return versions
