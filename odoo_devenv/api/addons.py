import logging


_logger = logging.getLogger(__name__)


ADDON_DIRECTORIES = ('custom', 'design', 'enterprise')


class AddonsApi(object):

    def __init__(self, env):
        self.environment = env

    def paths(self, versions):
        """
        Returns the addons directories of each version.
        """
        base_path = self.environment.context.project_path

        return [
            base_path / str(version) / name
            for version in versions
            for name in ADDON_DIRECTORIES
        ]

    def scaffold(self, versions=None):
        """
        Create the addons directories of each version if they don't exist.

        When no versions are passed, the versions stored in the environment
        file are used. Nothing is created if there are none.

        Returns:
            List<Path>: The addons directories.
        """
        if versions is None:
            versions = self.environment.versions.load()

        if versions is None:
            _logger.warning(
                "No Odoo versions available, skipping the creation of the "
                "addons directories. Volumes might be owned by root."
            )
            return []

        paths = self.paths(versions)

        for version in versions:
            _logger.info("Creating directories for Odoo version %s", version)

        for path in paths:
            path.mkdir(parents=True, exist_ok=True)

        return paths
