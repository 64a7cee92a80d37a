import shutil
import logging

from ..compat import pipe, succeeds, host_ids
from ..exceptions import ComposeError


_logger = logging.getLogger(__name__)


MANIFEST_NAMES = ('docker-compose.yml', 'docker-compose.yaml')


class DockerApi(object):
    """
    Thin layer over the docker cli.

    Every compose command runs in the project path with ``HOST_UID`` and
    ``HOST_GID`` set to the ids of the calling user.
    """

    def __init__(self, env):
        self.environment = env

    def installed(self):
        return shutil.which('docker') is not None

    def compose_available(self):
        return succeeds(['docker', 'compose', 'version'])

    def daemon_running(self):
        return succeeds(['docker', 'info'])

    def show_compose_version(self):
        return pipe(['docker', 'compose', 'version'])

    def manifest(self):
        """
        Returns the path of the docker-compose file in the project or None.
        """
        project_path = self.environment.context.project_path

        for name in MANIFEST_NAMES:
            path = project_path / name
            if path.is_file():
                return path

        return None

    def compose_environ(self):
        uid, gid = host_ids()
        return {
            "HOST_UID": str(uid),
            "HOST_GID": str(gid),
        }

    def compose(self, *args):
        params = ['docker', 'compose'] + list(args)

        ret = pipe(
            params,
            env=self.compose_environ(),
            cwd=self.environment.context.project_path,
        )

        if ret != 0:
            raise ComposeError(
                "Command '{}' failed with returncode {}".format(
                    " ".join(params), ret
                )
            )

        return ret

    def down(self, volumes=False):
        args = ['down']

        if volumes:
            args.append('--volumes')

        args.append('--remove-orphans')

        return self.compose(*args)

    def up(self, build=False):
        args = ['up', '-d']

        if build:
            args.append('--build')

        args += ['--remove-orphans', '--wait']

        return self.compose(*args)
