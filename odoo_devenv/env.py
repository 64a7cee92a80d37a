"""
Environment Variables
=====================
"""
from os import environ


class EnvironmentVariable(property):
    def __init__(
        self,
        serializer=None,
        deserializer=None,
        alternate_names=None,
        default=None,
        **kwargs
    ):
        super().__init__()
        self.__name = None
        self.serializer = serializer
        self.deserializer = deserializer
        self.default = default
        self.alternate_names = alternate_names or []

    def __set_name__(self, owner, name):
        self.__name = name

    def __get__(self, owner, klass):
        for name in [self.__name] + self.alternate_names:
            try:
                value = environ[name]
                break
            except KeyError:
                pass
        else:
            if callable(self.default):
                value = self.default()
            else:
                value = self.default

        if self.deserializer and value is not None:
            value = self.deserializer(value)

        return value

    def __set__(self, owner, value):
        if self.serializer:
            serialized_value = self.serializer(value)
            environ[self.__name] = serialized_value
        else:
            environ[self.__name] = value


class StoredEnv(EnvironmentVariable):
    def __init__(self, readonly=False, **kwargs):

        if readonly is not False:
            kwargs['readonly'] = readonly

        super().__init__(**kwargs)
        self.__name = None
        self.__readonly = readonly

    def __set_name__(self, owner, name):
        super().__set_name__(owner, name)
        owner.__fields__.add(name)
        self.__name = name

    def __get__(self, owner, klass):
        try:
            return owner._values[self.__name]
        except KeyError:
            value = super().__get__(owner, klass)
            owner._values[self.__name] = value
            return value

    def __set__(self, owner, value):
        super().__set__(owner, value)
        if not self.__readonly:
            owner._values[self.__name] = value


class StoredFloatEnv(StoredEnv):
    deserializer = float
    serializer = str

    def __init__(self, **kwargs):
        kwargs['serializer'] = StoredFloatEnv.serializer
        kwargs['deserializer'] = StoredFloatEnv.deserializer
        super().__init__(**kwargs)


class EnvironmentVariables(object):
    """
    EnvironmentVariables parser

    Attributes:
        DEVENV_PROJECT_PATH: Directory containing the docker-compose file.
            The environment file and the addons directories are created
            in this directory. Defaults to the current directory.

        DEVENV_ENV_FILE: Name of the environment file storing the odoo
            versions, relative to the project path.

        DEVENV_ODOO_REPOSITORY: Git url of the upstream odoo repository. Its
            default branch defines the latest odoo version.

        DEVENV_GITHUB_API: Base url of the github REST api.

        DEVENV_DOCKER_SCRIPT_URL: Url of the docker convenience install
            script.

        DEVENV_COMPOSE_PLUGIN_DIR: Directory in which the docker compose
            plugin gets installed when it is missing.

        DEVENV_HTTP_TIMEOUT: Timeout in seconds of the metadata requests.

        SUDO_USER: Set by sudo to the user calling it. This user is added
            to the docker group once docker is installed.

        PYTHON_LOG: Log level used when none is passed on the command line.
    """

    __fields__ = set()

    DEVENV_PROJECT_PATH = StoredEnv()
    DEVENV_ENV_FILE = StoredEnv(default='.env')

    DEVENV_ODOO_REPOSITORY = StoredEnv(
        default='https://github.com/odoo/odoo.git'
    )
    DEVENV_GITHUB_API = StoredEnv(default='https://api.github.com')

    DEVENV_DOCKER_SCRIPT_URL = StoredEnv(default='https://get.docker.com')
    DEVENV_COMPOSE_PLUGIN_DIR = StoredEnv(
        default='/usr/local/lib/docker/cli-plugins'
    )

    DEVENV_HTTP_TIMEOUT = StoredFloatEnv(default='5')

    SUDO_USER = StoredEnv(readonly=True)

    PYTHON_LOG = StoredEnv(default='INFO')

    def __init__(self):
        self._values = {}

    @classmethod
    def fields(cls):
        for attr in cls.__fields__:
            yield attr

    def values(self):
        return {
            field: getattr(self, field)
            for field in self.fields()
        }
