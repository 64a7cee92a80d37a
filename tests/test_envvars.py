import os
from pathlib import Path
import pytest
from mock import patch

from odoo_devenv.api.context import Context
from odoo_devenv.env import EnvironmentVariables
from odoo_devenv.exceptions import ConfigurationError


def test_environment_variables_defaults():
    with patch.dict(os.environ, {}, clear=True):
        env = EnvironmentVariables()
        assert env._values == {}
        assert env.DEVENV_PROJECT_PATH is None
        assert env.DEVENV_ENV_FILE == '.env'
        assert env.DEVENV_HTTP_TIMEOUT == 5.0
        assert env.SUDO_USER is None
        assert env.PYTHON_LOG == 'INFO'

        values = env.values()
        assert values['DEVENV_ODOO_REPOSITORY'] == (
            'https://github.com/odoo/odoo.git'
        )
        assert values['DEVENV_COMPOSE_PLUGIN_DIR'] == (
            '/usr/local/lib/docker/cli-plugins'
        )


def test_environment_variables_set():
    with patch.dict(os.environ, {}, clear=True):
        env = EnvironmentVariables()
        env.DEVENV_ENV_FILE = 'versions.env'
        assert os.environ['DEVENV_ENV_FILE'] == 'versions.env'
        assert env.DEVENV_ENV_FILE == 'versions.env'

        env.DEVENV_HTTP_TIMEOUT = 2.5
        assert os.environ['DEVENV_HTTP_TIMEOUT'] == '2.5'


def test_environment_variables_readonly():
    with patch.dict(os.environ, {'SUDO_USER': 'alice'}, clear=True):
        env = EnvironmentVariables()
        assert env.SUDO_USER == 'alice'

        env.SUDO_USER = 'bob'
        assert os.environ['SUDO_USER'] == 'bob'
        # Readonly values are cached on first access
        assert env.SUDO_USER == 'alice'


def test_empty_context(tmp_path):
    context = Context(project_path=tmp_path)

    assert context.env_file == tmp_path / '.env'
    assert context.compose_plugin_dir == Path(
        '/usr/local/lib/docker/cli-plugins'
    )
    assert context.fresh is False
    assert context.flags() == []


def test_context_cwd():
    context = Context()
    assert context.project_path == Path.cwd()
    assert context.env_file == Path.cwd() / '.env'


def test_context_flags(tmp_path):
    context = Context(
        project_path=tmp_path,
        fresh=True,
        delete_only=True,
        restart_only=True
    )

    assert context.flags() == ['-f', '-d', '-r']


def test_context_envvars(tmp_path):
    vals = dict(
        DEVENV_PROJECT_PATH=str(tmp_path),
        DEVENV_ENV_FILE='odoo.env',
        DEVENV_ODOO_REPOSITORY='git@github.com:acme/odoo.git',
        DEVENV_GITHUB_API='https://github.example.com/api/v3/',
        DEVENV_DOCKER_SCRIPT_URL='https://test.docker.com',
        DEVENV_COMPOSE_PLUGIN_DIR=str(tmp_path / 'plugins'),
        DEVENV_HTTP_TIMEOUT='10',
        SUDO_USER='alice',
    )

    with patch.dict(os.environ, vals, clear=True):
        context = Context.from_env()

    assert context.project_path == tmp_path
    assert context.env_file == tmp_path / 'odoo.env'
    assert context.odoo_repository == 'git@github.com:acme/odoo.git'
    assert context.github_api == 'https://github.example.com/api/v3'
    assert context.docker_script_url == 'https://test.docker.com'
    assert context.compose_plugin_dir == tmp_path / 'plugins'
    assert context.http_timeout == 10.0
    assert context.sudo_user == 'alice'


def test_context_envvars_invalid_timeout():
    vals = dict(DEVENV_HTTP_TIMEOUT='five')

    with patch.dict(os.environ, vals, clear=True):
        with pytest.raises(ConfigurationError) as exc_info:
            Context.from_env()

    assert 'DEVENV_HTTP_TIMEOUT' in str(exc_info.value)
    assert "'five'" in str(exc_info.value)
