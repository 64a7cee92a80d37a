import os
import tempfile
import pytest
from click.testing import CliRunner
from mock import patch

from odoo_devenv.odoo import Environment
from odoo_devenv.api.context import Context


@pytest.fixture
def env(tmp_path):
    context = Context(project_path=tmp_path)
    odoo_env = Environment(context=context)

    yield odoo_env


@pytest.fixture(autouse=True)
def change_test_dir(request, monkeypatch):
    with tempfile.TemporaryDirectory() as temp_dir:
        monkeypatch.chdir(temp_dir)
        yield


@pytest.fixture(autouse=True)
def clean_environ():
    devenv_keys = [
        key
        for key in os.environ
        if key.startswith('DEVENV_') or key == 'SUDO_USER'
    ]

    with patch.dict(os.environ):
        for key in devenv_keys:
            del os.environ[key]
        yield


@pytest.fixture
def runner():
    return CliRunner()
