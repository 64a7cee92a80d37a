import pytest
import requests
from mock import patch

from odoo_devenv.api.versions import VersionTriple
from odoo_devenv.exceptions import ComposeError
from tests.utils import json_response, write_env_file


def compose_calls(pipe):
    return [
        args[0][2:]
        for args, kwargs in pipe.call_args_list
    ]


def test_manage_services_without_manifest(env):
    with patch('odoo_devenv.api.docker.pipe') as pipe:
        assert env.manage_services() is False
        pipe.assert_not_called()


def test_manage_services(env, tmp_path):
    (tmp_path / 'docker-compose.yml').write_text("services: {}\n")

    with patch('odoo_devenv.api.docker.pipe') as pipe:
        pipe.return_value = 0
        assert env.manage_services() is True

    assert compose_calls(pipe) == [
        ['down', '--remove-orphans'],
        ['up', '-d', '--build', '--remove-orphans', '--wait'],
    ]


def test_manage_services_fresh(env, tmp_path):
    (tmp_path / 'docker-compose.yaml').write_text("services: {}\n")
    env.context.fresh = True

    with patch('odoo_devenv.api.docker.pipe') as pipe:
        pipe.return_value = 0
        env.manage_services()

    assert compose_calls(pipe) == [
        ['down', '--volumes', '--remove-orphans'],
        ['up', '-d', '--build', '--remove-orphans', '--wait'],
    ]


def test_manage_services_down_failure(env, tmp_path):
    (tmp_path / 'docker-compose.yml').write_text("services: {}\n")

    with patch('odoo_devenv.api.docker.pipe') as pipe:
        pipe.return_value = 1

        with pytest.raises(ComposeError):
            env.manage_services()

        assert pipe.call_count == 1


def test_setup(env, tmp_path):
    (tmp_path / 'docker-compose.yml').write_text("services: {}\n")

    with patch('odoo_devenv.utils.requests.get') as get,\
         patch('odoo_devenv.api.docker.pipe') as pipe:
        get.return_value = json_response({'default_branch': '18.0'})
        pipe.return_value = 0

        versions = env.setup()

    assert versions == VersionTriple(16, 17, 18)
    assert env.versions.load() == versions

    for version in ('16', '17', '18'):
        for name in ('custom', 'design', 'enterprise'):
            assert (tmp_path / version / name).is_dir()

    assert pipe.call_count == 2


def test_setup_fallback_env_file(env, tmp_path):
    write_env_file(env.context.env_file, [15, 16, 17])

    with patch('odoo_devenv.utils.requests.get') as get,\
         patch('odoo_devenv.api.docker.pipe') as pipe:
        get.side_effect = requests.ConnectionError("offline")

        versions = env.setup()

    assert versions == VersionTriple(15, 16, 17)
    assert (tmp_path / '17' / 'custom').is_dir()
    assert not (tmp_path / '18').exists()
    pipe.assert_not_called()


def test_setup_no_versions(env, tmp_path, caplog):
    (tmp_path / 'docker-compose.yml').write_text("services: {}\n")

    with patch('odoo_devenv.utils.requests.get') as get,\
         patch('odoo_devenv.api.docker.pipe') as pipe:
        get.return_value = json_response({'default_branch': 'master'})
        pipe.return_value = 0

        assert env.setup() is None

    assert not env.context.env_file.exists()
    warnings = [
        record for record in caplog.records
        if 'No Odoo versions available' in record.getMessage()
    ]
    assert len(warnings) == 1
    assert sorted(p.name for p in tmp_path.iterdir()) == ['docker-compose.yml']
    assert pipe.call_count == 2
