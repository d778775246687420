import os

import pytest

from pyconfman import (
    DuplicateSectionError, IniConfig, JsonConfig, NotFoundError, XmlConfig,
    YamlConfig
)

ADAPTERS = [
    (IniConfig, 'settings.ini'),
    (JsonConfig, 'settings.json'),
    (YamlConfig, 'settings.yaml'),
    (XmlConfig, 'settings.xml'),
]


@pytest.fixture(params=ADAPTERS, ids=lambda p: p[0].__name__)
def open_config(request, tmp_path):
    cls, name = request.param
    path = str(tmp_path / name)
    return lambda: cls(path)


def test_missing_file_is_created_empty(open_config):
    cfg = open_config()
    assert os.path.exists(cfg.path)
    assert cfg.get_sections() == []
    assert len(cfg) == 0


def test_create_section_then_exists(open_config):
    cfg = open_config()
    cfg.create_section('network')
    assert cfg.section_exists('network')
    assert 'network' in cfg
    assert cfg.get_keys('network') == []
    with pytest.raises(DuplicateSectionError):
        cfg.create_section('network')


def test_set_then_get(open_config):
    cfg = open_config()
    cfg.set_string('network', 'host', 'example.org')
    assert cfg.section_exists('network')
    assert cfg.key_exists('network', 'host')
    assert cfg.get_string('network', 'host', 'anything') == 'example.org'

    cfg.set_string('network', 'host', 'localhost')
    assert cfg.get_string('network', 'host', 'anything') == 'localhost'
    assert cfg.get_keys('network') == ['host']


def test_absent_reads_default(open_config):
    cfg = open_config()
    cfg.create_section('network')
    assert cfg.get_string('network', 'port', '80') == '80'
    assert cfg.get_string('missing', 'port', '80') == '80'
    assert not cfg.key_exists('network', 'port')
    assert not cfg.key_exists('missing', 'port')
    assert not cfg.section_exists('missing')


def test_keys_and_snapshot_keep_order(open_config):
    cfg = open_config()
    cfg.set_string('user', 'name', 'alice')
    cfg.set_string('user', 'shell', 'zsh')
    cfg.set_string('user', 'home', '/home/alice')
    assert cfg.get_keys('user') == ['name', 'shell', 'home']

    snapshot = cfg.get_all_key_values('user')
    assert snapshot == {'name': 'alice', 'shell': 'zsh', 'home': '/home/alice'}
    snapshot['name'] = 'bob'
    assert cfg.get_string('user', 'name', '') == 'alice'


def test_missing_section_lookups_raise(open_config):
    cfg = open_config()
    with pytest.raises(NotFoundError):
        cfg.get_keys('nope')
    with pytest.raises(NotFoundError):
        cfg.get_all_key_values('nope')
    with pytest.raises(NotFoundError):
        cfg.delete_section('nope')


def test_delete_key_not_found(open_config):
    cfg = open_config()
    cfg.create_section('s')
    with pytest.raises(NotFoundError):
        cfg.delete_key('s', 'missing')
    with pytest.raises(NotFoundError):
        cfg.delete_key('nope', 'missing')


def test_delete(open_config):
    cfg = open_config()
    cfg.set_string('a', 'x', '1')
    cfg.set_string('a', 'y', '2')
    cfg.set_string('b', 'z', '3')

    cfg.delete_key('a', 'x')
    assert cfg.get_keys('a') == ['y']
    cfg.delete_section('b')
    assert cfg.get_sections() == ['a']


def test_round_trip(open_config):
    cfg = open_config()
    cfg.set_string('database', 'host', 'db.internal')
    cfg.set_string('database', 'port', '5432')
    cfg.set_string('logging', 'level', 'debug')
    cfg.create_section('empty')
    cfg.save_file()

    fresh = open_config()
    assert fresh.get_sections() == ['database', 'logging', 'empty']
    assert fresh.get_all_key_values('database') == {
        'host': 'db.internal', 'port': '5432'}
    assert fresh.get_string('logging', 'level', '') == 'debug'
    assert fresh.get_keys('empty') == []


def test_unsaved_changes_stay_in_memory(open_config):
    cfg = open_config()
    cfg.set_string('s', 'k', 'v')
    assert open_config().get_sections() == []

    cfg.reload()
    assert cfg.get_sections() == []
