import copy
import dataclasses

import pytest

from richsocket.config import Config, get_config


def test_get_config_returns_same_instance():
    first = get_config()
    second = get_config()
    assert first is second
    assert (second.port, second.only_local) == (32322, True)


def test_default_port():
    assert get_config().port == 32322


def test_only_local_by_default():
    assert get_config().only_local is True


def test_config_is_immutable():
    config = get_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.port = 1
    assert get_config().port == 32322


def test_copy_yields_same_object():
    config = get_config()
    assert copy.copy(config) is config
    assert copy.deepcopy(config) is config


def test_explicit_config_keeps_values():
    config = Config(port=8080, only_local=False)
    assert (config.port, config.only_local) == (8080, False)