"""
Client Configuration Tests
Tests for curlish/config/runtime.py
"""
from curlish.config import ClientConfig, get_default_config, set_default_config
from curlish.config.runtime import _DEFAULT_HTTP_USER_AGENT


def test_defaults():
    config = ClientConfig()

    assert config.timeout is None
    assert config.user_agent == _DEFAULT_HTTP_USER_AGENT
    assert config.proxy is None
    assert config.options == {}


def test_from_env(monkeypatch):
    """Test CURLISH_* variables are picked up."""
    monkeypatch.setenv("CURLISH_TIMEOUT", "15")
    monkeypatch.setenv("CURLISH_USER_AGENT", "agent/2.0")
    monkeypatch.setenv("CURLISH_HTTP_PROXY", "http://proxy.local:3128")

    config = ClientConfig.from_env()

    assert config.timeout == 15
    assert config.user_agent == "agent/2.0"
    assert config.proxy == "http://proxy.local:3128"


def test_from_dict_partial():
    config = ClientConfig.from_dict({"timeout": 3, "options": {"verify": False}})

    assert config.timeout == 3
    assert config.user_agent == _DEFAULT_HTTP_USER_AGENT
    assert config.options == {"verify": False}


def test_to_dict_round_trip():
    config = ClientConfig(timeout=4, proxy="http://p:1", options={"verify": True})

    assert ClientConfig.from_dict(config.to_dict()) == config


def test_default_config_is_cached(monkeypatch):
    """Test get_default_config() reads the environment once."""
    set_default_config(None)
    monkeypatch.setenv("CURLISH_TIMEOUT", "8")

    first = get_default_config()
    monkeypatch.setenv("CURLISH_TIMEOUT", "9")

    assert get_default_config() is first
    assert first.timeout == 8


def test_set_default_config():
    config = ClientConfig(timeout=1)
    set_default_config(config)

    assert get_default_config() is config
