import pytest
from pydantic import ValidationError

from ebmltree.configs import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("EBMLTREE_MAX_DEPTH", raising=False)
    monkeypatch.delenv("EBMLTREE_RENDER_MAX_BYTES", raising=False)
    config = Settings(_env_file=None)
    assert config.max_depth == 64
    assert config.render_max_bytes == 32


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("EBMLTREE_MAX_DEPTH", "3")
    monkeypatch.setenv("EBMLTREE_LOG_LEVEL", "DEBUG")
    config = Settings(_env_file=None)
    assert config.max_depth == 3
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("name, value", [("EBMLTREE_MAX_DEPTH", "0"), ("EBMLTREE_RENDER_MAX_BYTES", "-1")])
def test_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
