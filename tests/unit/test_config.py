import sys

import pytest


def _import_config_module():
    """
    Import (or re-import) printperf.config so its cached settings start empty.
    """
    import importlib
    if "printperf.config" in sys.modules:
        return importlib.reload(sys.modules["printperf.config"])
    return importlib.import_module("printperf.config")


def test_defaults_without_env():
    cfg_mod = _import_config_module()
    cfg = cfg_mod.get_config(force_refresh=True)

    assert cfg.color == "auto"
    assert cfg.no_color is False


@pytest.mark.parametrize("raw, expected", [("always", "always"), (" NEVER ", "never"), ("", "auto")])
def test_color_env_is_normalised(monkeypatch, raw, expected):
    monkeypatch.setenv("PRINTPERF_COLOR", raw)
    cfg_mod = _import_config_module()

    assert cfg_mod.get_config(force_refresh=True).color == expected


def test_no_color_needs_a_value(monkeypatch):
    cfg_mod = _import_config_module()

    monkeypatch.setenv("NO_COLOR", "")
    assert cfg_mod.get_config(force_refresh=True).no_color is False

    monkeypatch.setenv("NO_COLOR", "1")
    assert cfg_mod.get_config(force_refresh=True).no_color is True


def test_invalid_color_warns_and_falls_back(monkeypatch, capsys):
    monkeypatch.setenv("PRINTPERF_COLOR", "rainbow")
    cfg_mod = _import_config_module()

    cfg = cfg_mod.get_config(force_refresh=True)

    assert cfg.color == "auto"
    err = capsys.readouterr().err
    assert "[printperf] ignoring PRINTPERF_COLOR='rainbow'" in err


def test_config_is_cached_until_refresh(monkeypatch):
    cfg_mod = _import_config_module()
    first = cfg_mod.get_config(force_refresh=True)

    monkeypatch.setenv("PRINTPERF_COLOR", "never")
    assert cfg_mod.get_config() is first
    assert cfg_mod.get_config(force_refresh=True).color == "never"
