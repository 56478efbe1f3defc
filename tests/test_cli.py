import pytest

from api.main import create_app_from_settings
from docs_hub.cli import main

from .conftest import PUBLIC_DIR, make_spec


@pytest.fixture
def local_env(monkeypatch, clean_settings_cache, local_specs):
    root = local_specs(
        {
            "crm/openapi.yaml": make_spec(title="CRM API", version="3.0"),
            "words/openapi.yaml": make_spec(title="Words API"),
        }
    )
    monkeypatch.setenv("SPEC_SOURCE", "local")
    monkeypatch.setenv("DATA_DIR", str(root))
    monkeypatch.setenv("PUBLIC_DIR", str(PUBLIC_DIR))
    return root


def test_list_prints_catalog(local_env, capsys):
    assert main(["list"]) == 0

    out = capsys.readouterr().out
    assert "crm\tCRM API\tv3.0" in out
    assert "words\tWords API" in out
    assert "2 especificaciones" in out


def test_list_fails_when_store_is_missing(monkeypatch, clean_settings_cache, tmp_path, capsys):
    monkeypatch.setenv("SPEC_SOURCE", "local")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "missing"))

    assert main(["list"]) == 1
    assert "No se pudo cargar" in capsys.readouterr().err


def test_app_factory_loads_catalog(local_env):
    app = create_app_from_settings()

    assert sorted(app.state.catalog) == ["crm", "words"]


def test_app_factory_exits_when_store_is_missing(monkeypatch, clean_settings_cache, tmp_path):
    monkeypatch.setenv("SPEC_SOURCE", "local")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "missing"))

    with pytest.raises(SystemExit) as exc_info:
        create_app_from_settings()

    assert exc_info.value.code == 1


def test_app_factory_exits_when_templates_are_missing(local_env, monkeypatch, tmp_path):
    monkeypatch.setenv("PUBLIC_DIR", str(tmp_path / "no-public"))

    with pytest.raises(SystemExit) as exc_info:
        create_app_from_settings()

    assert exc_info.value.code == 1
