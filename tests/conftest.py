import pytest


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings loader at a private file so the built-in defaults apply."""
    path = tmp_path / "config.json"
    monkeypatch.setenv("FORMULA_CONFIG", str(path))
    return path
