import json

import pytest

from asset_compiler.utils import close_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Each test starts with fresh warning/error tracking."""
    close_logging()
    yield
    close_logging()


@pytest.fixture
def tower_tables():
    parameters = {"3": {"width": 10, "height": 20}}
    enumeration = {"3": "Tower"}
    return parameters, enumeration


@pytest.fixture
def write_tables(tmp_path):
    """Write a JSON table source plus an INI pointing at it; returns the INI path."""

    def _write(parameters, enumeration, extra=""):
        tables = tmp_path / "tables.json"
        tables.write_text(json.dumps({"parameters": parameters, "enumeration": enumeration}), encoding="utf-8")
        ini = tmp_path / "extract.ini"
        ini.write_text(f"[source]\nkind = json\npath = tables.json\n{extra}", encoding="utf-8")
        return ini

    return _write
