import importlib.util
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "create_admin.py"


@pytest.fixture
def create_admin():
    spec = importlib.util.spec_from_file_location("create_admin", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.main


def test_creates_administrator_once(create_admin, tmp_path, capsys):
    db = f"sqlite:///{tmp_path / 'admins.db'}"
    args = ["--db", db, "--email", "adm@example.com", "--password", "pw", "--profile", "Editor"]
    assert create_admin(args) == 0
    assert "Created Editor adm@example.com" in capsys.readouterr().out

    assert create_admin(args) == 1
    assert "already registered" in capsys.readouterr().err


def test_rejects_invalid_payload(create_admin, tmp_path, capsys):
    db = f"sqlite:///{tmp_path / 'admins.db'}"
    assert create_admin(["--db", db, "--email", "no-at-sign", "--password", ""]) == 1
    err = capsys.readouterr().err
    assert "valid email" in err
    assert "Password must not be empty" in err
