import os

from wordboard.app import config


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "BOARD_DENSITY", "BOARD_SPEED_MIN", "BOARD_SPEED_MAX",
                 "LIST_PAGE_LIMIT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert config.database_url() == "sqlite:///" + os.path.join(config.project_root(), "wordboard.db")
    assert config.board_density() == 1.0
    assert config.speed_range() == (14.0, 28.0)
    assert config.page_limit() == 20
    assert config.log_level() == "INFO"


def test_relative_sqlite_path_is_under_project_root(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///data/app.db")
    assert config.database_url() == "sqlite:///" + os.path.join(config.project_root(), "data/app.db")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    assert config.database_url() == "sqlite:///:memory:"
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/words")
    assert config.database_url() == "postgresql://u:p@db/words"


def test_malformed_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("BOARD_DENSITY", "lots")
    monkeypatch.setenv("BOARD_SPEED_MIN", "nan")
    monkeypatch.setenv("BOARD_SPEED_MAX", "40")
    assert config.board_density() == 1.0
    assert config.speed_range() == (14.0, 40.0)


def test_page_limit_is_clamped(monkeypatch):
    monkeypatch.setenv("LIST_PAGE_LIMIT", "500")
    assert config.page_limit() == 100
    monkeypatch.setenv("LIST_PAGE_LIMIT", "0")
    assert config.page_limit() == 1


def test_board_density_is_clamped(monkeypatch):
    monkeypatch.setenv("BOARD_DENSITY", "1e308")
    assert config.board_density() == 10.0
    monkeypatch.setenv("BOARD_DENSITY", "-2")
    assert config.board_density() == 0.0
