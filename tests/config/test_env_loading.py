import os
from pathlib import Path

from charforge.config import data_dir, log_level, strict_choices_enabled
from charforge.config_env import load_env


def test_env_loads_dotenv(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text(
        "CHARFORGE_LOG_LEVEL=debug\nCHARFORGE_STRICT_CHOICES=from_env_file\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CHARFORGE_STRICT_CHOICES", "yes")

    load_env()

    assert log_level() == "DEBUG"
    assert os.getenv("CHARFORGE_STRICT_CHOICES") == "yes"
    assert strict_choices_enabled()


def test_data_dir_from_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("CHARFORGE_DATA_DIR=./.charforge\n", encoding="utf-8")

    load_env()

    assert data_dir() == (tmp_path / ".charforge").resolve()
    assert Path(os.environ["CHARFORGE_DATA_DIR"]).is_absolute()


def test_defaults():
    assert not strict_choices_enabled()
    assert log_level() == "INFO"
    assert data_dir() == Path(".")
