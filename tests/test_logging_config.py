from bookstore.logging_config import build_logging_config


def test_console_only_by_default():
    config = build_logging_config("debug")

    assert config["root"] == {"level": "DEBUG", "handlers": ["console"]}
    assert config["handlers"]["console"]["stream"] == "ext://sys.stdout"


def test_log_file_adds_file_handler(tmp_path):
    log_file = str(tmp_path / "bookstore.log")

    config = build_logging_config("INFO", log_file)

    assert config["root"]["handlers"] == ["console", "file"]
    assert config["handlers"]["file"]["filename"] == log_file


def test_uvicorn_loggers_propagate_to_root():
    loggers = build_logging_config()["loggers"]

    for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        assert loggers[name]["handlers"] == []
        assert loggers[name]["propagate"] is True
