from config.dashboard_config import DashboardConfig
from src.logging import configure_logger, get_logger
from src.logging import logger as logger_module


def test_configure_logger_uses_the_app_config(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_logger_instance", None)
    config = DashboardConfig(log_dir=str(tmp_path / "app_logs"), verbose=True)

    logger = configure_logger(config)

    assert get_logger() is logger
    assert logger.config is config
    assert logger.log_file.parent == tmp_path / "app_logs"
    assert logger.log_file.exists()


def test_configure_logger_keeps_instance_for_equal_config(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_logger_instance", None)
    first = configure_logger(DashboardConfig(log_dir=str(tmp_path)))

    assert configure_logger(DashboardConfig(log_dir=str(tmp_path))) is first
    assert configure_logger(DashboardConfig(log_dir=str(tmp_path), verbose=True)) is not first


def test_events_are_written_to_the_configured_file(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "_logger_instance", None)
    logger = configure_logger(DashboardConfig(log_dir=str(tmp_path), verbose=True))

    logger.warning("Unknown table id 99")
    for handler in logger.logger.handlers:
        handler.flush()

    assert "Unknown table id 99" in logger.log_file.read_text(encoding="utf-8")
