import logging

import pytest

from fluid_data import logging_utils
from fluid_data.logging_utils import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)
    logging.getLogger("fluid").setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("debug", logging.DEBUG),
        ("WARNING", logging.WARNING),
        (logging.ERROR, logging.ERROR),
        ("not-a-level", logging.INFO),
        (None, logging.INFO),
    ],
)
def test_coerce_level(value, expected):
    assert logging_utils._coerce_level(value) == expected


def test_get_logger_namespace():
    assert get_logger("geometry.vector3d").name == "fluid.geometry.vector3d"
    assert get_logger(".config.").name == "fluid.config"
    assert get_logger("").name == "fluid"


def test_defaults_install_null_handler():
    assert configure_logging() is None
    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.NullHandler)
    assert logging.getLogger("fluid").level == logging.WARNING


def test_file_is_created_on_first_record(tmp_path):
    log_path = configure_logging({"enabled": True, "to_console": False}, project_root=tmp_path)
    assert log_path is not None
    assert not log_path.exists()
    get_logger("test").warning("first record")
    assert log_path.exists()
    assert "WARNING - fluid.test - first record" in log_path.read_text(encoding="utf-8")


def test_file_level_filters_records(tmp_path):
    log_path = configure_logging(
        {"enabled": True, "to_console": True, "level": "DEBUG", "file_level": "ERROR"},
        project_root=tmp_path,
    )
    logger = get_logger("test")
    logger.info("kept out of the file")
    logger.error("written to the file")
    content = log_path.read_text(encoding="utf-8")
    assert "kept out of the file" not in content
    assert "written to the file" in content
