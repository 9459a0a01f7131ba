import json
import logging

import pytest

from fluid_data.config import Config
from fluid_data.geometry_utils.vector3D import Vector3D


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging.basicConfig(handlers=[logging.NullHandler()], force=True)
    logging.getLogger("fluid").setLevel(logging.NOTSET)


def write_config(tmp_path, data):
    path = tmp_path / "fluid.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_requires_path_or_data():
    with pytest.raises(ValueError, match="config_path or new_data"):
        Config()


def test_load_from_file(tmp_path):
    path = write_config(tmp_path, {"logging": {"enabled": False, "level": "ERROR"}})
    config = Config(config_path=str(path))
    assert config.logging == {"enabled": False, "level": "ERROR"}


def test_missing_logging_section_defaults_to_empty():
    config = Config(new_data={"other": 1})
    assert config.logging == {}
    assert not hasattr(config, "geometry")


@pytest.mark.parametrize(
    "data, message",
    [
        ({"logging": {"enabled": 1}}, "enabled"),
        ({"logging": {"to_console": "yes"}}, "to_console"),
        ({"logging": {"level": 2.5}}, "level"),
        ({"logging": {"file_level": True}}, "file_level"),
        ({"logging": "verbose"}, "logging"),
    ],
)
def test_invalid_sections(data, message):
    with pytest.raises(ValueError, match=message):
        Config(new_data=data)


def test_root_must_be_object(tmp_path):
    path = write_config(tmp_path, [1, 2, 3])
    with pytest.raises(ValueError, match="JSON object"):
        Config(config_path=str(path))


def test_apply_without_file_logging(tmp_path):
    path = write_config(tmp_path, {"logging": {"level": "INFO", "to_console": True}})
    config = Config(config_path=str(path))
    assert config.apply() is None
    assert not (tmp_path / "logs").exists()
    assert logging.getLogger("fluid").level == logging.INFO


def test_apply_with_file_logging(tmp_path):
    path = write_config(tmp_path, {"logging": {"enabled": True, "to_console": False, "level": "DEBUG"}})
    config = Config(config_path=str(path))
    log_path = config.apply()
    assert log_path.parent == tmp_path.resolve() / "logs"
    Vector3D().normalize()
    for handler in logging.getLogger().handlers:
        handler.flush()
    content = log_path.read_text(encoding="utf-8")
    assert "Loaded configuration" in content
    assert "zero-length" in content
