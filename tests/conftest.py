import json
import logging

import pytest
import yaml


@pytest.fixture
def ctrl_schema():
    """
    Schema with a single CTRL register at 0x40:
    ENABLE on bit 0 and MODE on bits 1-2.
    """
    return {
        "registers": [
            {
                "name": "CTRL",
                "address": 0x40,
                "fields": [
                    {"name": "ENABLE", "mask": 0x1, "description": "enable bit"},
                    {"name": "MODE", "mask": 0x6, "description": "mode select"},
                ],
            }
        ]
    }


@pytest.fixture
def multi_schema():
    """Schema with three registers, declared out of address order."""
    return {
        "registers": [
            {
                "name": "STATUS",
                "address": 0x1004,
                "fields": [
                    {"name": "BUSY", "mask": 0x80000000, "description": "busy flag"},
                    {"name": "COUNT", "mask": 0x0000FF00, "description": "pending count"},
                ],
            },
            {
                "name": "CTRL",
                "address": 0x1000,
                "fields": [
                    {"name": "MODE", "mask": 0x6, "description": "mode select"},
                    {"name": "ENABLE", "mask": 0x1, "description": "enable bit"},
                ],
            },
            {
                "name": "IRQ",
                "address": 0x1008,
                "fields": [
                    {"name": "PENDING", "mask": 0xF0, "description": "pending lines"},
                ],
            },
        ]
    }


@pytest.fixture
def write_document(tmp_path):
    """
    Returns a helper that writes `data` to `tmp_path/name`.

    Files ending in .yml/.yaml are dumped as YAML, anything else as JSON.
    A `str` payload is written verbatim.
    """

    def _write(name, data):
        path = tmp_path / name
        if isinstance(data, str):
            path.write_text(data, encoding="utf-8")
        elif path.suffix in (".yml", ".yaml"):
            path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        else:
            path.write_text(json.dumps(data), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Removes handlers installed by configure_logger so tests stay isolated."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in saved_handlers:
            root_logger.removeHandler(handler)
    root_logger.setLevel(saved_level)
