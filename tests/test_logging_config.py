# tests/test_logging_config.py
import logging

import pytest

from ellipsoidmesh import Ellipsoid3D, setup_logging
from ellipsoidmesh.logging_config import LOGGER_NAME


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger(LOGGER_NAME)
    level, handlers = logger.level, list(logger.handlers)
    yield logger
    for h in logger.handlers:
        h.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_repeated_setup_does_not_stack_handlers(restore_package_logger):
    setup_logging(logging.INFO)
    logger = setup_logging(logging.WARNING)
    assert logger is restore_package_logger
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_file_handler_receives_generator_records(restore_package_logger, tmp_path):
    log_file = tmp_path / "mesh.log"
    setup_logging(logging.DEBUG, log_file=str(log_file))
    Ellipsoid3D(0, 0, 0, 1, 1, 1, 3, 4)

    for h in restore_package_logger.handlers:
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "ellipsoidmesh.ellipsoid - DEBUG - Allocating grid stacks=3 slices=4" in text
    assert "Filled Mesh3D(stacks=3, slices=4)" in text


def test_repeated_setup_closes_replaced_file_handlers(restore_package_logger, tmp_path):
    setup_logging(logging.INFO, log_file=str(tmp_path / "first.log"))
    first = [h for h in restore_package_logger.handlers if isinstance(h, logging.FileHandler)]
    assert len(first) == 1
    assert first[0].stream is not None

    setup_logging(logging.INFO, log_file=str(tmp_path / "second.log"))

    assert first[0].stream is None
    assert first[0] not in restore_package_logger.handlers
    assert len(restore_package_logger.handlers) == 2
