"""Спільні фікстури для тестів reeve3d."""
import logging

import pytest

from reeve3d.geom import Pt
from reeve3d.lattice import reeve_tetrahedron
from reeve3d.logging_config import setup_logging


@pytest.fixture(scope="session", autouse=True)
def setup_test_logging():
    logger = setup_logging(level=logging.DEBUG)
    logger.info("=== test session start ===")
    yield
    logger.info("=== test session end ===")


@pytest.fixture
def unit_tet():
    """Стандартний симплекс (0,0,0), (1,0,0), (0,1,0), (0,0,1)."""
    return (Pt(0, 0, 0), Pt(1, 0, 0), Pt(0, 1, 0), Pt(0, 0, 1))


@pytest.fixture(params=[1, 2, 5, 13])
def reeve(request):
    return reeve_tetrahedron(request.param)
