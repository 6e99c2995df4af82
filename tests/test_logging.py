import logging

from psauc.utils.logging import get_logger


def test_get_logger_single_handler_on_package():
    a = get_logger("compute_auc")
    b = get_logger("compute_auc", logging.DEBUG)
    pkg = logging.getLogger("psauc")
    assert a is b and a.name == "psauc.scripts.compute_auc"
    assert len(pkg.handlers) == 1
    assert pkg.level == logging.DEBUG
    assert logging.getLogger("psauc.eval.discrimination").getEffectiveLevel() == logging.DEBUG
