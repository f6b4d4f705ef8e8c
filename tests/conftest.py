import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers and propagation changes made by `log.configure`."""
    package = logging.getLogger("epochview")
    handlers = list(package.handlers)
    level, propagate = package.level, package.propagate
    yield
    package.handlers = handlers
    package.setLevel(level)
    package.propagate = propagate
