import logging
import os
import pathlib
import sys

import pytest

# Run Qt without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Ensure project root is in sys.path
repo_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(repo_root))

try:
    from PySide6.QtWidgets import QApplication
except ImportError:
    QApplication = None


@pytest.fixture(scope="session")
def qapp():
    """
    Ensure QApplication is instantiated only once.
    """
    if QApplication is None:
        yield None
        return

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def restore_root_logger():
    """
    Restores root logger handlers and level after a test reconfigures logging.
    """
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class Contact:
    """Simple candidate type with several text facets."""

    def __init__(self, name, aliases=None, email=None):
        self.name = name
        self.aliases = aliases or []
        self.email = email

    def facets(self):
        return [self.name, *self.aliases, self.email]

    def __repr__(self):
        return f"Contact({self.name!r})"


@pytest.fixture
def contacts():
    """A small address book with names, aliases and optional emails."""
    return [
        Contact("Margaret Hamilton", ["Maggie"], "margaret@example.com"),
        Contact("Grace Hopper", ["Amazing Grace"], None),
        Contact("Alan Turing", [], "alan@example.org"),
        Contact("Ada Lovelace", ["Countess"], None),
    ]
