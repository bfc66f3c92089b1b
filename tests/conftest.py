import os
import tempfile

import pytest

# Les logs des tests ne doivent pas atterrir dans le dossier du projet
os.environ.setdefault("TEXTDESK_LOG_DIR", tempfile.mkdtemp(prefix="textdesk-logs-"))

from services import commands  # noqa: E402
from services.text_store import TextStore  # noqa: E402


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file):
    return TextStore(data_file)


@pytest.fixture
def bound_commands(data_file):
    """Commandes reliées à un fichier temporaire, restaurées après le test."""
    previous = commands._STORE
    commands.configure(data_file)
    yield commands
    commands._STORE = previous
