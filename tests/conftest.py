import os
import sys
from pathlib import Path

# Ensure repository root is on sys.path for module imports (app, blobworld)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Headless test mode
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest  # noqa: E402

from blobworld.config import SceneBounds, SimConfig  # noqa: E402
from blobworld.rng_service import RNGService  # noqa: E402


@pytest.fixture
def scene():
    return SceneBounds()


@pytest.fixture
def config():
    return SimConfig()


@pytest.fixture
def rng():
    return RNGService(1234)


class SparkleRecorder:
    """Stands in for the particle system; records emit origins."""

    def __init__(self):
        self.origins = []

    def emit(self, origin):
        self.origins.append(origin)


@pytest.fixture
def recorder():
    return SparkleRecorder()
