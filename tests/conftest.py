import os
import random
import sys

# Headless SDL so pygame surfaces, fonts and the mixer work without a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

# Add the repo root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from gridsnake.world import World


@pytest.fixture
def world():
    return World(rng=random.Random(1234))
