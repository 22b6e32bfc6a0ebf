import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

from smart_factories.core.random_source import RandomSource  # noqa: E402


@pytest.fixture
def seeded_source() -> RandomSource:
    return RandomSource(seed=1234)
