import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from metaphone_transform import PhoneticEncoder


@pytest.fixture
def encoder():
    """Fresh encoder instance; encoders hold no state so any instance works."""

    return PhoneticEncoder()
