import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pcs.rand import SeededRandomSource
from pcs.srs import trusted_setup, hiding_setup, compromised_setup


@pytest.fixture(scope="session")
def setup4():
    """Deterministic honest setup for degree 4."""
    return trusted_setup(4, SeededRandomSource(42))


@pytest.fixture(scope="session")
def hiding_setup4():
    """Deterministic hiding setup for degree 4."""
    return hiding_setup(4, SeededRandomSource(1234))


@pytest.fixture(scope="session")
def compromised_setup4():
    """Setup whose toxic waste is handed back to the caller."""
    return compromised_setup(4, SeededRandomSource(7))
