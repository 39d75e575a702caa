import sys
from pathlib import Path

import pytest

# Ensure the root of the repository is on PYTHONPATH
sys.path.append(str(Path(__file__).resolve().parents[1]))


@pytest.fixture()
def client():
    from arithmos import create_app

    app = create_app()
    app.config.update(TESTING=True)
    with app.test_client() as test_client:
        yield test_client
