import os
from pathlib import Path

import pytest

here = Path(__file__).parent


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in list(os.environ):
        if name.startswith("HOSTEXPR_"):
            monkeypatch.delenv(name)


@pytest.fixture
def config():
    def get_config(name):
        return here / "config" / f"{name}.yaml"

    return get_config
