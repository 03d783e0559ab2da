import os

import pytest


@pytest.fixture(autouse=True)
def isolated_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give each test its own os.environ with no TINT_KIT_* variables."""
    env = {k: v for k, v in os.environ.items() if not k.startswith('TINT_KIT_')}
    monkeypatch.setattr(os, 'environ', env)
