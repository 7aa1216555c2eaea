from collections.abc import Iterator
from pathlib import Path

import pytest

from utilkit.rules.loader import reset_rules_cache

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The rules.yaml shipped at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture(autouse=True)
def fresh_rules(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Every test starts with default, uncached rules."""
    monkeypatch.delenv("UTILKIT_RULES_PATH", raising=False)
    reset_rules_cache()
    yield
    reset_rules_cache()
