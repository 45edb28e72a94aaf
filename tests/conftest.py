from pathlib import Path

import pytest

from almanac import configuration
from almanac.repository.budget import BudgetRepository
from almanac.repository.plan import PlanRepository
from almanac.repository.preferences import PreferenceStore
from almanac.repository.profile import ProfileRepository
from almanac.service.almanac import AlmanacEngine, default_engine
from almanac.view import state as view_state


class FixedClock:
    """Returns the same epoch millisecond on every call."""

    def __init__(self, now_ms: int = 1_767_225_600_000) -> None:
        self.now_ms = now_ms

    def __call__(self) -> int:
        return self.now_ms


@pytest.fixture
def preferences_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "preferences.yaml"


@pytest.fixture
def preferences(preferences_path: Path) -> PreferenceStore:
    return PreferenceStore(preferences_path)


@pytest.fixture
def plans(preferences: PreferenceStore) -> PlanRepository:
    return PlanRepository(preferences)


@pytest.fixture
def profile(preferences: PreferenceStore) -> ProfileRepository:
    return ProfileRepository(preferences)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def budget(preferences: PreferenceStore, clock: FixedClock) -> BudgetRepository:
    return BudgetRepository(preferences, clock=clock)


@pytest.fixture
def engine() -> AlmanacEngine:
    return default_engine()


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config file at a temporary directory."""
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(configuration, "DATA_PATH", configuration.DATA_PATH)
    monkeypatch.setattr(
        configuration, "DATA_PREFERENCES_PATH", configuration.DATA_PREFERENCES_PATH
    )
    return config_dir


@pytest.fixture(autouse=True)
def reset_view_settings():
    """CLI runs set the header and timezone for the whole thread."""
    view_state.set_show_header(True)
    view_state.set_timezone("local")
    yield
    view_state.set_show_header(True)
    view_state.set_timezone("local")
