from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from theme import PREFS_ENV_VAR, load_override, save_override
from wetbulb import estimate, format_estimate

APP = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def prefs(monkeypatch, tmp_path):
    path = tmp_path / "preferences.json"
    monkeypatch.setenv(PREFS_ENV_VAR, str(path))
    return path


def run_app():
    at = AppTest.from_file(APP, default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_default_result(prefs):
    at = run_app()
    assert at.metric[0].value == f"{format_estimate(estimate(25.0, 50.0))} °C"


def test_recomputes_on_input_change(prefs):
    at = run_app()
    at.slider(key="temperature").set_value(32.0)
    at.slider(key="humidity").set_value(60.0).run()
    assert at.metric[0].value == f"{format_estimate(estimate(32.0, 60.0))} °C"
    assert not at.warning


def test_warns_outside_accuracy_band(prefs):
    at = run_app()
    at.slider(key="temperature").set_value(-20.0).run()
    assert len(at.warning) == 1


def test_theme_choice_persisted(prefs):
    at = run_app()
    assert at.radio(key="theme").value == "System"
    at.radio(key="theme").set_value("Dark").run()
    assert load_override(prefs) == "dark"


def test_stored_theme_restored(prefs):
    save_override("light", prefs)
    at = run_app()
    assert at.radio(key="theme").value == "Light"


def test_unsaved_theme_keeps_result(monkeypatch, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setenv(PREFS_ENV_VAR, str(blocker / "preferences.json"))
    at = run_app()
    at.radio(key="theme").set_value("Dark").run()
    assert not at.exception
    assert len(at.metric) == 1
    assert len(at.warning) == 1
    at.slider(key="humidity").set_value(60.0).run()
    assert not at.exception
    assert len(at.metric) == 1
