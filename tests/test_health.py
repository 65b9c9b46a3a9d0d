"""Smoke test for application startup."""


def test_app_imports() -> None:
    """Verify the app can be imported without errors."""
    from rosterforge.main import app

    assert app.title == "RosterForge"


def test_routes_registered() -> None:
    from rosterforge.main import app

    paths = set(app.openapi()["paths"])
    assert {"/characters", "/combos", "/decks", "/decks/{deck_id}/stats", "/health"} <= paths
