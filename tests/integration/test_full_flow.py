"""End-to-end tests: scan, list, toggle, remind, restart."""

import json

import pytest

from hot_prospects.app import ProspectsApplication
from hot_prospects.notifications import InMemoryNotificationCenter
from hot_prospects.presentation import FilterType, RowActionKind, SortType


@pytest.fixture
def app_overrides(tmp_path):
    return {"storage": {"directory": str(tmp_path / "data"), "fsync": False}}


@pytest.fixture
def app(tmp_path, app_overrides):
    application = ProspectsApplication.from_config_dir(
        tmp_path / "config",
        overrides=app_overrides,
        notification_center=InMemoryNotificationCenter(grant_authorization=True),
        setup_logging=False,
    )
    yield application
    application.close()


def test_scan_toggle_and_restart(tmp_path, app, app_overrides):
    everyone = app.view(FilterType.NONE)
    contacted = app.view(FilterType.CONTACTED)
    uncontacted = app.view(FilterType.UNCONTACTED)

    paul = app.simulate_scan()
    assert paul.name == "Paul Hudson"
    assert app.simulate_scan("onlyonefield") is None
    assert [r.name for r in everyone.rows] == ["Paul Hudson"]
    assert [r.name for r in uncontacted.rows] == ["Paul Hudson"]
    assert contacted.rows == ()

    everyone.perform(paul.id, RowActionKind.MARK_CONTACTED)

    assert [r.prospect_id for r in contacted.rows] == [paul.id]
    assert uncontacted.rows == ()

    document = json.loads((tmp_path / "data" / "SavedData").read_text())
    assert document["prospects"][0]["isContacted"] is True

    app.close()
    restarted = ProspectsApplication.from_config_dir(
        tmp_path / "config", overrides=app_overrides, setup_logging=False
    )
    assert restarted.store.snapshot() == app.store.snapshot()
    restarted.close()


def test_reminder_flow(app):
    paul = app.simulate_scan()

    request = app.view(FilterType.UNCONTACTED).perform(paul.id, RowActionKind.REMIND)

    assert request.title == "Contact Paul Hudson"
    assert app.notification_center.pending_requests() == [request]


def test_sorting_across_views(app):
    for payload in ("Ada Lovelace\nada@example.com", "Zed Shaw\nzed@example.com",
                    "Paul Hudson\npaul@hackingwithswift.com"):
        app.simulate_scan(payload)

    everyone = app.view(FilterType.NONE)
    assert [r.name for r in everyone.rows] == ["Ada Lovelace", "Zed Shaw", "Paul Hudson"]

    everyone.set_sort(SortType.NAME)
    assert [r.name for r in everyone.rows] == ["Zed Shaw", "Paul Hudson", "Ada Lovelace"]

    # Sorting one view does not affect the others
    assert app.view(FilterType.UNCONTACTED).sort_type == SortType.RECENT


def test_invalid_config_refuses_to_start(tmp_path):
    with pytest.raises(ValueError, match="hour"):
        ProspectsApplication.from_config_dir(
            tmp_path / "config",
            overrides={"reminders": {"hour": 25}},
            setup_logging=False,
        )


def test_config_file_is_honoured(tmp_path):
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "app.yaml").write_text(
        f"storage:\n  directory: {tmp_path / 'yaml-data'}\n  fsync: false\n"
        "reminders:\n  title_template: 'Call {name}'\n"
    )

    app = ProspectsApplication.from_config_dir(config_dir, setup_logging=False)
    app.notification_center.grant_authorization = True
    paul = app.simulate_scan()

    assert app.storage.path == tmp_path / "yaml-data" / "SavedData"
    assert app.scheduler.schedule(paul).title == "Call Paul Hudson"
    app.close()
