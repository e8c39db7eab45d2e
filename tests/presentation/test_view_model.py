"""Tests for the headless prospect list view model."""

from unittest.mock import Mock

import pytest

from hot_prospects.errors import ProspectNotFoundError
from hot_prospects.notifications import InMemoryNotificationCenter, ReminderScheduler
from hot_prospects.presentation import (
    FilterType,
    ProspectListViewModel,
    ProspectRow,
    RowActionKind,
    SortType,
)
from hot_prospects.scanning import ScanIngestor, ScanResult


@pytest.fixture
def center():
    return InMemoryNotificationCenter(grant_authorization=True)


@pytest.fixture
def make_view(store, center):
    def _make(filter_type=FilterType.NONE, **kwargs):
        return ProspectListViewModel(
            store,
            filter_type,
            scheduler=ReminderScheduler(center),
            ingestor=ScanIngestor(store),
            **kwargs
        )
    return _make


class TestProspectRow:
    """Test row construction."""

    def test_uncontacted_row(self, paul):
        row = ProspectRow.from_prospect(paul)

        assert row.icon == "person.fill.xmark"
        assert row.tint == "red"
        assert [a.kind for a in row.actions] == [RowActionKind.MARK_CONTACTED, RowActionKind.REMIND]
        assert [a.label for a in row.actions] == ["Mark Contacted", "Remind Me"]

    def test_contacted_row(self, sample_prospects):
        row = ProspectRow.from_prospect(sample_prospects[1])

        assert row.icon == "person.fill.checkmark"
        assert row.tint == "green"
        assert [a.label for a in row.actions] == ["Mark Uncontacted"]


class TestProspectListViewModel:
    """Test ProspectListViewModel."""

    def test_title_and_sort_options(self, make_view):
        view = make_view(FilterType.UNCONTACTED)

        assert view.title == "Uncontacted people"
        assert [label for _, label in view.sort_options] == ["Most Recent", "Name"]

    def test_rows_follow_filter_and_sort(self, store, make_view, sample_prospects):
        for prospect in sample_prospects:
            store.add(prospect)
        view = make_view(FilterType.UNCONTACTED)

        assert [r.name for r in view.rows] == ["Paul Hudson", "Grace Hopper"]

        view.set_sort(SortType.NAME)
        assert [r.name for r in view.rows] == ["Paul Hudson", "Grace Hopper"]

        everyone = make_view(FilterType.NONE, sort_type=SortType.NAME)
        assert [r.name for r in everyone.rows] == [
            "Paul Hudson", "Grace Hopper", "Alan Turing", "Ada Lovelace"
        ]

    def test_rows_refresh_on_store_change(self, store, make_view, paul):
        on_change = Mock()
        contacted = make_view(FilterType.CONTACTED, on_change=on_change)
        store.add(paul)
        assert contacted.rows == ()

        contacted.toggle(paul.id)

        assert [r.prospect_id for r in contacted.rows] == [paul.id]
        assert contacted.revision == 2
        assert on_change.call_count == 2

    def test_perform_actions(self, store, make_view, center, paul):
        store.add(paul)
        view = make_view()

        request = view.perform(paul.id, RowActionKind.REMIND)
        assert request is not None
        assert center.pending_requests() == [request]

        view.perform(paul.id, RowActionKind.MARK_CONTACTED)
        assert store.get(paul.id).is_contacted is True

        view.perform(paul.id, RowActionKind.MARK_UNCONTACTED)
        assert store.get(paul.id).is_contacted is False

    def test_mark_action_matching_current_state_is_noop(self, store, make_view, paul):
        store.add(paul)
        view = make_view()
        saves = store.save_count

        assert view.perform(paul.id, RowActionKind.MARK_UNCONTACTED) is None
        assert store.get(paul.id).is_contacted is False
        assert store.save_count == saves

        view.perform(paul.id, RowActionKind.MARK_CONTACTED)
        assert view.perform(paul.id, RowActionKind.MARK_CONTACTED) is None
        assert store.get(paul.id).is_contacted is True
        assert store.save_count == saves + 1

    def test_mark_unknown_prospect(self, make_view):
        with pytest.raises(ProspectNotFoundError):
            make_view().perform("missing", RowActionKind.MARK_CONTACTED)

    def test_remind_unknown_prospect(self, make_view):
        with pytest.raises(ProspectNotFoundError):
            make_view().remind("missing")

    def test_remind_without_scheduler(self, store, paul):
        store.add(paul)
        view = ProspectListViewModel(store)

        assert view.remind(paul.id) is None

    def test_scanner_sheet(self, store, make_view):
        view = make_view()
        view.present_scanner()
        assert view.is_showing_scanner is True

        added = view.handle_scan(ScanResult.success("Paul Hudson\npaul@hackingwithswift.com"))

        assert view.is_showing_scanner is False
        assert added is not None
        assert [r.name for r in view.rows] == ["Paul Hudson"]

    def test_scan_without_ingestor(self, store):
        view = ProspectListViewModel(store)
        view.present_scanner()

        assert view.handle_scan(ScanResult.success("Paul Hudson\npaul@hackingwithswift.com")) is None
        assert view.is_showing_scanner is False
        assert len(store) == 0

    def test_close_stops_updates(self, store, make_view, paul):
        view = make_view()
        view.close()

        store.add(paul)

        assert view.revision == 0
