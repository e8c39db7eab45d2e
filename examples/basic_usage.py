#!/usr/bin/env python3
"""
Basic Usage Example - Hot Prospects

This script walks through the prospect tracker headlessly. It shows how to:
- Build the application against a throwaway data directory
- Ingest scanned QR payloads (valid and malformed)
- Mark prospects contacted and view the filtered lists
- Schedule a reminder
- Restart and reload the persisted list

Run: python examples/basic_usage.py
"""

import tempfile
from pathlib import Path

from hot_prospects.app import ProspectsApplication
from hot_prospects.notifications import InMemoryNotificationCenter
from hot_prospects.presentation import FilterType, ProspectListViewModel, RowActionKind, SortType


def print_list(view: ProspectListViewModel) -> None:
    """Print one list the way the screen would show it."""
    print(f"📋 {view.title} ({view.sort_type.label})")
    if not view.rows:
        print("   (empty)")
    for row in view.rows:
        marker = "✅" if row.is_contacted else "❌"
        actions = ", ".join(action.label for action in row.actions)
        print(f"   {marker} {row.name} <{row.email_address}>  [{actions}]")
    print()


def main():
    """Main demonstration function."""
    print("🚀 Hot Prospects - Basic Usage Demo")
    print("=" * 60)

    data_dir = Path(tempfile.mkdtemp(prefix="hot_prospects_demo_"))
    overrides = {"storage": {"directory": str(data_dir)}}

    print("1. Initializing the application...")
    app = ProspectsApplication.from_config_dir(
        overrides=overrides,
        notification_center=InMemoryNotificationCenter(grant_authorization=True),
    )
    print(f"   Data file: {app.storage.path}")
    print()

    print("2. Scanning QR codes...")
    payloads = [
        "Paul Hudson\npaul@hackingwithswift.com",
        "Ada Lovelace\nada@example.com",
        "onlyonefield",
        "Grace Hopper\ngrace@example.com",
    ]
    for payload in payloads:
        prospect = app.simulate_scan(payload)
        shown = payload.replace("\n", " / ")
        print(f"   {shown!r:50} -> {'added ' + prospect.name if prospect else 'discarded'}")
    print()

    everyone = app.view(FilterType.NONE)
    print_list(everyone)

    print("3. Marking Ada Lovelace contacted...")
    ada = next(row for row in everyone.rows if row.name == "Ada Lovelace")
    result = everyone.perform(ada.prospect_id, RowActionKind.MARK_CONTACTED)
    print(f"   Saved: {result.success} ({result.bytes_written} bytes)")
    print()
    print_list(app.view(FilterType.CONTACTED))
    print_list(app.view(FilterType.UNCONTACTED))

    print("4. Sorting everyone by name...")
    everyone.set_sort(SortType.NAME)
    print_list(everyone)

    print("5. Scheduling a reminder for Paul Hudson...")
    paul = next(row for row in everyone.rows if row.name == "Paul Hudson")
    request = everyone.perform(paul.prospect_id, RowActionKind.REMIND)
    print(f"   {request.title} / {request.subtitle} at {request.trigger.next_fire_time():%Y-%m-%d %H:%M}")
    print()

    print("6. Restarting and reloading...")
    app.close()
    restarted = ProspectsApplication.from_config_dir(overrides=overrides, setup_logging=False)
    print(f"   Reloaded {len(restarted.store)} prospects, identical: "
          f"{restarted.store.snapshot() == app.store.snapshot()}")
    restarted.close()

    print("\n🎉 Demo complete!")


if __name__ == "__main__":
    main()
