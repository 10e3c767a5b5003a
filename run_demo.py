"""
End-to-end walkthrough of the caregiving log core.

This script exercises:
1. Configuration loading and validation
2. Sleep/wake recording and history bounding
3. The feeding timer and session save
4. Notes, including the blank-input guard
5. Today's dashboard summary

Run with: uv run python run_demo.py
"""

import asyncio

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from carelog.config import AppConfig, TrackingConfig, get_config, print_config_summary
from carelog.domain.models import SleepEventKind
from carelog.observability import configure_logging
from carelog.services.time_format import format_date, format_duration, format_time_of_day
from carelog.services.tracker import CareTracker

console = Console()


def demo_configuration() -> bool:
    console.print(Panel("Configuration", style="blue"))

    try:
        config = get_config()
        configure_logging(config.logging)
        console.print("Configuration loaded successfully", style="green")
        print_config_summary()
        return True

    except Exception as e:
        console.print(f"Configuration failed: {e}", style="red")
        return False


def demo_sleep_log(tracker: CareTracker) -> bool:
    console.print(Panel("Sleep Log", style="blue"))

    kinds = [SleepEventKind.SLEEP_START, SleepEventKind.WAKE] * 7
    for kind in kinds:
        tracker.record_sleep_event(kind)

    events = tracker.recent_sleep_events()
    console.print(
        f"Recorded {len(kinds)} events, {len(events)} kept in history", style="green"
    )

    table = Table(title="Recent Sleep History")
    table.add_column("Event", style="cyan")
    table.add_column("Date", style="magenta")
    table.add_column("Time", style="yellow")

    display = tracker.config.display
    for event in events:
        label = "Fell asleep" if event.kind is SleepEventKind.SLEEP_START else "Woke up"
        table.add_row(
            label,
            format_date(event.timestamp, display),
            format_time_of_day(event.timestamp, display),
        )

    console.print(table)
    return len(events) == tracker.config.tracking.history_limit


async def demo_feeding_timer(tracker: CareTracker) -> bool:
    console.print(Panel("Feeding Timer", style="blue"))

    tracker.timer.add_listener(lambda snap: console.print(f"  {snap.display}", style="dim"))

    if tracker.save_feeding_session() is not None:
        console.print("Saving an empty timer should do nothing", style="red")
        return False

    tracker.toggle_timer()
    await asyncio.sleep(tracker.config.tracking.timer_tick_seconds * 3.5)
    tracker.toggle_timer()

    snapshot = tracker.timer_snapshot()
    console.print(f"Paused at {snapshot.display} ({snapshot.phase.value})", style="yellow")

    session = tracker.save_feeding_session()
    if session is None:
        console.print("Timer did not advance", style="red")
        return False

    console.print(
        f"Saved session of {format_duration(session.duration_seconds)}; "
        f"timer now {tracker.timer_snapshot().display}",
        style="green",
    )
    return tracker.timer_snapshot().elapsed_seconds == 0


def demo_notes(tracker: CareTracker) -> bool:
    console.print(Panel("Notes", style="blue"))

    skipped = tracker.add_note("   ")
    tracker.add_note("Took the whole bottle, burped twice")
    tracker.add_note("  Slight rash on the left cheek  ")

    for note in tracker.notes():
        stamp = format_time_of_day(note.timestamp, tracker.config.display)
        console.print(f"  ({stamp}) {note.content.strip()}")

    return skipped is None and len(tracker.notes()) == 2


def demo_dashboard(tracker: CareTracker) -> bool:
    console.print(Panel("Today", style="blue"))

    stats = tracker.daily_stats()

    summary_table = Table(title=f"Summary for {stats.day:%d/%m/%Y}")
    summary_table.add_column("Metric", style="cyan")
    summary_table.add_column("Value", style="white")
    summary_table.add_row("Sleep records", str(stats.today_sleep_count))
    summary_table.add_row("Feedings", str(stats.today_feeding_count))
    summary_table.add_row("Total feeding time", stats.today_total_feeding_display)

    console.print(summary_table)
    return stats.today_feeding_count == 1


async def run_demo() -> None:
    console.print(Panel("Caregiving Log - Walkthrough", style="bold blue"))

    results = [("Configuration", demo_configuration())]

    config = AppConfig(
        environment=get_config().environment,
        tracking=TrackingConfig(timer_tick_seconds=0.25),
        display=get_config().display,
        logging=get_config().logging,
    )

    async with CareTracker(config).session() as tracker:
        results.append(("Sleep Log", demo_sleep_log(tracker)))
        results.append(("Feeding Timer", await demo_feeding_timer(tracker)))
        results.append(("Notes", demo_notes(tracker)))
        results.append(("Dashboard", demo_dashboard(tracker)))

    console.print(f"\n{'=' * 60}")
    summary_table = Table()
    summary_table.add_column("Step", style="cyan")
    summary_table.add_column("Result", style="white")

    passed = 0
    for name, ok in results:
        summary_table.add_row(name, "OK" if ok else "FAILED")
        passed += ok

    console.print(summary_table)
    console.print(f"\n{passed}/{len(results)} steps behaved as expected")


if __name__ == "__main__":
    try:
        asyncio.run(run_demo())
    except KeyboardInterrupt:
        console.print("\nStopped by user", style="yellow")
