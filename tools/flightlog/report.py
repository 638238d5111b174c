"""Human readable summaries of an analyzed log."""

from __future__ import annotations

import pandas as pd

from .session import SessionAggregator


def format_duration(seconds: float) -> str:
    """Render seconds as ``MM:SS``; minutes keep counting past the hour."""
    sign = "-" if seconds < 0 else ""
    minutes, secs = divmod(int(round(abs(seconds))), 60)
    return f"{sign}{minutes:02d}:{secs:02d}"


def render_summary(name: str, aggregator: SessionAggregator) -> str:
    batteries = aggregator.batteries
    lines = [f"{name} contains data for {len(batteries)} LiPos worth of flights:"]
    for battery in batteries:
        lines.append(f"LiPo {battery.index}: {format_duration(battery.total_duration_seconds)}")
    for flight in aggregator.flights:
        suffix = "" if flight.closed else " (in progress)"
        lines.append(f"Flight {flight.index}: peak {flight.peak_altitude:.2f} m{suffix}")
    return "\n".join(lines)


def battery_frame(aggregator: SessionAggregator) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "battery": battery.index,
                "takeoff_voltage_v": round(battery.takeoff_voltage, 2),
                "flights": len(battery.flights),
                "flight_time": format_duration(battery.total_duration_seconds),
            }
            for battery in aggregator.batteries
        ],
        columns=["battery", "takeoff_voltage_v", "flights", "flight_time"],
    )


def flight_frame(aggregator: SessionAggregator) -> pd.DataFrame:
    rows = []
    for flight in aggregator.flights:
        duration = (flight.end - flight.start).total_seconds() if flight.closed else None
        rows.append(
            {
                "flight": flight.index,
                "battery": flight.battery,
                "takeoff": str(flight.start),
                "duration": format_duration(duration) if duration is not None else "in progress",
                "peak_alt_m": f"{flight.peak_altitude:.2f}",
            }
        )
    return pd.DataFrame(rows, columns=["flight", "battery", "takeoff", "duration", "peak_alt_m"])


def render_markdown(name: str, aggregator: SessionAggregator) -> str:
    """Markdown report with one table for batteries and one for flights."""
    lines = [f"# Flight Summary: {name}\n"]
    lines.append(f"- Batteries: **{len(aggregator.batteries)}**")
    lines.append(f"- Flights: **{len(aggregator.flights)}**\n")

    lines.append("## Batteries\n")
    batteries = battery_frame(aggregator)
    lines.append(batteries.to_markdown(index=False) if not batteries.empty else "- No flights detected")

    lines.append("\n## Flights\n")
    flights = flight_frame(aggregator)
    lines.append(flights.to_markdown(index=False) if not flights.empty else "- No flights detected")
    lines.append("")
    return "\n".join(lines)
