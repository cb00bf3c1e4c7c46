"""Itinerary renderers."""

from __future__ import annotations

from tripgen.domain.models import GeneratedItinerary, ItineraryDay


def _format_hours(hours: float) -> str:
    return f"{hours:g}h"


def _format_day(day: ItineraryDay) -> list[str]:
    title = f"## Day {day.day}"
    if day.date:
        title = f"{title} ({day.date})"

    lines: list[str] = [title]
    if not day.activities:
        lines.append("- No activities scheduled")
        lines.append("")
        return lines

    for activity in day.activities:
        tags = ", ".join(activity.category)
        line = f"- {activity.time_slot} {activity.name} ({_format_hours(activity.duration)}, rating {activity.rating:.1f})"
        if tags:
            line = f"{line} [{tags}]"
        lines.append(line)
    lines.append(f"- Total: {_format_hours(day.total_duration)}")
    lines.append("")
    return lines


def render_itinerary_markdown(itinerary: GeneratedItinerary) -> str:
    destination = itinerary.destination
    place = f"{destination.name}, {destination.country}" if destination.country else destination.name
    lines: list[str] = [
        f"# {destination.name} Trip",
        "",
        "## Summary",
        f"- Destination: {place}",
        f"- Days: {itinerary.total_days}",
        f"- Interests: {itinerary.preferences.interests or 'any'}",
        "",
        "## Itinerary",
        "",
    ]
    for day in itinerary.days:
        lines.extend(_format_day(day))
    return "\n".join(lines).rstrip() + "\n"


__all__ = ["render_itinerary_markdown"]
