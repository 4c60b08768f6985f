# analytics_reports.py
"""
Three YouTube Analytics reports for the signed-in user's default channel:
views over time, top videos, and viewer demographics.
"""

import sys
from typing import Any, Callable, Dict

from auth_helper import authorize
from sample_runner import run_sample, safe_print
from youtube_client import build_analytics, build_youtube

SCOPES = [
    "https://www.googleapis.com/auth/yt-analytics.readonly",
    "https://www.googleapis.com/auth/youtube.readonly",
]
COLUMN_WIDTH = 30


def views_over_time_query(analytics: Any, channel_id: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate="2012-01-01",
        endDate="2012-01-14",
        metrics="views,estimatedMinutesWatched",
        dimensions="day",
        sort="day",
    ).execute()


def top_videos_query(analytics: Any, channel_id: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate="2012-01-01",
        endDate="2012-08-14",
        metrics="views,subscribersGained,subscribersLost",
        dimensions="video",
        sort="-views",
        maxResults=10,
    ).execute()


def demographics_query(analytics: Any, channel_id: str) -> dict:
    return analytics.reports().query(
        ids=f"channel=={channel_id}",
        startDate="2007-01-01",
        endDate="2012-08-14",
        metrics="viewerPercentage",
        dimensions="ageGroup,gender",
        sort="-viewerPercentage",
    ).execute()


def _format_cell(value: Any, data_type: str) -> str:
    if data_type == "INTEGER":
        return "%*d" % (COLUMN_WIDTH, int(value))
    if data_type == "FLOAT":
        return "%*f" % (COLUMN_WIDTH, float(value))
    return "%*s" % (COLUMN_WIDTH, value)


def format_report(title: str, results: dict) -> str:
    lines = [f"Report: {title}"]
    rows = results.get("rows") or []
    headers = results.get("columnHeaders") or []
    if not rows:
        lines.append("No results found.")
        return "\n".join(lines)
    lines.append("".join("%*s" % (COLUMN_WIDTH, h.get("name", "")) for h in headers))
    for row in rows:
        lines.append("".join(_format_cell(row[i], h.get("dataType", "")) for i, h in enumerate(headers)))
    lines.append("")
    return "\n".join(lines)


REPORTS: Dict[str, Callable[[Any, str], dict]] = {
    "Views Over Time.": views_over_time_query,
    "Top Videos": top_videos_query,
    "Demographics": demographics_query,
}


def main(argv=None) -> int:
    def body():
        creds = authorize(SCOPES, "analyticsreports")
        youtube = build_youtube(creds)
        analytics = build_analytics(creds)

        resp = youtube.channels().list(part="id,snippet", mine=True, fields="items(id,snippet/title)").execute()
        items = resp.get("items", [])
        channel_id = items[0].get("id") if items else None
        if not channel_id:
            safe_print("No channel found.")
            return
        safe_print(f"Default Channel: {items[0]['snippet']['title']} ( {channel_id} )\n")
        for title, query in REPORTS.items():
            safe_print(format_report(title, query(analytics, channel_id)))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
