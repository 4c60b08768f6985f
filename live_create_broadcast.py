# live_create_broadcast.py
"""
Create a private broadcast, create an RTMP stream, and bind the two.

The broadcast is scheduled for one day from now and lasts one day.
"""

import sys
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from auth_helper import authorize
from sample_runner import print_banner, print_fields, prompt, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube"]


def _rfc3339(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.000Z")


def insert_broadcast(youtube: Any, title: str, now: Optional[datetime] = None) -> dict:
    start = (now or datetime.now(timezone.utc)) + timedelta(days=1)
    body = {
        "kind": "youtube#liveBroadcast",
        "snippet": {
            "title": title,
            "scheduledStartTime": _rfc3339(start),
            "scheduledEndTime": _rfc3339(start + timedelta(days=1)),
        },
        "status": {"privacyStatus": "private"},
    }
    return youtube.liveBroadcasts().insert(part="snippet,status", body=body).execute()


def insert_stream(youtube: Any, title: str) -> dict:
    body = {
        "kind": "youtube#liveStream",
        "snippet": {"title": title},
        "cdn": {"format": "1080p", "ingestionType": "rtmp"},
    }
    return youtube.liveStreams().insert(part="snippet,cdn", body=body).execute()


def bind_broadcast(youtube: Any, broadcast_id: str, stream_id: str) -> dict:
    return youtube.liveBroadcasts().bind(id=broadcast_id, part="id,contentDetails", streamId=stream_id).execute()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "createbroadcast"))

        title = prompt("Please enter a broadcast title: ", default="New Broadcast")
        safe_print(f"You chose {title} for broadcast title.")
        broadcast = insert_broadcast(youtube, title)
        snippet = broadcast.get("snippet", {}) or {}
        print_banner("Returned Broadcast")
        print_fields(
            ("Id", broadcast.get("id")),
            ("Title", snippet.get("title")),
            ("Description", snippet.get("description")),
            ("Published At", snippet.get("publishedAt")),
            ("Scheduled Start Time", snippet.get("scheduledStartTime")),
            ("Scheduled End Time", snippet.get("scheduledEndTime")),
        )

        title = prompt("Please enter a stream title: ", default="New Stream")
        safe_print(f"You chose {title} for stream title.")
        stream = insert_stream(youtube, title)
        snippet = stream.get("snippet", {}) or {}
        print_banner("Returned Stream")
        print_fields(
            ("Id", stream.get("id")),
            ("Title", snippet.get("title")),
            ("Description", snippet.get("description")),
            ("Published At", snippet.get("publishedAt")),
        )

        bound = bind_broadcast(youtube, broadcast["id"], stream["id"])
        print_banner("Returned Bound Broadcast")
        print_fields(
            ("Broadcast Id", bound.get("id")),
            ("Bound Stream Id", (bound.get("contentDetails", {}) or {}).get("boundStreamId")),
        )

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
