# live_list_broadcasts.py
import sys
from typing import Any

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, run_sample
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def list_broadcasts(youtube: Any) -> list:
    resp = youtube.liveBroadcasts().list(part="id,snippet", broadcastType="all", broadcastStatus="all").execute()
    return resp.get("items", [])


def print_broadcasts(broadcasts: list):
    print_banner("Returned Broadcasts")
    for broadcast in broadcasts:
        snippet = broadcast.get("snippet", {}) or {}
        print_fields(
            ("Id", broadcast.get("id")),
            ("Title", snippet.get("title")),
            ("Description", snippet.get("description")),
            ("Published At", snippet.get("publishedAt")),
            ("Scheduled Start Time", snippet.get("scheduledStartTime")),
            ("Scheduled End Time", snippet.get("scheduledEndTime")),
        )
        print_separator()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "listbroadcasts"))
        print_broadcasts(list_broadcasts(youtube))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
