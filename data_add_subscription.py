# data_add_subscription.py
import sys
from typing import Any

from auth_helper import authorize
from sample_runner import print_banner, print_fields, prompt, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube"]
DEFAULT_CHANNEL_ID = "UCtVd0c0tGXuTSbU5d8cSBUg"


def subscribe(youtube: Any, channel_id: str) -> dict:
    body = {"snippet": {"resourceId": {"kind": "youtube#channel", "channelId": channel_id}}}
    return youtube.subscriptions().insert(part="snippet,contentDetails", body=body).execute()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "addsubscription"))
        channel_id = prompt("Please enter a channel id: ", default=DEFAULT_CHANNEL_ID)
        safe_print(f"You chose {channel_id} to subscribe.")

        subscription = subscribe(youtube, channel_id)
        print_banner("Returned Subscription")
        print_fields(
            ("Id", subscription.get("id")),
            ("Title", (subscription.get("snippet", {}) or {}).get("title")),
        )

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
