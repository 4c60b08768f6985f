# data_channel_bulletin.py
import sys
from datetime import datetime
from typing import Any, Optional

from auth_helper import authorize
from sample_runner import run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube"]
VIDEO_ID = "L-oNKK1CrnU"


def get_my_channel_id(youtube: Any) -> Optional[str]:
    resp = youtube.channels().list(part="contentDetails", mine=True, fields="items(id,contentDetails)").execute()
    items = resp.get("items", [])
    return items[0].get("id") if items else None


def post_bulletin(youtube: Any, channel_id: str, video_id: str) -> dict:
    body = {
        "snippet": {
            "channelId": channel_id,
            "description": f"Bulletin test video via YouTube API on {datetime.now():%a %b %d %H:%M:%S %Y}",
        },
        "contentDetails": {
            "bulletin": {"resourceId": {"kind": "youtube#video", "videoId": video_id}},
        },
    }
    return youtube.activities().insert(part="contentDetails,snippet", body=body).execute()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "channelbulletin"))
        channel_id = get_my_channel_id(youtube)
        if channel_id is None:
            safe_print("No channels are assigned to this user.")
            return

        activity = post_bulletin(youtube, channel_id, VIDEO_ID)
        if not activity:
            safe_print("Activity failed.")
            return 1
        snippet = activity.get("snippet", {}) or {}
        bulletin = (activity.get("contentDetails", {}) or {}).get("bulletin", {}) or {}
        safe_print("New Activity inserted of type", snippet.get("type"))
        safe_print(" - Video id", (bulletin.get("resourceId", {}) or {}).get("videoId"))
        safe_print(" - Description:", snippet.get("description"))
        safe_print(" - Posted on", snippet.get("publishedAt"))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
