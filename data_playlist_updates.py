# data_playlist_updates.py
import sys
from datetime import datetime
from typing import Any

from auth_helper import authorize
from sample_runner import run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube"]
VIDEO_ID = "SZj6rAYkYOg"


def insert_playlist(youtube: Any) -> str:
    body = {
        "snippet": {
            "title": f"Test Playlist {datetime.now():%a %b %d %H:%M:%S %Y}",
            "description": "A private playlist created with the YouTube API v3",
        },
        "status": {"privacyStatus": "private"},
    }
    playlist = youtube.playlists().insert(part="snippet,status", body=body).execute()
    snippet = playlist.get("snippet", {}) or {}
    safe_print("New Playlist name:", snippet.get("title"))
    safe_print(" - Privacy:", (playlist.get("status", {}) or {}).get("privacyStatus"))
    safe_print(" - Description:", snippet.get("description"))
    safe_print(" - Posted:", snippet.get("publishedAt"))
    safe_print(" - Channel:", snippet.get("channelId"), "\n")
    return playlist["id"]


def insert_playlist_item(youtube: Any, playlist_id: str, video_id: str) -> str:
    body = {
        "snippet": {
            "title": "First video in the test playlist",
            "playlistId": playlist_id,
            "resourceId": {"kind": "youtube#video", "videoId": video_id},
        }
    }
    item = youtube.playlistItems().insert(part="snippet,contentDetails", body=body).execute()
    snippet = item.get("snippet", {}) or {}
    safe_print("New PlaylistItem name:", snippet.get("title"))
    safe_print(" - Video id:", (snippet.get("resourceId", {}) or {}).get("videoId"))
    safe_print(" - Posted:", snippet.get("publishedAt"))
    safe_print(" - Channel:", snippet.get("channelId"))
    return item["id"]


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "playlistupdates"))
        playlist_id = insert_playlist(youtube)
        insert_playlist_item(youtube, playlist_id, VIDEO_ID)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
