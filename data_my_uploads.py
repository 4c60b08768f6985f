# data_my_uploads.py
import sys
from typing import Any, List, Optional

from auth_helper import authorize
from sample_runner import print_separator, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def get_uploads_playlist_id(youtube: Any) -> Optional[str]:
    resp = youtube.channels().list(
        part="contentDetails", mine=True, fields="items/contentDetails,nextPageToken,pageInfo"
    ).execute()
    items = resp.get("items", [])
    if not items:
        return None
    return items[0]["contentDetails"]["relatedPlaylists"]["uploads"]


def list_playlist_items(youtube: Any, playlist_id: str) -> List[dict]:
    """Collect every item of a playlist, following nextPageToken."""
    collected: List[dict] = []
    page_token = None
    while True:
        kwargs = {
            "part": "id,contentDetails,snippet",
            "playlistId": playlist_id,
            "fields": "items(contentDetails/videoId,snippet/title,snippet/publishedAt),nextPageToken,pageInfo",
        }
        if page_token:
            kwargs["pageToken"] = page_token
        resp = youtube.playlistItems().list(**kwargs).execute()
        collected.extend(resp.get("items", []))
        page_token = resp.get("nextPageToken")
        if not page_token:
            return collected


def pretty_print(items: List[dict]):
    safe_print("=============================================================")
    safe_print(f"\t\tTotal Videos Uploaded: {len(items)}")
    safe_print("=============================================================\n")
    for item in items:
        snippet = item.get("snippet", {}) or {}
        safe_print(" video name  =", snippet.get("title"))
        safe_print(" video id    =", (item.get("contentDetails", {}) or {}).get("videoId"))
        safe_print(" upload date =", snippet.get("publishedAt"))
        print_separator()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "myuploads"))
        playlist_id = get_uploads_playlist_id(youtube)
        if playlist_id is None:
            safe_print("No channels are assigned to this user.")
            return
        pretty_print(list_playlist_items(youtube, playlist_id))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
