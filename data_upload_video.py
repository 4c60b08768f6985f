# data_upload_video.py
import sys
from datetime import datetime
from typing import Any

from googleapiclient.http import MediaFileUpload

from auth_helper import authorize
from sample_runner import print_banner, print_fields, run_sample, safe_print
from youtube_client import build_youtube, upload_with_progress

SCOPES = ["https://www.googleapis.com/auth/youtube.upload"]
VIDEO_FILE_FORMAT = "video/*"
SAMPLE_VIDEO_FILENAME = "sample-video.mp4"
CHUNK_SIZE = 8 * 1024 * 1024


def video_metadata(now: datetime) -> dict:
    stamp = now.strftime("%a %b %d %H:%M:%S %Y")
    return {
        "snippet": {
            "title": f"Test Upload via Python on {stamp}",
            "description": f"Video uploaded via YouTube Data API V3 using the Python client library on {stamp}",
            "tags": ["test", "example", "python", "YouTube Data API V3", "erase me"],
        },
        "status": {"privacyStatus": "public"},
    }


def upload_video(youtube: Any, path: str, body: dict) -> dict:
    media = MediaFileUpload(path, mimetype=VIDEO_FILE_FORMAT, chunksize=CHUNK_SIZE, resumable=True)
    request = youtube.videos().insert(part="snippet,statistics,status", body=body, media_body=media)
    return upload_with_progress(request, emit=safe_print)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    path = args[0] if args else SAMPLE_VIDEO_FILENAME

    def body():
        youtube = build_youtube(authorize(SCOPES, "uploadvideo"))
        safe_print("Uploading:", path)
        video = upload_video(youtube, path, video_metadata(datetime.now()))

        snippet = video.get("snippet", {}) or {}
        print_banner("Returned Video")
        print_fields(
            ("Id", video.get("id")),
            ("Title", snippet.get("title")),
            ("Tags", snippet.get("tags")),
            ("Privacy Status", (video.get("status", {}) or {}).get("privacyStatus")),
            ("Video Count", (video.get("statistics", {}) or {}).get("viewCount")),
        )

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
