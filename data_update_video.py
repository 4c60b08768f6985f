# data_update_video.py
import sys
from typing import Any, Optional

from auth_helper import authorize
from sample_runner import print_banner, print_fields, prompt, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube"]


def add_tag(youtube: Any, video_id: str, tag: str) -> Optional[dict]:
    """Append `tag` to the video's tags. Returns None when the video does not exist."""
    resp = youtube.videos().list(part="snippet", id=video_id).execute()
    items = resp.get("items", [])
    if not items:
        return None
    video = items[0]
    snippet = video.setdefault("snippet", {})
    tags = snippet.get("tags")
    if tags is None:
        tags = []
        snippet["tags"] = tags
    tags.append(tag)
    return youtube.videos().update(part="snippet", body={"id": video["id"], "snippet": snippet}).execute()


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "updatevideo"))
        video_id = prompt("Please enter a video Id to update: ", required_message="Video Id can't be empty!")
        safe_print(f"You chose {video_id} to update.")
        tag = prompt("Please enter a tag for your video: ", default="New Tag")
        safe_print(f"You chose {tag} as a tag.")

        updated = add_tag(youtube, video_id, tag)
        if updated is None:
            safe_print("Can't find a video with ID:", video_id)
            return
        snippet = updated.get("snippet", {}) or {}
        print_banner("Returned Video")
        print_fields(("Title", snippet.get("title")), ("Tags", snippet.get("tags")))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
