# data_comment_threads.py
import sys
from typing import Any, List, Optional

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, prompt, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]
DEFAULT_TEXT = "YouTube For Developers."


def top_level_snippet(thread: dict) -> dict:
    return ((thread.get("snippet", {}) or {}).get("topLevelComment", {}) or {}).get("snippet", {}) or {}


def print_comment(snippet: dict):
    print_fields(("Author", snippet.get("authorDisplayName")), ("Comment", snippet.get("textDisplay")))
    print_separator()


def insert_thread(youtube: Any, channel_id: str, text: str, video_id: Optional[str] = None) -> dict:
    """Start a new comment thread on a channel, or on one of its videos when `video_id` is given."""
    snippet = {"channelId": channel_id, "topLevelComment": {"snippet": {"textOriginal": text}}}
    if video_id:
        snippet["videoId"] = video_id
    return youtube.commentThreads().insert(part="snippet", body={"snippet": snippet}).execute()


def list_threads(youtube: Any, **filters) -> List[dict]:
    """List comment threads for a videoId= or channelId= filter."""
    resp = youtube.commentThreads().list(part="snippet", textFormat="plainText", **filters).execute()
    return resp.get("items", [])


def update_thread(youtube: Any, thread: dict, text: str = "updated") -> dict:
    top_level_snippet(thread)["textOriginal"] = text
    return youtube.commentThreads().update(part="snippet", body=thread).execute()


def _show_and_update(youtube: Any, threads: List[dict], kind: str):
    if not threads:
        safe_print(f"Can't get {kind.lower()} comments.")
        return
    print_banner(f"Returned {kind} Comments")
    for thread in threads:
        print_comment(top_level_snippet(thread))

    updated = update_thread(youtube, threads[0])
    print_banner(f"Updated {kind} Comment")
    print_comment(top_level_snippet(updated))


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "commentthreads"))
        channel_id = prompt("Please enter a channel id: ", required_message="Channel id can't be empty!")
        safe_print(f"You chose {channel_id} to comment on.")
        video_id = prompt("Please enter a video id: ", required_message="Video id can't be empty!")
        safe_print(f"You chose {video_id} to comment on.")
        text = prompt("Please enter a comment text: ", default=DEFAULT_TEXT)
        safe_print(f"You chose {text} as the comment text.")

        created = insert_thread(youtube, channel_id, text)
        print_banner("Created Channel Comment")
        print_comment(top_level_snippet(created))

        created = insert_thread(youtube, channel_id, text, video_id=video_id)
        print_banner("Created Video Comment")
        print_comment(top_level_snippet(created))

        _show_and_update(youtube, list_threads(youtube, videoId=video_id), "Video")
        _show_and_update(youtube, list_threads(youtube, channelId=channel_id), "Channel")

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
