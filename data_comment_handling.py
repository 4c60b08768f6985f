# data_comment_handling.py
import sys
from typing import Any, List, Optional

from auth_helper import authorize
from data_comment_threads import DEFAULT_TEXT, list_threads, print_comment, top_level_snippet
from sample_runner import print_banner, prompt, run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]


def reply(youtube: Any, parent_id: str, text: str) -> dict:
    body = {"snippet": {"parentId": parent_id, "textOriginal": text}}
    return youtube.comments().insert(part="snippet", body=body).execute()


def list_replies(youtube: Any, parent_id: str) -> List[dict]:
    resp = youtube.comments().list(part="snippet", parentId=parent_id, textFormat="plainText").execute()
    return resp.get("items", [])


def update_reply(youtube: Any, comment: dict, text: str = "updated") -> dict:
    comment.setdefault("snippet", {})["textOriginal"] = text
    return youtube.comments().update(part="snippet", body=comment).execute()


def moderate(youtube: Any, comment_id: str):
    """Publish a comment, flag it as spam, then delete it."""
    youtube.comments().setModerationStatus(id=comment_id, moderationStatus="published").execute()
    safe_print("  -  Changed comment status to published:", comment_id)
    youtube.comments().markAsSpam(id=comment_id).execute()
    safe_print("  -  Marked comment as spam:", comment_id)
    youtube.comments().delete(id=comment_id).execute()
    safe_print("  -  Deleted comment as spam:", comment_id)


def handle(youtube: Any, video_id: str, text: str) -> Optional[str]:
    """Reply to the first comment on a video and walk the reply through moderation. Returns the reply id."""
    threads = list_threads(youtube, videoId=video_id)
    if not threads:
        safe_print("Can't get video comments.")
        return None
    print_banner("Returned Video Comments")
    for thread in threads:
        print_comment(top_level_snippet(thread))

    parent_id = threads[0]["id"]
    created = reply(youtube, parent_id, text)
    print_banner("Created Comment Reply")
    print_comment(created.get("snippet", {}) or {})

    replies = list_replies(youtube, parent_id)
    if not replies:
        safe_print("Can't get comment replies.")
        return None
    print_banner("Returned Comment Replies")
    for comment in replies:
        print_comment(comment.get("snippet", {}) or {})

    first = replies[0]
    updated = update_reply(youtube, first)
    print_banner("Updated Video Comment")
    print_comment(updated.get("snippet", {}) or {})
    moderate(youtube, first["id"])
    return first["id"]


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "commenthandling"))
        video_id = prompt("Please enter a video id: ", required_message="Video id can't be empty!")
        safe_print(f"You chose {video_id} to comment on.")
        text = prompt("Please enter a comment text: ", default=DEFAULT_TEXT)
        safe_print(f"You chose {text} as the reply text.")
        handle(youtube, video_id, text)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
