# data_captions.py
"""
Caption track sample: upload, list, update, download and delete caption tracks.

  python data_captions.py [upload|list|update|download|delete|all]

`all` uploads a draft track, publishes the first track of the video, downloads
it as SRT and deletes it.
"""

import io
import sys
from typing import Any, List, Optional

from googleapiclient.http import MediaFileUpload, MediaIoBaseDownload

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, prompt, run_sample, safe_print, usage_error
from youtube_client import build_youtube, upload_with_progress

SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]
ACTIONS = ("upload", "list", "update", "download", "delete", "all")
CAPTION_FILE_FORMAT = "*/*"
SRT = "srt"
DOWNLOAD_PATH = "captionFile.srt"
CHUNK_SIZE = 1024 * 1024


def _media(path: str) -> MediaFileUpload:
    return MediaFileUpload(path, mimetype=CAPTION_FILE_FORMAT, chunksize=CHUNK_SIZE, resumable=True)


def upload_caption(youtube: Any, video_id: str, language: str, name: str, path: str) -> dict:
    """Upload `path` as a new draft caption track of `video_id`."""
    body = {"snippet": {"videoId": video_id, "language": language, "name": name, "isDraft": True}}
    request = youtube.captions().insert(part="snippet", body=body, media_body=_media(path))
    caption = upload_with_progress(request, emit=safe_print)

    snippet = caption.get("snippet", {}) or {}
    print_banner("Uploaded Caption Track")
    print_fields(("ID", caption.get("id")), ("Name", snippet.get("name")),
                 ("Language", snippet.get("language")), ("Status", snippet.get("status")))
    print_separator()
    return caption


def list_captions(youtube: Any, video_id: str) -> List[dict]:
    captions = youtube.captions().list(part="snippet", videoId=video_id).execute().get("items", [])
    print_banner("Returned Caption Tracks")
    for caption in captions:
        snippet = caption.get("snippet", {}) or {}
        print_fields(("ID", caption.get("id")), ("Name", snippet.get("name")), ("Language", snippet.get("language")))
        print_separator()
    return captions


def update_caption(youtube: Any, caption_id: str, path: Optional[str] = None) -> dict:
    """Publish a caption track, replacing its contents when `path` is given."""
    body = {"id": caption_id, "snippet": {"isDraft": False}}
    if path:
        request = youtube.captions().update(part="snippet", body=body, media_body=_media(path))
        caption = upload_with_progress(request, emit=safe_print)
        print_banner("Uploaded New Caption Track")
    else:
        caption = youtube.captions().update(part="snippet", body=body).execute()

    snippet = caption.get("snippet", {}) or {}
    print_banner("Updated Caption Track")
    print_fields(("ID", caption.get("id")), ("Name", snippet.get("name")),
                 ("Language", snippet.get("language")), ("Draft Status", snippet.get("isDraft")))
    print_separator()
    return caption


def download_caption(youtube: Any, caption_id: str, path: str = DOWNLOAD_PATH) -> str:
    request = youtube.captions().download_media(id=caption_id, tfmt=SRT)
    with io.FileIO(path, mode="wb") as fh:
        downloader = MediaIoBaseDownload(fh, request, chunksize=CHUNK_SIZE)
        done = False
        while not done:
            status, done = downloader.next_chunk()
            if status and not done:
                safe_print("Download in progress")
                safe_print(f"Download percentage: {status.progress():.2f}")
    safe_print("Download Completed!")
    return path


def delete_caption(youtube: Any, caption_id: str):
    youtube.captions().delete(id=caption_id).execute()
    safe_print("  -  Deleted caption:", caption_id)


def _video_id() -> str:
    video_id = prompt("Please enter a video id: ", required_message="Video id can't be empty!")
    safe_print(f"You chose {video_id} for captions.")
    return video_id


def _caption_id() -> str:
    caption_id = prompt("Please enter a caption track id: ", required_message="Caption track id can't be empty!")
    safe_print(f"You chose {caption_id}.")
    return caption_id


def _upload_args():
    language = prompt("Please enter the caption language: ", default="en")
    name = prompt("Please enter the caption track name: ", default="YouTube for Developers")
    path = prompt("Please enter the path of the caption track file to upload: ",
                  required_message="Path can not be empty!")
    safe_print(f"You chose {path} to upload.")
    return language, name, path


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        action = args[0].lower()
    else:
        action = prompt(f"Please choose an action ({', '.join(ACTIONS)}): ", default="all").lower()
    if action not in ACTIONS:
        return usage_error(f"Unknown action: {action}. Choose one of: {', '.join(ACTIONS)}")

    def body():
        youtube = build_youtube(authorize(SCOPES, "captions"))
        if action == "upload":
            upload_caption(youtube, _video_id(), *_upload_args())
        elif action == "list":
            list_captions(youtube, _video_id())
        elif action == "update":
            caption_id = _caption_id()
            path = prompt("Please enter the path of a new caption track file (leave empty to keep the current one): ",
                          default="")
            update_caption(youtube, caption_id, path or None)
        elif action == "download":
            download_caption(youtube, _caption_id())
        elif action == "delete":
            delete_caption(youtube, _caption_id())
        else:
            video_id = _video_id()
            upload_caption(youtube, video_id, *_upload_args())
            captions = list_captions(youtube, video_id)
            if not captions:
                safe_print("Can't get video caption tracks.")
                return
            first_id = captions[0]["id"]
            update_caption(youtube, first_id)
            download_caption(youtube, first_id)
            delete_caption(youtube, first_id)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
