# data_upload_thumbnail.py
import sys
from typing import Any

from googleapiclient.http import MediaFileUpload

from auth_helper import authorize
from sample_runner import print_banner, print_fields, prompt, run_sample, safe_print
from youtube_client import build_youtube, upload_with_progress

SCOPES = ["https://www.googleapis.com/auth/youtube"]
IMAGE_FILE_FORMAT = "image/png"
CHUNK_SIZE = 1024 * 1024


def upload_thumbnail(youtube: Any, video_id: str, image_path: str) -> dict:
    media = MediaFileUpload(image_path, mimetype=IMAGE_FILE_FORMAT, chunksize=CHUNK_SIZE, resumable=True)
    request = youtube.thumbnails().set(videoId=video_id, media_body=media)
    return upload_with_progress(request, emit=safe_print)


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "uploadthumbnail"))
        video_id = prompt("Please enter a video Id to update: ", required_message="Video Id can't be empty!")
        safe_print(f"You chose {video_id} to upload a thumbnail.")
        image_path = prompt("Please enter the path of the image file to upload: ",
                            required_message="Path can not be empty!")
        safe_print(f"You chose {image_path} to upload.")

        resp = upload_thumbnail(youtube, video_id, image_path)
        default = ((resp.get("items") or [{}])[0].get("default", {}) or {})
        print_banner("Uploaded Thumbnail")
        print_fields(("Url", default.get("url")))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
