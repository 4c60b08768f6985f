# data_geolocation_search.py
import sys
from typing import Any, List

from data_search import NUMBER_OF_VIDEOS_RETURNED, print_results_header
from sample_runner import print_separator, prompt, run_sample, safe_print
from settings import PROPERTIES_PATH, ConfigError, load_api_key
from youtube_client import build_youtube_with_key


def search_video_ids(youtube: Any, query: str, location: str, location_radius: str) -> List[str]:
    resp = youtube.search().list(
        part="id,snippet",
        q=query,
        location=location,
        locationRadius=location_radius,
        type="video",
        fields="items(id/videoId)",
        maxResults=NUMBER_OF_VIDEOS_RETURNED,
    ).execute()
    return [it["id"]["videoId"] for it in resp.get("items", []) if (it.get("id") or {}).get("videoId")]


def list_videos(youtube: Any, video_ids: List[str]) -> List[dict]:
    if not video_ids:
        return []
    resp = youtube.videos().list(part="snippet,recordingDetails", id=",".join(video_ids)).execute()
    return resp.get("items", []) or []


def pretty_print(videos: List[dict], query: str):
    print_results_header(query)
    if not videos:
        safe_print(" There aren't any results for your query.")
    for video in videos:
        snippet = video.get("snippet", {}) or {}
        location = (video.get("recordingDetails", {}) or {}).get("location", {}) or {}
        thumbnail = ((snippet.get("thumbnails", {}) or {}).get("default", {}) or {}).get("url")
        safe_print(" Video Id", video.get("id"))
        safe_print(" Title:", snippet.get("title"))
        safe_print(f" Location: {location.get('latitude')}, {location.get('longitude')}")
        safe_print(" Thumbnail:", thumbnail)
        print_separator()


def main(argv=None) -> int:
    try:
        api_key = load_api_key()
    except ConfigError as e:
        safe_print(f"There was an error reading {PROPERTIES_PATH}: {e}", file=sys.stderr)
        return 1

    def body():
        youtube = build_youtube_with_key(api_key)
        query = prompt("Please enter a search term: ", default="YouTube Developers Live")
        location = prompt("Please enter location coordinates (example: 37.42307,-122.08427): ",
                          default="37.42307,-122.08427")
        radius = prompt("Please enter a location radius (examples: 5km, 8mi):", default="5km")
        ids = search_video_ids(youtube, query, location, radius)
        pretty_print(list_videos(youtube, ids), query)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
