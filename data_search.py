# data_search.py
import sys
from typing import Any, List

from sample_runner import print_separator, prompt, run_sample, safe_print
from settings import PROPERTIES_PATH, ConfigError, load_api_key
from youtube_client import build_youtube_with_key

NUMBER_OF_VIDEOS_RETURNED = 25
SEARCH_FIELDS = "items(id/kind,id/videoId,snippet/title,snippet/thumbnails/default/url)"


def search_videos(youtube: Any, query: str) -> List[dict]:
    resp = youtube.search().list(
        part="id,snippet",
        q=query,
        type="video",
        fields=SEARCH_FIELDS,
        maxResults=NUMBER_OF_VIDEOS_RETURNED,
    ).execute()
    return resp.get("items", []) or []


def print_results_header(query: str):
    safe_print("\n=============================================================")
    safe_print(f'   First {NUMBER_OF_VIDEOS_RETURNED} videos for search on "{query}".')
    safe_print("=============================================================\n")


def pretty_print(results: List[dict], query: str):
    print_results_header(query)
    if not results:
        safe_print(" There aren't any results for your query.")
    for result in results:
        rid = result.get("id", {}) or {}
        if rid.get("kind") != "youtube#video":
            continue
        snippet = result.get("snippet", {}) or {}
        thumbnail = ((snippet.get("thumbnails", {}) or {}).get("default", {}) or {}).get("url")
        safe_print(" Video Id", rid.get("videoId"))
        safe_print(" Title:", snippet.get("title"))
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
        pretty_print(search_videos(youtube, query), query)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
