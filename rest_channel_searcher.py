# rest_channel_searcher.py
import sys
import traceback

import requests

from api_key_client import ApiKeySession, format_channels, mask_key, search_channels
from sample_runner import safe_print
from settings import load_api_key

APPLICATION_NAME = "YouTube Channel Searcher"
SEARCH_QUERY = "GoogleDevelopers"
HEADERS = {"User-Agent": APPLICATION_NAME, "Accept": "application/json"}


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    query = args[0] if args else SEARCH_QUERY
    try:
        api_key = load_api_key()
        safe_print("Loaded API key:", mask_key(api_key))
        with ApiKeySession(api_key, headers=HEADERS) as session:
            safe_print("Searching channels:", query)
            data = search_channels(session, query, order="relevance")
    except requests.HTTPError as e:
        resp = e.response
        safe_print(f"HTTP error: {resp.status_code} {resp.reason}", file=sys.stderr)
        if resp.text:
            safe_print("Error details:", resp.text, file=sys.stderr)
        return 1
    except (requests.RequestException, OSError) as e:
        safe_print("IOError:", e, file=sys.stderr)
        return 1
    except Exception as e:
        safe_print("Unexpected error:", e, file=sys.stderr)
        traceback.print_exc()
        return 1

    blocks = format_channels(data)
    if not blocks:
        safe_print("No channels found")
        return 0
    safe_print("=== YouTube channel search results ===")
    for block in blocks:
        safe_print(block)
    return 0


if __name__ == "__main__":
    sys.exit(main())
