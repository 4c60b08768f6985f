# rest_quickstart.py
import sys

from api_key_client import ApiKeySession, format_channels, mask_key, search_channels
from sample_runner import run_sample, safe_print
from settings import load_api_key

SEARCH_QUERY = "GoogleDevelopers"


def main(argv=None) -> int:
    def body():
        api_key = load_api_key()
        safe_print("Loaded API key:", mask_key(api_key))
        with ApiKeySession(api_key) as session:
            safe_print("Searching channels:", SEARCH_QUERY)
            data = search_channels(session, SEARCH_QUERY)

        blocks = format_channels(data)
        if not blocks:
            safe_print("No channels found")
            return
        safe_print("=== YouTube channel search results ===")
        for block in blocks:
            safe_print(block)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
