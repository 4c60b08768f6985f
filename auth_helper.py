# auth_helper.py  -- Desktop (Installed) flow with a per-sample token cache

import json
import os
import sys
from pathlib import Path
from typing import List

from google_auth_oauthlib.flow import InstalledAppFlow
from google.oauth2.credentials import Credentials
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request

from settings import CLIENT_SECRETS_PATH, CREDENTIALS_DIR, OAUTH_PORT

DEFAULT_SCOPES = [
    "https://www.googleapis.com/auth/youtube",
    "https://www.googleapis.com/auth/youtube.force-ssl",
]

CONSOLE_HINT = (
    "Enter Client ID and Secret from https://console.developers.google.com/project/_/apiui/credential "
    f"into {CLIENT_SECRETS_PATH}"
)


def token_path(credential_datastore: str) -> Path:
    return Path(CREDENTIALS_DIR) / f"{credential_datastore}.json"


def _check_client_secrets(path: str) -> None:
    """Exit when the client secrets file still holds the placeholder values."""
    if not os.path.exists(path):
        raise FileNotFoundError(
            f"Missing {path}. Download your OAuth client (Desktop) JSON "
            "from Google Cloud Console and save it at that path."
        )
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    details = data.get("installed") or data.get("web") or {}
    client_id = details.get("client_id", "")
    client_secret = details.get("client_secret", "")
    if client_id.startswith("Enter") or client_secret.startswith("Enter "):
        print(CONSOLE_HINT)
        sys.exit(1)


def authorize(scopes: List[str], credential_datastore: str) -> Credentials:
    """Return credentials for `scopes`, cached under CREDENTIALS_DIR/<credential_datastore>.json."""
    path = token_path(credential_datastore)
    path.parent.mkdir(parents=True, exist_ok=True)
    creds = None

    # If token file exists, load it
    if path.exists():
        try:
            creds = Credentials.from_authorized_user_file(str(path), scopes)
        except ValueError as e:
            print("Warning: failed to load existing token file:", e, file=sys.stderr)
            creds = None

    if creds and creds.valid:
        return creds

    # If we have expired credentials with a refresh token, refresh them
    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
        except RefreshError as e:
            print("Refresh failed, will run new authorization flow:", e, file=sys.stderr)
            creds = None
    else:
        creds = None

    # Otherwise run the install flow to get new credentials
    if not creds:
        _check_client_secrets(CLIENT_SECRETS_PATH)
        flow = InstalledAppFlow.from_client_secrets_file(CLIENT_SECRETS_PATH, scopes)
        # run_local_server opens a browser and handles the redirect on localhost
        creds = flow.run_local_server(port=OAUTH_PORT)

    # Save credentials for next run
    with open(path, "w", encoding="utf-8") as token_file:
        token_file.write(creds.to_json())
    return creds


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    datastore = args[0] if args else "default"
    authorize(DEFAULT_SCOPES, datastore)
    print("Saved token to", token_path(datastore))
    return 0


if __name__ == "__main__":
    sys.exit(main())
