# settings.py
import os

from dotenv import load_dotenv, dotenv_values

load_dotenv()

CLIENT_SECRETS_PATH = os.getenv("CLIENT_SECRETS_PATH", "client_secrets.json")
CREDENTIALS_DIR = os.path.expanduser(os.getenv("CREDENTIALS_DIR", "~/.oauth-credentials"))
OAUTH_PORT = int(os.getenv("OAUTH_PORT", "8080"))
PROPERTIES_PATH = os.getenv("PROPERTIES_PATH", "youtube.properties")
YOUTUBE_API_BASE_URL = os.getenv("YOUTUBE_API_BASE_URL", "https://www.googleapis.com/youtube/v3")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15"))

API_KEY_PROPERTY = "youtube.apikey"


class ConfigError(OSError):
    """Raised when the properties file is missing or incomplete."""


def load_api_key(path: str = PROPERTIES_PATH) -> str:
    """Read the API key from a key=value properties file."""
    if not os.path.exists(path):
        raise ConfigError(f"{path} not found. Create it with a line like: {API_KEY_PROPERTY}=YOUR_API_KEY")
    values = dotenv_values(path)
    api_key = (values.get(API_KEY_PROPERTY) or "").strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_PROPERTY} is not set in {path}")
    return api_key
