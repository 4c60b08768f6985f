import httplib2
import pytest
from unittest.mock import MagicMock

from googleapiclient.errors import HttpError


@pytest.fixture
def youtube():
    """A stand-in for the generated youtube resource."""
    return MagicMock(name="youtube")


def make_http_error(status=403, message="The live chat is no longer live."):
    resp = httplib2.Response({"status": str(status), "reason": "Forbidden"})
    content = ('{"error": {"code": %d, "message": "%s"}}' % (status, message)).encode("utf-8")
    return HttpError(resp, content)


@pytest.fixture
def http_error():
    return make_http_error
