"""Tests for the tag page fetcher."""

import pytest
import requests
import responses
from responses import matchers

from hubtags_cli.registry.client import HubClient, RegistryError

from tests.helpers import TAGS_URL


class TestHubClient:
    """Test fetching single pages."""

    def test_tags_url(self, client):
        assert client.tags_url("library", "nginx", 3) == (
            "https://registry.hub.docker.com/v2/repositories/library/nginx/tags?page=3"
        )

    def test_custom_base_url(self):
        client = HubClient("https://hub.example.com/v2/repositories/")
        assert client.tags_url("o", "i", 1) == (
            "https://hub.example.com/v2/repositories/o/i/tags?page=1"
        )

    @responses.activate
    def test_returns_body(self, client):
        responses.add(
            responses.GET,
            TAGS_URL.format(repo="library/nginx"),
            body='{"results": [], "next": null}',
            status=200,
            match=[matchers.query_param_matcher({"page": "2"})],
        )
        body = client.fetch_tag_page("library", "nginx", 2)
        assert body == '{"results": [], "next": null}'

    @responses.activate
    def test_non_success_status(self, client):
        responses.add(
            responses.GET,
            TAGS_URL.format(repo="private/repo"),
            body="boom",
            status=500,
        )
        with pytest.raises(RegistryError, match="500") as excinfo:
            client.fetch_tag_page("private", "repo", 1)
        assert excinfo.value.status == 500
        assert excinfo.value.url.endswith("/private/repo/tags?page=1")

    @responses.activate
    def test_not_found(self, client):
        responses.add(responses.GET, TAGS_URL.format(repo="library/none"), status=404)
        with pytest.raises(RegistryError) as excinfo:
            client.fetch_tag_page("library", "none", 1)
        assert excinfo.value.status == 404

    @responses.activate
    def test_connection_error_is_wrapped(self, client):
        responses.add(
            responses.GET,
            TAGS_URL.format(repo="timeout/repo"),
            body=requests.exceptions.ConnectionError("refused"),
        )
        with pytest.raises(RegistryError) as excinfo:
            client.fetch_tag_page("timeout", "repo", 1)
        assert excinfo.value.status is None
        assert isinstance(excinfo.value.__cause__, requests.RequestException)
