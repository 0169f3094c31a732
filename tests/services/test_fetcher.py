import pytest
from unittest.mock import Mock, call

import requests

from linkprobe.domain.http_response import HttpResponse
from linkprobe.domain.link_result import LinkState
from linkprobe.exceptions import HttpFetchError
from linkprobe.services.fetcher import LinkFetcher


@pytest.fixture
def http_service():
    service = Mock()
    service.head.return_value = HttpResponse(200, '', 'text/html')
    service.get.return_value = HttpResponse(200, '<a href="/x">x</a>', 'text/html; charset=utf-8')
    return service


def test_link_check_uses_head_only(http_service):
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=False)
    http_service.head.assert_called_once_with('http://example.com')
    http_service.get.assert_not_called()
    assert result.state == LinkState.OK
    assert result.status == 200


def test_crawled_page_uses_get_and_keeps_body(http_service):
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=True)
    http_service.get.assert_called_once_with('http://example.com')
    http_service.head.assert_not_called()
    assert result.body == '<a href="/x">x</a>'
    assert result.is_html is True


def test_head_405_retries_once_with_get(http_service):
    http_service.head.return_value = HttpResponse(405, '', 'text/html')
    http_service.get.return_value = HttpResponse(200, '', 'text/html')

    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=False)

    assert http_service.head.call_count == 1
    assert http_service.get.call_args_list == [call('http://example.com', read_body=False)]
    assert result.state == LinkState.OK
    assert result.status == 200


def test_head_405_then_get_failure_reports_get_status(http_service):
    http_service.head.return_value = HttpResponse(405, '', None)
    http_service.get.return_value = HttpResponse(503, '', None)

    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=False)

    assert http_service.get.call_count == 1
    assert result.state == LinkState.BROKEN
    assert result.status == 503


def test_get_405_is_not_retried(http_service):
    http_service.get.return_value = HttpResponse(405, '', 'text/html')
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=True)
    assert http_service.get.call_count == 1
    assert result.state == LinkState.BROKEN
    assert result.status == 405


@pytest.mark.parametrize("status,state", [
    (200, LinkState.OK),
    (204, LinkState.OK),
    (299, LinkState.OK),
    (300, LinkState.BROKEN),
    (404, LinkState.BROKEN),
    (500, LinkState.BROKEN),
    (199, LinkState.BROKEN),
])
def test_status_classification(http_service, status, state):
    http_service.head.return_value = HttpResponse(status, '', None)
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=False)
    assert result.state == state
    assert result.status == status


def test_transport_failure_is_broken_without_status(http_service):
    http_service.head.side_effect = HttpFetchError('http://nowhere.invalid', requests.exceptions.ConnectionError("dns"))
    result = LinkFetcher(http_service).fetch('http://nowhere.invalid', should_crawl_children=False)
    assert result.state == LinkState.BROKEN
    assert result.status is None
    assert result.link_result.status is None


def test_unexpected_error_is_broken_without_status(http_service):
    http_service.get.side_effect = RuntimeError("boom")
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=True)
    assert result.state == LinkState.BROKEN
    assert result.status is None
    assert result.is_html is False


def test_non_html_content_type(http_service):
    http_service.get.return_value = HttpResponse(200, 'plain', 'text/plain')
    result = LinkFetcher(http_service).fetch('http://example.com/a.txt', should_crawl_children=True)
    assert result.is_html is False


def test_link_result_carries_url_status_state(http_service):
    result = LinkFetcher(http_service).fetch('http://example.com', should_crawl_children=False)
    link = result.link_result
    assert (link.url, link.status, link.state) == ('http://example.com', 200, LinkState.OK)
