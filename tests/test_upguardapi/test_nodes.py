"""Tests for the Nodes wrapper and shared list filters."""
import pytest
from urllib.parse import urlsplit, parse_qs

from upguard_cli.upguardapi.nodes import Nodes, build_filters
from upguard_cli.utils.exceptions import ValidationError
from tests.fixtures.http_mocks import MockHttpResponse, page_responses
from tests.fixtures.sample_data import SAMPLE_NODES


@pytest.mark.unit
class TestBuildFilters:

    def test_no_filters(self):
        assert build_filters() == {'status': None, 'lastScanStatus': None}

    def test_valid_filters(self):
        assert build_filters('detected', 'timeout') == {'status': 'detected', 'lastScanStatus': 'timeout'}

    def test_empty_strings_accepted(self):
        assert build_filters('', '') == {'status': '', 'lastScanStatus': ''}

    def test_invalid_status(self):
        with pytest.raises(ValidationError, match="Invalid status"):
            build_filters(status='gone')

    def test_invalid_last_scan_status(self):
        with pytest.raises(ValidationError, match="Invalid last scan status"):
            build_filters(last_scan_status='maybe')


@pytest.mark.unit
class TestNodesList:

    def test_list_returns_records(self, dispatcher, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_NODES)

        nodes = Nodes(dispatcher).list()

        assert nodes == SAMPLE_NODES

    def test_list_uses_nodes_endpoint_and_filters(self, dispatcher, mock_session):
        mock_session.request.return_value = MockHttpResponse.success(SAMPLE_NODES)

        Nodes(dispatcher).list(status='active', last_scan_status='failure')

        url = urlsplit(mock_session.request.call_args[0][1])
        assert url.path == '/api/v2/nodes.json'
        assert parse_qs(url.query) == {
            'page': ['1'], 'per_page': ['500'], 'status': ['active'], 'lastScanStatus': ['failure']
        }

    def test_list_paginates(self, dispatcher, mock_session):
        mock_session.request.side_effect = page_responses([500, 500, 20])

        nodes = Nodes(dispatcher).list(status='active')

        assert len(nodes) == 1020
        assert mock_session.request.call_count == 3

    def test_invalid_filter_makes_no_request(self, dispatcher, mock_session):
        with pytest.raises(ValidationError):
            Nodes(dispatcher).list(status='bogus')

        mock_session.request.assert_not_called()
