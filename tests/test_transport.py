"""Tests for the requests-backed transport and status mapping."""

from unittest.mock import Mock, PropertyMock

import pytest
import requests

from swift_object import RemoteObject
from swift_object.errors import AuthError, ErrorKind, NetworkError, NotFoundError, TransportError
from swift_object.transport import RequestsTransport, check_response
from swift_object.config import ObjectSettings

from conftest import BODY, OBJECT_URL, TOKEN, FakeResponse, make_headers


class TestRequestsTransport:
    """Test request construction against a mocked session."""

    def test_get_streams_with_timeout(self):
        session = Mock(spec=requests.Session)
        transport = RequestsTransport(timeout=5, session=session)

        transport.do_request(OBJECT_URL, "GET", {"X-Auth-Token": "t"})

        session.request.assert_called_once_with(
            "GET", OBJECT_URL, headers={"X-Auth-Token": "t"},
            timeout=5, verify=True, stream=True,
        )

    def test_head_does_not_stream(self):
        session = Mock(spec=requests.Session)
        transport = RequestsTransport(session=session)

        transport.do_request(OBJECT_URL, "HEAD")

        assert session.request.call_args.kwargs["stream"] is False

    def test_connection_error_becomes_network_error(self):
        session = Mock(spec=requests.Session)
        session.request.side_effect = requests.exceptions.ConnectionError("refused")
        transport = RequestsTransport(session=session)

        with pytest.raises(NetworkError, match="Cannot connect"):
            transport.do_request(OBJECT_URL, "GET")

    def test_from_settings(self):
        transport = RequestsTransport.from_settings(ObjectSettings(timeout=3, verify_tls=False))

        assert transport.timeout == 3
        assert transport.verify_tls is False
        transport.close()


def _broken_body_session():
    """Session whose GET succeeds but whose body read fails mid-transfer."""
    response = Mock()
    response.status_code = 200
    response.headers = make_headers(BODY)
    type(response).content = PropertyMock(
        side_effect=requests.exceptions.ChunkedEncodingError(
            "Connection broken: IncompleteRead(7 bytes read, 993 more expected)"
        )
    )
    session = Mock(spec=requests.Session)
    session.request.return_value = response
    return session, response


class TestRequestsResponse:
    """Test body access on streamed responses."""

    def test_broken_body_becomes_network_error(self):
        session, _ = _broken_body_session()
        response = RequestsTransport(session=session).do_request(OBJECT_URL, "GET")

        with pytest.raises(NetworkError, match="Connection lost while reading"):
            response.content

    def test_try_content_reports_network_kind(self):
        session, _ = _broken_body_session()
        obj = RemoteObject("cat.txt", token=TOKEN, url=OBJECT_URL, transport=RequestsTransport(session=session))

        result = obj.try_content()

        assert not result.ok
        assert result.kind == ErrorKind.NETWORK
        assert not obj.has_local_content()

    def test_raw_decodes_content_encoding(self):
        session, response = _broken_body_session()
        response.raw.decode_content = False

        raw = RequestsTransport(session=session).do_request(OBJECT_URL, "GET").raw

        assert raw is response.raw
        assert raw.decode_content is True

    def test_status_and_headers_passed_through(self):
        session, response = _broken_body_session()
        wrapped = RequestsTransport(session=session).do_request(OBJECT_URL, "HEAD")

        assert wrapped.status_code == 200
        assert wrapped.headers["Etag"] == response.headers["Etag"]

    def test_close(self):
        session, response = _broken_body_session()

        RequestsTransport(session=session).do_request(OBJECT_URL, "GET").close()

        response.close.assert_called_once()


class TestCheckResponse:
    """Test status code to error mapping."""

    def test_ok(self):
        check_response(FakeResponse(200), OBJECT_URL)

    @pytest.mark.parametrize("status,error", [
        (404, NotFoundError),
        (401, AuthError),
        (403, AuthError),
        (500, TransportError),
        (204, TransportError),
    ])
    def test_failures(self, status, error):
        with pytest.raises(error) as exc_info:
            check_response(FakeResponse(status), OBJECT_URL)

        assert exc_info.value.status == status
        assert exc_info.value.url == OBJECT_URL
