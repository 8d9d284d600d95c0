import json

import pytest

from lithp_lsp.repl_server import ReplServer


@pytest.fixture
def server():
    return ReplServer()


def _request(server, payload):
    return server.handle_request(json.dumps(payload).encode("utf-8"))


def test_eval_request(server):
    assert _request(server, {"cmd": "eval", "code": "(+ 1 2 3)"}) == {"ok": True, "result": "6"}


def test_error_values_are_successful_results(server):
    assert _request(server, {"cmd": "eval", "code": "(/ 1 0)"}) == {"ok": True, "result": "Error: Division by Zero!"}


def test_parse_error_is_reported(server):
    resp = _request(server, {"cmd": "eval", "code": "(+ 1"})
    assert resp["ok"] is False
    assert resp["error"].startswith("<tcp>:1:5: error: expected")


def test_missing_code_evaluates_empty_line(server):
    assert _request(server, {"cmd": "eval"}) == {"ok": True, "result": "()"}


@pytest.mark.parametrize(
    "payload,fragment",
    [
        ({"cmd": "quit"}, "Unknown cmd: quit"),
        ({"cmd": "eval", "code": 5}, "code must be a string"),
        ([1, 2], "expected a JSON object"),
    ]
)
def test_bad_requests(server, payload, fragment):
    resp = _request(server, payload)
    assert resp["ok"] is False
    assert fragment in resp["error"]


def test_invalid_json(server):
    resp = server.handle_request(b"{not json")
    assert resp["ok"] is False
    assert resp["error"].startswith("Invalid request:")
