import json
from unittest.mock import MagicMock, patch

import requests

from breez.interpreter import (
    GroqQueryInterpreter,
    HttpQueryInterpreter,
    build_query_interpreter,
)
from breez.interpreter.config import InterpreterConfig

ENABLED_CONFIG = InterpreterConfig(api_key="test-key", enabled=True, interpreter_url="")
DISABLED_CONFIG = InterpreterConfig(api_key="test-key", enabled=False, interpreter_url="")
REMOTE_CONFIG = InterpreterConfig(interpreter_url="http://interpreter.test/sendQuery")


def _mock_groq_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def _mock_http_response(status_code: int, payload=None, raises=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    if raises is not None:
        response.json.side_effect = raises
    else:
        response.json.return_value = payload
    return response


# ── Groq interpreter ─────────────────────────────────────────────────────


@patch("breez.interpreter.groq_client.Groq")
def test_groq_extracts_attributes(mock_groq_cls):
    llm_response = json.dumps({
        "category": "Milkshake",
        "subcategory": None,
        "taste": "Sweet",
        "healthy": True,
        "price": "medium",
        "dietary_restrictions": None,
    })
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(llm_response)

    attrs = GroqQueryInterpreter(ENABLED_CONFIG).interpret("a sweet healthy milkshake")

    assert attrs.non_null() == {
        "category": "Milkshake",
        "taste": "Sweet",
        "healthy": "true",
        "price_tier": "medium",
    }


@patch("breez.interpreter.groq_client.Groq")
def test_groq_keeps_restriction_list(mock_groq_cls):
    llm_response = json.dumps({"dietary_restrictions": ["vegan", "nut free"]})
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response(llm_response)

    attrs = GroqQueryInterpreter(ENABLED_CONFIG).interpret("vegan and nut free please")

    assert attrs.dietary_restrictions == ["vegan", "nut free"]


@patch("breez.interpreter.groq_client.Groq")
def test_groq_fallback_on_api_error(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.side_effect = Exception("API timeout")

    attrs = GroqQueryInterpreter(ENABLED_CONFIG).interpret("something sweet")

    assert attrs.non_null() == {}


@patch("breez.interpreter.groq_client.Groq")
def test_groq_fallback_on_bad_json(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response("not valid json{{{")

    attrs = GroqQueryInterpreter(ENABLED_CONFIG).interpret("something sweet")

    assert attrs.non_null() == {}


@patch("breez.interpreter.groq_client.Groq")
def test_groq_fallback_on_non_object(mock_groq_cls):
    mock_groq_cls.return_value.chat.completions.create.return_value = _mock_groq_response('["Chai"]')

    attrs = GroqQueryInterpreter(ENABLED_CONFIG).interpret("chai")

    assert attrs.non_null() == {}


@patch("breez.interpreter.groq_client.Groq")
def test_groq_disabled(mock_groq_cls):
    attrs = GroqQueryInterpreter(DISABLED_CONFIG).interpret("chai")

    assert attrs.non_null() == {}
    mock_groq_cls.assert_not_called()


# ── HTTP interpreter ─────────────────────────────────────────────────────


@patch("breez.interpreter.http_client.requests.post")
def test_http_sends_query_and_parses(mock_post):
    mock_post.return_value = _mock_http_response(200, {"category": "Pizza", "vendor": None})

    attrs = HttpQueryInterpreter(config=REMOTE_CONFIG).interpret("pizza")

    assert attrs.non_null() == {"category": "Pizza"}
    args, kwargs = mock_post.call_args
    assert args[0] == "http://interpreter.test/sendQuery"
    assert kwargs["json"] == {"user_query_str": "pizza"}


@patch("breez.interpreter.http_client.requests.post")
def test_http_non_success_status(mock_post):
    mock_post.return_value = _mock_http_response(500, {"category": "Pizza"})

    attrs = HttpQueryInterpreter(config=REMOTE_CONFIG).interpret("pizza")

    assert attrs.non_null() == {}


@patch("breez.interpreter.http_client.requests.post")
def test_http_transport_failure(mock_post):
    mock_post.side_effect = requests.ConnectionError("refused")

    attrs = HttpQueryInterpreter(config=REMOTE_CONFIG).interpret("pizza")

    assert attrs.non_null() == {}


@patch("breez.interpreter.http_client.requests.post")
def test_http_malformed_body(mock_post):
    mock_post.return_value = _mock_http_response(200, raises=ValueError("bad json"))

    attrs = HttpQueryInterpreter(config=REMOTE_CONFIG).interpret("pizza")

    assert attrs.non_null() == {}


def test_remote_url_selects_http_interpreter():
    assert isinstance(build_query_interpreter(REMOTE_CONFIG), HttpQueryInterpreter)
    assert isinstance(build_query_interpreter(ENABLED_CONFIG), GroqQueryInterpreter)
