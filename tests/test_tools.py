"""Tests for the strategy selection MCP tools."""

from __future__ import annotations

import asyncio
import json

import pytest

from strategy_advisor.data.sessions import create_session, get_session, session_count
from strategy_advisor.engine.rules import Step
from strategy_advisor.exceptions import InvalidTransition
from strategy_advisor.mcp_server import create_mcp_server
from strategy_advisor.resources.strategies import STRATEGIES_URI, strategies_json
from strategy_advisor.tools.advisor import (
    invalid_transition_result,
    session_message,
    session_payload,
)

TOOL_NAMES = {
    "start_strategy_selection",
    "answer_strategy_question",
    "go_back_strategy_question",
    "restart_strategy_selection",
    "confirm_strategy",
    "close_strategy_selection",
}


@pytest.fixture
def mcp():
    return create_mcp_server()


def _call(mcp, name, **arguments):
    return asyncio.run(mcp.call_tool(name, arguments))


class TestSessionPayload:
    def test_goal_question(self):
        controller = create_session()
        payload = session_payload(controller)
        assert payload["sessionId"] == controller.session_id
        assert payload["step"] == "GOAL"
        assert payload["answers"] == {}
        assert len(payload["question"]["options"]) == 7
        assert "strategy" not in payload

    def test_confirmation(self):
        controller = create_session()
        controller.answer("read-only-test")
        payload = session_payload(controller)
        assert payload["step"] == "CONFIRMATION"
        assert payload["answers"] == {"GOAL": "read-only-test"}
        assert payload["strategy"]["id"] == "LINKED"
        assert payload["reasoning"] == list(controller.reasoning)
        assert "question" not in payload

    def test_error(self):
        controller = create_session()
        controller.answer("schemas-data")
        controller.answer("no")
        payload = session_payload(controller)
        assert payload["step"] == "ERROR"
        assert payload["error"]["title"]
        assert len(payload["reasoning"]) == 2

    def test_messages(self):
        controller = create_session()
        assert "What is your primary migration goal?" in session_message(controller)
        controller.answer("schemas-data")
        controller.answer("yes")
        controller.answer("mixed")
        message = session_message(controller)
        assert "HYBRID" in message
        assert "Key Features:" in message
        assert "Requirements:" in message

    def test_invalid_transition_result(self):
        controller = create_session()
        exc = InvalidTransition("bad", step="GOAL", token="x", valid_tokens=("a", "b"))
        result = invalid_transition_result(controller, exc)
        assert result.isError is True
        assert result.structuredContent["validOptions"] == ["a", "b"]
        assert result.structuredContent["step"] == "GOAL"


class TestRegistration:
    def test_tools_registered(self, mcp):
        tools = asyncio.run(mcp.list_tools())
        assert TOOL_NAMES <= {tool.name for tool in tools}

    def test_catalog_resource_registered(self, mcp):
        resources = asyncio.run(mcp.list_resources())
        assert STRATEGIES_URI in {str(resource.uri).rstrip("/") for resource in resources}

    def test_catalog_json(self):
        data = json.loads(strategies_json())
        assert [entry["id"] for entry in data] == [
            "SCHEMA_ONLY",
            "STORAGE_MIGRATION",
            "LINKED",
            "COMMON",
            "DUMP",
            "SQL",
            "EXPORT_IMPORT",
            "HYBRID",
        ]


class TestToolFlow:
    def test_full_flow_to_confirmation(self, mcp):
        result = _call(mcp, "start_strategy_selection")
        session_id = result.structuredContent["sessionId"]
        assert result.structuredContent["step"] == "GOAL"

        result = _call(mcp, "answer_strategy_question", session_id=session_id, answer="schemas-data")
        assert result.structuredContent["step"] == "DETAIL"

        result = _call(mcp, "answer_strategy_question", session_id=session_id, answer="yes")
        assert result.structuredContent["step"] == "CHARACTERISTICS"

        result = _call(
            mcp, "answer_strategy_question", session_id=session_id, answer="large-partitions"
        )
        assert result.structuredContent["strategy"]["id"] == "SQL"

        result = _call(mcp, "confirm_strategy", session_id=session_id)
        assert result.structuredContent["confirmed"] is True
        assert result.structuredContent["strategy"]["id"] == "SQL"
        assert get_session(session_id) is None

    def test_invalid_answer_is_error_result(self, mcp):
        session_id = _call(mcp, "start_strategy_selection").structuredContent["sessionId"]
        result = _call(mcp, "answer_strategy_question", session_id=session_id, answer="maybe")
        assert result.isError is True
        assert "schemas-data" in result.structuredContent["validOptions"]
        assert get_session(session_id).current_step is Step.GOAL

    def test_back_and_restart(self, mcp):
        session_id = _call(mcp, "start_strategy_selection").structuredContent["sessionId"]
        _call(mcp, "answer_strategy_question", session_id=session_id, answer="schemas-data")

        result = _call(mcp, "go_back_strategy_question", session_id=session_id)
        assert result.structuredContent["step"] == "GOAL"

        result = _call(mcp, "go_back_strategy_question", session_id=session_id)
        assert result.isError is True

    def test_back_out_of_error_is_rejected(self, mcp):
        session_id = _call(mcp, "start_strategy_selection").structuredContent["sessionId"]
        _call(mcp, "answer_strategy_question", session_id=session_id, answer="schemas-data")
        result = _call(mcp, "answer_strategy_question", session_id=session_id, answer="no")
        assert "Start over" in result.content[0].text

        result = _call(mcp, "go_back_strategy_question", session_id=session_id)
        assert result.isError is True
        assert result.structuredContent["step"] == "ERROR"

        result = _call(mcp, "restart_strategy_selection", session_id=session_id)
        assert result.structuredContent["step"] == "GOAL"
        assert result.structuredContent["answers"] == {}

    def test_close_removes_session(self, mcp):
        session_id = _call(mcp, "start_strategy_selection").structuredContent["sessionId"]
        _call(mcp, "answer_strategy_question", session_id=session_id, answer="schemas-data")
        _call(mcp, "answer_strategy_question", session_id=session_id, answer="no")

        result = _call(mcp, "close_strategy_selection", session_id=session_id)
        assert result.structuredContent == {"sessionId": session_id, "closed": True}
        assert get_session(session_id) is None
        assert session_count() == 0

    def test_confirm_before_resolution_keeps_session(self, mcp):
        session_id = _call(mcp, "start_strategy_selection").structuredContent["sessionId"]
        result = _call(mcp, "confirm_strategy", session_id=session_id)
        assert result.isError is True
        assert get_session(session_id) is not None

    @pytest.mark.parametrize(
        "name,arguments",
        [
            ("answer_strategy_question", {"answer": "yes"}),
            ("go_back_strategy_question", {}),
            ("restart_strategy_selection", {}),
            ("confirm_strategy", {}),
            ("close_strategy_selection", {}),
        ],
    )
    def test_unknown_session(self, mcp, name, arguments):
        result = _call(mcp, name, session_id="missing", **arguments)
        assert result.isError is True
        assert result.structuredContent == {"error": "Session not found"}
        assert session_count() == 0
