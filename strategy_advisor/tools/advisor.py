"""Strategy selection tools for MCP server."""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import Field

from strategy_advisor.data.sessions import clear_session, create_session, get_session
from strategy_advisor.engine.catalog import describe
from strategy_advisor.engine.controller import QuestionFlowController
from strategy_advisor.engine.questions import (
    ERROR_MESSAGE,
    ERROR_TITLE,
    get_question,
    option_labels,
)
from strategy_advisor.engine.rules import Step
from strategy_advisor.exceptions import InvalidTransition

logger = structlog.get_logger(__name__)


def _advisor_meta(session_id: Optional[str] = None) -> dict:
    """Meta for strategy selection tools with optional session tracking."""
    meta = {
        "openai/toolInvocation/invoking": "Evaluating migration strategy",
        "openai/toolInvocation/invoked": "Strategy guidance ready",
    }
    if session_id:
        meta["openai/widgetSessionId"] = session_id
    return meta


def session_payload(controller: QuestionFlowController) -> Dict[str, Any]:
    """Structured description of the session's current position."""
    step = controller.current_step
    payload: Dict[str, Any] = {
        "sessionId": controller.session_id,
        "step": step.value,
        "answers": {s.value: v for s, v in controller.answers.items()},
    }

    if step is Step.CONFIRMATION:
        payload["strategy"] = describe(controller.resolved_strategy).to_dict()
        payload["reasoning"] = list(controller.reasoning)
    elif step is Step.ERROR:
        payload["error"] = {"title": ERROR_TITLE, "message": ERROR_MESSAGE}
        payload["reasoning"] = list(controller.reasoning)
    else:
        question = get_question(step, controller.answers)
        payload["question"] = question.to_dict()

    return payload


def session_message(controller: QuestionFlowController) -> str:
    """Human-readable text for the session's current position."""
    step = controller.current_step

    if step is Step.CONFIRMATION:
        descriptor = describe(controller.resolved_strategy)
        lines = [
            f"{descriptor.label} Recommended Strategy: **{descriptor.id}**",
            "",
            "Why this strategy?",
        ]
        lines.extend(f"- {reason}" for reason in controller.reasoning)
        if descriptor.features:
            lines.extend(["", "Key Features:"])
            lines.extend(f"- {feature}" for feature in descriptor.features)
        if descriptor.requirements:
            lines.extend(["", "Requirements:"])
            lines.extend(f"- {req}" for req in descriptor.requirements)
        lines.extend(
            ["", "Confirm to continue with this strategy, or start over to change it."]
        )
        return "\n".join(lines)

    if step is Step.ERROR:
        lines = [ERROR_TITLE, "", ERROR_MESSAGE, "", "Consider these options:"]
        lines.extend(f"- {reason}" for reason in controller.reasoning)
        lines.extend(["", "Start over to choose a different path."])
        return "\n".join(lines)

    question = get_question(step, controller.answers)
    lines = [question.prompt, ""]
    lines.extend(f"- {label}" for label in option_labels(question))
    return "\n".join(lines)


def _session_result(
    controller: QuestionFlowController, prefix: str = "", **extra: Any
) -> CallToolResult:
    structured = session_payload(controller)
    structured.update(extra)
    return CallToolResult(
        content=[TextContent(type="text", text=prefix + session_message(controller))],
        structuredContent=structured,
        _meta=_advisor_meta(controller.session_id),
    )


def _session_not_found() -> CallToolResult:
    return CallToolResult(
        content=[
            TextContent(
                type="text",
                text="Session not found. Please start strategy selection again.",
            )
        ],
        structuredContent={"error": "Session not found"},
        isError=True,
    )


def invalid_transition_result(
    controller: QuestionFlowController, exc: InvalidTransition
) -> CallToolResult:
    """Error result for a rejected operation; the session is unchanged."""
    logger.warning(
        "strategy_transition_rejected",
        session_id=controller.session_id,
        step=exc.step,
        token=exc.token,
        reason=str(exc),
    )
    structured: Dict[str, Any] = {
        "error": str(exc),
        "sessionId": controller.session_id,
        "step": controller.current_step.value,
    }
    if exc.valid_tokens:
        structured["validOptions"] = list(exc.valid_tokens)
    return CallToolResult(
        content=[TextContent(type="text", text=str(exc))],
        structuredContent=structured,
        _meta=_advisor_meta(controller.session_id),
        isError=True,
    )


def register_advisor_tools(mcp: FastMCP) -> None:
    """Register strategy selection tools with the MCP server."""

    @mcp.tool()
    async def start_strategy_selection() -> CallToolResult:
        """Starts the guided questionnaire that recommends a migration strategy.

        Asks about the migration goal, cluster storage access and table
        characteristics, then recommends one strategy with its reasoning.
        """
        controller = create_session()
        logger.info("strategy_session_created", session_id=controller.session_id)
        return _session_result(
            controller, prefix="Let's find the right migration strategy.\n\n"
        )

    @mcp.tool()
    async def answer_strategy_question(
        session_id: str = Field(
            ...,
            description="The strategy selection session ID from the previous response.",
        ),
        answer: str = Field(
            ...,
            description="The option value chosen for the current question, e.g. 'schemas-data'.",
        ),
    ) -> CallToolResult:
        """Records the answer to the current question and returns the next question or the outcome."""
        controller = get_session(session_id)
        if controller is None:
            return _session_not_found()
        try:
            controller.answer(answer)
        except InvalidTransition as exc:
            return invalid_transition_result(controller, exc)
        return _session_result(controller)

    @mcp.tool()
    async def go_back_strategy_question(
        session_id: str = Field(
            ...,
            description="The strategy selection session ID from the previous response.",
        ),
    ) -> CallToolResult:
        """Undoes the most recent answer and returns to that question."""
        controller = get_session(session_id)
        if controller is None:
            return _session_not_found()
        try:
            controller.back()
        except InvalidTransition as exc:
            return invalid_transition_result(controller, exc)
        return _session_result(controller)

    @mcp.tool()
    async def restart_strategy_selection(
        session_id: str = Field(
            ...,
            description="The strategy selection session ID from the previous response.",
        ),
    ) -> CallToolResult:
        """Clears all answers and starts the questionnaire over."""
        controller = get_session(session_id)
        if controller is None:
            return _session_not_found()
        controller.restart()
        return _session_result(controller)

    @mcp.tool()
    async def close_strategy_selection(
        session_id: str = Field(
            ...,
            description="The strategy selection session ID from the previous response.",
        ),
    ) -> CallToolResult:
        """Abandons a strategy selection session without confirming a strategy."""
        controller = clear_session(session_id)
        if controller is None:
            return _session_not_found()
        logger.info(
            "strategy_session_closed",
            session_id=session_id,
            step=controller.current_step.value,
        )
        return CallToolResult(
            content=[TextContent(type="text", text="Strategy selection closed.")],
            structuredContent={"sessionId": session_id, "closed": True},
            _meta=_advisor_meta(session_id),
        )

    @mcp.tool()
    async def confirm_strategy(
        session_id: str = Field(
            ...,
            description="The strategy selection session ID from the previous response.",
        ),
    ) -> CallToolResult:
        """Confirms the recommended strategy and closes the session.

        The caller is responsible for saving the strategy into a configuration.
        """
        controller = get_session(session_id)
        if controller is None:
            return _session_not_found()
        try:
            strategy, reasoning = controller.confirm()
        except InvalidTransition as exc:
            return invalid_transition_result(controller, exc)

        clear_session(session_id)
        logger.info(
            "strategy_confirmed",
            session_id=session_id,
            strategy=strategy.value,
            reasons=len(reasoning),
        )
        return _session_result(
            controller,
            prefix=f"Continuing with the {strategy.value} strategy.\n\n",
            confirmed=True,
        )
