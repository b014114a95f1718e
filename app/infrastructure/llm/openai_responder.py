from __future__ import annotations

import logging
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

from openai import AsyncOpenAI

from app.application.exceptions import LLMContractError, LLMUpstreamError
from app.application.ports.catalog import CatalogPort
from app.application.ports.responder import ResponderPort
from app.application.ports.session_store import SessionStorePort
from app.infrastructure.llm.prompts import build_system_prompt
from app.infrastructure.llm.tools import CatalogToolbox

TOO_COMPLEX_REPLY = (
    "Desculpe, a solicitação está muito complexa. Por favor, tente reformular sua pergunta."
)


class OpenAIResponder(ResponderPort):
    """
    OpenAI-backed adapter implementing ResponderPort.

    Runs a tool-calling loop: the model may query the catalog through the
    toolbox several times before producing its final answer.

    Contract guarantees:
    - respond returns non-empty text
    - Raises:
        LLMUpstreamError: networking/provider failures
        LLMContractError: response without choices or text
    """

    def __init__(
        self,
        store: SessionStorePort,
        catalog: CatalogPort,
        toolbox: CatalogToolbox,
        model: str,
        temperature: float,
        business_name: str,
        timezone: ZoneInfo,
        api_key: str | None = None,
        max_iterations: int = 5,
        max_tokens: int = 1024,
        client: Any | None = None,
    ) -> None:
        self._store = store
        self._catalog = catalog
        self._toolbox = toolbox
        self._model = model
        self._temperature = temperature
        self._business_name = business_name
        self._timezone = timezone
        self._max_iterations = max_iterations
        self._max_tokens = max_tokens
        self.client = client or AsyncOpenAI(api_key=api_key)
        self._logger = logging.getLogger(__name__)

    async def respond(self, text: str, session_id: str) -> str:
        system_prompt = build_system_prompt(
            now=datetime.now(self._timezone),
            session_context=self._store.get_formatted_context(session_id),
            catalog=self._catalog,
            business_name=self._business_name,
        )
        messages: list[dict[str, Any]] = [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": text},
        ]

        for iteration in range(1, self._max_iterations + 1):
            message = await self._complete(messages)

            tool_calls = getattr(message, "tool_calls", None) or []
            if tool_calls:
                self._logger.info(
                    "Tools called",
                    extra={
                        "session_id": session_id,
                        "action": ",".join(tc.function.name for tc in tool_calls),
                        "reason": f"iteration={iteration}",
                    },
                )
                messages.append(
                    {
                        "role": "assistant",
                        "content": message.content,
                        "tool_calls": [
                            {
                                "id": tc.id,
                                "type": "function",
                                "function": {"name": tc.function.name, "arguments": tc.function.arguments},
                            }
                            for tc in tool_calls
                        ],
                    }
                )
                for tc in tool_calls:
                    messages.append(
                        {
                            "role": "tool",
                            "tool_call_id": tc.id,
                            "content": self._toolbox.execute(tc.function.name, tc.function.arguments),
                        }
                    )
                continue

            content = (message.content or "").strip()
            if not content:
                raise LLMContractError("LLM returned empty response text.")
            return content

        self._logger.warning(
            "Tool loop exhausted", extra={"session_id": session_id, "reason": f"max_iterations={self._max_iterations}"}
        )
        return TOO_COMPLEX_REPLY

    async def _complete(self, messages: list[dict[str, Any]]) -> Any:
        try:
            resp = await self.client.chat.completions.create(
                model=self._model,
                messages=messages,
                tools=self._toolbox.definitions,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        if not resp.choices:
            raise LLMContractError("LLM returned no choices.")
        return resp.choices[0].message
