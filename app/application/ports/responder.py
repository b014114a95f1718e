from abc import ABC, abstractmethod


class ResponderPort(ABC):
    @abstractmethod
    async def respond(self, text: str, session_id: str) -> str:
        """
        Produce the final natural-language reply for a (possibly enriched) user message.

        The adapter may call catalog tools while composing the answer.

        Raises:
            LLMUpstreamError: provider or network failure
            LLMContractError: provider answered without usable text
        """
        raise NotImplementedError
