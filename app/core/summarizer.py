"""
Module for summarizing transcripts using LLM providers.

Each supported provider is a small adapter around langchain's chat model
factory. ``TranscriptSummarizer`` validates the request, picks the adapter for
the requested provider tag and parses the reply into a StructuredSummary.
"""

from typing import Dict, List, Optional, Type

from langchain.chat_models import init_chat_model
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from app.config import config
from app.core.prompts import SYSTEM_INSTRUCTION, create_summary_prompt
from app.core.response_parser import parse_summary_response
from app.models.schemas import ProviderName, StructuredSummary, SummaryRequest
from app.utils.error_handling import (
    AppError,
    InvalidApiKeyError,
    MissingFieldsError,
    RateLimitExceededError,
    SummarizationError,
    TranscriptTooShortError,
    UnsupportedProviderError,
)
from app.utils.logger import logging

MIN_TRANSCRIPT_LENGTH = 100

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
OPENROUTER_APP_TITLE = "YouTube to Notion Summarizer"


class SummaryProvider:
    """Base adapter for a chat-completion backend."""

    name: ProviderName
    model_provider: str
    default_model: str
    use_system_message = True

    def __init__(self, api_key: str, model: Optional[str] = None):
        self.api_key = api_key
        self.model = model or self.default_model

    def client_options(self) -> Dict[str, object]:
        """Extra keyword arguments for the underlying chat model."""
        return {}

    def build_llm(self):
        return init_chat_model(
            model=self.model,
            model_provider=self.model_provider,
            api_key=self.api_key,
            temperature=config.SUMMARY_TEMPERATURE,
            max_tokens=config.SUMMARY_MAX_TOKENS,
            **self.client_options()
        )

    def build_messages(self, prompt: str) -> List[BaseMessage]:
        messages = []
        if self.use_system_message:
            messages.append(SystemMessage(content=SYSTEM_INSTRUCTION))
        messages.append(HumanMessage(content=prompt))
        return messages

    def complete(self, prompt: str) -> str:
        """Send the prompt once and return the raw reply text."""
        llm = self.build_llm()
        response = llm.invoke(self.build_messages(prompt))
        return _message_text(response.content)


class OpenAIProvider(SummaryProvider):
    name = ProviderName.OPENAI
    model_provider = "openai"
    default_model = "gpt-4o-mini"


class AnthropicProvider(SummaryProvider):
    name = ProviderName.ANTHROPIC
    model_provider = "anthropic"
    default_model = "claude-3-haiku-20240307"
    use_system_message = False


class OpenRouterProvider(SummaryProvider):
    """OpenAI-compatible endpoint with OpenRouter's app attribution headers."""

    name = ProviderName.OPENROUTER
    model_provider = "openai"
    default_model = "openai/gpt-4o-mini"

    def client_options(self) -> Dict[str, object]:
        return {
            "base_url": OPENROUTER_BASE_URL,
            "default_headers": {
                "HTTP-Referer": config.FRONTEND_URL,
                "X-Title": OPENROUTER_APP_TITLE,
            },
        }


PROVIDERS: Dict[str, Type[SummaryProvider]] = {
    ProviderName.OPENAI.value: OpenAIProvider,
    ProviderName.ANTHROPIC.value: AnthropicProvider,
    ProviderName.OPENROUTER.value: OpenRouterProvider,
}


def supported_providers() -> List[str]:
    return list(PROVIDERS)


def get_provider(name: str, api_key: str, model: Optional[str] = None) -> SummaryProvider:
    """
    Instantiate the adapter for a provider tag.

    Raises:
        UnsupportedProviderError: if the tag is not one of the supported providers
    """
    provider_cls = PROVIDERS.get((name or "").strip().lower())
    if provider_cls is None:
        raise UnsupportedProviderError(supported=supported_providers())
    return provider_cls(api_key=api_key, model=model)


def map_provider_error(error: Exception) -> AppError:
    """Translate an upstream SDK/HTTP failure into a caller-facing error."""
    message = str(error)
    if "API key" in message:
        return InvalidApiKeyError(details=message)
    if "quota" in message or "limit" in message:
        return RateLimitExceededError(details=message)
    return SummarizationError(details=message)


def _message_text(content) -> str:
    if isinstance(content, str):
        return content
    # Content-block replies: keep only the text parts.
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class TranscriptSummarizer:
    """Class to handle transcript summarization requests."""

    def validate(self, request: SummaryRequest) -> None:
        if not request.transcript or not request.api_key or not request.provider:
            raise MissingFieldsError(
                "Missing required fields: transcript, apiKey, and provider are required"
            )
        if len(request.transcript) < MIN_TRANSCRIPT_LENGTH:
            raise TranscriptTooShortError()

    def summarize(self, request: SummaryRequest) -> StructuredSummary:
        """
        Summarize a transcript with the requested provider.

        Args:
            request: Transcript, title, provider tag, API key and optional model

        Returns:
            StructuredSummary parsed from the provider reply

        Raises:
            MissingFieldsError, TranscriptTooShortError, UnsupportedProviderError,
            InvalidApiKeyError, RateLimitExceededError, SummarizationError
        """
        self.validate(request)
        provider = get_provider(request.provider, request.api_key, request.model)

        logging.info(
            f"Generating summary using {provider.name.value} "
            f"({provider.model}, {len(request.transcript)} chars)"
        )

        prompt = create_summary_prompt(request.transcript, request.title)
        try:
            content = provider.complete(prompt)
        except Exception as e:
            logging.error(f"Error generating summary with {provider.name.value}: {str(e)}")
            raise map_provider_error(e) from e

        summary = parse_summary_response(content)
        logging.info("Summary generated successfully")
        return summary
