import logging

from pydantic import ValidationError

from fact_generator.api.schemas import TopicRequest
from fact_generator.config import Settings
from fact_generator.errors import InvalidTopicRequest, MissingCredentialError
from fact_generator.providers.llm.openrouter import OpenRouterClient

logger = logging.getLogger(__name__)

RANDOM_FACT_PROMPT = (
    "Сгенерируй случайный интересный факт на русском языке. "
    "Ответ должен содержать только сам факт, без вступлений и объяснений."
)
TOPIC_FACT_PROMPT = (
    "Сгенерируй интересный факт на тему '{topic}' на русском языке. "
    "Ответ должен содержать только сам факт, без вступлений и объяснений."
)


def build_prompt(topic: str) -> str:
    if not topic:
        return RANDOM_FACT_PROMPT
    return TOPIC_FACT_PROMPT.format(topic=topic)


class FactService:
    def __init__(self, settings: Settings, client: OpenRouterClient | None = None) -> None:
        self.settings = settings
        self.client = client or OpenRouterClient(settings)

    @staticmethod
    def parse_request(body: bytes) -> TopicRequest:
        try:
            return TopicRequest.model_validate_json(body)
        except ValidationError as exc:
            raise InvalidTopicRequest(_first_error(exc)) from exc

    async def generate(self, body: bytes) -> str:
        topic_req = self.parse_request(body)

        api_key = self.settings.openrouter_api_key
        if not api_key:
            logger.error("fact.credential_missing env=OPENROUTER_API_KEY")
            raise MissingCredentialError()

        topic = topic_req.topic or ""
        fact = await self.client.complete(build_prompt(topic), api_key)
        logger.info("fact.generated chars=%d topic=%s", len(fact), topic or "-")
        return fact


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    if location:
        return f"{location}: {first['msg']}"
    return first["msg"]
