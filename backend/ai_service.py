"""
Groq API key must be defined in the environment or in a .env file in the backend root:

GROQ_API_KEY=your_real_key_here

The app loads environment variables automatically using python-dotenv.
"""

from dotenv import load_dotenv
import json
import os
from pathlib import Path

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

from groq import AsyncGroq
from groq.types.chat import ChatCompletion

from models import ChatMessage, GenerationResult

API_KEY_ENV = "GROQ_API_KEY"
MODEL = "llama3-8b-8192"
TEMPERATURE = 1
MAX_TOKENS = 1024
TOP_P = 1

SYSTEM_MESSAGE = """Generate the json with following attributes

One liner (string)
Value Proposition (string)
Site Map (string array)
Blog Ideas (string array)
SEO Terms (string array)

Scrape the website pages to provide meaningful response"""

USER_TEMPLATE = """I want to autogenerate content for my website and other channels based on the trending SEO terms to show how your product fits into what's currently popular

Website: {url}
Proposed SEO key terms: {keywords} - add trending SEO terms too from your side
Business information: {business_info}

I need the response in this format:
One liner (max 10 words):
Value Proposition:
Site Map:
Blog Ideas:
SEO Terms:


"""


class GenerationError(Exception):
    """Request construction, transport or response parsing failed."""


def get_api_key() -> str | None:
    """Read the Groq credential from the process environment."""
    return os.getenv(API_KEY_ENV)


def build_messages(url: str, keywords: str, business_info: str) -> list[ChatMessage]:
    # Inputs are interpolated as-is; the provider enforces any length limit.
    return [
        {"role": "system", "content": SYSTEM_MESSAGE},
        {
            "role": "user",
            "content": USER_TEMPLATE.format(
                url=url,
                keywords=keywords,
                business_info=business_info,
            ),
        },
    ]


def _extract_content(completion: ChatCompletion) -> str:
    content = completion.choices[0].message.content
    return content if content is not None else "{}"


class ContentGenerator:
    """Runs one chat-completion exchange per call and parses the JSON reply.

    The API key is injected at construction; when no client is supplied an
    ``AsyncGroq`` client is created lazily on the first call, so a missing
    credential surfaces as a ``GenerationError`` like any other failure.
    """

    def __init__(self, api_key: str | None, client: AsyncGroq | None = None) -> None:
        self.api_key = api_key
        self._client = client

    def _get_client(self) -> AsyncGroq:
        if self._client is None:
            self._client = AsyncGroq(api_key=self.api_key)
        return self._client

    async def generate(self, url: str, keywords: str, business_info: str) -> GenerationResult:
        """
        Call Groq once and return the parsed JSON object unchanged.
        Raises GenerationError on any construction, network or JSON failure.
        """
        try:
            client = self._get_client()
            completion = await client.chat.completions.create(
                messages=build_messages(url, keywords, business_info),
                model=MODEL,
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
                top_p=TOP_P,
                stream=False,
                response_format={"type": "json_object"},
                stop=None,
            )
            return json.loads(_extract_content(completion))
        except Exception as e:
            raise GenerationError(str(e)) from e
