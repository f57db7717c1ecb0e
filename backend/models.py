"""Data models and types used across the backend.

Request/response schemas for the HTTP API are in schemas.py.
Types for form state, model output and request status live here.
"""

from dataclasses import dataclass
from typing import TypedDict, Union

ONE_LINER = "One liner"
VALUE_PROPOSITION = "Value Proposition"
SITE_MAP = "Site Map"
BLOG_IDEAS = "Blog Ideas"
SEO_TERMS = "SEO Terms"

# Every key is optional: the model output is not schema-validated.
GenerationResult = TypedDict(
    "GenerationResult",
    {
        ONE_LINER: str,
        VALUE_PROPOSITION: str,
        SITE_MAP: list[str],
        BLOG_IDEAS: list[str],
        SEO_TERMS: list[str],
    },
    total=False,
)


class ChatMessage(TypedDict):
    """Single role-tagged message sent to the chat-completion API."""

    role: str
    content: str


@dataclass
class FormState:
    """Current values of the three form fields."""

    url: str = ""
    keywords: str = ""
    business_info: str = ""


@dataclass(frozen=True)
class Idle:
    pass


@dataclass(frozen=True)
class Loading:
    pass


VALIDATION_ERROR = "validation"
GENERATION_ERROR = "generation"


@dataclass(frozen=True)
class Error:
    message: str
    kind: str = GENERATION_ERROR


@dataclass(frozen=True)
class Success:
    result: GenerationResult


RequestStatus = Union[Idle, Loading, Error, Success]
