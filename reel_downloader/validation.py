"""Link validation for incoming reel requests."""

import re
from typing import Any
from urllib.parse import urlsplit

from pydantic import BaseModel, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

MISSING_LINK = "कृपया वैध रील लिंक पेस्ट करें।"
MALFORMED_LINK = "लिंक सही प्रारूप में नहीं है।"
BAD_BODY = "रिक्वेस्ट डेटा पढ़ने में समस्या हुई।"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")


def is_absolute_url(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
        parts.port  # raises on a non-numeric or out-of-range port
    except ValueError:
        return False
    return bool(_SCHEME_RE.match(parts.scheme) and parts.hostname)


def _clean_link(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(MISSING_LINK)
    value = value.strip()
    if not is_absolute_url(value):
        raise ValueError(MALFORMED_LINK)
    return value


class ReelRequest(BaseModel):
    url: str

    @field_validator("url", mode="before")
    @classmethod
    def check_url(cls, v: Any) -> str:
        return _clean_link(v)


def validate_reel_link(value: Any) -> str:
    """Return the trimmed link or raise ValidationError with the first problem found."""
    try:
        return _clean_link(value)
    except ValueError as exc:
        raise ValidationError(str(exc)) from None


def parse_reel_request(body: Any) -> ReelRequest:
    """Validate a decoded JSON body of the form {"url": "..."}."""
    if not isinstance(body, dict):
        raise ValidationError(MISSING_LINK)
    try:
        return ReelRequest.model_validate(body)
    except PydanticValidationError as exc:
        issue = exc.errors()[0]
        cause = issue.get("ctx", {}).get("error")
        raise ValidationError(str(cause) if cause else MISSING_LINK) from None
