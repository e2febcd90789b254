"""
Reshape the upstream RapidAPI payload into a minimal, trusted ReelResult.

Shapes are declared once as pydantic models. Required fields are strict
(a candidate missing ``url`` or ``type`` never becomes a SanitizedMedia),
optional fields are dropped when their type does not match instead of
being coerced.
"""

import logging
import math
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field, StrictStr
from pydantic import ValidationError as PydanticValidationError

from .errors import NoMediaAvailable

logger = logging.getLogger(__name__)

UNREADABLE_MEDIA_LIST = "डाउनलोड मीडिया सूची पढ़ने में समस्या हुई।"


def _str_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _duration_or_none(value: Any) -> Optional[Union[int, float]]:
    # bool is an int subclass but not a duration
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return value


RequiredStr = Annotated[StrictStr, Field(min_length=1)]
OptionalStr = Annotated[Optional[str], BeforeValidator(_str_or_none)]
OptionalDuration = Annotated[Optional[Union[int, float]], BeforeValidator(_duration_or_none)]


class SanitizedMedia(BaseModel):
    url: RequiredStr
    type: RequiredStr
    quality: OptionalStr = None
    extension: OptionalStr = None


class ReelResult(BaseModel):
    source_url: str = Field(serialization_alias="sourceUrl")
    author: OptionalStr = None
    title: OptionalStr = None
    thumbnail: OptionalStr = None
    duration: OptionalDuration = None
    medias: List[SanitizedMedia] = Field(min_length=1)

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


def sanitize_medias(raw: Any) -> List[SanitizedMedia]:
    """Keep the candidates that carry a string url and type, in upstream order."""
    if not isinstance(raw, list):
        return []
    medias = []
    for item in raw:
        try:
            medias.append(SanitizedMedia.model_validate(item))
        except PydanticValidationError:
            continue
    dropped = len(raw) - len(medias)
    if dropped:
        logger.debug("Dropped %d of %d malformed media candidates", dropped, len(raw))
    return medias


def build_reel_result(payload: Any, source_url: str) -> ReelResult:
    """Build the response payload or raise NoMediaAvailable when nothing usable remains."""
    if not isinstance(payload, dict):
        payload = {}

    raw_medias = payload.get("medias")
    if not isinstance(raw_medias, list) or not raw_medias:
        raise NoMediaAvailable()

    medias = sanitize_medias(raw_medias)
    if not medias:
        raise NoMediaAvailable(UNREADABLE_MEDIA_LIST)

    upstream_url = payload.get("url")
    return ReelResult(
        source_url=upstream_url if isinstance(upstream_url, str) else source_url,
        author=payload.get("author"),
        title=payload.get("title"),
        thumbnail=payload.get("thumbnail"),
        duration=payload.get("duration"),
        medias=medias,
    )
