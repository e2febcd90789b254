"""Pick the media item shown as the primary download."""

import re
from typing import Optional, Sequence

from .sanitize import SanitizedMedia

_QUALITY_RE = re.compile(r"(\d+)[pP]")


def quality_score(quality: Optional[str]) -> int:
    """'720p' -> 720, '1080P' -> 1080; anything else scores 0."""
    if not quality:
        return 0
    match = _QUALITY_RE.search(quality)
    return int(match.group(1)) if match else 0


def pick_best_media(medias: Sequence[SanitizedMedia]) -> Optional[SanitizedMedia]:
    # sorted() is stable, so equal scores keep upstream order
    ranked = sorted(medias, key=lambda media: quality_score(media.quality), reverse=True)
    if not ranked:
        return None
    return next((media for media in ranked if media.type == "video"), ranked[0])
