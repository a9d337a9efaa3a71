from dataclasses import dataclass, asdict
from datetime import datetime
from enum import StrEnum


class SlugType(StrEnum):
    """Provenance of a short code."""

    GENERATOR_DERIVED = 'generator_derived'
    HASH_BASED = 'hash_based'


# fmt: off
@dataclass(frozen=True)
class ShortURLModel:
    target: str                         # Original long URL
    shortcode: str                      # Unique short identifier of shortened URL
    created_at: datetime | None = None  # Moment the mapping was stored
    expires_at: datetime | None = None  # TTL as Python datetime, after which this record is expired


@dataclass(frozen=True)
class ShortenedURL:
    original_url: str                   # Normalized URL that was shortened
    short_code: str                     # Code the URL is stored under
    short_url: str                      # Public URL resolving to original_url
    slug_type: SlugType                 # Which branch of the shortening policy produced short_code

    def to_dict(self) -> dict[str, str]:
        return {k: str(v) for k, v in asdict(self).items()}
# fmt: on
