from sluglink.services.slug_generator import SlugGenerator, BedrockSlugGenerator, build_slug_generator, clean_slug
from sluglink.services.url_shortener import URLShortener, SlugAvailability


__all__ = [
    'SlugGenerator',
    'BedrockSlugGenerator',
    'build_slug_generator',
    'clean_slug',
    'URLShortener',
    'SlugAvailability',
]
