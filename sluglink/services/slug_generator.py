"""Human-readable slug generation

A slug generator proposes a short, memorable code for a URL (e.g. "ghub" for
https://github.com). Proposals are only suggestions: the shortening policy
checks their availability and falls back to a hash-based code whenever the
generator fails.

Classes:
    SlugGenerator:
        Interface every generator implements.
    BedrockSlugGenerator:
        Asks a text-generation model on Amazon Bedrock (Converse API) for a slug.

Functions:
    clean_slug(raw: str) -> str | None
        Reduce raw generator output to a valid slug, or None.
    extract_domain(url: str) -> str
        Strip the scheme and path from a URL.
    build_slug_generator(config: dict | None, deadline: Deadline | None = None) -> SlugGenerator | None
        Build the configured generator, None when the generator is disabled.

Example:
    >>> clean_slug('  GHub!\\n')
    'ghub'
    >>> clean_slug('-a-') is None
    True
"""

import re
import logging
from abc import ABC, abstractmethod

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from sluglink.types import BedrockRuntimeClient
from sluglink.constants import Defaults, SlugRules
from sluglink.exceptions import SlugGenerationError
from sluglink.utils.deadline import Deadline, bounded_timeout


logger = logging.getLogger(__name__)

INVALID_SLUG_CHARS = re.compile(r'[^a-z0-9-]')

PROMPT_TEMPLATE = """Generate exactly one short, catchy, and memorable URL slug for this website:
URL: {url}
Domain: {domain}

Requirements:
- 3 to 8 characters
- Memorable and relevant to the website's name or purpose
- Use only lowercase letters, numbers, and hyphens
- No spaces, underscores, or special characters
- Avoid generic or overused slugs

Examples:
- For "github.com" -> "ghub" or "git"
- For "stackoverflow.com" -> "stack" or "so"
- For "reddit.com" -> "reddit" or "rdt"

Output:
Only return the slug itself with no explanation or formatting."""


def clean_slug(raw: str) -> str | None:
    """Reduce raw generator output to a valid slug.

    Steps: strip whitespace, lowercase, drop every character outside [a-z0-9-],
    trim leading/trailing hyphens, truncate to 8 characters.

    Returns:
        str | None: The cleaned slug, or None if fewer than 3 characters remain.
    """
    slug = INVALID_SLUG_CHARS.sub('', raw.strip().lower()).strip('-')
    slug = slug[: SlugRules.MAX_LENGTH]
    if len(slug) < SlugRules.MIN_LENGTH:
        return None
    return slug


def extract_domain(url: str) -> str:
    for prefix in ('http://', 'https://'):
        if url.startswith(prefix):
            url = url[len(prefix) :]
            break
    return url.split('/', 1)[0]


class SlugGenerator(ABC):
    """Interface for slug generators.

    Methods:
        generate(url: str) -> str:
            Return a cleaned slug matching [a-z0-9-]{3,8}.
            Raises SlugGenerationError on any failure.
    """

    @abstractmethod
    def generate(self, url: str) -> str:
        pass


class BedrockSlugGenerator(SlugGenerator):
    """Slug generator backed by a Bedrock text-generation model.

    Authentication uses the Bedrock API key that botocore reads from the
    AWS_BEARER_TOKEN_BEDROCK environment variable (or regular AWS credentials).
    Every call is bounded by botocore timeouts and never retried.

    Args:
        model_id (str):
            Bedrock model identifier, e.g. 'amazon.nova-micro-v1:0'.
        region (str):
            AWS region hosting the model.
        timeout (float):
            Connect and read timeout in seconds.
        client (Optional[BedrockRuntimeClient]):
            Pre-initialized bedrock-runtime client (useful in tests).
    """

    MAX_TOKENS = 20
    TEMPERATURE = 0.7

    def __init__(
        self,
        model_id: str,
        region: str | None = None,
        timeout: float = Defaults.SLUG_GENERATOR_TIMEOUT,
        client: BedrockRuntimeClient | None = None,
    ):
        if client is None:
            client = boto3.client(
                'bedrock-runtime',
                region_name=region,
                config=Config(
                    connect_timeout=timeout,
                    read_timeout=timeout,
                    retries={'total_max_attempts': 1},
                ),
            )
        self.client = client
        self.model_id = model_id

    def generate(self, url: str) -> str:
        prompt = PROMPT_TEMPLATE.format(url=url, domain=extract_domain(url))
        try:
            response = self.client.converse(
                modelId=self.model_id,
                messages=[{'role': 'user', 'content': [{'text': prompt}]}],
                inferenceConfig={'maxTokens': self.MAX_TOKENS, 'temperature': self.TEMPERATURE},
            )
        except (BotoCoreError, ClientError) as e:
            raise SlugGenerationError(f'Failed to generate slug: {e}') from e

        try:
            content = response['output']['message']['content']
            raw = ''.join(block.get('text', '') for block in content)
        except (KeyError, TypeError, AttributeError) as e:
            raise SlugGenerationError('Malformed response from Bedrock.') from e

        if not raw.strip():
            raise SlugGenerationError('No slug in response from Bedrock.')

        slug = clean_slug(raw)
        if slug is None:
            raise SlugGenerationError(f'Generated slug {raw!r} is empty after cleaning.')

        logger.info('Generated slug for URL.', extra={'slug': slug, 'url': url, 'modelId': self.model_id})
        return slug


def build_slug_generator(config: dict | None, deadline: Deadline | None = None) -> SlugGenerator | None:
    """Build the slug generator described by the 'slug_generator' config section.

    The botocore connect/read timeout is the configured timeout capped by the
    request deadline, so a slow model call fails once the request runs out of time.

    Returns:
        SlugGenerator | None: None if the section is absent (no API key configured).

    Raises:
        DeadlineExceededError: If the deadline already passed.
    """
    if config is None:
        logger.info('AI slug generation disabled - no API key provided.')
        return None

    logger.info('AI slug generation enabled.', extra={'modelId': config['model_id']})
    return BedrockSlugGenerator(
        model_id=config['model_id'],
        region=config.get('region'),
        timeout=bounded_timeout(config.get('timeout', Defaults.SLUG_GENERATOR_TIMEOUT), deadline, 'slug generator setup'),
    )
