"""Client configuration.

Settings can be built directly or read from the environment:

  CONTENTFUL_ACCESS_TOKEN   – delivery (or preview) API token
  CONTENTFUL_SPACE_ID       – space identifier
  CONTENTFUL_ENVIRONMENT    – environment identifier (default: master)
  CONTENTFUL_PREVIEW        – set to "1" to use the preview API
  CONTENTFUL_API_URL        – override the API base URL
"""

import os
from dataclasses import dataclass, field

PRODUCTION_URL = 'https://cdn.contentful.com'
PREVIEW_URL = 'https://preview.contentful.com'
DEFAULT_ENVIRONMENT = 'master'
DEFAULT_TIMEOUT = 30.0


@dataclass
class ClientSettings:
    """Connection settings for the delivery API."""

    access_token: str
    space_id: str
    environment_id: str = DEFAULT_ENVIRONMENT
    preview: bool = False
    api_url: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float = DEFAULT_TIMEOUT

    @property
    def base_url(self) -> str:
        if self.api_url:
            return self.api_url.rstrip('/')
        return PREVIEW_URL if self.preview else PRODUCTION_URL

    @property
    def space_uri(self) -> str:
        """Root URI of the configured space environment."""
        environment = self.environment_id or DEFAULT_ENVIRONMENT
        return f"{self.base_url}/spaces/{self.space_id}/environments/{environment}"

    @classmethod
    def from_env(cls, **overrides) -> 'ClientSettings':
        """Build settings from CONTENTFUL_* environment variables.

        Keyword arguments that are not ``None`` take precedence over the
        environment.
        """
        values = {
            'access_token': os.environ.get('CONTENTFUL_ACCESS_TOKEN', ''),
            'space_id': os.environ.get('CONTENTFUL_SPACE_ID', ''),
            'environment_id': os.environ.get('CONTENTFUL_ENVIRONMENT', DEFAULT_ENVIRONMENT),
            'preview': os.environ.get('CONTENTFUL_PREVIEW', '0') == '1',
            'api_url': os.environ.get('CONTENTFUL_API_URL') or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
