"""Build a URLStore from configuration.

Example:
    >>> from urlstore.store import build_url_store
    >>> store = build_url_store()  # reads load_config('url_store')
    >>> store.set('', 'https://example.com')
    'Gh71WPT'
"""

import logging
from typing import Any, Optional

import redis

from urlstore.constants import Keys, URL_STORE_COMPONENT
from urlstore.exceptions import BadConfigurationError
from urlstore.dao.redis import URLRecordRedisDAO
from urlstore.store.url_store import URLStore
from urlstore.telemetry import Usage
from urlstore.utils.config import app_prefix, load_config


logger = logging.getLogger(__name__)


def build_url_store(
    config: Optional[dict[str, Any]] = None,
    usage: Optional[Usage] = None,
    redis_client: Optional[redis.Redis] = None,
) -> URLStore:
    """Create a URLStore backed by the configured data store.

    Args:
        config (Optional[dict]):
            Output of load_config(). Loaded for the 'url_store' component if None.
        usage (Optional[Usage]):
            Telemetry counters to inject. A fresh Usage is created if None.
        redis_client (Optional[redis.Redis]):
            Pre-initialized Redis client, overrides the connection parameters.

    Returns:
        URLStore: ready-to-use store.

    Raises:
        BadConfigurationError: if no supported backend is configured.
        DataStoreError: if the data store is unreachable.
    """
    if config is None:
        config = load_config(URL_STORE_COMPONENT)

    if 'redis' not in config:
        backends = sorted(set(config) - {'store'})
        raise BadConfigurationError(f'Unsupported data store backend(s): {backends}. Expected: redis.')

    logger.debug('Using Redis as the backend data store for URL records.')
    redis_config = {f'redis_{k}': v for k, v in config['redis'].items()}
    dao = URLRecordRedisDAO(**redis_config, redis_client=redis_client, prefix=app_prefix())

    settings = config.get('store', {})
    return URLStore(
        dao=dao,
        usage=usage,
        key_length=int(settings.get('key_length', Keys.DEFAULT_LENGTH)),
        max_attempts=int(settings.get('max_attempts', Keys.DEFAULT_MAX_ATTEMPTS)),
    )
