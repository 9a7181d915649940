"""Utility functions for application configuration management.

Configuration is a JSON/YAML document with one section per component and,
inside it, one sub-section per data store backend:

    {
        "active_backend": "redis",
        "configs": {
            "url_store": {
                "redis": {"host": "...", "port": 6379, "db": 0, "socket_timeout": 2.0},
                "store": {"key_length": 7, "max_attempts": 5}
            }
        }
    }

`load_config(component)` returns the active backend's section plus the
backend-independent "store" section, e.g. {"redis": {...}, "store": {...}}.

Sources:
    - Locally (APP_ENV unset or 'local'): `config/<component>/<env>.yaml`
      under project_root(), parsed with PyYAML.
    - Elsewhere: AWS AppConfig, via the boto3 `appconfigdata` client.
      APPCONFIG_APP_ID, APPCONFIG_ENV_ID and APPCONFIG_PROFILE_ID must be set.

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`), defaulting to 'local'.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return the key prefix for DAOs, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(component: str) -> dict
        Load the configuration of a component.

Example:
    >>> from urlstore.utils.config import load_config
    >>> config = load_config('url_store')
    >>> print(config['redis']['host'])
    localhost
"""

import os
import json
import functools
import logging
from pathlib import Path
from collections.abc import Callable

import boto3
import yaml

from urlstore.constants import ENV
from urlstore.exceptions import BadConfigurationError
from urlstore.utils.helpers import require_environment
from urlstore.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    """Return the project root directory

    Reads PROJECT_ROOT, falls back to the current working directory.
    """
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'urlstore'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'urlstore:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _component_section(document: dict, component: str) -> dict:
    """Extract {backend: ..., 'store': ...} for `component` from a full config document."""
    try:
        backend = document['active_backend']
        section = document['configs'][component]
        data = {backend: section[backend]}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"Configuration has no '{component}' section for the active backend.") from e

    if 'store' in section:
        data['store'] = section['store']
    return data


def _load_local_config(func: Callable[[str], dict]) -> Callable[[str], dict]:
    """Decorator: load configuration from a local YAML file when running locally

    Behavior:
        - If the application is running locally, read
          `<project root>/config/<component>/<env>.yaml`.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    @functools.wraps(func)
    def wrapper(component: str) -> dict:
        if not running_locally():
            return func(component)

        path = project_root() / 'config' / component / f'{app_env()}.yaml'
        logger.debug('Trying to load configuration from local file.', extra={'path': str(path), 'component': component})
        with path.open('r', encoding='utf-8') as f:
            document = yaml.safe_load(f)

        data = _component_section(document, component)
        logger.debug('Loaded configuration from local file.', extra={'component': component})
        return data

    return wrapper


@_load_local_config
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(component: str) -> dict:
    """Load configuration for a given component from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        component (str):
            Name of the configuration section (e.g., "url_store").

    Returns:
        dict: {<active backend>: {...}, 'store': {...}}

    Raises:
        MissingEnvironmentVariableError: if an AppConfig id is not set.
        BadConfigurationError: if the document lacks the component section.
    """
    logger.debug('Trying to load configuration from AWS AppConfig.', extra={'component': component})

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    # Fetch the configuration
    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    document = json.loads(content.decode('utf-8'))

    data = _component_section(document, component)
    logger.debug('Loaded configuration from AWS AppConfig.', extra={'component': component})
    return data
