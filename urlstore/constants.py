from enum import StrEnum


class Keys:
    """Key assignment defaults."""

    # Marker prepended to caller-supplied (reserved) keys
    RESERVED_MARKER = '$'
    # Length of generated keys (62^7 ~ 3.5e12 possible keys)
    DEFAULT_LENGTH = 7
    # Maximum insert attempts for generated keys before giving up
    DEFAULT_MAX_ATTEMPTS = 5


class Telemetry:
    """Usage telemetry defaults."""

    NAMESPACE = 'url'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'


# Name of the configuration section read by build_url_store()
URL_STORE_COMPONENT = 'url_store'
