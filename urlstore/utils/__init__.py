from urlstore.utils.config import app_env, app_name, project_root, app_prefix, load_config
from urlstore.utils.helpers import require_environment
from urlstore.utils.keys import generate_key, reserve_key, is_reserved_key
from urlstore.utils.logging import initialize_logging


__all__ = [
    'generate_key',
    'reserve_key',
    'is_reserved_key',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'require_environment',
    'initialize_logging',
]
