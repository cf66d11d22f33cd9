"""Default configuration bootstrap (import side-effect)."""
from .api import set_config
from .core.config import ShdateConfig

set_config(ShdateConfig.from_env())
