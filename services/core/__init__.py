# Core components: settings and logging
from .config import HealthEngineSettings, get_settings, settings
from .logging_config import setup_logging
