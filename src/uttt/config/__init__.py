from .settings import DEFAULT_CONFIG_PATH, load_config, setup_logging
