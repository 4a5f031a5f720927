from repokit.core.app import Application
from repokit.core.container import Container
from repokit.core.module import Module
from repokit.core.routing import HttpModule
from repokit.core.config import Config, Settings, load_config_from_env
from repokit.core.log import configure_logging

__all__ = [
    "Application",
    "Container",
    "Module",
    "HttpModule",
    "Config",
    "Settings",
    "load_config_from_env",
    "configure_logging",
]
