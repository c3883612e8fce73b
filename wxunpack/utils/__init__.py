from .logger import logger, set_verbose

__all__ = ["logger", "set_verbose"]
