# src/solgate/utils/__init__.py
from .logger import setup_logging, get_logger

__all__ = ['setup_logging', 'get_logger']
