# File: src/solgate/api/routes/__init__.py
from .blocks import router as blocks_router

__all__ = ['blocks_router']
