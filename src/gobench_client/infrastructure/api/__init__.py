"""gobench master API gateway."""

from .async_gateway import AsyncApplicationGateway
from .gateway import GobenchApi

__all__ = ["GobenchApi", "AsyncApplicationGateway"]
