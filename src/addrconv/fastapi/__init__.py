"""
FastAPI application for the address conversion RPC
"""

from addrconv.fastapi.app import create_app

__all__ = ["create_app"]
