"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from sotay.api import app

    uvicorn sotay.api:app --reload
"""

from sotay.api.app import app

__all__ = ["app"]
