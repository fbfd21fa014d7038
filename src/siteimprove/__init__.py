"""Siteimprove integration for CMS content.

Requests Siteimprove tokens and resolves content entities to the front-end
URLs the Siteimprove overlay should check.
"""

from .app import SiteimproveApp, create_app
from .config import Config
from .entity import ContentEntity, Entity, EntityMalformedError
from .resolver import EntityUrlResolver
from .routing import RequestContext
from .session import Account, SessionContext
from .token import TokenClient

__all__ = [
    "Account",
    "Config",
    "ContentEntity",
    "Entity",
    "EntityMalformedError",
    "EntityUrlResolver",
    "RequestContext",
    "SessionContext",
    "SiteimproveApp",
    "TokenClient",
    "create_app",
]
