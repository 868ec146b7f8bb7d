"""Application ports package."""

from .customer_repository import CustomerRepositoryPort
from .database import DatabaseEnginePort
from .entry_repository import EntryRepositoryPort
from .identity_provider import (
    SIGNED_IN,
    SIGNED_OUT,
    AuthListener,
    IdentityProviderPort,
    UserSession,
)
from .report_renderer import ReportRendererPort

__all__ = [
    "CustomerRepositoryPort",
    "DatabaseEnginePort",
    "EntryRepositoryPort",
    "SIGNED_IN",
    "SIGNED_OUT",
    "AuthListener",
    "IdentityProviderPort",
    "UserSession",
    "ReportRendererPort",
]
