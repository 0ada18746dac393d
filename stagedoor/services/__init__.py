"""
Resource services built on the access layer.

Each service takes the shared ApiClient, parses payloads into schemas and
clears the client's GET cache after every successful write.
"""
from .auth import AuthService
from .base import BaseService, ResourceService, SettingsService, dump_payload
from .catalog import CategoryService, MediaService, VariationService
from .clients import ClientCommunicationService, ClientService
from .contact import ContactService
from .content import AboutPageService, HeroService, SEOService
from .faq import FAQService
from .invoices import InvoiceService
from .performances import PerformanceService, TestimonialService

__all__ = [
    # Base
    "BaseService",
    "ResourceService",
    "SettingsService",
    "dump_payload",
    # Auth
    "AuthService",
    # Site content
    "HeroService",
    "AboutPageService",
    "SEOService",
    "PerformanceService",
    "TestimonialService",
    "FAQService",
    "ContactService",
    # Catalog
    "CategoryService",
    "VariationService",
    "MediaService",
    # Client tracking
    "ClientService",
    "ClientCommunicationService",
    "InvoiceService",
]
