"""
Single-document site settings: hero, about page and SEO metadata.
"""
from stagedoor.schemas import AboutPageSettings, HeroSettings, SEOSettings
from stagedoor.services.base import SettingsService


class HeroService(SettingsService[HeroSettings]):
    model = HeroSettings
    read_path = "/api/hero"
    admin_path = "/api/admin/hero"


class AboutPageService(SettingsService[AboutPageSettings]):
    model = AboutPageSettings
    read_path = "/api/about"
    admin_path = "/api/admin/about"


class SEOService(SettingsService[SEOSettings]):
    model = SEOSettings
    read_path = "/api/seo"
    admin_path = "/api/admin/seo"
