"""
Pydantic schemas for the site's API payloads
Field names are snake_case in Python and camelCase on the wire
"""
from datetime import datetime
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


# ===== ENVELOPE =====

class ApiEnvelope(BaseModel):
    """Wrapper every API response uses"""
    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None


class ApiModel(BaseModel):
    """Base for resource payloads"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        extra = "allow"


class RefreshData(ApiModel):
    """Payload of a successful token refresh"""
    access_token: Optional[str] = None


# ===== AUTH SCHEMAS =====

class AdminUser(ApiModel):
    id: str
    email: str
    name: str


class LoginResponse(ApiModel):
    access_token: str
    user: Optional[AdminUser] = None


# ===== SITE CONTENT SCHEMAS =====

class CallToAction(ApiModel):
    text: str
    link: str


class HeroSettings(ApiModel):
    title: str
    subtitle: str
    background_image: Optional[str] = None
    background_video: Optional[str] = None
    background_position: Optional[Literal["top", "center", "bottom"]] = None
    cta_whats_app: Optional[CallToAction] = Field(default=None, alias="ctaWhatsApp")
    cta_email: Optional[CallToAction] = None


class AboutPageSettings(ApiModel):
    hero_title: str
    hero_subtitle: str
    hero_background_image: Optional[str] = None
    hero_background_video: Optional[str] = None
    story_title: str
    story_content: str
    gallery_images: List[str] = []
    cta_title: str
    cta_description: str


class SocialMedia(ApiModel):
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    youtube: Optional[str] = None


class SEOSettings(ApiModel):
    default_title: str
    default_description: str
    default_image: str
    site_url: str
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    social_media: Optional[SocialMedia] = None


# ===== CATALOG SCHEMAS =====

class Document(ApiModel):
    """Stored record with Mongo-style id and timestamps"""
    id: Optional[str] = Field(default=None, alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class Category(Document):
    name: str
    slug: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    featured_image: Optional[str] = None
    media: List[str] = []
    audio_samples: List[str] = []
    price_range: Optional[str] = None
    order: Optional[int] = None


class Variation(Document):
    # Either an id or the populated category
    category_id: Any = None
    name: str
    short_description: str = ""
    long_description: str = ""
    slug: Optional[str] = None
    featured_image: Optional[str] = None
    order: Optional[int] = None


class Media(Document):
    variation_id: str
    type: Literal["image", "video"]
    url: str
    thumbnail_url: Optional[str] = None
    order: Optional[int] = None


class UploadedFile(ApiModel):
    url: str
    public_id: Optional[str] = None
    filename: Optional[str] = None
    size: Optional[int] = None


class Performance(Document):
    event_name: str
    venue_name: str
    city: str
    state: str
    date: datetime
    time: str
    ticket_link: Optional[str] = None
    description: Optional[str] = None
    featured_image: Optional[str] = None
    media: List[str] = []
    category_id: Optional[str] = None
    variation_id: Optional[str] = None
    category: Optional[Category] = None
    variation: Optional[Variation] = None


class Testimonial(Document):
    client_name: str
    event_type: str
    message: str
    rating: Optional[int] = None


class FAQ(Document):
    question: str
    answer: str
    order: Optional[int] = None
    is_active: Optional[bool] = None


# ===== CLIENT TRACKING SCHEMAS =====

ClientSource = Literal["contact_form", "manual"]
ClientStatus = Literal["lead", "contacted", "quoted", "confirmed", "cancelled", "completed"]


class Client(Document):
    name: str
    email: str
    phone: Optional[str] = None
    event_type: Optional[str] = None
    event_date: Optional[str] = None
    location: Optional[str] = None
    message: Optional[str] = None
    source: ClientSource = "manual"
    status: ClientStatus = "lead"
    notes: Optional[str] = None


class ClientCommunication(Document):
    client_id: str
    type: Literal["email", "note"]
    subject: Optional[str] = None
    body: Optional[str] = None
    sent_at: datetime
    status: Literal["pending_reply", "replied", "confirmed", "cancelled", "no_response"]
    notes: Optional[str] = None


class ContactForm(ApiModel):
    name: str
    email: str
    phone: str
    event_type: str
    event_date: str
    location: str
    message: str


class ContactResult(ApiModel):
    success: bool = True
    message: Optional[str] = None


# ===== INVOICE SCHEMAS =====

class InvoiceLineItem(ApiModel):
    description: str
    quantity: float
    unit_price: float
    gst_included: Optional[bool] = None


class Invoice(Document):
    invoice_number: str
    title: Optional[str] = None
    issue_date: datetime
    due_date: Optional[datetime] = None
    business_name: str
    abn: str
    business_address: Optional[str] = None
    client_id: Optional[str] = None
    client_name: str
    client_address: Optional[str] = None
    client_email: Optional[str] = None
    items: List[InvoiceLineItem] = []
    gst_rate: Optional[float] = None
    subtotal: Optional[float] = None
    gst_amount: Optional[float] = None
    total: Optional[float] = None
    payment_terms: Optional[str] = None
    notes: Optional[str] = None
    status: Optional[Literal["draft", "sent", "paid", "overdue"]] = None


class NextInvoiceNumber(ApiModel):
    invoice_number: str
