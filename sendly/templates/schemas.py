"""Template Pydantic schemas."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class TemplateStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class TemplateVariable(BaseModel):
    """Placeholder declared by a template."""

    key: str = Field(..., description="Variable name used in the text")
    type: str = Field("", description="Variable type")
    fallback: str | None = Field(None, description="Value used when none is supplied")

    model_config = {"frozen": True}


class Template(BaseModel):
    """Reusable message template."""

    id: str = Field(..., description="Template ID")
    name: str = Field("", description="Template name")
    text: str = Field("", description="Message body with placeholders")
    variables: list[TemplateVariable] = Field(default_factory=list)
    is_preset: bool = Field(False, description="Whether this is a built-in template")
    preset_slug: str | None = Field(None, description="Slug of the built-in template")
    status: str = Field("", description="Template status: draft or published")
    version: int = Field(0, description="Template version")
    published_at: datetime | None = Field(None, description="When the template was published")
    created_at: datetime | None = Field(None, description="Creation timestamp")
    updated_at: datetime | None = Field(None, description="Last update timestamp")

    model_config = {"frozen": True}


class TemplateListResponse(BaseModel):
    templates: list[Template] = Field(default_factory=list)

    model_config = {"frozen": True}


class CreateTemplateRequest(BaseModel):
    name: str = Field(..., description="Template name")
    text: str = Field(..., description="Message body with placeholders")


class UpdateTemplateRequest(BaseModel):
    """Template update request.

    Only provided fields are sent.
    """

    name: str | None = Field(None, description="New template name")
    text: str | None = Field(None, description="New message body")


class TemplatePreview(BaseModel):
    """Template rendered with sample values."""

    id: str = Field(..., description="Template ID")
    name: str = Field("", description="Template name")
    original_text: str = Field("", description="Text with placeholders")
    preview_text: str = Field("", description="Text with values substituted")
    variables: list[TemplateVariable] = Field(default_factory=list)

    model_config = {"frozen": True}
