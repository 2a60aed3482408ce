"""Message templates."""

from sendly.templates.schemas import (
    CreateTemplateRequest,
    Template,
    TemplateListResponse,
    TemplatePreview,
    TemplateStatus,
    TemplateVariable,
    UpdateTemplateRequest,
)
from sendly.templates.service import TemplateManager

__all__ = [
    "CreateTemplateRequest",
    "Template",
    "TemplateListResponse",
    "TemplateManager",
    "TemplatePreview",
    "TemplateStatus",
    "TemplateVariable",
    "UpdateTemplateRequest",
]
