"""Message template management."""

from __future__ import annotations

import logging
from typing import Any

from sendly.executor import RequestExecutor
from sendly.templates.schemas import (
    CreateTemplateRequest,
    Template,
    TemplateListResponse,
    TemplatePreview,
    UpdateTemplateRequest,
)

logger = logging.getLogger(__name__)


class TemplateManager:
    """CRUD, publishing and previews for message templates."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    async def list(self) -> TemplateListResponse:
        data = await self._executor.request("GET", "/templates")
        return TemplateListResponse.model_validate(data)

    async def presets(self) -> TemplateListResponse:
        """Built-in templates only."""
        data = await self._executor.request("GET", "/templates/presets")
        return TemplateListResponse.model_validate(data)

    async def get(self, template_id: str) -> Template:
        data = await self._executor.request("GET", f"/templates/{template_id}")
        return Template.model_validate(data)

    async def create(self, req: CreateTemplateRequest) -> Template:
        data = await self._executor.request("POST", "/templates", req.model_dump())
        template = Template.model_validate(data)
        logger.info("Created template %s", template.id)
        return template

    async def update(self, template_id: str, req: UpdateTemplateRequest) -> Template:
        """Update a template; fields left as ``None`` are not sent."""
        data = await self._executor.request(
            "PATCH", f"/templates/{template_id}", req.model_dump(exclude_none=True)
        )
        return Template.model_validate(data)

    async def publish(self, template_id: str) -> Template:
        """Publish a draft template."""
        data = await self._executor.request("POST", f"/templates/{template_id}/publish")
        template = Template.model_validate(data)
        logger.info("Published template %s (version %d)", template.id, template.version)
        return template

    async def preview(
        self, template_id: str, variables: dict[str, str] | None = None
    ) -> TemplatePreview:
        """
        Render a template with sample values.

        Args:
            template_id: Template to render
            variables: Values to substitute. ``None`` leaves the key out of the
                request entirely; an empty dict is sent as-is.
        """
        body: dict[str, Any] = {}
        if variables is not None:
            body["variables"] = variables

        data = await self._executor.request("POST", f"/templates/{template_id}/preview", body)
        return TemplatePreview.model_validate(data)

    async def delete(self, template_id: str) -> None:
        await self._executor.request("DELETE", f"/templates/{template_id}")
        logger.info("Deleted template %s", template_id)
