"""Presentation-related Pydantic models.

Field names are snake_case in Python and camelCase on the wire, matching the
JSON schema the model is asked to produce. Only fields the model actually
sent (or the pipeline set) are written back out, so a parsed document
round-trips unchanged.
"""
import logging
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

SLIDE_TYPES = ("title", "content", "comparison", "chart", "quote", "image", "conclusion")


class CamelModel(BaseModel):
    """Base model that reads and writes camelCase keys and keeps unknown fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to the camelCase JSON shape returned to clients."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class ChatMessage(BaseModel):
    """A single prompt message sent upstream."""

    role: Literal["system", "user"] = Field(description="Either 'system' or 'user'")
    content: str = Field(description="The message content")


class ChartData(CamelModel):
    type: Optional[str] = Field(default=None, description="bar|line|pie|doughnut")
    labels: Optional[list[Any]] = None
    values: Optional[list[Any]] = None
    label: Optional[str] = Field(default=None, description="Dataset name")


class Quote(CamelModel):
    text: Optional[str] = None
    author: Optional[str] = None


class Column(CamelModel):
    title: Optional[str] = None
    content: Optional[list[Any]] = None


class Theme(CamelModel):
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    background_color: Optional[str] = None
    text_color: Optional[str] = None


class Slide(CamelModel):
    """One slide of a generated presentation."""

    type: Optional[str] = Field(default=None, description="One of SLIDE_TYPES; not enforced")
    title: Optional[str] = Field(default=None, description="Slide title")
    content: Optional[Any] = Field(default=None, description="Bullet points, passed through as sent")
    notes: Optional[str] = Field(default=None, description="Speaker notes")
    chart_data: Optional[ChartData] = None
    image_search: Optional[str] = None
    quote: Optional[Quote] = None
    left_column: Optional[Column] = None
    right_column: Optional[Column] = None

    # Set by the enhancement stage
    enhanced_notes: Optional[str] = None
    transition: Optional[str] = None


class PresentationDocument(CamelModel):
    """The document returned for a generate request. Never persisted."""

    title: str = Field(..., description="Main presentation title")
    subtitle: Optional[str] = Field(default=None, description="Presentation subtitle")
    slides: Optional[list[Slide]] = None
    theme: Optional[Theme] = None
    key_takeaways: Optional[list[str]] = None

    # Set when the pipeline finalizes the document
    id: Optional[str] = None
    created_at: Optional[str] = None
    topic: Optional[str] = None

    @property
    def slide_list(self) -> list[Slide]:
        """The slides, or an empty list when the model sent none."""
        return self.slides or []


class EnhancedSlide(CamelModel):
    slide_index: int = Field(..., description="Index into the presentation's slides")
    enhanced_notes: Optional[str] = None
    transition: Optional[str] = None


class EnhancementResult(CamelModel):
    """Parsed output of the enhancement stage.

    Entries are kept raw and validated one at a time, so a single malformed
    entry does not discard the rest.
    """

    enhanced_slides: list[Any] = Field(default_factory=list)
    key_takeaways: Optional[list[str]] = None

    def valid_entries(self) -> list[EnhancedSlide]:
        """Return the entries that parse as EnhancedSlide, skipping the rest."""
        entries = []
        for raw in self.enhanced_slides:
            if isinstance(raw, EnhancedSlide):
                entries.append(raw)
                continue
            try:
                entries.append(EnhancedSlide.model_validate(raw))
            except ValidationError:
                logger.debug(f"Ignoring malformed enhancement entry: {raw!r}")
        return entries


class GenerateRequest(BaseModel):
    """Request body for the generate endpoint."""

    topic: Optional[str] = Field(default=None, description="Presentation topic")


class HealthStatus(CamelModel):
    """Configuration and last-observed upstream health."""

    status: str = "ok"
    model: str
    api_format: str
    configured: bool
    healthy: Optional[bool] = None
    last_check: Optional[str] = None
    last_error: Optional[str] = None
