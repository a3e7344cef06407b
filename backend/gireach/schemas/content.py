"""Page content contracts. A section's ``type`` selects the shape of its ``data`` payload."""

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import ConfigDict, Field, field_validator

from gireach.schemas.common import ApiModel


class SectionStyles(ApiModel):
    background_color: Optional[str] = None
    text_color: Optional[str] = None
    font_size: Optional[str] = None
    padding: Optional[str] = None


class StatItem(ApiModel):
    label: str
    value: str


class StatsData(ApiModel):
    stats: List[StatItem] = Field(default_factory=list)


class ServiceItem(ApiModel):
    id: str
    title: str
    description: str = ""
    icon: Optional[str] = None
    color: Optional[str] = None


class ServicesData(ApiModel):
    services: List[ServiceItem] = Field(default_factory=list)


class ContactData(ApiModel):
    model_config = ConfigDict(extra="allow")

    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    hours: Optional[str] = None


class TestimonialItem(ApiModel):
    name: str
    quote: str
    role: Optional[str] = None
    image_url: Optional[str] = None


class TestimonialsData(ApiModel):
    testimonials: List[TestimonialItem] = Field(default_factory=list)


class _SectionBase(ApiModel):
    id: str = Field(min_length=1)
    title: str = ""
    content: str = ""
    image_url: Optional[str] = None
    styles: Optional[SectionStyles] = None


class HeroSection(_SectionBase):
    type: Literal["hero"] = "hero"
    data: Optional[Dict[str, Any]] = None


class TextSection(_SectionBase):
    type: Literal["text"] = "text"
    data: Optional[Dict[str, Any]] = None


class StatsSection(_SectionBase):
    type: Literal["stats"] = "stats"
    data: StatsData = Field(default_factory=StatsData)


class ServicesSection(_SectionBase):
    type: Literal["services"] = "services"
    data: ServicesData = Field(default_factory=ServicesData)


class ContactSection(_SectionBase):
    type: Literal["contact"] = "contact"
    data: ContactData = Field(default_factory=ContactData)


class TestimonialsSection(_SectionBase):
    type: Literal["testimonials"] = "testimonials"
    data: TestimonialsData = Field(default_factory=TestimonialsData)


ContentSection = Annotated[
    Union[HeroSection, TextSection, StatsSection, ServicesSection, ContactSection, TestimonialsSection],
    Field(discriminator="type"),
]


def ensure_unique_section_ids(sections: List[Any]) -> List[Any]:
    seen = set()
    for section in sections:
        if section.id in seen:
            raise ValueError(f"duplicate section id '{section.id}'")
        seen.add(section.id)
    return sections


def dump_sections(sections: List[Any]) -> List[dict]:
    return [section.model_dump(mode="json", by_alias=True, exclude_none=True) for section in sections]


class PageContent(ApiModel):
    """A page as the site renders it: ordered sections, top to bottom."""

    id: str
    name: str
    sections: List[ContentSection] = Field(default_factory=list)

    @field_validator("sections")
    @classmethod
    def _unique_ids(cls, value):
        return ensure_unique_section_ids(value)


class PageContentUpsert(ApiModel):
    page_id: str = Field(min_length=1, max_length=100)
    page_name: str = Field(min_length=1)
    sections: List[ContentSection] = Field(default_factory=list)
    updated_by_id: Optional[str] = None

    @field_validator("sections")
    @classmethod
    def _unique_ids(cls, value):
        return ensure_unique_section_ids(value)


class PageContentUpdate(ApiModel):
    page_name: Optional[str] = None
    sections: Optional[List[ContentSection]] = None
    is_published: Optional[bool] = None

    @field_validator("sections")
    @classmethod
    def _unique_ids(cls, value):
        if value is None:
            return value
        return ensure_unique_section_ids(value)


class PageContentRecord(ApiModel):
    id: str
    page_id: str
    page_name: str
    sections: List[ContentSection] = Field(default_factory=list)
    is_published: bool = True
    updated_by_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_page(self) -> PageContent:
        return PageContent(id=self.page_id, name=self.page_name, sections=self.sections)
