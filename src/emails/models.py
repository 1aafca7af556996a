"""
Data model for event-driven marketing emails.

Events are immutable once created. EmailOutput records are generated on
demand and never stored; their field order is the stable serialization
order used by the API and the CLI.
"""

import json
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any
from urllib.parse import urlencode

from .errors import MalformedOutput

UTM_SOURCE = "email"
UTM_MEDIUM = "newsletter"

_UTM_DEFAULTS = {
    "utm_source": UTM_SOURCE,
    "utm_medium": UTM_MEDIUM,
    "utm_campaign": "",
    "utm_content": "",
}


class ContentType(str, Enum):
    """Marketing angle used to fill the email slots."""

    ANNOUNCE = "announce"
    SALE = "sale"
    PAIN_SALE = "pain_sale"
    REMINDER = "reminder"
    DIGEST = "digest"


@dataclass(frozen=True)
class Event:
    """A stored event. Comma-separated fields are kept as raw text."""

    id: str
    name: str
    slug: str
    date: str = ""
    program: str = ""
    speakers: str = ""
    pains: str = ""
    rag_links: str = ""  # opaque, never fetched
    html_template: str = ""


EVENT_TEXT_FIELDS = (
    "name",
    "slug",
    "date",
    "program",
    "speakers",
    "pains",
    "rag_links",
    "html_template",
)


@dataclass(frozen=True)
class UTMParams:
    """Campaign attribution fields for the CTA link."""

    utm_source: str
    utm_medium: str
    utm_campaign: str
    utm_content: str

    @classmethod
    def for_event(cls, event: Event, content_type: ContentType) -> "UTMParams":
        return cls(
            utm_source=UTM_SOURCE,
            utm_medium=UTM_MEDIUM,
            utm_campaign=event.slug,
            utm_content=ContentType(content_type).value,
        )

    def to_dict(self) -> dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def as_query(self) -> str:
        """Encode as a URL query string (without the leading '?')."""
        return urlencode(self.to_dict())

    def __str__(self) -> str:
        return self.as_query()


@dataclass(frozen=True)
class ValidationError:
    """A non-fatal content problem attached to a generated email."""

    slot: str
    reason: str

    def to_dict(self) -> dict[str, str]:
        return {"slot": self.slot, "reason": self.reason}

    def __str__(self) -> str:
        return f"{self.slot}: {self.reason}"


@dataclass
class EmailOutput:
    """Generated email slots, ready for template merge."""

    subject: str
    preheader: str
    headline: str
    intro: str
    pain_point: str | None
    value_proposition: str
    agenda_block: str | None
    speakers_block: str | None
    offer: str
    cta_text: str
    cta_url: str
    utm_params: UTMParams
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def tracked_cta_url(self) -> str:
        """CTA URL with the UTM parameters appended."""
        separator = "&" if "?" in self.cta_url else "?"
        return f"{self.cta_url}{separator}{self.utm_params.as_query()}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize with stable key order; absent slots become None."""
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == "utm_params":
                value = value.to_dict()
            elif f.name == "errors":
                value = [e.to_dict() for e in value]
            data[f.name] = value
        return data

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmailOutput":
        """Rebuild an output from its ``to_dict`` form (e.g. a saved JSON file).

        Missing UTM fields fall back to their defaults.

        Raises:
            MalformedOutput: ``utm_params`` or ``errors`` have the wrong
                shape or carry unknown keys.
        """
        utm = data.get("utm_params") or {}
        errors = data.get("errors") or []
        if not isinstance(utm, dict) or not isinstance(errors, list):
            raise MalformedOutput("'utm_params' must be an object and 'errors' a list")

        values = {f.name: data.get(f.name) for f in fields(cls)}
        try:
            values["utm_params"] = UTMParams(**{**_UTM_DEFAULTS, **utm})
            values["errors"] = [ValidationError(**e) for e in errors]
        except TypeError as e:
            raise MalformedOutput(f"Cannot rebuild email output: {e}") from e
        for name in ("subject", "preheader", "headline", "intro",
                     "value_proposition", "offer", "cta_text", "cta_url"):
            values[name] = values[name] or ""
        return cls(**values)

    def to_template_context(self, flatten_utm: bool = False) -> dict[str, Any]:
        """Top-level slot mapping for the template renderer.

        With ``flatten_utm`` the four UTM fields and ``tracked_cta_url``
        become addressable as plain placeholders.
        """
        context: dict[str, Any] = {f.name: getattr(self, f.name) for f in fields(self)}
        if flatten_utm:
            context.update(self.utm_params.to_dict())
            context["tracked_cta_url"] = self.tracked_cta_url
        return context
