"""
Email service — generate, render, and preview event emails.
"""

import logging

from src.emails import (
    DEFAULT_TEMPLATE,
    EmailOutput,
    EngineConfig,
    EventStore,
    Validator,
    generate_email,
    render_template,
)

logger = logging.getLogger(__name__)


def generate(
    store: EventStore,
    event_id: str | None,
    content_type: str,
    topic: str | None,
    engine_config: EngineConfig,
    validator: Validator,
) -> dict:
    """Generate email slots for a stored event."""
    output = generate_email(
        store, event_id, content_type, topic, config=engine_config, validator=validator
    )
    return output.to_dict()


def render(
    template: str,
    output: dict,
    flatten_utm: bool = False,
    autoescape: bool = False,
) -> str:
    """Merge a serialized EmailOutput into a template."""
    email = EmailOutput.from_dict(output)
    return render_template(
        template,
        email.to_template_context(flatten_utm=flatten_utm),
        autoescape=autoescape,
    )


def preview(
    store: EventStore,
    event_id: str | None,
    content_type: str,
    topic: str | None,
    engine_config: EngineConfig,
    validator: Validator,
) -> dict:
    """Generate an email and render it with the event's own template.

    Events without a template are rendered with the default layout.
    """
    output = generate_email(
        store, event_id, content_type, topic, config=engine_config, validator=validator
    )
    event = store.get(event_id)
    template_source = "event" if event.html_template.strip() else "default"
    template = event.html_template if template_source == "event" else DEFAULT_TEMPLATE

    html = render_template(template, output)
    logger.info(f"Rendered preview for event {event_id} using {template_source} template")

    return {
        "output": output.to_dict(),
        "html": html,
        "template_source": template_source,
    }
