"""
Template rendering for generated emails.

Merges an EmailOutput into an HTML template. The template language has
two constructs:

- ``{{slot}}`` placeholders, replaced by the slot's string form (empty
  string when the slot is absent or unknown);
- ``<!--IF:slot-->...<!--ENDIF-->`` blocks, kept only when the slot is
  present and non-empty. Blocks do not nest.

Conditional blocks are resolved first, then placeholders are substituted
in a single pass, so substituted text is never re-interpreted.
"""

import html
import logging
import re
from collections.abc import Mapping
from typing import Any

from .errors import TemplateSyntaxError
from .models import EmailOutput

logger = logging.getLogger("eventmail.renderer")

SLOT_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z_][A-Za-z0-9_]*)\s*\}\}")
MARKER_PATTERN = re.compile(r"<!--\s*(?:IF:(?P<slot>.*?)|(?P<end>ENDIF))\s*-->")


def _context(output: EmailOutput | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(output, EmailOutput):
        return output.to_template_context()
    return output


def _is_present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, dict)):
        return len(value) > 0
    return True


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value)
    return str(value)


def resolve_conditionals(template: str, context: Mapping[str, Any]) -> str:
    """Keep or drop every ``<!--IF:slot-->`` block.

    Raises:
        TemplateSyntaxError: invalid slot name, nested block, ENDIF
            without IF, or IF without ENDIF.
    """
    parts: list[str] = []
    cursor = 0
    open_slot: str | None = None
    open_at = 0
    body_start = 0

    for match in MARKER_PATTERN.finditer(template):
        slot = match.group("slot")
        if slot is not None:
            slot = slot.strip()
            if not SLOT_NAME_PATTERN.fullmatch(slot):
                raise TemplateSyntaxError(f"Invalid slot name in <!--IF:{slot}-->", match.start())
            if open_slot is not None:
                raise TemplateSyntaxError(
                    f"Nested <!--IF:{slot}--> inside <!--IF:{open_slot}-->",
                    match.start(),
                )
            parts.append(template[cursor:match.start()])
            open_slot, open_at, body_start = slot, match.start(), match.end()
            continue

        if open_slot is None:
            raise TemplateSyntaxError("<!--ENDIF--> without matching <!--IF-->", match.start())

        if _is_present(context.get(open_slot)):
            parts.append(template[body_start:match.start()])
        else:
            logger.debug(f"Dropped conditional block for empty slot '{open_slot}'")
        open_slot = None
        cursor = match.end()

    if open_slot is not None:
        raise TemplateSyntaxError(f"<!--IF:{open_slot}--> without matching <!--ENDIF-->", open_at)

    parts.append(template[cursor:])
    return "".join(parts)


def substitute_placeholders(
    template: str, context: Mapping[str, Any], autoescape: bool = False
) -> str:
    """Replace every ``{{slot}}`` with its value in one pass."""

    def replace(match: re.Match) -> str:
        value = _stringify(context.get(match.group(1)))
        return html.escape(value) if autoescape else value

    return PLACEHOLDER_PATTERN.sub(replace, template)


def render_template(
    template: str,
    output: EmailOutput | Mapping[str, Any],
    autoescape: bool = False,
) -> str:
    """Merge generated slots into an HTML template.

    Args:
        template: HTML with placeholders and conditional blocks.
        output: Generated email, or a mapping of slot name to value
            (e.g. ``output.to_template_context(flatten_utm=True)``).
        autoescape: HTML-escape substituted values.

    Returns:
        Rendered HTML.

    Raises:
        TemplateSyntaxError: unmatched or nested conditional markers.
    """
    context = _context(output)
    try:
        resolved = resolve_conditionals(template, context)
    except TemplateSyntaxError as e:
        logger.warning(f"Template rejected: {e}")
        raise
    return substitute_placeholders(resolved, context, autoescape=autoescape)


# =============================================================================
# Built-in Layouts
# =============================================================================


DEFAULT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{subject}}</title>
</head>
<body style="margin: 0; padding: 0; background-color: #f4f4f4; font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif;">
<div style="display: none; max-height: 0; overflow: hidden;">{{preheader}}</div>
<table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="background-color: #f4f4f4;">
<tr>
<td align="center" style="padding: 40px 20px;">
<table role="presentation" width="600" cellpadding="0" cellspacing="0" style="background-color: #ffffff; border-radius: 8px; overflow: hidden;">

<!-- Header -->
<tr>
<td style="background-color: #1a1a2e; padding: 30px 40px; text-align: center;">
<h1 style="margin: 0; color: #ffffff; font-size: 24px; font-weight: 600;">{{headline}}</h1>
</td>
</tr>

<!-- Body -->
<tr>
<td style="padding: 40px;">
<p style="margin: 0 0 16px 0; font-size: 16px; line-height: 1.6; color: #333333;">{{intro}}</p>
<!--IF:pain_point-->
<p style="margin: 0 0 16px 0; font-size: 16px; line-height: 1.6; color: #b00020;">{{pain_point}}</p>
<!--ENDIF-->
<p style="margin: 0 0 16px 0; font-size: 16px; line-height: 1.6; color: #333333; white-space: pre-line;">{{value_proposition}}</p>
<!--IF:agenda_block-->
<h2 style="margin: 24px 0 8px 0; font-size: 18px; color: #1a1a2e;">Program</h2>
<p style="margin: 0 0 16px 0; font-size: 15px; line-height: 1.6; color: #333333;">{{agenda_block}}</p>
<!--ENDIF-->
<!--IF:speakers_block-->
<h2 style="margin: 24px 0 8px 0; font-size: 18px; color: #1a1a2e;">Speakers</h2>
<p style="margin: 0 0 16px 0; font-size: 15px; line-height: 1.6; color: #333333;">{{speakers_block}}</p>
<!--ENDIF-->
<p style="margin: 0 0 16px 0; font-size: 16px; line-height: 1.6; color: #333333;"><strong>{{offer}}</strong></p>

<!-- CTA Button -->
<table role="presentation" width="100%" cellpadding="0" cellspacing="0" style="margin: 30px 0;">
<tr>
<td align="center">
<a href="{{cta_url}}" style="display: inline-block; padding: 14px 32px; background-color: #e94560; color: #ffffff; text-decoration: none; font-size: 16px; font-weight: 600; border-radius: 6px;">{{cta_text}}</a>
</td>
</tr>
</table>
</td>
</tr>

</table>
</td>
</tr>
</table>
</body>
</html>"""


def render_as_plaintext(output: EmailOutput) -> str:
    """Render an email as zero-HTML plaintext.

    Args:
        output: Generated email.

    Returns:
        Plain text string with no HTML tags.
    """
    lines = [
        f"Subject: {output.subject}",
        f"Preheader: {output.preheader}",
        "",
        output.headline,
        "",
        output.intro,
        "",
    ]

    if output.pain_point:
        lines.extend([output.pain_point, ""])

    lines.extend([output.value_proposition, ""])

    if output.agenda_block:
        lines.extend(["Program:", output.agenda_block, ""])
    if output.speakers_block:
        lines.extend(["Speakers:", output.speakers_block, ""])

    lines.extend([
        output.offer,
        "",
        f"{output.cta_text}: {output.tracked_cta_url}",
    ])

    return "\n".join(lines)
