"""HTML rendering for the generator page and its output sections."""

from dataclasses import dataclass
from html import escape
import json

from models import BLOG_IDEAS, ONE_LINER, SEO_TERMS, SITE_MAP, VALUE_PROPOSITION, GenerationResult
from seo_generator import SeoGenerator

PAGE_TITLE = "SEO Content Generator"
PAGE_DESCRIPTION = "Enter your website details to generate SEO content"

TEXT_FIELDS = [
    (ONE_LINER, "One-liner:"),
    (VALUE_PROPOSITION, "Value Proposition:"),
]

LIST_FIELDS = [
    (SITE_MAP, "Suggested Site Map:", "No site map available"),
    (BLOG_IDEAS, "Blog Ideas:", "No blog ideas available"),
    (SEO_TERMS, "SEO Terms:", "No SEO terms available"),
]


@dataclass(frozen=True)
class Section:
    """One rendered output block.

    Text sections carry ``text``; list sections carry either ``items`` or,
    when the field is missing or not an array, the ``fallback`` string.
    """

    key: str
    heading: str
    text: str | None = None
    items: list | None = None
    fallback: str | None = None


def _text_value(value: object) -> str:
    if value is None:
        return ""
    # Non-string JSON values are shown in their JSON spelling.
    return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)


def build_sections(result: GenerationResult | None) -> list[Section]:
    """Map a (possibly partial or malformed) result to the five output sections."""
    data = result if isinstance(result, dict) else {}
    sections = [
        Section(key=key, heading=heading, text=_text_value(data.get(key)))
        for key, heading in TEXT_FIELDS
    ]
    for key, heading, fallback in LIST_FIELDS:
        value = data.get(key)
        if isinstance(value, list):
            sections.append(Section(key=key, heading=heading, items=list(value)))
        else:
            sections.append(Section(key=key, heading=heading, fallback=fallback))
    return sections


def _render_section(section: Section) -> str:
    heading = f'<h3 class="text-lg font-semibold">{escape(section.heading)}</h3>'
    if section.items is not None:
        items = "".join(f"<li>{escape(_text_value(item))}</li>" for item in section.items)
        body = f'<ul class="list-disc pl-5">{items}</ul>'
    elif section.fallback is not None:
        body = f"<p>{escape(section.fallback)}</p>"
    else:
        body = f"<p>{escape(section.text or '')}</p>"
    return f'<div class="section" data-field="{escape(section.key)}">{heading}{body}</div>'


def render_output(result: GenerationResult | None) -> str:
    sections = "".join(_render_section(s) for s in build_sections(result))
    return (
        '<div class="card output mt-8">'
        "<h2>Generated Output</h2>"
        f'<div class="space-y-4">{sections}</div>'
        "</div>"
    )


def render_error(message: str) -> str:
    return (
        '<div class="alert alert-destructive mt-4" role="alert">'
        "<h4>Error</h4>"
        f"<p>{escape(message)}</p>"
        "</div>"
    )


def render_form(component: SeoGenerator) -> str:
    form = component.form
    disabled = " disabled" if component.is_loading else ""
    button_label = "Generating..." if component.is_loading else "Generate Content"
    return f"""<form method="post" action="/" class="space-y-4">
  <div>
    <label for="url">Website URL</label>
    <input id="url" name="url" type="url" value="{escape(form.url)}" placeholder="https://example.com" required>
  </div>
  <div>
    <label for="keywords">SEO Keywords (optional)</label>
    <input id="keywords" name="keywords" type="text" value="{escape(form.keywords)}" placeholder="e.g. digital marketing, SEO, web design">
  </div>
  <div>
    <label for="businessInfo">Business Information</label>
    <textarea id="businessInfo" name="businessInfo" placeholder="Describe your business...">{escape(form.business_info)}</textarea>
  </div>
  <button type="submit"{disabled}>{button_label}</button>
</form>"""


def render_page(component: SeoGenerator) -> str:
    """Render the full page for the component's current state."""
    parts = [
        '<div class="card">',
        f"<h1>{PAGE_TITLE}</h1>",
        f"<p>{PAGE_DESCRIPTION}</p>",
        render_form(component),
        "</div>",
    ]
    if component.error:
        parts.append(render_error(component.error))
    if component.output is not None:
        parts.append(render_output(component.output))

    body = "\n".join(parts)
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{PAGE_TITLE}</title>
</head>
<body>
<div class="container mx-auto p-4 max-w-2xl">
{body}
</div>
</body>
</html>"""
