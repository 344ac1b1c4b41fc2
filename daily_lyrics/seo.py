"""
Daily Lyrics - Document Head Metadata

Builds the ``<head>`` tag set shared by every page: charset and viewport,
stylesheets, the robots exclusion, plain and Open Graph title/description,
the preview image (as ``og:image`` and as a preload hint) and the Twitter
card.  ``build_head_tags`` is a pure function of its arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from markupsafe import Markup, escape

from daily_lyrics.config import ROBOTS, STYLESHEETS

TWITTER_CARD = "summary_large_image"

# Elements written as a start tag with text content and a closing tag
_CONTAINER_ELEMENTS = {"title"}


@dataclass(frozen=True)
class HeadTag:
    """One element in the document head."""

    element: str
    attrs: tuple[tuple[str, str], ...] = ()
    text: Optional[str] = None

    def render(self) -> Markup:
        attrs = "".join(f' {name}="{escape(value)}"' for name, value in self.attrs)
        if self.element in _CONTAINER_ELEMENTS:
            return Markup(f"<{self.element}{attrs}>{escape(self.text or '')}</{self.element}>")
        return Markup(f"<{self.element}{attrs} />")


def _meta(key: str, name: str, content: str) -> HeadTag:
    return HeadTag("meta", ((key, name), ("content", content)))


def _link(rel: str, href: str, **extra: str) -> HeadTag:
    return HeadTag("link", (("rel", rel), ("href", href), *extra.items()))


def build_head_tags(
    title: str,
    description: str,
    image_url: str,
    site_domain: str,
    social_handle: str,
    path: str = "/",
) -> tuple[HeadTag, ...]:
    """
    Return the head tags for one page.

    ``path`` is the page's own path and is only used for the canonical and
    ``og:url`` links.  ``social_handle`` may be given with or without the
    leading ``@``.
    """
    handle = "@" + social_handle.lstrip("@") if social_handle else ""
    page_url = f"https://{site_domain}/{path.lstrip('/')}"

    tags: list[HeadTag] = [
        HeadTag("meta", (("charset", "UTF-8"),)),
        _meta("name", "viewport", "width=device-width,initial-scale=1"),
        _meta("name", "referrer", "origin"),
        _meta("name", "robots", ROBOTS),
    ]
    tags.extend(_link("stylesheet", href) for href in STYLESHEETS)

    tags.append(HeadTag("title", text=title))
    tags.append(_meta("name", "description", description))
    tags.append(_link("canonical", page_url))

    tags.extend(
        [
            _meta("property", "og:title", title),
            _meta("property", "og:description", description),
            _meta("property", "og:type", "website"),
            _meta("property", "og:url", page_url),
            _meta("property", "og:site_name", site_domain),
        ]
    )
    if image_url:
        tags.append(_meta("property", "og:image", image_url))
        tags.append(_link("preload", image_url, **{"as": "image"}))

    tags.append(_meta("name", "twitter:card", TWITTER_CARD))
    if handle:
        tags.append(_meta("name", "twitter:site", handle))
        tags.append(_meta("name", "twitter:creator", handle))

    return tuple(tags)


def render_head(tags: tuple[HeadTag, ...]) -> Markup:
    return Markup("\n").join(tag.render() for tag in tags)
