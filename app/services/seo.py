"""
robots.txt and sitemap.xml generation.

Both documents are built from the request's public origin so the same
deployment works behind any host name.
"""

import re
from datetime import datetime
from typing import Iterable, List, Optional
from xml.sax.saxutils import escape

from fastapi import Request

from app.models.content import ContentPost
from app.models.job import Job

STATIC_PAGES = ["/", "/blog", "/preparation", "/about", "/contact", "/privacy", "/terms", "/disclaimer"]


def slugify(text: str) -> str:
    """
    URL slug for a job title.

    >>> slugify("Bank  Clerk – 2024!")
    'bank-clerk-2024'
    """
    slug = (text or "").lower().strip()
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"[^\w-]+", "", slug)
    slug = re.sub(r"--+", "-", slug)
    return slug.strip("-")


def base_url(request: Request) -> str:
    """Public origin: forwarded protocol (or request scheme) plus Host."""
    scheme = request.headers.get("x-forwarded-proto") or request.url.scheme
    host = request.headers.get("host") or request.url.netloc
    return f"{scheme}://{host}"


def build_robots(base: str) -> str:
    return (
        "User-agent: *\n"
        "Allow: /\n"
        f"Sitemap: {base}/sitemap.xml\n"
        "\n"
        "Disallow: /admin\n"
        "Disallow: /api\n"
    )


def _url_entry(loc: str, lastmod: Optional[datetime] = None) -> str:
    parts = [f"<loc>{escape(loc)}</loc>"]
    if lastmod is not None:
        parts.append(f"<lastmod>{lastmod.isoformat()}</lastmod>")
    parts.append("<changefreq>daily</changefreq>")
    parts.append("<priority>0.8</priority>")
    return "<url>" + "".join(parts) + "</url>"


def build_sitemap(base: str, jobs: Iterable[Job], posts: Iterable[ContentPost]) -> str:
    """
    Sitemap with the static pages, then jobs, then blog posts.

    Callers pass only listable rows: non-expired jobs and published
    posts of type `posts`.
    """
    entries: List[str] = [_url_entry(f"{base}{page}") for page in STATIC_PAGES]
    entries.extend(_url_entry(f"{base}/job/{slugify(job.title)}", job.created_at) for job in jobs)
    entries.extend(_url_entry(f"{base}/blog/{post.id}", post.created_at) for post in posts)

    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        + "\n".join(entries)
        + "\n</urlset>\n"
    )
