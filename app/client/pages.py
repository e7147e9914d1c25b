"""
Maps a browser path to the page the site renders and its document title.

Titles are built from `seoSettings.global.siteTitle` of the site data.
Maintenance mode replaces every public page; the admin area stays reachable.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.services.seo import slugify

STATIC_PAGES = {
    "/": ("home", None),
    "/blog": ("blog", "Blog"),
    "/preparation": ("preparation", "Exam Preparation"),
    "/privacy": ("privacy", "Privacy Policy"),
    "/terms": ("terms", "Terms & Conditions"),
    "/about": ("about", "About Us"),
    "/disclaimer": ("disclaimer", "Disclaimer"),
    "/contact": ("contact", "Contact Us"),
}


@dataclass(frozen=True)
class PageView:
    name: str
    title: str
    param: Optional[str] = None


def _site_title(data: Dict[str, Any]) -> str:
    seo = data.get("seoSettings") or {}
    return (seo.get("global") or {}).get("siteTitle", "")


def _segment(path: str) -> Optional[str]:
    """Second path segment, case preserved: `/job/Bank-Clerk` -> `Bank-Clerk`."""
    parts = path.split("/")
    return parts[2] if len(parts) > 2 and parts[2] else None


def resolve_page(path: str, data: Dict[str, Any], is_logged_in: bool) -> PageView:
    """
    Args:
        path: Request path, e.g. "/job/bank-clerk-2024"
        data: Site data as returned by /api/data
        is_logged_in: Whether an admin session is active

    Returns:
        PageView naming the page, its title and its path parameter
    """
    route = (path or "/").lower()
    if len(route) > 1:
        route = route.rstrip("/") or "/"
    site_title = _site_title(data)

    def titled(label: str) -> str:
        return f"{label} | {site_title}"

    if route.startswith("/admin"):
        name = "admin-panel" if is_logged_in else "admin-login"
        return PageView(name, titled("Admin Panel"))

    maintenance = bool((data.get("generalSettings") or {}).get("maintenanceMode"))

    if route.startswith("/job/"):
        view = PageView("job-detail", titled("Job Details"), _segment(path))
    elif route.startswith("/blog/"):
        view = PageView("blog-detail", titled("Blog Post"), _segment(path))
    elif route in STATIC_PAGES:
        name, label = STATIC_PAGES[route]
        view = PageView(name, titled(label) if label else site_title)
    else:
        view = PageView("not-found", titled("404 - Page Not Found"))

    if maintenance:
        return PageView("maintenance", view.title)
    return view


def find_job(data: Dict[str, Any], slug: str) -> Optional[Dict[str, Any]]:
    """Job whose title slugifies to `slug`, as linked from the sitemap."""
    for job in data.get("jobs", []):
        if slugify(job.get("title", "")) == slug:
            return job
    return None


def find_post(data: Dict[str, Any], post_id: str) -> Optional[Dict[str, Any]]:
    """Post behind `/blog/<id>`."""
    for post in data.get("posts", []):
        if post.get("id") == post_id:
            return post
    return None
