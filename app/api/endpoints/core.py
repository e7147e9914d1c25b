"""
Public read endpoints: the aggregated site data, health, robots.txt and
sitemap.xml.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.session import SessionData, get_session
from app.crud import job as job_crud
from app.crud.resources import published_blog_posts
from app.services.aggregation import build_site_data
from app.services.seo import base_url, build_robots, build_sitemap

router = APIRouter(tags=["Site"])
logger = logging.getLogger(__name__)


@router.get("/data")
def site_data(db: Session = Depends(get_db), session: SessionData = Depends(get_session)):
    """
    Everything the site renders from, in one response.

    Admin-only collections are empty arrays unless the caller holds an
    admin session.
    """
    return build_site_data(db, is_admin=session.is_admin is True)


@router.get("/health")
def health_check():
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@router.get("/robots", response_class=PlainTextResponse)
def robots(request: Request):
    return PlainTextResponse(build_robots(base_url(request)))


@router.get("/sitemap")
def sitemap(request: Request, db: Session = Depends(get_db)):
    xml = build_sitemap(
        base_url(request),
        job_crud.list_for_sitemap(db),
        published_blog_posts(db),
    )
    return Response(content=xml, media_type="text/xml")
