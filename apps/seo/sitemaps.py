"""
XML sitemap: static pages, consultant profiles and service detail pages.

Served at ``/sitemap.xml`` by ``django.contrib.sitemaps``. URLs are always
absolute on the public site URL, whatever host the request came in on.
"""

from dataclasses import dataclass

from django.contrib import sitemaps
from django.urls import reverse
from django.utils import timezone

from config.constants.branding import SITE_DOMAIN, SITE_URL
from config.constants.limits import (
    SITEMAP_HOME_PRIORITY, SITEMAP_PAGE_PRIORITY, SITEMAP_PAGE_CHANGEFREQ,
    SITEMAP_DETAIL_PRIORITY, SITEMAP_DETAIL_CHANGEFREQ,
)
from consultants.data import CONSULTANTS
from core.content import detail_services

STATIC_PAGES = ('home', 'about', 'services', 'consultant-list', 'contact')


class SiteSitemap(sitemaps.Sitemap):
    protocol = 'https'

    def get_domain(self, site=None):
        return SITE_DOMAIN

    def lastmod(self, item):
        return timezone.now()


class StaticViewSitemap(SiteSitemap):
    changefreq = SITEMAP_PAGE_CHANGEFREQ

    def items(self):
        return list(STATIC_PAGES)

    def location(self, item):
        return reverse(item)

    def priority(self, item):
        return SITEMAP_HOME_PRIORITY if item == 'home' else SITEMAP_PAGE_PRIORITY


class ConsultantSitemap(SiteSitemap):
    changefreq = SITEMAP_DETAIL_CHANGEFREQ
    priority = SITEMAP_DETAIL_PRIORITY

    def items(self):
        return list(CONSULTANTS)

    def location(self, item):
        return reverse('consultant-detail', kwargs={'consultant_id': item.id})


class ServiceSitemap(SiteSitemap):
    changefreq = SITEMAP_DETAIL_CHANGEFREQ
    priority = SITEMAP_DETAIL_PRIORITY

    def items(self):
        return detail_services()

    def location(self, item):
        return reverse('service-detail', kwargs={'slug': item.slug})


SITEMAPS = {
    'pages': StaticViewSitemap,
    'consultants': ConsultantSitemap,
    'services': ServiceSitemap,
}


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    changefreq: str
    priority: float


def sitemap_entries():
    """The sitemap as plain values, in the order it is published."""
    entries = []
    for sitemap_class in SITEMAPS.values():
        sitemap = sitemap_class()
        for item in sitemap.items():
            priority = sitemap.priority(item) if callable(sitemap.priority) else sitemap.priority
            entries.append(SitemapEntry(
                url=f"{SITE_URL}{sitemap.location(item)}",
                changefreq=sitemap.changefreq,
                priority=priority,
            ))
    return entries
