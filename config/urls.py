from django.contrib.sitemaps.views import sitemap
from django.urls import path, include

from seo.sitemaps import SITEMAPS
from seo.views import robots_txt

handler404 = 'core.views.page_not_found'

urlpatterns = [
    path("__reload__/", include("django_browser_reload.urls")),
    path("consultants/", include("consultants.urls")),
    path("sitemap.xml", sitemap, {"sitemaps": SITEMAPS}, name="sitemap"),
    path("robots.txt", robots_txt, name="robots"),
    path("", include("core.urls")),
]
