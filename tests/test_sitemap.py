from django.urls import reverse

from config.constants.branding import SITE_URL
from consultants.data import CONSULTANTS
from seo.sitemaps import sitemap_entries


class TestSitemapEntries:
    """Sitemap contents"""

    def test_static_pages_come_first(self):
        entries = sitemap_entries()
        assert [e.url for e in entries[:5]] == [
            f"{SITE_URL}/",
            f"{SITE_URL}/about/",
            f"{SITE_URL}/services/",
            f"{SITE_URL}/consultants/",
            f"{SITE_URL}/contact/",
        ]
        assert entries[0].priority == 1.0
        assert all(e.priority == 0.8 and e.changefreq == 'weekly' for e in entries[1:5])

    def test_every_consultant_is_listed(self):
        urls = {e.url: e for e in sitemap_entries()}
        for consultant in CONSULTANTS:
            entry = urls[f"{SITE_URL}/consultants/{consultant.id}/"]
            assert entry.changefreq == 'monthly'
            assert entry.priority == 0.7

    def test_service_detail_pages(self):
        urls = [e.url for e in sitemap_entries()]
        assert urls[-3:] == [
            f"{SITE_URL}/services/project-management/",
            f"{SITE_URL}/services/program-management/",
            f"{SITE_URL}/services/strategic-planning/",
        ]

    def test_entry_count(self):
        assert len(sitemap_entries()) == 5 + len(CONSULTANTS) + 3


class TestSitemapView:
    def test_sitemap_xml_uses_public_site_url(self, client):
        response = client.get(reverse('sitemap'))
        assert response.status_code == 200
        body = response.content.decode()
        assert '<loc>https://eliteenterprisetcg.com/</loc>' in body
        assert f'<loc>https://eliteenterprisetcg.com/consultants/{CONSULTANTS[0].id}/</loc>' in body
        assert 'testserver' not in body
        assert '<changefreq>monthly</changefreq>' in body
        assert '<priority>1.0</priority>' in body

    def test_robots_txt_points_at_sitemap(self, client):
        response = client.get(reverse('robots'))
        assert response.status_code == 200
        assert response['Content-Type'].startswith('text/plain')
        assert 'Sitemap: https://eliteenterprisetcg.com/sitemap.xml' in response.content.decode()
