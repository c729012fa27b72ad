from io import StringIO

import pytest
from django.core.management import call_command
from django.urls import reverse

from core.content import SERVICES, FAQS, detail_services, get_service


class TestStaticPages:
    """Informational pages"""

    @pytest.mark.parametrize("name", ['home', 'about', 'services', 'contact', 'consultant-list'])
    def test_page_renders(self, client, name):
        response = client.get(reverse(name))
        assert response.status_code == 200
        assert '<link rel="canonical"' in response.content.decode()

    def test_home_has_organization_data(self, client):
        body = client.get(reverse('home')).content.decode()
        assert '"@type": "Organization"' in body

    def test_services_page_has_faq_and_service_data(self, client):
        body = client.get(reverse('services')).content.decode()
        assert '"@type": "FAQPage"' in body
        assert body.count('"@type": "Service"') == len(SERVICES)
        for service in SERVICES:
            assert service.name in body.replace('&amp;', '&')

    def test_site_config_in_every_page(self, client):
        body = client.get(reverse('about')).content.decode()
        assert 'info@eliteenterprisetcg.com' in body
        assert 'All rights reserved.' in body


class TestServiceDetail:
    """Service detail pages"""

    @pytest.mark.parametrize("slug", ['project-management', 'program-management', 'strategic-planning'])
    def test_detail_pages(self, client, slug, recording_sink):
        response = client.get(reverse('service-detail', kwargs={'slug': slug}))
        assert response.status_code == 200
        assert ('service_view', {'service_name': get_service(slug).name}) in recording_sink.events

    def test_service_without_detail_page_is_404(self, client):
        assert client.get(reverse('service-detail', kwargs={'slug': 'ai-consulting'})).status_code == 404

    def test_unknown_service_is_404(self, client):
        response = client.get('/services/underwater-welding/')
        assert response.status_code == 404
        assert 'Page Not Found' in response.content.decode()


class TestContent:
    def test_three_detail_services(self):
        assert [s.slug for s in detail_services()] == [
            'project-management', 'program-management', 'strategic-planning',
        ]

    def test_service_slugs_unique(self):
        slugs = [s.slug for s in SERVICES]
        assert len(slugs) == len(set(slugs))

    def test_faqs_are_pairs(self):
        assert all(len(item) == 2 for item in FAQS)


class TestHealthcheck:
    def test_all_checks_pass(self):
        buffer = StringIO()
        call_command('healthcheck', stdout=buffer)
        out = buffer.getvalue()
        assert '  ❌ ' not in out
        assert '❌ 0 failed' in out
        assert 'All checks PASSED' in out
        assert 'Consultants' in out
        assert 'RESULTS:' in out
