from unittest.mock import patch

from django.test import RequestFactory

from config import middleware
from config.context_processors import site_config
from config.middleware import RequestLoggingMiddleware, get_client_ip


class TestRequestLoggingMiddleware:
    """Request logging levels"""

    def test_success_logged_as_info(self, client):
        with patch.object(middleware, 'logger') as logger:
            client.get('/about/')
        message = logger.info.call_args[0][0]
        assert 'GET /about/' in message
        assert 'status=200' in message

    def test_not_found_logged_as_warning(self, client):
        with patch.object(middleware, 'logger') as logger:
            client.get('/consultants/nobody/')
        assert 'CLIENT ERROR' in logger.warning.call_args[0][0]

    def test_unhandled_exception_logged_critical(self):
        request = RequestFactory().get('/boom/')
        mw = RequestLoggingMiddleware(lambda r: None)
        with patch.object(middleware, 'logger') as logger:
            assert mw.process_exception(request, ValueError("boom")) is None
        assert 'ValueError: boom' in logger.critical.call_args[0][0]

    def test_client_ip_prefers_forwarded_header(self):
        request = RequestFactory().get('/', HTTP_X_FORWARDED_FOR='203.0.113.9, 10.0.0.1')
        assert get_client_ip(request) == '203.0.113.9'


class TestSiteConfig:
    def test_branding_in_context(self):
        context = site_config(RequestFactory().get('/'))
        assert context['SITE_NAME'] == 'Elite Enterprise Transformation Consulting Group'
        assert context['SITE_URL'] == 'https://eliteenterprisetcg.com'
        assert context['COMPANY_EMAIL'] == 'info@eliteenterprisetcg.com'
