"""
==========================================================
SELF-DIAGNOSTIC HEALTH CHECK COMMAND
==========================================================
Run: python manage.py healthcheck

Checks:
  ✅ Installed apps
  ✅ Template rendering (loads base.html)
  ✅ Static files (tracking script present)
  ✅ Required packages
  ✅ Log file writability
  ✅ URL configuration (reverse all named URLs)
  ✅ Branding constants
  ✅ Middleware chain
  ✅ Consultant roster integrity
  ✅ Critical pages respond
"""

import re
import time
import importlib
import logging
from collections import Counter
from pathlib import Path

from django.core.management.base import BaseCommand
from django.template import engines
from django.conf import settings
from django.test import Client
from django.urls import reverse, NoReverseMatch

logger = logging.getLogger('diagnostics')

SLUG_RE = re.compile(r'^[-a-zA-Z0-9_]+$')


class Command(BaseCommand):
    help = 'Run a self-diagnostic health check on the site.'

    CHECKS = [
        'check_installed_apps',
        'check_templates',
        'check_static_files',
        'check_required_packages',
        'check_log_files',
        'check_urls',
        'check_constants',
        'check_middleware',
        'check_consultants',
        'check_pages',
    ]

    def handle(self, *args, **options):
        self.stdout.write(self.style.HTTP_INFO('\n' + '=' * 60))
        self.stdout.write(self.style.HTTP_INFO('  🏥  SITE HEALTH CHECK'))
        self.stdout.write(self.style.HTTP_INFO('=' * 60 + '\n'))

        passed = 0
        failed = 0
        warnings = 0

        for check_name in self.CHECKS:
            method = getattr(self, check_name)
            try:
                result = method()
                if result == 'pass':
                    passed += 1
                elif result == 'warn':
                    warnings += 1
                else:
                    failed += 1
            except Exception as e:
                self.report_fail(check_name.replace('check_', '').replace('_', ' ').title(), str(e))
                failed += 1

        # Summary
        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(f'  RESULTS: ✅ {passed} passed | ⚠️  {warnings} warnings | ❌ {failed} failed')
        self.stdout.write('=' * 60 + '\n')

        if failed > 0:
            self.stdout.write(self.style.ERROR('⛔ Some checks FAILED. Review the output above.'))
            logger.error(f'Health check: {failed} checks failed, {warnings} warnings')
        elif warnings > 0:
            self.stdout.write(self.style.WARNING('⚠️  All checks passed with warnings.'))
            logger.warning(f'Health check: {warnings} warnings')
        else:
            self.stdout.write(self.style.SUCCESS('🎉 All checks PASSED! Site is healthy.'))
            logger.info('Health check: All checks passed')

    def report_pass(self, name, detail=''):
        msg = f'  ✅ {name}'
        if detail:
            msg += f' — {detail}'
        self.stdout.write(self.style.SUCCESS(msg))

    def report_fail(self, name, detail=''):
        msg = f'  ❌ {name}'
        if detail:
            msg += f' — {detail}'
        self.stdout.write(self.style.ERROR(msg))

    def report_warn(self, name, detail=''):
        msg = f'  ⚠️  {name}'
        if detail:
            msg += f' — {detail}'
        self.stdout.write(self.style.WARNING(msg))

    # -------------------------------------------------------
    # Individual Checks
    # -------------------------------------------------------

    def check_installed_apps(self):
        """Verify all INSTALLED_APPS can be imported."""
        broken = []
        for app in settings.INSTALLED_APPS:
            try:
                importlib.import_module(app)
            except ImportError:
                broken.append(app)
        if broken:
            self.report_fail('Installed Apps', f'{len(broken)} broken: {", ".join(broken)}')
            return 'fail'
        self.report_pass('Installed Apps', f'{len(settings.INSTALLED_APPS)} apps loaded')
        return 'pass'

    def check_templates(self):
        """Verify template engine can load base.html."""
        try:
            engines['django'].get_template('base.html')
            self.report_pass('Templates', 'base.html loads OK')
            return 'pass'
        except Exception as e:
            self.report_fail('Templates', f'Cannot load base.html: {e}')
            return 'fail'

    def check_static_files(self):
        """Verify the click-tracking script ships with the static files."""
        script = Path(settings.BASE_DIR) / 'static' / 'js' / 'tracking.js'
        if script.exists():
            self.report_pass('Static Files', 'js/tracking.js present')
            return 'pass'
        self.report_warn('Static Files', 'js/tracking.js missing — click tracking disabled')
        return 'warn'

    def check_required_packages(self):
        """Verify critical Python packages are installed."""
        required = [
            ('django', 'Django'),
            ('django_browser_reload', 'django-browser-reload'),
        ]
        missing = []
        for module_name, display_name in required:
            try:
                importlib.import_module(module_name)
            except ImportError:
                missing.append(display_name)

        if missing:
            self.report_fail('Required Packages', f'Missing: {", ".join(missing)}')
            return 'fail'
        self.report_pass('Required Packages', f'All {len(required)} packages installed')
        return 'pass'

    def check_log_files(self):
        """Verify log directory is writable."""
        log_dir = Path(settings.BASE_DIR) / 'logs'
        if not log_dir.exists():
            try:
                log_dir.mkdir(parents=True)
                self.report_pass('Log Files', f'Created {log_dir}')
                return 'pass'
            except OSError as e:
                self.report_fail('Log Files', f'Cannot create log dir: {e}')
                return 'fail'

        log_files = list(log_dir.glob('*.log'))
        self.report_pass('Log Files', f'{len(log_files)} log file(s) in {log_dir}')
        return 'pass'

    def check_urls(self):
        """Test that key named URLs resolve correctly."""
        test_urls = ['home', 'about', 'services', 'contact', 'consultant-list', 'sitemap', 'robots']
        broken = []
        for url_name in test_urls:
            try:
                reverse(url_name)
            except NoReverseMatch:
                broken.append(url_name)
        if broken:
            self.report_fail('URL Config', f'{len(broken)} broken: {", ".join(broken)}')
            return 'fail'
        self.report_pass('URL Config', f'{len(test_urls)} routes verified')
        return 'pass'

    def check_constants(self):
        """Verify the config/constants module loads."""
        try:
            from config.constants import SITE_NAME, SITE_URL
            if not SITE_NAME or not SITE_URL:
                self.report_warn('Constants', 'SITE_NAME or SITE_URL is empty')
                return 'warn'
            self.report_pass('Constants', f'Loaded (SITE_NAME="{SITE_NAME}")')
            return 'pass'
        except ImportError as e:
            self.report_fail('Constants', f'Import error: {e}')
            return 'fail'

    def check_middleware(self):
        """Verify middleware chain is configured."""
        middleware = settings.MIDDLEWARE
        has_request_logging = 'config.middleware.RequestLoggingMiddleware' in middleware
        if has_request_logging:
            self.report_pass('Middleware', f'{len(middleware)} middleware active (incl. request logging)')
        else:
            self.report_warn('Middleware', f'{len(middleware)} middleware active (request logging not enabled)')
        return 'pass' if has_request_logging else 'warn'

    def check_consultants(self):
        """Consultant ids must be unique URL slugs; every profile needs specialties."""
        from consultants.data import CONSULTANTS

        duplicates = [cid for cid, count in Counter(c.id for c in CONSULTANTS).items() if count > 1]
        if duplicates:
            self.report_fail('Consultants', f'Duplicate ids (first match wins): {", ".join(duplicates)}')
            return 'fail'

        bad_slugs = [c.id for c in CONSULTANTS if not SLUG_RE.match(c.id)]
        if bad_slugs:
            self.report_fail('Consultants', f'Ids not usable in URLs: {", ".join(bad_slugs)}')
            return 'fail'

        untagged = [c.id for c in CONSULTANTS if not c.specialties]
        if untagged:
            self.report_warn('Consultants', f'No specialties: {", ".join(untagged)}')
            return 'warn'

        self.report_pass('Consultants', f'{len(CONSULTANTS)} profiles OK')
        return 'pass'

    def check_pages(self):
        """Request the critical pages through the test client."""
        from consultants.data import CONSULTANTS

        client = Client()
        pages = [
            ('Home Page', reverse('home')),
            ('About', reverse('about')),
            ('Services', reverse('services')),
            ('Consultant List', reverse('consultant-list')),
            ('Contact', reverse('contact')),
            ('Sitemap', reverse('sitemap')),
        ]
        if CONSULTANTS:
            pages.append((
                'Consultant Profile',
                reverse('consultant-detail', kwargs={'consultant_id': CONSULTANTS[0].id}),
            ))

        broken = []
        start = time.time()
        for name, url in pages:
            status = client.get(url).status_code
            if status != 200:
                broken.append(f'{name} ({status})')
        duration_ms = (time.time() - start) * 1000

        if broken:
            self.report_fail('Pages', f'{len(broken)} failing: {", ".join(broken)}')
            return 'fail'
        self.report_pass('Pages', f'{len(pages)} pages OK in {duration_ms:.0f}ms')
        return 'pass'
