from config.constants.branding import SITE_NAME, SITE_URL, META_KEYWORDS, META_OG_IMAGE
from consultants.data import CONSULTANTS
from core.content import get_service
from seo.metadata import (
    absolute_url, build_page_metadata, get_page_metadata,
    consultant_metadata, not_found_metadata, service_metadata,
)


class TestAbsoluteUrl:
    def test_joins_site_relative_paths(self):
        assert absolute_url('/about/') == f"{SITE_URL}/about/"
        assert absolute_url('about/') == f"{SITE_URL}/about/"

    def test_leaves_absolute_urls_alone(self):
        assert absolute_url('https://example.com/x') == 'https://example.com/x'

    def test_empty_path_is_site_root(self):
        assert absolute_url('') == SITE_URL


class TestPageMetadata:
    """Standard page metadata"""

    def test_build_page_metadata(self):
        meta = build_page_metadata('About Us', 'About the firm.', '/about/', ['mission'])
        assert meta.title == f"About Us | {SITE_NAME}"
        assert meta.canonical_url == f"{SITE_URL}/about/"
        assert meta.keywords == [*META_KEYWORDS, 'mission']

        og = meta.open_graph
        assert og['title'] == meta.title
        assert og['url'] == meta.canonical_url
        assert og['site_name'] == SITE_NAME
        assert og['type'] == 'website'
        assert og['locale'] == 'en_US'
        assert og['images'] == [{
            'url': f"{SITE_URL}{META_OG_IMAGE}",
            'width': 1200,
            'height': 630,
            'alt': meta.title,
        }]

        twitter = meta.twitter
        assert twitter['card'] == 'summary_large_image'
        assert twitter['images'] == [f"{SITE_URL}{META_OG_IMAGE}"]

    def test_site_keywords_are_not_mutated(self):
        before = list(META_KEYWORDS)
        build_page_metadata('X', 'y', '/x/', ['extra'])
        assert META_KEYWORDS == before

    def test_every_named_page_has_metadata(self):
        for page in ('home', 'about', 'services', 'consultants', 'contact'):
            meta = get_page_metadata(page)
            assert meta.title
            assert meta.description
            assert meta.canonical_url.startswith(SITE_URL)

    def test_contact_page_keywords(self):
        meta = get_page_metadata('contact')
        assert meta.title == f"Contact Us | {SITE_NAME}"
        assert 'schedule consultation' in meta.keywords


class TestConsultantMetadata:
    """Profile metadata"""

    def test_profile_fields(self):
        consultant = CONSULTANTS[0]
        meta = consultant_metadata(consultant)
        assert meta.title == f"{consultant.name} - {consultant.title} | Elite Enterprise TCG"
        assert meta.description == consultant.short_bio
        assert meta.canonical_url == f"{SITE_URL}/consultants/{consultant.id}/"
        assert meta.open_graph['title'] == f"{consultant.name} - Elite Enterprise TCG"
        assert meta.open_graph['type'] == 'profile'
        image = meta.open_graph['images'][0]
        assert image['url'] == f"{SITE_URL}{consultant.image}"
        assert (image['width'], image['height']) == (800, 600)

    def test_keywords_include_specialties(self):
        consultant = CONSULTANTS[0]
        meta = consultant_metadata(consultant)
        assert meta.keywords == [
            *META_KEYWORDS, consultant.name, consultant.title, *consultant.specialties,
        ]


class TestOtherMetadata:
    def test_not_found(self):
        assert not_found_metadata().title == 'Page Not Found'
        assert not_found_metadata('Consultant Not Found').title == 'Consultant Not Found'
        assert not_found_metadata().canonical_url is None

    def test_service(self):
        service = get_service('strategic-planning')
        meta = service_metadata(service)
        assert meta.title == f"Strategic Planning | {SITE_NAME}"
        assert meta.canonical_url == f"{SITE_URL}/services/strategic-planning/"
