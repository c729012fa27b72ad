"""
Per-page SEO metadata.

Every page's title, description, canonical URL, Open Graph and Twitter
card fields are assembled from the branding constants. Templates render
a ``PageMetadata`` with ``{% page_meta meta %}``.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config.constants.branding import (
    SITE_NAME, SITE_SHORT_NAME, SITE_DESCRIPTION, SITE_URL,
    META_KEYWORDS, META_LOCALE, META_OG_IMAGE,
    SOCIAL_TWITTER, SOCIAL_TWITTER_CARD,
)
from config.constants.limits import (
    OG_IMAGE_WIDTH, OG_IMAGE_HEIGHT, PROFILE_IMAGE_WIDTH, PROFILE_IMAGE_HEIGHT,
)
from config.constants.messages import MSG_PAGE_NOT_FOUND, MSG_NOT_FOUND


def absolute_url(path):
    """Join a site-relative path onto the public site URL."""
    if not path:
        return SITE_URL
    if path.startswith(('http://', 'https://')):
        return path
    if not path.startswith('/'):
        path = '/' + path
    return f"{SITE_URL}{path}"


@dataclass(frozen=True)
class OpenGraphImage:
    url: str
    width: int
    height: int
    alt: str


@dataclass(frozen=True)
class PageMetadata:
    title: str
    description: str
    canonical_url: Optional[str] = None
    og_title: str = ''
    og_type: str = 'website'
    image: Optional[OpenGraphImage] = None
    keywords: List[str] = field(default_factory=list)
    site_name: str = SITE_NAME
    locale: str = META_LOCALE
    twitter_card: str = SOCIAL_TWITTER_CARD
    twitter_site: str = SOCIAL_TWITTER

    @property
    def open_graph(self):
        og = {
            'title': self.og_title or self.title,
            'description': self.description,
            'url': self.canonical_url,
            'site_name': self.site_name,
            'locale': self.locale,
            'type': self.og_type,
            'images': [],
        }
        if self.image:
            og['images'].append({
                'url': self.image.url,
                'width': self.image.width,
                'height': self.image.height,
                'alt': self.image.alt,
            })
        return og

    @property
    def twitter(self):
        return {
            'card': self.twitter_card,
            'site': self.twitter_site,
            'title': self.og_title or self.title,
            'description': self.description,
            'images': [self.image.url] if self.image else [],
        }

    @property
    def keywords_content(self):
        return ', '.join(self.keywords)


def page_title(title):
    return f"{title} | {SITE_NAME}"


def build_page_metadata(title, description, path, keywords: Sequence[str] = (), og_type='website'):
    """
    Metadata for a standard page: ``"{title} | {SITE_NAME}"`` titles, the
    default social image, and site keywords followed by page keywords.
    """
    full_title = page_title(title)
    return PageMetadata(
        title=full_title,
        description=description,
        canonical_url=absolute_url(path),
        og_title=full_title,
        og_type=og_type,
        image=OpenGraphImage(
            url=absolute_url(META_OG_IMAGE),
            width=OG_IMAGE_WIDTH,
            height=OG_IMAGE_HEIGHT,
            alt=full_title,
        ),
        keywords=[*META_KEYWORDS, *keywords],
    )


def home_metadata():
    return PageMetadata(
        title=SITE_NAME,
        description=SITE_DESCRIPTION,
        canonical_url=absolute_url('/'),
        image=OpenGraphImage(
            url=absolute_url(META_OG_IMAGE),
            width=OG_IMAGE_WIDTH,
            height=OG_IMAGE_HEIGHT,
            alt=SITE_NAME,
        ),
        keywords=list(META_KEYWORDS),
    )


PAGE_METADATA = {
    'about': build_page_metadata(
        'About Us',
        'Learn about Elite Enterprise Transformation Consulting Group, a woman and minority owned '
        'consulting firm dedicated to transforming businesses through expert guidance and '
        'innovative solutions.',
        '/about/',
        ['about us', 'consulting firm', 'mission', 'vision', 'values', 'woman owned', 'minority owned'],
    ),
    'services': build_page_metadata(
        'Our Services',
        'Comprehensive consulting solutions including Project Management, Program Management, '
        'Strategic Planning, and more to transform your business and drive sustainable growth.',
        '/services/',
        ['consulting services', 'project management', 'program management', 'strategic planning',
         'business analysis', 'organizational change management'],
    ),
    'consultants': build_page_metadata(
        'Our Consultants',
        'Meet our team of experienced consultants dedicated to transforming your business with '
        'expert guidance and innovative solutions.',
        '/consultants/',
        ['consultants', 'consulting team', 'experts'],
    ),
    'contact': build_page_metadata(
        'Contact Us',
        'Get in touch with Elite Enterprise Transformation Consulting Group. Schedule a '
        'consultation with our expert team to discuss how we can help you achieve your '
        'business goals.',
        '/contact/',
        ['contact us', 'consulting services', 'business consultation', 'schedule consultation'],
    ),
}


def get_page_metadata(page):
    if page == 'home':
        return home_metadata()
    return PAGE_METADATA[page]


def consultant_metadata(consultant):
    """Profile metadata for a consultant detail page."""
    display = f"{consultant.name} - {consultant.title}"
    return PageMetadata(
        title=f"{display} | {SITE_SHORT_NAME}",
        description=consultant.short_bio,
        canonical_url=absolute_url(f"/consultants/{consultant.id}/"),
        og_title=f"{consultant.name} - {SITE_SHORT_NAME}",
        og_type='profile',
        image=OpenGraphImage(
            url=absolute_url(consultant.image),
            width=PROFILE_IMAGE_WIDTH,
            height=PROFILE_IMAGE_HEIGHT,
            alt=display,
        ),
        keywords=[*META_KEYWORDS, consultant.name, consultant.title, *consultant.specialties],
    )


def not_found_metadata(title=MSG_PAGE_NOT_FOUND):
    return PageMetadata(title=title, description=MSG_NOT_FOUND)


def service_metadata(service):
    return build_page_metadata(
        service.name,
        service.summary,
        f"/services/{service.slug}/",
        [service.name.lower(), 'consulting services'],
    )
