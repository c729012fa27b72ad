"""
Context Processor: Injects branding & config constants into every template.

Usage in templates:
    {{ SITE_NAME }}
    {{ SITE_TAGLINE }}
    {{ COPYRIGHT_TEXT }}
    etc.
"""

from config.constants.branding import (
    SITE_NAME, SITE_SHORT_NAME, SITE_TAGLINE, SITE_DESCRIPTION, SITE_URL,
    COMPANY_NAME, COMPANY_EMAIL, COMPANY_PHONE, COMPANY_ADDRESS_REGION,
    COPYRIGHT_TEXT, META_DESCRIPTION,
    SOCIAL_TWITTER, SOCIAL_LINKEDIN,
)
from config.constants.messages import (
    MSG_HOME_WELCOME, MSG_HOME_CTA, MSG_NOT_FOUND,
)


def site_config(request):
    """Inject site-wide branding and config into all templates."""
    return {
        # Branding
        'SITE_NAME': SITE_NAME,
        'SITE_SHORT_NAME': SITE_SHORT_NAME,
        'SITE_TAGLINE': SITE_TAGLINE,
        'SITE_DESCRIPTION': SITE_DESCRIPTION,
        'SITE_URL': SITE_URL,
        'COMPANY_NAME': COMPANY_NAME,
        'COMPANY_EMAIL': COMPANY_EMAIL,
        'COMPANY_PHONE': COMPANY_PHONE,
        'COMPANY_ADDRESS_REGION': COMPANY_ADDRESS_REGION,
        'COPYRIGHT_TEXT': COPYRIGHT_TEXT,
        'META_DESCRIPTION': META_DESCRIPTION,

        # Social
        'SOCIAL_TWITTER': SOCIAL_TWITTER,
        'SOCIAL_LINKEDIN': SOCIAL_LINKEDIN,

        # Messages (for templates)
        'MSG_HOME_WELCOME': MSG_HOME_WELCOME,
        'MSG_HOME_CTA': MSG_HOME_CTA,
        'MSG_NOT_FOUND': MSG_NOT_FOUND,
    }
