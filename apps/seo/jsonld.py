"""
JSON-LD structured data builders.

Each builder returns a plain dict shaped for schema.org; the ``json_ld``
template filter serializes it into a ``<script type="application/ld+json">``
block.
"""

from config.constants.branding import (
    SITE_NAME, SITE_DESCRIPTION, SITE_URL, SITE_LOGO,
    COMPANY_PHONE, COMPANY_ADDRESS_REGION, COMPANY_ADDRESS_COUNTRY,
    COMPANY_GEO_LATITUDE, COMPANY_GEO_LONGITUDE,
    COMPANY_OPENING_HOURS, COMPANY_PRICE_RANGE,
    SOCIAL_LINKEDIN,
)
from .metadata import absolute_url

SCHEMA_CONTEXT = "https://schema.org"


def _postal_address():
    return {
        "@type": "PostalAddress",
        "addressRegion": COMPANY_ADDRESS_REGION,
        "addressCountry": COMPANY_ADDRESS_COUNTRY,
    }


def _provider():
    return {
        "@type": "Organization",
        "name": SITE_NAME,
        "url": SITE_URL,
    }


def organization():
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Organization",
        "name": SITE_NAME,
        "url": SITE_URL,
        "logo": absolute_url(SITE_LOGO),
        "description": SITE_DESCRIPTION,
        "address": _postal_address(),
        "sameAs": [SOCIAL_LINKEDIN] if SOCIAL_LINKEDIN else [],
    }


def person(consultant):
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Person",
        "name": consultant.name,
        "jobTitle": consultant.title,
        "description": consultant.short_bio,
        "image": absolute_url(consultant.image),
        "worksFor": _provider(),
        "knowsAbout": list(consultant.specialties),
    }


def local_business():
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "LocalBusiness",
        "name": SITE_NAME,
        "url": SITE_URL,
        "image": absolute_url(SITE_LOGO),
        "description": SITE_DESCRIPTION,
        "address": _postal_address(),
        "geo": {
            "@type": "GeoCoordinates",
            "latitude": COMPANY_GEO_LATITUDE,
            "longitude": COMPANY_GEO_LONGITUDE,
        },
        "openingHours": COMPANY_OPENING_HOURS,
        "telephone": COMPANY_PHONE,
        "priceRange": COMPANY_PRICE_RANGE,
    }


def service(name, description, path):
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "Service",
        "name": name,
        "description": description,
        "provider": _provider(),
        "url": absolute_url(path),
    }


def faq(questions):
    """``questions`` is a sequence of ``(question, answer)`` pairs."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": question,
                "acceptedAnswer": {
                    "@type": "Answer",
                    "text": answer,
                },
            }
            for question, answer in questions
        ],
    }


def breadcrumbs(items):
    """``items`` is a sequence of ``(name, path)`` pairs, outermost first."""
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": name,
                "item": absolute_url(path),
            }
            for position, (name, path) in enumerate(items, start=1)
        ],
    }
