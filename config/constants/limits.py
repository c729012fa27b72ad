"""
==========================================================
LIMITS, THRESHOLDS & SEO HINTS
==========================================================
Numeric limits, image sizes, and sitemap hints.
Change once here → applies everywhere.
"""

# --- Contact Form ---
CONTACT_NAME_MAX_LENGTH = 120
CONTACT_COMPANY_MAX_LENGTH = 200
CONTACT_PHONE_MAX_LENGTH = 40
CONTACT_MESSAGE_MAX_LENGTH = 5000
CONTACT_MESSAGE_ROWS = 5

# --- Open Graph Images ---
OG_IMAGE_WIDTH = 1200
OG_IMAGE_HEIGHT = 630
PROFILE_IMAGE_WIDTH = 800
PROFILE_IMAGE_HEIGHT = 600

# --- Sitemap ---
SITEMAP_HOME_PRIORITY = 1.0
SITEMAP_PAGE_PRIORITY = 0.8
SITEMAP_PAGE_CHANGEFREQ = "weekly"
SITEMAP_DETAIL_PRIORITY = 0.7
SITEMAP_DETAIL_CHANGEFREQ = "monthly"

# --- Requests ---
SLOW_REQUEST_MS = 2000
