"""
==========================================================
BRANDING & IDENTITY
==========================================================
Change these values to rebrand the entire site instantly.
Every template, metadata block, JSON-LD payload and sitemap URL
reads from here.
"""

# --- Core Identity ---
SITE_NAME = "Elite Enterprise Transformation Consulting Group"
SITE_SHORT_NAME = "Elite Enterprise TCG"
SITE_TAGLINE = "Transforming businesses through expert guidance and innovative solutions."
SITE_DESCRIPTION = (
    "Professional consulting services specializing in Project Management, "
    "Program Management, Strategic Planning, Data & Analytics, Vendor Management, "
    "and AI Consulting."
)
SITE_AUTHOR = SITE_NAME

# --- URLs ---
SITE_URL = "https://eliteenterprisetcg.com"
SITE_DOMAIN = "eliteenterprisetcg.com"
SITE_LOGO = "/images/logo.png"

# --- Company Info ---
COMPANY_NAME = SITE_NAME
COMPANY_EMAIL = "info@eliteenterprisetcg.com"
COMPANY_PHONE = ""
COMPANY_ADDRESS_REGION = "Georgia"
COMPANY_ADDRESS_COUNTRY = "US"
COMPANY_GEO_LATITUDE = "33.4717"
COMPANY_GEO_LONGITUDE = "-82.1340"
COMPANY_OPENING_HOURS = "Mo,Tu,We,Th,Fr 09:00-17:00"
COMPANY_PRICE_RANGE = "$$"

# --- SEO & Meta ---
META_TITLE_SUFFIX = f" | {SITE_NAME}"
META_DESCRIPTION = SITE_DESCRIPTION
META_LOCALE = "en_US"
META_OG_IMAGE = "/images/og-image.jpg"
META_KEYWORDS = [
    "consulting",
    "project management",
    "program management",
    "strategic planning",
    "data analytics",
    "vendor management",
    "AI consulting",
    "business transformation",
]

# --- Social ---
SOCIAL_TWITTER = "@eliteenterprisetcg"
SOCIAL_TWITTER_CARD = "summary_large_image"
SOCIAL_LINKEDIN = "https://www.linkedin.com/company/elite-enterprise-transformation-consulting-group"

# --- Copyright ---
COPYRIGHT_YEAR = "2026"
COPYRIGHT_TEXT = f"© {COPYRIGHT_YEAR} {COMPANY_NAME}. All rights reserved."
