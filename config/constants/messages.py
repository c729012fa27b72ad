"""
==========================================================
USER-FACING MESSAGES
==========================================================
All success, error, and info messages shown to visitors.
Change the wording once → updates across the entire site.
"""

from .branding import SITE_NAME

# --- Home Page ---
MSG_HOME_WELCOME = f"Welcome to {SITE_NAME}"
MSG_HOME_CTA = "Schedule a Consultation"

# --- Consultants ---
MSG_CONSULTANTS_HEADING = "Our Consultants"
MSG_CONSULTANTS_INTRO = (
    "Meet our team of experienced consultants dedicated to transforming your "
    "business with expert guidance and innovative solutions."
)
MSG_CONSULTANTS_NO_RESULTS = "No consultants found with the selected specialty."
MSG_CONSULTANTS_CLEAR_FILTER = "Clear filter"
MSG_CONSULTANT_NOT_FOUND = "Consultant Not Found"

# --- Contact ---
MSG_CONTACT_SUCCESS_HEADING = "Thank You!"
MSG_CONTACT_SUCCESS = "Your message has been received. We'll get back to you within 1-2 business days."
MSG_CONTACT_ERROR = "There was an error submitting your message. Please try again."
MSG_CONTACT_SEND_ANOTHER = "Send Another Message"

# --- Generic ---
MSG_NOT_FOUND = "The requested resource was not found."
MSG_PAGE_NOT_FOUND = "Page Not Found"
