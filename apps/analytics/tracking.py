"""
Analytics event tracking.

Tracking calls format an event name plus a flat parameter dict and hand
them to a sink. The process-wide sink is installed once at startup from
``settings.ANALYTICS_SINK``; until then (or when analytics is disabled)
it is a ``NullSink``, so every tracking call is always safe to make.

Per request, ``AnalyticsMiddleware`` attaches an ``EventBuffer`` as
``request.analytics``. Events tracked against it are forwarded to the
process sink and also rendered into the page as ``gtag('event', ...)``
calls by ``{% analytics_events %}``.
"""

import logging

logger = logging.getLogger('apps.analytics')

# --- Event names ---
PAGE_VIEW = 'page_view'
FORM_SUBMISSION = 'form_submission'
FORM_START = 'form_start'
BUTTON_CLICK = 'button_click'
CTA_CLICK = 'cta_click'
SERVICE_VIEW = 'service_view'
SERVICE_INTEREST = 'service_interest'
CONSULTANT_VIEW = 'consultant_view'
CONSULTANT_CONTACT = 'consultant_contact'
PHONE_CLICK = 'phone_click'
EMAIL_CLICK = 'email_click'
NAVIGATION_CLICK = 'navigation_click'
CONVERSION = 'conversion'
ENGAGEMENT = 'engagement'

EVENT_NAMES = frozenset({
    PAGE_VIEW, FORM_SUBMISSION, FORM_START, BUTTON_CLICK, CTA_CLICK,
    SERVICE_VIEW, SERVICE_INTEREST, CONSULTANT_VIEW, CONSULTANT_CONTACT,
    PHONE_CLICK, EMAIL_CLICK, NAVIGATION_CLICK, CONVERSION, ENGAGEMENT,
})


class AnalyticsSink:
    """Destination for tracked events."""

    def send(self, event_name, params):
        raise NotImplementedError


class NullSink(AnalyticsSink):
    """Drops every event. Used when no analytics backend is configured."""

    def send(self, event_name, params):
        return None


class LoggingSink(AnalyticsSink):
    """Writes events to the analytics log."""

    def send(self, event_name, params):
        logger.info(f"📊 {event_name} {params}")


class EventBuffer(AnalyticsSink):
    """
    Collects the events of a single request so the page can replay them
    to the browser-side gtag script. Events are also passed on to
    ``forward_to`` (the process sink) when given.
    """

    def __init__(self, forward_to=None):
        self.forward_to = forward_to
        self.events = []

    def send(self, event_name, params):
        self.events.append((event_name, params))
        if self.forward_to is not None:
            self.forward_to.send(event_name, params)

    def __len__(self):
        return len(self.events)

    def __iter__(self):
        return iter(self.events)


_sink = NullSink()


def get_sink():
    return _sink


def set_sink(sink):
    """Install the process-wide sink. ``None`` restores the no-op sink."""
    global _sink
    _sink = sink if sink is not None else NullSink()
    return _sink


def load_sink(dotted_path):
    """Instantiate a sink class from its dotted import path."""
    from django.utils.module_loading import import_string

    if not dotted_path:
        return NullSink()
    return import_string(dotted_path)()


def clean_params(params):
    """Drop unset (``None``) values; gtag ignores them anyway."""
    return {key: value for key, value in (params or {}).items() if value is not None}


def track_event(event_name, params=None, sink=None):
    """
    Forward one event to ``sink`` (the installed sink by default).

    Never raises: analytics must not break a page.
    """
    target = sink if sink is not None else _sink
    cleaned = clean_params(params)
    try:
        target.send(event_name, cleaned)
    except Exception as exc:
        logger.debug(f"Analytics sink {type(target).__name__} dropped {event_name}: {exc}")
    return cleaned


# --- Page views ---

def track_page_view(url, sink=None):
    return track_event(PAGE_VIEW, {'page_path': url}, sink=sink)


# --- Contact form ---

def track_form_submission(form_type, service_type=None, sink=None):
    return track_event(FORM_SUBMISSION, {
        'form_type': form_type,
        'service_type': service_type,
    }, sink=sink)


def track_form_start(form_type, sink=None):
    return track_event(FORM_START, {'form_type': form_type}, sink=sink)


# --- Buttons & CTAs ---

def track_button_click(button_name, location, sink=None):
    return track_event(BUTTON_CLICK, {
        'button_name': button_name,
        'location': location,
    }, sink=sink)


def track_cta_click(cta_name, destination, sink=None):
    return track_event(CTA_CLICK, {
        'cta_name': cta_name,
        'destination': destination,
    }, sink=sink)


# --- Services ---

def track_service_view(service_name, sink=None):
    return track_event(SERVICE_VIEW, {'service_name': service_name}, sink=sink)


def track_service_interest(service_name, action, sink=None):
    return track_event(SERVICE_INTEREST, {
        'service_name': service_name,
        'action': action,
    }, sink=sink)


# --- Consultants ---

def track_consultant_view(consultant_name, consultant_id, sink=None):
    return track_event(CONSULTANT_VIEW, {
        'consultant_name': consultant_name,
        'consultant_id': consultant_id,
    }, sink=sink)


def track_consultant_contact(consultant_name, contact_method, sink=None):
    return track_event(CONSULTANT_CONTACT, {
        'consultant_name': consultant_name,
        'contact_method': contact_method,
    }, sink=sink)


# --- Contact details ---

def track_phone_click(phone_number, location, sink=None):
    return track_event(PHONE_CLICK, {
        'phone_number': phone_number,
        'location': location,
    }, sink=sink)


def track_email_click(email_address, location, sink=None):
    return track_event(EMAIL_CLICK, {
        'email_address': email_address,
        'location': location,
    }, sink=sink)


# --- Navigation ---

def track_navigation(link_name, destination, sink=None):
    return track_event(NAVIGATION_CLICK, {
        'link_name': link_name,
        'destination': destination,
    }, sink=sink)


# --- Conversions & engagement ---

def track_conversion(conversion_type, value=None, sink=None):
    return track_event(CONVERSION, {
        'conversion_type': conversion_type,
        'value': value,
    }, sink=sink)


def track_engagement(engagement_type, sink=None, **details):
    return track_event(ENGAGEMENT, {'engagement_type': engagement_type, **details}, sink=sink)
