import json

from django import template
from django.conf import settings
from django.utils.html import format_html

from analytics.tracking import EVENT_NAMES, clean_params

register = template.Library()


@register.inclusion_tag('analytics/google_analytics.html')
def google_analytics():
    """gtag.js loader; renders nothing unless GA_MEASUREMENT_ID is configured."""
    return {'measurement_id': getattr(settings, 'GA_MEASUREMENT_ID', '')}


@register.inclusion_tag('analytics/events.html', takes_context=True)
def analytics_events(context):
    """Replay the events tracked during this request to the browser."""
    request = context.get('request')
    buffer = getattr(request, 'analytics', None)
    events = [[name, params] for name, params in buffer] if buffer else []
    return {'events': events}


@register.simple_tag
def track_click(event_name, **params):
    """
    Render ``data-track-*`` attributes for a link or button.

        <a href="/contact/" {% track_click "cta_click" cta_name="Contact" destination="/contact/" %}>
    """
    if event_name not in EVENT_NAMES:
        raise template.TemplateSyntaxError(f"Unknown analytics event: {event_name!r}")
    return format_html(
        'data-track-event="{}" data-track-params="{}"',
        event_name,
        json.dumps(clean_params(params)),
    )
