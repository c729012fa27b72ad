import json

from django import template
from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html
from django.utils.safestring import mark_safe

register = template.Library()

# Keep the payload from closing the surrounding <script> element.
_JSON_SCRIPT_ESCAPES = {
    ord('<'): '\\u003C',
    ord('>'): '\\u003E',
    ord('&'): '\\u0026',
}


def dump_json_ld(data):
    return json.dumps(data, cls=DjangoJSONEncoder).translate(_JSON_SCRIPT_ESCAPES)


@register.filter
def json_ld(data):
    """Render a structured-data dict as an ``application/ld+json`` script block."""
    if not data:
        return ''
    return format_html(
        '<script type="application/ld+json">{}</script>',
        mark_safe(dump_json_ld(data)),
    )


@register.inclusion_tag('seo/meta_tags.html')
def page_meta(meta):
    return {'meta': meta}
