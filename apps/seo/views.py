from django.http import HttpResponse
from django.urls import reverse
from django.views.decorators.http import require_GET

from seo.metadata import absolute_url


@require_GET
def robots_txt(request):
    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        f"Sitemap: {absolute_url(reverse('sitemap'))}",
    ]
    return HttpResponse("\n".join(lines) + "\n", content_type="text/plain")
