from .tracking import EventBuffer, get_sink, track_page_view


class AnalyticsMiddleware:
    """
    Give each request its own event buffer (``request.analytics``) and
    record a server-side page view for every full HTML page served.
    htmx partial swaps are not page views.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.analytics = EventBuffer(forward_to=get_sink())

        response = self.get_response(request)

        if self.is_page_view(request, response):
            track_page_view(request.get_full_path())
        return response

    @staticmethod
    def is_page_view(request, response):
        return (
            request.method == 'GET'
            and not request.headers.get('HX-Request')
            and response.status_code == 200
            and response.get('Content-Type', '').startswith('text/html')
        )
