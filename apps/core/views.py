import logging

from django.http import Http404
from django.shortcuts import render
from django.urls import reverse
from django.views import View
from django.views.generic import TemplateView

from analytics.tracking import track_form_submission, track_conversion, track_service_view
from config.constants.messages import (
    MSG_CONTACT_SUCCESS_HEADING, MSG_CONTACT_SUCCESS, MSG_CONTACT_ERROR,
    MSG_CONTACT_SEND_ANOTHER, MSG_CONSULTANT_NOT_FOUND, MSG_NOT_FOUND,
)
from consultants.data import CONSULTANTS
from seo import jsonld
from seo.metadata import get_page_metadata, service_metadata, not_found_metadata
from .content import SERVICES, FAQS, get_service
from .forms import ContactForm
from .services import ContactService, ContactSubmissionError

logger = logging.getLogger('apps.core')

HOME_FEATURED_CONSULTANTS = 3


def home(request):
    return render(request, 'home.html', {
        'meta': get_page_metadata('home'),
        'organization_ld': jsonld.organization(),
        'services': SERVICES,
        'featured_consultants': CONSULTANTS[:HOME_FEATURED_CONSULTANTS],
    })


class AboutView(TemplateView):
    template_name = 'core/about.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['meta'] = get_page_metadata('about')
        context['breadcrumbs_ld'] = jsonld.breadcrumbs([
            ('Home', reverse('home')),
            ('About Us', reverse('about')),
        ])
        return context


class ServicesView(TemplateView):
    template_name = 'core/services.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['meta'] = get_page_metadata('services')
        context['services'] = SERVICES
        context['faqs'] = FAQS
        context['faq_ld'] = jsonld.faq(FAQS)
        context['service_lds'] = [jsonld.service(s.name, s.summary, self.service_path(s)) for s in SERVICES]
        return context

    @staticmethod
    def service_path(service):
        if service.has_detail_page:
            return reverse('service-detail', kwargs={'slug': service.slug})
        return reverse('services')


class ServiceDetailView(TemplateView):
    template_name = 'core/service_detail.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        service = get_service(kwargs['slug'])
        if service is None or not service.has_detail_page:
            raise Http404(MSG_NOT_FOUND)

        detail_url = reverse('service-detail', kwargs={'slug': service.slug})
        track_service_view(service.name, sink=getattr(self.request, 'analytics', None))

        context['service'] = service
        context['meta'] = service_metadata(service)
        context['service_ld'] = jsonld.service(service.name, service.description, detail_url)
        context['breadcrumbs_ld'] = jsonld.breadcrumbs([
            ('Home', reverse('home')),
            ('Services', reverse('services')),
            (service.name, detail_url),
        ])
        return context


class ContactView(View):
    template_name = 'core/contact.html'
    form_type = 'contact'

    def get(self, request):
        return self.render_page(request, ContactForm())

    def post(self, request):
        form = ContactForm(request.POST)
        if not form.is_valid():
            return self.render_page(request, form)

        try:
            ContactService.submit(form.cleaned_data)
        except ContactSubmissionError:
            logger.exception("Error submitting contact form")
            return self.render_page(request, form, submit_error=MSG_CONTACT_ERROR)

        sink = getattr(request, 'analytics', None)
        service = form.cleaned_data.get('service') or None
        track_form_submission(self.form_type, service, sink=sink)
        track_conversion('contact_form', sink=sink)

        return self.render_page(request, ContactForm(), sent=True)

    def render_page(self, request, form, sent=False, submit_error=''):
        return render(request, self.template_name, {
            'form': form,
            'sent': sent,
            'submit_error': submit_error,
            'success_heading': MSG_CONTACT_SUCCESS_HEADING,
            'success_message': MSG_CONTACT_SUCCESS,
            'send_another_label': MSG_CONTACT_SEND_ANOTHER,
            'meta': get_page_metadata('contact'),
            'local_business_ld': jsonld.local_business(),
        })


def page_not_found(request, exception=None):
    match = getattr(request, 'resolver_match', None)
    if match and match.url_name == 'consultant-detail':
        meta = not_found_metadata(MSG_CONSULTANT_NOT_FOUND)
    else:
        meta = not_found_metadata()
    return render(request, '404.html', {'meta': meta}, status=404)
