from django.urls import reverse
from django.views.generic import TemplateView

from analytics.tracking import track_consultant_view
from config.constants.messages import (
    MSG_CONSULTANTS_HEADING, MSG_CONSULTANTS_INTRO,
    MSG_CONSULTANTS_NO_RESULTS, MSG_CONSULTANTS_CLEAR_FILTER,
)
from seo import jsonld
from seo.metadata import get_page_metadata, consultant_metadata
from .services import build_directory, get_consultant_or_404

SPECIALTY_PARAM = 'specialty'


class ConsultantListView(TemplateView):
    """Consultant directory, filtered by the ``?specialty=`` selection."""
    template_name = 'consultants/consultant_list.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        directory = build_directory(self.request.GET.get(SPECIALTY_PARAM))
        list_url = reverse('consultant-list')

        context['directory'] = directory
        context['consultants'] = directory.consultants
        context['specialty_param'] = SPECIALTY_PARAM
        context['reset_url'] = list_url
        context['meta'] = get_page_metadata('consultants')
        context['heading'] = MSG_CONSULTANTS_HEADING
        context['intro'] = MSG_CONSULTANTS_INTRO
        context['no_results_message'] = MSG_CONSULTANTS_NO_RESULTS
        context['clear_filter_label'] = MSG_CONSULTANTS_CLEAR_FILTER
        context['breadcrumbs_ld'] = jsonld.breadcrumbs([
            ('Home', reverse('home')),
            ('Consultants', list_url),
        ])
        return context

    def get_template_names(self):
        if self.request.headers.get('HX-Request'):
            return ['consultants/_consultant_directory.html']
        return super().get_template_names()


class ConsultantDetailView(TemplateView):
    template_name = 'consultants/consultant_detail.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        consultant = get_consultant_or_404(kwargs['consultant_id'])
        detail_url = reverse('consultant-detail', kwargs={'consultant_id': consultant.id})

        track_consultant_view(consultant.name, consultant.id, sink=getattr(self.request, 'analytics', None))

        context['consultant'] = consultant
        context['bio_paragraphs'] = consultant.bio_paragraphs
        context['meta'] = consultant_metadata(consultant)
        context['person_ld'] = jsonld.person(consultant)
        context['breadcrumbs_ld'] = jsonld.breadcrumbs([
            ('Home', reverse('home')),
            ('Consultants', reverse('consultant-list')),
            (consultant.name, detail_url),
        ])
        return context
