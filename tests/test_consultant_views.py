from django.urls import reverse

from consultants.data import CONSULTANTS
from consultants.services import all_specialties, filter_by_specialty
from config.constants.messages import (
    MSG_CONSULTANTS_NO_RESULTS, MSG_CONSULTANTS_CLEAR_FILTER, MSG_CONSULTANT_NOT_FOUND,
)


class TestConsultantList:
    """Consultant directory page"""

    def test_lists_every_consultant(self, client):
        response = client.get(reverse('consultant-list'))
        assert response.status_code == 200
        assert list(response.context['consultants']) == list(CONSULTANTS)
        for consultant in CONSULTANTS:
            assert consultant.name in response.content.decode()

    def test_filter_options_are_sorted_tags(self, client):
        response = client.get(reverse('consultant-list'))
        assert response.context['directory'].specialties == all_specialties()

    def test_specialty_query_filters(self, client):
        specialty = "Vendor Management"
        response = client.get(reverse('consultant-list'), {'specialty': specialty})
        assert response.status_code == 200
        assert response.context['consultants'] == filter_by_specialty(specialty)
        assert response.context['directory'].selected == specialty

    def test_unknown_specialty_shows_no_results_with_reset(self, client):
        response = client.get(reverse('consultant-list'), {'specialty': 'Underwater Basket Weaving'})
        assert response.status_code == 200
        body = response.content.decode()
        assert response.context['consultants'] == []
        assert MSG_CONSULTANTS_NO_RESULTS in body
        assert MSG_CONSULTANTS_CLEAR_FILTER in body
        assert f'href="{reverse("consultant-list")}"' in body

    def test_htmx_request_renders_directory_only(self, client):
        response = client.get(reverse('consultant-list'), HTTP_HX_REQUEST='true')
        assert response.status_code == 200
        assert '<html' not in response.content.decode()
        templates = [t.name for t in response.templates]
        assert 'consultants/_consultant_directory.html' in templates
        assert 'consultants/_consultant_grid.html' in templates

    def test_htmx_request_highlights_selected_specialty(self, client):
        specialty = "Vendor Management"
        response = client.get(reverse('consultant-list'), {'specialty': specialty}, HTTP_HX_REQUEST='true')
        body = response.content.decode()
        assert 'Filter by Specialty' in body
        assert body.count('class="active"') == 1
        active_link = body.split('class="active"', 1)[1].split('</a>', 1)[0]
        assert active_link.endswith(f'>{specialty}')

    def test_htmx_links_swap_filter_and_grid_together(self, client):
        body = client.get(reverse('consultant-list'), HTTP_HX_REQUEST='true').content.decode()
        assert 'hx-target="#consultant-grid"' not in body
        assert 'hx-target="#consultant-directory"' in body

    def test_has_page_metadata(self, client):
        body = client.get(reverse('consultant-list')).content.decode()
        assert '<link rel="canonical" href="https://eliteenterprisetcg.com/consultants/">' in body


class TestConsultantDetail:
    """Consultant profile page"""

    def test_renders_profile(self, client):
        consultant = CONSULTANTS[0]
        response = client.get(reverse('consultant-detail', kwargs={'consultant_id': consultant.id}))
        assert response.status_code == 200
        body = response.content.decode()
        assert response.context['consultant'] is consultant
        assert response.context['bio_paragraphs'] == consultant.bio_paragraphs
        for paragraph in consultant.bio_paragraphs:
            assert f"<p>{paragraph}</p>" in body
        for cert in consultant.certifications:
            assert cert in body
        assert f"Work With {consultant.first_name}" in body

    def test_embeds_person_structured_data(self, client):
        consultant = CONSULTANTS[1]
        body = client.get(reverse('consultant-detail', kwargs={'consultant_id': consultant.id})).content.decode()
        assert '<script type="application/ld+json">' in body
        assert '"@type": "Person"' in body
        assert '"@type": "BreadcrumbList"' in body

    def test_profile_metadata(self, client):
        consultant = CONSULTANTS[1]
        body = client.get(reverse('consultant-detail', kwargs={'consultant_id': consultant.id})).content.decode()
        assert f"<title>{consultant.name} - {consultant.title} | Elite Enterprise TCG</title>" in body
        assert '<meta property="og:type" content="profile">' in body

    def test_unknown_id_is_404(self, client):
        response = client.get('/consultants/no-such-person/')
        assert response.status_code == 404
        assert MSG_CONSULTANT_NOT_FOUND in response.content.decode()

    def test_non_slug_id_does_not_route(self, client):
        response = client.get('/consultants/not%20a%20slug/')
        assert response.status_code == 404

    def test_records_consultant_view(self, client, recording_sink):
        consultant = CONSULTANTS[2]
        response = client.get(reverse('consultant-detail', kwargs={'consultant_id': consultant.id}))
        assert ('consultant_view', {
            'consultant_name': consultant.name,
            'consultant_id': consultant.id,
        }) in recording_sink.events
        assert 'id="analytics-events"' in response.content.decode()
