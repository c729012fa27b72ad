"""
Static page content: the service catalogue and the services FAQ.
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass(frozen=True)
class Service:
    slug: str
    name: str
    summary: str
    description: str
    highlights: Tuple[str, ...] = ()
    has_detail_page: bool = False


SERVICES = (
    Service(
        slug="project-management",
        name="Project Management",
        summary=(
            "End-to-end project leadership that keeps scope, schedule, and budget under "
            "control from kickoff through closeout."
        ),
        description=(
            "Our certified project managers plan, execute, and close projects using proven "
            "methodologies tailored to your organization. We establish clear governance, "
            "manage risks before they become issues, and keep stakeholders informed at "
            "every step."
        ),
        highlights=(
            "Project planning and scheduling",
            "Risk and issue management",
            "Stakeholder communication",
            "Troubled project recovery",
        ),
        has_detail_page=True,
    ),
    Service(
        slug="program-management",
        name="Program Management",
        summary=(
            "Coordinated management of related projects so that together they deliver "
            "the strategic benefits your organization expects."
        ),
        description=(
            "We align portfolios of projects with strategic goals, stand up program "
            "management offices, and manage interdependencies so benefits are realized, "
            "not just deliverables shipped."
        ),
        highlights=(
            "Program governance and PMO setup",
            "Benefits realization tracking",
            "Cross-project dependency management",
        ),
        has_detail_page=True,
    ),
    Service(
        slug="strategic-planning",
        name="Strategic Planning",
        summary=(
            "Facilitated planning that turns vision into a prioritized, actionable "
            "roadmap with measurable outcomes."
        ),
        description=(
            "We guide leadership teams through environmental assessment, goal setting, and "
            "initiative prioritization, then build the roadmap and performance measures "
            "that make the strategy executable."
        ),
        highlights=(
            "Leadership workshops",
            "Strategic roadmaps",
            "Key performance indicators",
        ),
        has_detail_page=True,
    ),
    Service(
        slug="data-analytics",
        name="Data & Analytics",
        summary="Data strategy, governance, and reporting that turn information into insight.",
        description=(
            "From data governance frameworks to executive dashboards, we help organizations "
            "trust their data and use it to make better decisions."
        ),
        highlights=(
            "Data governance",
            "Dashboards and reporting",
            "Analytics roadmaps",
        ),
    ),
    Service(
        slug="vendor-management",
        name="Vendor Management",
        summary="Sourcing, contract oversight, and performance management for third-party vendors.",
        description=(
            "We help you select the right partners, structure accountable contracts, and "
            "monitor vendor performance to reduce cost and delivery risk."
        ),
        highlights=(
            "Vendor selection and solicitation",
            "Contract management",
            "Performance scorecards",
        ),
    ),
    Service(
        slug="ai-consulting",
        name="AI Consulting",
        summary="Practical, responsible adoption of AI aligned with your business goals.",
        description=(
            "We assess AI readiness, identify high-value use cases, and guide pilots from "
            "proof of concept to production with governance built in."
        ),
        highlights=(
            "AI readiness assessments",
            "Use case prioritization",
            "Responsible AI governance",
        ),
    ),
)

SERVICE_CHOICES = [(s.name, s.name) for s in SERVICES]

FAQS = (
    (
        "What industries do you serve?",
        "We work with healthcare, government, financial services, manufacturing, and "
        "technology organizations of every size.",
    ),
    (
        "How does an engagement start?",
        "Every engagement begins with a free consultation where we learn about your goals "
        "and recommend the right mix of services.",
    ),
    (
        "Can you work alongside our internal teams?",
        "Yes. Our consultants embed with your staff, transfer knowledge, and leave behind "
        "practices your team can sustain.",
    ),
    (
        "Are you a certified diverse supplier?",
        "Yes. Elite Enterprise Transformation Consulting Group is a woman and minority owned business.",
    ),
)


def get_service(slug) -> Optional[Service]:
    for service in SERVICES:
        if service.slug == slug:
            return service
    return None


def detail_services():
    return [s for s in SERVICES if s.has_detail_page]
