"""
Consultant roster.

The list is defined once at import time and never mutated; every
directory view is a read-only derived view over ``CONSULTANTS``.
"""

from dataclasses import dataclass
from typing import Tuple

BIO_PARAGRAPH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class Consultant:
    id: str
    name: str
    title: str
    short_bio: str
    full_bio: str
    image: str
    specialties: Tuple[str, ...] = ()
    certifications: Tuple[str, ...] = ()
    education: Tuple[str, ...] = ()
    experience: Tuple[str, ...] = ()

    @property
    def bio_paragraphs(self):
        """``full_bio`` split into display paragraphs, blanks dropped."""
        return [
            paragraph.strip()
            for paragraph in self.full_bio.split(BIO_PARAGRAPH_SEPARATOR)
            if paragraph.strip()
        ]

    @property
    def first_name(self):
        parts = self.name.split()
        return parts[0] if parts else ""


CONSULTANTS = (
    Consultant(
        id="angela-brooks",
        name="Angela Brooks",
        title="Founder & Principal Consultant",
        short_bio=(
            "Transformation leader with more than two decades of experience guiding "
            "enterprise programs from strategy through delivery."
        ),
        full_bio=(
            "Angela Brooks founded Elite Enterprise Transformation Consulting Group to help "
            "organizations turn strategy into measurable results. She has led portfolio "
            "offices for healthcare, government, and financial services clients.\n\n"
            "Her work centers on aligning executive priorities with the programs that carry "
            "them out, building governance that keeps large initiatives on schedule and "
            "within budget.\n\n"
            "Angela is a frequent speaker on organizational change and mentors emerging "
            "project leaders across the Southeast."
        ),
        image="/images/consultants/angela-brooks.jpg",
        specialties=(
            "Program Management",
            "Strategic Planning",
            "Organizational Change Management",
        ),
        certifications=(
            "Project Management Professional (PMP)",
            "Program Management Professional (PgMP)",
            "Prosci Change Management Practitioner",
        ),
        education=(
            "MBA, Georgia State University",
            "B.S. Industrial Engineering, Georgia Institute of Technology",
        ),
        experience=(
            "Director, Enterprise Program Management Office, regional health system",
            "Senior Program Manager, Fortune 500 financial services firm",
            "Management Consultant, global consulting practice",
        ),
    ),
    Consultant(
        id="marcus-hill",
        name="Marcus Hill",
        title="Senior Project Management Consultant",
        short_bio=(
            "Certified project manager who delivers complex technology implementations "
            "on time through disciplined planning and clear communication."
        ),
        full_bio=(
            "Marcus Hill has spent fifteen years delivering ERP, CRM, and infrastructure "
            "projects for public and private sector clients.\n\n"
            "He specializes in rescuing troubled projects: re-baselining scope, restoring "
            "stakeholder confidence, and establishing the reporting cadence teams need to "
            "finish strong."
        ),
        image="/images/consultants/marcus-hill.jpg",
        specialties=(
            "Project Management",
            "Vendor Management",
            "Agile Delivery",
        ),
        certifications=(
            "Project Management Professional (PMP)",
            "Certified ScrumMaster (CSM)",
        ),
        education=(
            "M.S. Information Systems, Augusta University",
        ),
        experience=(
            "IT Project Manager, state government agency",
            "Implementation Lead, enterprise software vendor",
        ),
    ),
    Consultant(
        id="priya-raman",
        name="Priya Raman",
        title="Data & Analytics Consultant",
        short_bio=(
            "Analytics strategist helping leadership teams build the data foundations "
            "and dashboards that drive better decisions."
        ),
        full_bio=(
            "Priya Raman designs analytics programs that connect operational data to "
            "executive decision making.\n\n"
            "She has built data governance frameworks, self-service reporting platforms, "
            "and machine learning pilots for manufacturing and logistics clients.\n\n"
            "Priya leads the firm's AI Consulting practice, advising clients on responsible "
            "adoption of generative AI."
        ),
        image="/images/consultants/priya-raman.jpg",
        specialties=(
            "Data & Analytics",
            "AI Consulting",
            "Strategic Planning",
        ),
        certifications=(
            "Certified Analytics Professional (CAP)",
            "Microsoft Certified: Power BI Data Analyst Associate",
        ),
        education=(
            "M.S. Analytics, Georgia Institute of Technology",
            "B.S. Mathematics, University of Georgia",
        ),
        experience=(
            "Analytics Manager, national logistics provider",
            "Data Scientist, manufacturing technology firm",
        ),
    ),
    Consultant(
        id="david-okafor",
        name="David Okafor",
        title="Vendor & Procurement Management Consultant",
        short_bio=(
            "Procurement specialist who negotiates, manages, and optimizes vendor "
            "relationships to reduce cost and risk."
        ),
        full_bio=(
            "David Okafor brings twelve years of sourcing and contract management experience "
            "to clients managing complex vendor ecosystems.\n\n"
            "He builds vendor scorecards, leads competitive solicitations, and sets up the "
            "oversight practices that keep third-party delivery accountable."
        ),
        image="/images/consultants/david-okafor.jpg",
        specialties=(
            "Vendor Management",
            "Project Management",
        ),
        certifications=(
            "Certified Professional in Supply Management (CPSM)",
            "Project Management Professional (PMP)",
        ),
        education=(
            "B.B.A. Supply Chain Management, Georgia Southern University",
        ),
        experience=(
            "Procurement Manager, county government",
            "Contract Administrator, aerospace supplier",
        ),
    ),
)
