import time
import logging

from django.conf import settings

logger = logging.getLogger('apps.core')


class ContactSubmissionError(Exception):
    """The contact message could not be delivered."""


class ContactService:
    @staticmethod
    def submit(data):
        """
        Deliver a contact form submission.

        No backend is wired up yet: delivery waits ``CONTACT_SUBMIT_DELAY``
        seconds to stand in for the network round trip, then logs the
        message. Raises ``ContactSubmissionError`` when delivery fails.
        """
        try:
            ContactService._deliver(data)
        except ContactSubmissionError:
            raise
        except Exception as exc:
            raise ContactSubmissionError(str(exc)) from exc

        logger.info(
            f"📨 Contact submission received: name={data.get('name')!r} "
            f"email={data.get('email')!r} service={data.get('service') or '-'}"
        )
        return True

    @staticmethod
    def _deliver(data):
        delay = getattr(settings, 'CONTACT_SUBMIT_DELAY', 0)
        if delay > 0:
            time.sleep(delay)
