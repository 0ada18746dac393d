"""
Public booking enquiries from the contact form.
"""
from stagedoor.schemas import ContactForm, ContactResult
from stagedoor.services.base import BaseService, dump_payload

CONTACT_PATH = "/api/contact"


class ContactService(BaseService):

    def submit_form(self, form: ContactForm) -> ContactResult:
        """Send a booking enquiry; the server records it as a new lead."""
        data = self.client.post(CONTACT_PATH, dump_payload(form))
        self._mutated()
        return ContactResult.model_validate(data or {})
