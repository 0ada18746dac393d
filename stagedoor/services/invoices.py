"""
Australian tax invoices issued to clients.
"""
from typing import List

from pydantic import ValidationError

from stagedoor.errors import ApiError
from stagedoor.schemas import Invoice, NextInvoiceNumber
from stagedoor.services.base import ResourceService


class InvoiceService(ResourceService[Invoice]):
    model = Invoice
    read_path = "/api/admin/invoices"
    admin_path = "/api/admin/invoices"
    cache_listing = False

    def get_by_client_id(self, client_id: str) -> List[Invoice]:
        return self._parse_list(self.client.get(f"/api/admin/clients/{client_id}/invoices", False))

    def get_next_invoice_number(self) -> str:
        """Number the server will assign to the next invoice."""
        url = f"{self.read_path}/next-number"
        data = self.client.get(url, False)
        try:
            return NextInvoiceNumber.model_validate(data).invoice_number
        except ValidationError as e:
            raise ApiError("Unexpected response format from server", url=url) from e
