from __future__ import annotations

from .._core import BaseResource
from ..models import Invoice, InvoiceAdd, ValidationError


class Invoices(BaseResource):
    async def add(self, invoice: InvoiceAdd) -> Invoice | ValidationError:
        """Create an invoice against a subscription."""
        response = await (
            self._request("billing/invoices").authenticate_as_server().with_body(invoice).post()
        )
        return self._parse_or_invalid(response, Invoice)


__all__ = ["Invoices"]
