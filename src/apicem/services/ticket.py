"""Service tickets: the token sent in ``X-Auth-Token``."""

from __future__ import annotations

from pydantic import Field

from apicem.core.response import Response
from apicem.services.base import ApiModel, Service


class UserCredentials(ApiModel):
    username: str
    password: str


class Ticket(ApiModel):
    service_ticket: str = ""
    idle_timeout: int | None = None
    session_timeout: int | None = None


class TicketDeleteResult(ApiModel):
    message: str = Field(default="")


class TicketService(Service):
    """Wraps the ``v1/ticket`` resource."""

    def add_ticket(self, username: str, password: str) -> tuple[Ticket, Response]:
        credentials = UserCredentials(username=username, password=password)
        return self._call("POST", "v1/ticket", Ticket, body=credentials)

    def delete_ticket(self, ticket: str) -> tuple[TicketDeleteResult, Response]:
        return self._call("DELETE", f"v1/ticket/{ticket}", TicketDeleteResult)

    def login(self, username: str, password: str) -> Ticket:
        """Request a ticket and use it for every later request of this client."""
        ticket, _ = self.add_ticket(username, password)
        self.client.authorization = ticket.service_ticket
        return ticket
