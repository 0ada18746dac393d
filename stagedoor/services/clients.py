"""
Client (lead) tracking and the communication log kept per client.
"""
from typing import List

from stagedoor.schemas import Client, ClientCommunication
from stagedoor.services.base import BaseService, Payload, ResourceService, dump_payload

COMMUNICATIONS_PATH = "/api/admin/communications"


class ClientService(ResourceService[Client]):
    model = Client
    read_path = "/api/admin/clients"
    admin_path = "/api/admin/clients"
    cache_listing = False


class ClientCommunicationService(BaseService):
    """Communications are only ever listed per client, always uncached."""

    def get_by_client_id(self, client_id: str) -> List[ClientCommunication]:
        data = self.client.get(f"/api/admin/clients/{client_id}/communications", False)
        return [ClientCommunication.model_validate(item) for item in data or []]

    def create(self, data: Payload) -> ClientCommunication:
        created = self.client.post(COMMUNICATIONS_PATH, dump_payload(data))
        self._mutated()
        return ClientCommunication.model_validate(created)

    def update(self, communication_id: str, data: Payload) -> ClientCommunication:
        updated = self.client.put(f"{COMMUNICATIONS_PATH}/{communication_id}", dump_payload(data))
        self._mutated()
        return ClientCommunication.model_validate(updated)

    def delete(self, communication_id: str) -> None:
        self.client.delete(f"{COMMUNICATIONS_PATH}/{communication_id}")
        self._mutated()
