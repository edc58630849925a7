"""Clients a flow can be published for, and the submission hand-off types."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from screenflow.models.base import WireDocument


@dataclass(frozen=True)
class Client:
    """Business account a flow is published for."""

    id: str
    name: str
    phone_number_id: str
    waba_id: str
    has_access_token: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Client":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            phone_number_id=str(data.get("phone_number_id", "")),
            waba_id=str(data.get("waba_id", "")),
            has_access_token=bool(data.get("has_access_token", False)),
        )


class ClientDirectory:
    """Lookup of known clients by id, in insertion order."""

    def __init__(self, clients: Iterable[Client] = ()):
        self._clients: dict[str, Client] = {}
        for client in clients:
            self.add(client)

    def add(self, client: Client) -> None:
        self._clients[client.id] = client

    def get(self, client_id: str | None) -> Client | None:
        if client_id is None:
            return None
        return self._clients.get(client_id)

    def list_clients(self) -> list[Client]:
        return list(self._clients.values())

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)


@dataclass(frozen=True)
class SubmissionRequest:
    """Everything the delivery platform needs to create a flow."""

    client: Client
    flow_name: str
    flow_data: WireDocument

    def to_dict(self) -> dict[str, Any]:
        return {
            "clientId": self.client.id,
            "flowName": self.flow_name,
            "flowData": self.flow_data,
        }


Submitter = Callable[[SubmissionRequest], Any]
