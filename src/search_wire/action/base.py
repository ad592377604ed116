"""Common transport options embedded in every custom-operation request."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from search_wire.errors import ActionRequestValidationError


if TYPE_CHECKING:
    from search_wire.streams import StreamInput, StreamOutput


@dataclass
class CustomOperationOptions:
    """Options shared by requests that run a custom operation on a single node.

    Requests embed this value instead of inheriting from a base request and
    merge its ``validate()`` result with their own checks. On the wire these
    two flags precede the request's own fields.

    Attributes:
        threaded_operation: Run the operation on a separate thread when executed locally.
        prefer_local: Execute on the local node when it can serve the request.
    """

    threaded_operation: bool = True
    prefer_local: bool = True

    def validate(self) -> ActionRequestValidationError | None:
        return None

    def write_to(self, out: StreamOutput) -> None:
        out.write_boolean(self.threaded_operation)
        out.write_boolean(self.prefer_local)

    @classmethod
    def read_from(cls, stream: StreamInput) -> CustomOperationOptions:
        threaded_operation = stream.read_boolean()
        prefer_local = stream.read_boolean()
        return cls(threaded_operation=threaded_operation, prefer_local=prefer_local)
