"""
OperationResult.

Structured outcome returned across the engine boundary in place of
raised exceptions.
"""
from dataclasses import asdict, dataclass, field, is_dataclass
from typing import Any, Dict, Optional

from core.domain.exceptions import DomainException


@dataclass
class OperationResult:
    """
    Outcome of a license or account operation.

    ``code`` is None on success and the domain error code on failure.
    ``data`` holds the operation's payload fields.
    """

    success: bool
    code: Optional[str] = None
    message: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, payload: Any = None, message: Optional[str] = None, **extra) -> "OperationResult":
        """
        Build a successful result.

        Args:
            payload: Dataclass DTO or dict merged into data
            message: Human-readable message
            **extra: Additional data fields
        """
        data: Dict[str, Any] = {}
        if is_dataclass(payload):
            data.update(asdict(payload))
        elif payload:
            data.update(payload)
        data.update(extra)
        if message is None:
            message = data.pop("message", None)
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, exc: DomainException, **extra) -> "OperationResult":
        """Build a failed result from a domain exception."""
        return cls(success=False, code=exc.code, message=exc.message, data=dict(extra))

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to a response body."""
        body: Dict[str, Any] = {"success": self.success}
        body.update(self.data)
        if self.code is not None:
            body["code"] = self.code
        if self.message is not None:
            body["message"] = self.message
        return body
