"""Assembly of DoH JSON shaped response documents."""

from dataclasses import dataclass, field
from typing import Any, Optional

from dnsolve.dns.status import ResponseStatus


@dataclass
class ResponseAssembler:
    """
    Accumulates the parts of one response.

    questions and answers keep insertion order and are never deduplicated.
    build() omits "Question" / "Answer" when empty and "comment" when unset.
    TC is always false: truncation is handled inside the resolver library.
    """

    status: ResponseStatus = ResponseStatus.NOERROR
    recursion_desired: bool = True
    recursion_available: bool = True
    authenticated_data: bool = False
    checking_disabled: bool = False
    comment: Optional[str] = None
    questions: list[dict[str, Any]] = field(default_factory=list)
    answers: list[dict[str, Any]] = field(default_factory=list)

    def add_question(self, name: str, record_type: int) -> None:
        self.questions.append({"name": name, "type": int(record_type)})

    def add_answer(self, name: str, record_type: int, ttl: int, data: str) -> None:
        self.answers.append(
            {"name": name, "type": int(record_type), "TTL": int(ttl), "data": data}
        )

    def build(self) -> dict[str, Any]:
        response: dict[str, Any] = {
            "Status": int(self.status),
            "TC": False,
            "RD": self.recursion_desired,
            "RA": self.recursion_available,
            "AD": self.authenticated_data,
            "CD": self.checking_disabled,
        }

        if self.questions:
            response["Question"] = list(self.questions)

        if self.answers:
            response["Answer"] = list(self.answers)

        if self.comment is not None:
            response["comment"] = self.comment

        return response

    @classmethod
    def error(cls, status: ResponseStatus, message: str) -> dict[str, Any]:
        """Minimal response for failures before any query was attempted."""
        return cls(status=status, authenticated_data=False, comment=message).build()
