"""
Roster API - Error Outcomes
============================

What:  The three failure outcomes a request can end in, as plain values.
Why:   Services return these instead of raising, so every handler receives
       an explicit outcome and hands it to the response mapper.
How:   Frozen dataclasses; each knows the HTTP status it maps to.
Who:   Produced by validators, services and the query executor;
       consumed by app.responses.

Taxonomy:
    ValidationError   → 400  (client input failed one or more field rules)
    NotFoundError     → 404  (write statement matched zero rows)
    DataAccessError   → 500  (store or pool failure, raw message kept)

Validation errors never reach the data layer; data-access errors are never
retried or reclassified.
"""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class FieldError:
    """One violated rule: which field, where it came from, and why."""

    field: str
    message: str
    location: str = "body"

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message, "location": self.location}


@dataclass(frozen=True)
class ValidationError:
    errors: List[FieldError] = field(default_factory=list)
    status_code: int = 400


@dataclass(frozen=True)
class NotFoundError:
    resource: str = "Resource"
    status_code: int = 404

    @property
    def message(self) -> str:
        return f"{self.resource} not found"


@dataclass(frozen=True)
class DataAccessError:
    """
    Any failure reported by the store or the connection pool.

    The message is the driver's own text (or the pool timeout text) and is
    returned to the client unchanged.
    """

    message: str
    status_code: int = 500


Failure = Union[ValidationError, NotFoundError, DataAccessError]
