from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class CreateSessionInputDTO:
    id_token: str | None


@dataclass(frozen=True)
class SessionCookieDTO:
    value: str
    max_age: timedelta
