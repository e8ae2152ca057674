"""
Pydantic models for the backend's response envelopes.
"""
from typing import Any, Dict, List, Optional, Union
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Backend sends expiresIn as seconds or as a duration string like "7d"
DEFAULT_EXPIRES_IN = 7 * 24 * 60 * 60


class Pagination(BaseModel):
    page: int = 1
    limit: int = 20
    total: int = 0
    total_pages: int = 0
    has_next: bool = False
    has_prev: bool = False


class ApiEnvelope(BaseModel):
    """Uniform {success, data, error} shape of every response"""
    model_config = ConfigDict(extra="allow")

    success: bool
    data: Any = None
    error: Optional[str] = None
    message: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    pagination: Optional[Pagination] = None


class User(BaseModel):
    """Authenticated staff member"""
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    phone: Optional[str] = None
    role: Optional[str] = None
    branch_id: Optional[str] = None
    is_active: bool = True
    last_login: Optional[str] = None


class TokenSet(BaseModel):
    access_token: str
    refresh_token: str
    expires_in: int = DEFAULT_EXPIRES_IN


class LoginResult(BaseModel):
    user: User
    tokens: TokenSet

    @classmethod
    def from_login_data(cls, data: Dict[str, Any]) -> "LoginResult":
        """Normalize the /auth/login payload {user, token, refreshToken, expiresIn}"""
        expires_in: Union[int, str, None] = data.get("expiresIn")
        if not isinstance(expires_in, int):
            expires_in = DEFAULT_EXPIRES_IN
        return cls(
            user=User.model_validate(data["user"]),
            tokens=TokenSet(
                access_token=data["token"],
                refresh_token=data["refreshToken"],
                expires_in=expires_in,
            ),
        )


class VehicleSummary(BaseModel):
    model_config = ConfigDict(extra="allow")

    registration_number: str
    vehicle_type: Optional[str] = None


class JobSummary(BaseModel):
    """The subset of a job shown in listings

    Accepts both the backend's row shape (`job_no`, flat `registration_no`,
    numeric ids) and the nested shape with `job_number` and `vehicle`.
    """
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    id: str
    job_number: str = Field(validation_alias=AliasChoices("job_number", "job_no"))
    status: str
    payment_status: Optional[str] = None
    vehicle: Optional[VehicleSummary] = None
    registration_no: Optional[str] = None
    final_amount: Optional[float] = None
    total_amount: Optional[float] = None
    check_in_time: Optional[str] = Field(default=None, validation_alias=AliasChoices("check_in_time", "created_at"))
    estimated_duration: Optional[int] = None

    @property
    def amount(self) -> float:
        if self.final_amount is not None:
            return self.final_amount
        return self.total_amount or 0.0

    @property
    def registration(self) -> Optional[str]:
        if self.vehicle is not None:
            return self.vehicle.registration_number
        return self.registration_no


def parse_job_list(envelope: Dict[str, Any]) -> List[JobSummary]:
    return [JobSummary.model_validate(item) for item in envelope.get("data") or []]
