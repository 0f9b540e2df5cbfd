"""
Validation rules and normalizers for account input.

Rules are plain callables taking the input record (a mapping keyed by the
wire field names, e.g. ``firstName``) and raising ValidationFailed on the
first violation. ValidationPipeline runs them in order and stops at the
first failure.
"""

# Standard library imports
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Mapping, Optional

# External package imports
from email_validator import EmailNotValidError, validate_email

# Local application imports
from ..core.exceptions import ValidationFailed
from .constants import UserFields

Record = Mapping[str, Any]
Rule = Callable[[Record], None]

MOBILE_PATTERN = re.compile(r"^[0-9]{10}$")
URL_PATTERN = re.compile(r"^https?://\S+$", re.IGNORECASE)

MIN_AGE = 13
MAX_AGE = 120
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 30

PASSWORD_FIELD = "password"
CONFIRM_PASSWORD_FIELD = "confirmPassword"
NEW_PASSWORD_FIELD = "newPassword"
TERMS_FIELD = UserFields.TERMS_ACCEPTED

REGISTRATION_REQUIRED_FIELDS = (
    UserFields.FIRST_NAME,
    UserFields.LAST_NAME,
    UserFields.EMAIL,
    UserFields.MOBILE,
    UserFields.AGE,
    PASSWORD_FIELD,
    CONFIRM_PASSWORD_FIELD,
)


# -----------------------------------------------------------------------------
# Normalizers
# -----------------------------------------------------------------------------


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def normalize_mobile(mobile: Any) -> str:
    return re.sub(r"[^0-9]", "", str(mobile or ""))


def normalize_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    return name[:1].upper() + name[1:].lower()


def parse_age(value: Any) -> Optional[int]:
    """Return the age as an int, or None if it is not an integer"""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and re.fullmatch(r"\s*[0-9]+\s*", value):
        return int(value)
    return None


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


# -----------------------------------------------------------------------------
# Policies
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class PasswordPolicy:
    """Password strength requirements"""
    min_length: int = 8
    require_composition: bool = True

    def check(self, password: Any, field_name: str = PASSWORD_FIELD) -> None:
        if not isinstance(password, str) or len(password) < self.min_length:
            raise ValidationFailed(field_name, f"must be at least {self.min_length} characters")
        if not self.require_composition:
            return
        if not re.search(r"[A-Z]", password):
            raise ValidationFailed(field_name, "must contain an uppercase letter")
        if not re.search(r"[a-z]", password):
            raise ValidationFailed(field_name, "must contain a lowercase letter")
        if not re.search(r"\d", password):
            raise ValidationFailed(field_name, "must contain a digit")
        if not re.search(r"[^A-Za-z0-9]", password):
            raise ValidationFailed(field_name, "must contain a special character")


@dataclass(frozen=True)
class ValidationPolicy:
    """Policy knobs that differ between deployments"""
    password: PasswordPolicy = field(default_factory=PasswordPolicy)
    allowed_email_domain: Optional[str] = None


# -----------------------------------------------------------------------------
# Rules
# -----------------------------------------------------------------------------


def required(fields: Iterable[str]) -> Rule:
    fields = tuple(fields)

    def rule(record: Record) -> None:
        for name in fields:
            if is_blank(record.get(name)):
                raise ValidationFailed(name, "is required")

    return rule


def terms_accepted(record: Record) -> None:
    value = record.get(TERMS_FIELD)
    # Form posts send the flag as the string "true"
    if value is not True and value != "true":
        raise ValidationFailed(TERMS_FIELD, "must be accepted")


def age_in_range(record: Record) -> None:
    if UserFields.AGE not in record:
        return
    age = parse_age(record[UserFields.AGE])
    if age is None:
        raise ValidationFailed(UserFields.AGE, "must be an integer")
    if age < MIN_AGE or age > MAX_AGE:
        raise ValidationFailed(UserFields.AGE, f"must be between {MIN_AGE} and {MAX_AGE}")


def email_format(allowed_domain: Optional[str] = None) -> Rule:
    def rule(record: Record) -> None:
        email = normalize_email(record.get(UserFields.EMAIL))
        # Same checker as EmailStr on the login and reset requests
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError:
            raise ValidationFailed(UserFields.EMAIL, "must be a valid email address")
        if allowed_domain and email.rsplit("@", 1)[1] != allowed_domain:
            raise ValidationFailed(UserFields.EMAIL, f"must be a @{allowed_domain} address")

    return rule


def mobile_format(record: Record) -> None:
    if not MOBILE_PATTERN.match(normalize_mobile(record.get(UserFields.MOBILE))):
        raise ValidationFailed(UserFields.MOBILE, "must be 10 digits")


def password_strength(policy: PasswordPolicy, field_name: str = PASSWORD_FIELD) -> Rule:
    def rule(record: Record) -> None:
        policy.check(record.get(field_name), field_name)

    return rule


def passwords_match(field_name: str = PASSWORD_FIELD) -> Rule:
    def rule(record: Record) -> None:
        if record.get(CONFIRM_PASSWORD_FIELD) != record.get(field_name):
            raise ValidationFailed(CONFIRM_PASSWORD_FIELD, "does not match password")

    return rule


def name_format(field_name: str) -> Rule:
    def rule(record: Record) -> None:
        if field_name not in record:
            return
        name = record.get(field_name)
        name = name.strip() if isinstance(name, str) else ""
        if not (NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH) or not name.isalpha():
            raise ValidationFailed(
                field_name,
                f"must be {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} letters",
            )

    return rule


def profile_picture_url(record: Record) -> None:
    value = record.get(UserFields.PROFILE_PICTURE)
    if is_blank(value):
        return
    if not isinstance(value, str) or not URL_PATTERN.match(value.strip()):
        raise ValidationFailed(UserFields.PROFILE_PICTURE, "must be an http(s) URL")


def only_fields(allowed: Iterable[str]) -> Rule:
    allowed = frozenset(allowed)

    def rule(record: Record) -> None:
        for name in record:
            if name not in allowed:
                raise ValidationFailed(name, "cannot be changed")

    return rule


# -----------------------------------------------------------------------------
# Pipelines
# -----------------------------------------------------------------------------


class ValidationPipeline:
    """Runs rules in order; the first failing rule wins"""

    def __init__(self, rules: Iterable[Rule]) -> None:
        self.rules: List[Rule] = list(rules)

    def run(self, record: Record) -> None:
        for rule in self.rules:
            rule(record)


def registration_pipeline(policy: ValidationPolicy) -> ValidationPipeline:
    return ValidationPipeline([
        required(REGISTRATION_REQUIRED_FIELDS),
        terms_accepted,
        age_in_range,
        email_format(policy.allowed_email_domain),
        mobile_format,
        password_strength(policy.password),
        passwords_match(),
        name_format(UserFields.FIRST_NAME),
        name_format(UserFields.LAST_NAME),
    ])


def new_password_pipeline(policy: ValidationPolicy) -> ValidationPipeline:
    return ValidationPipeline([
        required((NEW_PASSWORD_FIELD, CONFIRM_PASSWORD_FIELD)),
        password_strength(policy.password, NEW_PASSWORD_FIELD),
        passwords_match(NEW_PASSWORD_FIELD),
    ])


def profile_patch_pipeline() -> ValidationPipeline:
    return ValidationPipeline([
        only_fields(UserFields.MUTABLE_PROFILE_FIELDS),
        name_format(UserFields.FIRST_NAME),
        name_format(UserFields.LAST_NAME),
        age_in_range,
        profile_picture_url,
    ])
