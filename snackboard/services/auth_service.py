"""Login and admin bootstrap.

A family logs in with its name and access code and gets a signed access
token; every later request is checked against that token server side.
"""

import logging

from sqlmodel import Session, select

from snackboard.config import settings
from snackboard.errors import AuthenticationError
from snackboard.models.family import Family, ROLE_ADMIN
from snackboard.services.family_service import create_family, get_family_by_name
from snackboard.utils.security import create_access_token, verify_access_code

logger = logging.getLogger(__name__)

INVALID_LOGIN = "Invalid name or access code"


def authenticate(session: Session, name: str, access_code: str) -> Family:
    """Return the family for a matching name/code pair.

    Unknown names and wrong codes fail the same way so the response does
    not reveal which names exist.
    """
    family = get_family_by_name(session, name)
    if not family or not verify_access_code(access_code, family.access_code_hash):
        logger.warning("Failed login for name %r", name)
        raise AuthenticationError(INVALID_LOGIN)
    logger.info("Family %s (%s) logged in", family.id, family.name)
    return family


def login(session: Session, name: str, access_code: str) -> tuple[Family, str]:
    family = authenticate(session, name, access_code)
    return family, create_access_token(family.id, family.role)


def ensure_admin(session: Session) -> Family:
    """Create the configured admin account if there is no admin yet."""
    admin = session.exec(select(Family).where(Family.role == ROLE_ADMIN)).first()
    if admin:
        return admin
    admin = create_family(
        session,
        name=settings.admin_name,
        access_code=settings.admin_access_code,
        role=ROLE_ADMIN,
    )
    logger.info("Bootstrapped admin account %r", admin.name)
    return admin
