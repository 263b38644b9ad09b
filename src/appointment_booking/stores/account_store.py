import base64
import logging
from datetime import datetime

import pytz
from sqlalchemy.exc import IntegrityError

from ..errors import UnauthorizedError, ValidationError
from ..models.account import Account
from . import storage_operation

logger = logging.getLogger(__name__)


def issue_token(account_id, email, issued_at=None):
    """Opaque session token: base64 of "<id>:<email>:<unix millis>".

    Not signed and never verified server side; anyone can decode or forge it.
    """
    issued_at = issued_at or datetime.now(pytz.utc)
    millis = int(issued_at.timestamp() * 1000)
    raw = f"{account_id}:{email}:{millis}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


class AccountStore:
    """Registration, login and admin seeding over the users table."""

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def register(self, first_name, last_name, email, phone, password):
        with storage_operation(self.session, "registering user", "Registration failed"):
            if Account.query.filter_by(email=email).first():
                raise ValidationError("User already exists")

            account = Account(
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                password=password,
                role="user",
            )
            self.session.add(account)
            try:
                self.session.commit()
            except IntegrityError:
                # Lost a race with a concurrent registration for the same email
                self.session.rollback()
                raise ValidationError("User already exists")
            logger.info("Registered user %s", email)
            return account.id

    def login(self, email, password):
        with storage_operation(self.session, "logging in", "Login failed"):
            account = Account.query.filter_by(email=email, password=password).first()
        if account is None:
            raise UnauthorizedError("Invalid credentials")

        return {
            "token": issue_token(account.id, account.email),
            "role": account.role,
            "email": account.email,
            "name": account.full_name,
        }

    def seed_admin(self, email, password):
        """Create the administrator account if it is missing. Returns True when created."""
        with storage_operation(self.session, "seeding admin account", "Failed to seed admin account"):
            if Account.query.filter_by(email=email).first():
                logger.info("Admin account %s already exists", email)
                return False

            admin = Account(
                first_name="Admin",
                last_name="User",
                email=email,
                phone="0000000000",
                password=password,
                role="admin",
            )
            self.session.add(admin)
            self.session.commit()
            logger.info("Admin account %s created", email)
            return True
