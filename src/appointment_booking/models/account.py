from . import db
from datetime import datetime

ACCOUNT_ROLES = ("user", "admin")


class Account(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    phone = db.Column(db.String(20), nullable=False)
    # Stored verbatim, no hashing
    password = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(*ACCOUNT_ROLES, name="account_role"), nullable=False, default="user")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __repr__(self):
        return f"<Account {self.email} ({self.role})>"
