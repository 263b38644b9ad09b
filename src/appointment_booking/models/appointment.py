from . import db  # Import db from the models package's __init__.py
from datetime import datetime

APPOINTMENT_STATUSES = ("pending", "confirmed", "cancelled", "completed")


class Appointment(db.Model):
    __tablename__ = "appointments"

    id = db.Column(db.Integer, primary_key=True)
    customer_name = db.Column(db.String(255), nullable=False)
    customer_email = db.Column(db.String(255), nullable=False)
    customer_phone = db.Column(db.String(20), nullable=False)
    appointment_date = db.Column(db.Date, nullable=False)
    appointment_time = db.Column(db.Time, nullable=False)
    service = db.Column(db.String(255), nullable=False)
    notes = db.Column(db.Text, default="")
    status = db.Column(
        db.Enum(*APPOINTMENT_STATUSES, name="appointment_status"),
        nullable=False,
        default="pending",
    )
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "customer_name": self.customer_name,
            "customer_email": self.customer_email,
            "customer_phone": self.customer_phone,
            "appointment_date": self.appointment_date.isoformat(),
            "appointment_time": self.appointment_time.strftime("%H:%M:%S"),
            "service": self.service,
            "notes": self.notes or "",
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Appointment {self.customer_name} on {self.appointment_date} at {self.appointment_time}>"
