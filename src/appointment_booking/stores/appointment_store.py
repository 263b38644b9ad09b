from datetime import datetime

from ..errors import NotFoundError
from ..models.appointment import Appointment
from . import storage_operation


class AppointmentStore:
    """Persistence for the appointments table.

    Inputs are expected to be validated already; every method maps to a single
    statement against the shared session.
    """

    def __init__(self, db):
        self.db = db

    @property
    def session(self):
        return self.db.session

    def list(self):
        with storage_operation(self.session, "fetching appointments", "Failed to fetch appointments"):
            return (
                Appointment.query
                .order_by(Appointment.appointment_date.desc(), Appointment.appointment_time.desc())
                .all()
            )

    def create(self, customer_name, customer_email, customer_phone,
               appointment_date, appointment_time, service, notes=""):
        with storage_operation(self.session, "creating appointment", "Failed to create appointment"):
            appointment = Appointment(
                customer_name=customer_name,
                customer_email=customer_email,
                customer_phone=customer_phone,
                appointment_date=appointment_date,
                appointment_time=appointment_time,
                service=service,
                notes=notes or "",
            )
            self.session.add(appointment)
            self.session.commit()
            return appointment.id

    def update(self, appointment_id, customer_name, customer_email, customer_phone,
               appointment_date, appointment_time, service, notes="", status="pending"):
        # Full replace, last writer wins
        with storage_operation(self.session, "updating appointment", "Failed to update appointment"):
            appointment = self._get_or_raise(appointment_id)
            appointment.customer_name = customer_name
            appointment.customer_email = customer_email
            appointment.customer_phone = customer_phone
            appointment.appointment_date = appointment_date
            appointment.appointment_time = appointment_time
            appointment.service = service
            appointment.notes = notes or ""
            appointment.status = status or "pending"
            appointment.updated_at = datetime.utcnow()
            self.session.commit()

    def update_status(self, appointment_id, status):
        with storage_operation(self.session, "updating appointment status", "Failed to update appointment status"):
            appointment = self._get_or_raise(appointment_id)
            appointment.status = status
            appointment.updated_at = datetime.utcnow()
            self.session.commit()

    def delete(self, appointment_id):
        with storage_operation(self.session, "deleting appointment", "Failed to delete appointment"):
            appointment = self._get_or_raise(appointment_id)
            self.session.delete(appointment)
            self.session.commit()

    def _get_or_raise(self, appointment_id):
        appointment = self.session.get(Appointment, appointment_id)
        if appointment is None:
            raise NotFoundError("Appointment not found")
        return appointment
