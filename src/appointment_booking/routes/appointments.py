from flask import Blueprint, jsonify

from ..validators import get_payload, parse_date, parse_time, require_fields, validate_status

REQUIRED_FIELDS = (
    "customer_name",
    "customer_email",
    "customer_phone",
    "appointment_date",
    "appointment_time",
    "service",
)
MISSING_FIELDS_MESSAGE = "All required fields must be filled"


def _appointment_fields(data):
    # No format checks on email/phone and no future-date check, any non-empty value is stored
    require_fields(data, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)
    return {
        "customer_name": data["customer_name"],
        "customer_email": data["customer_email"],
        "customer_phone": data["customer_phone"],
        "appointment_date": parse_date(data["appointment_date"]),
        "appointment_time": parse_time(data["appointment_time"]),
        "service": data["service"],
        "notes": data.get("notes") or "",
    }


def create_appointments_bp(store):
    appointments_bp = Blueprint("appointments", __name__)

    # Route to list every appointment, latest date and time first
    @appointments_bp.route("/appointments", methods=["GET"])
    def list_appointments():
        return jsonify([appointment.to_dict() for appointment in store.list()])

    # Route to book a new appointment
    @appointments_bp.route("/appointments", methods=["POST"])
    def create_appointment():
        fields = _appointment_fields(get_payload())
        appointment_id = store.create(**fields)
        return jsonify({"id": appointment_id, "message": "Appointment booked successfully"}), 201

    # Route to replace every column of an appointment
    @appointments_bp.route("/appointments/<int:appointment_id>", methods=["PUT"])
    def update_appointment(appointment_id):
        data = get_payload()
        fields = _appointment_fields(data)
        status = data.get("status")
        fields["status"] = validate_status(status) if status else "pending"
        store.update(appointment_id, **fields)
        return jsonify({"message": "Appointment updated successfully"})

    # Route for staff to change only the status
    @appointments_bp.route("/appointments/<int:appointment_id>/status", methods=["PATCH"])
    def update_appointment_status(appointment_id):
        status = validate_status(get_payload().get("status"))
        store.update_status(appointment_id, status)
        return jsonify({"message": "Appointment status updated successfully"})

    @appointments_bp.route("/appointments/<int:appointment_id>", methods=["DELETE"])
    def delete_appointment(appointment_id):
        store.delete(appointment_id)
        return jsonify({"message": "Appointment deleted successfully"})

    return appointments_bp
