from flask import Blueprint, jsonify

from ..validators import get_payload, require_fields

REGISTER_FIELDS = ("first_name", "last_name", "email", "phone", "password")


def create_auth_bp(store):
    auth_bp = Blueprint("auth", __name__)

    @auth_bp.route("/register", methods=["POST"])
    def register():
        data = get_payload()
        require_fields(data, REGISTER_FIELDS, "All fields are required")
        store.register(**{field: data[field] for field in REGISTER_FIELDS})
        return jsonify({"message": "User registered successfully"}), 201

    @auth_bp.route("/login", methods=["POST"])
    def login():
        data = get_payload()
        require_fields(data, ("email", "password"), "Email and password are required")
        return jsonify(store.login(data["email"], data["password"]))

    return auth_bp
