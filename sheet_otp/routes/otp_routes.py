from flask import Blueprint, current_app, jsonify, request

otp_bp = Blueprint('otp', __name__)


def get_validator():
    return current_app.extensions['otp_validator']


# ------------------ OTP Validation ------------------ #
@otp_bp.route('/validate-otp', methods=['POST'])
def validate_otp_route():
    data = request.get_json(silent=True)
    # A missing or non-object body counts as missing fields
    if not isinstance(data, dict):
        data = {}

    status, body = get_validator().validate(data.get('email'), data.get('otp'))

    current_app.logger.debug(f"POST /validate-otp -> {status}")
    return jsonify(body), status
