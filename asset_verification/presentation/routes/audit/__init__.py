from flask import Blueprint

audit_bp = Blueprint('audit', __name__)

from . import reports  # noqa: E402,F401
