from flask import Blueprint

verification_bp = Blueprint('verification', __name__)

# Import all route modules
from . import (  # noqa: E402,F401
    cycles,
    submissions,
    summaries,
)
