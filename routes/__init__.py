from flask import Blueprint

# single blueprint for the read-only catalog API
catalog_bp = Blueprint("catalog", __name__)

# import route modules so their handlers register on the blueprint
from . import courses    # noqa: F401
