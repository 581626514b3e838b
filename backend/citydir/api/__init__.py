from flask import Blueprint

api_bp = Blueprint("api", __name__)

# Import route modules so they register with api_bp
from . import status
from . import auth
from . import users
from . import categories
from . import types
from . import sections
from . import brands
from . import businesses
from . import attractions
from . import events
from . import subevents
from . import uploads
from . import hotspot
