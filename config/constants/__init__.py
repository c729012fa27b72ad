# Config Constants Package
# Import everything from sub-modules for easy access:
#   from config.constants import SITE_NAME, SLOW_REQUEST_MS

from .branding import *
from .limits import *
from .messages import *
