from .api.backend.exceptions import *
from .client.exceptions import *
from .config.exceptions import *
from .variables.exceptions import *
