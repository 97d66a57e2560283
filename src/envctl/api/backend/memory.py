import structlog

from .abstract_api_backend import AbstractApiBackend
from .exceptions import NotFoundException, UnauthorizedException

log = structlog.getLogger(__name__)


class ApiBackend(AbstractApiBackend):
    def __init__(self, config):
        super().__init__(config)

        self._token = config.token

        self.variables = {
            resource: set(ids) for resource, ids in config.variables.items()
        }

    async def close(self):
        pass

    async def whoami(self):
        if not self._token:
            raise UnauthorizedException()

        return {"token": self._token}

    async def variable_delete(self, resource, id):
        log.debug("api_memory_delete", resource=resource, id=id)

        if not self._token:
            raise UnauthorizedException()

        try:
            self.variables[resource].remove(id)
        except KeyError:
            raise NotFoundException(resource, id)
