import structlog

from ..api import (
    load_api_backend,
    NotFoundException,
    UnauthorizedException,
)

from .exceptions import NotLoggedIn, PermissionDenied, VariableNotFound

log = structlog.getLogger(__name__)


class Client:
    def __init__(self, config):
        self.config = config

        self._backend = load_api_backend(config)

        self._log = log.bind(backend=self._backend)

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self):
        await self._backend.close()

    async def check_logged_in(self):
        self._log.debug("client_check_logged_in")

        try:
            await self._backend.whoami()
        except UnauthorizedException as exc:
            raise NotLoggedIn() from exc

    async def delete(self, resource, id):
        resource = getattr(resource, "value", resource)

        self._log.debug("client_delete", resource=resource, id=id)

        try:
            await self._backend.variable_delete(resource, id)
        except NotFoundException as exc:
            raise VariableNotFound(exc.resource, exc.id) from exc
        except UnauthorizedException as exc:
            raise PermissionDenied(resource, id, str(exc)) from exc
