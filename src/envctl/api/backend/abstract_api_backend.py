from abc import ABC, abstractmethod


class AbstractApiBackend(ABC):
    def __init__(self, config):
        self.name = config.type.value

    def __repr__(self):
        return self.name

    @abstractmethod
    async def close(self):
        raise NotImplementedError()

    @abstractmethod
    async def whoami(self):
        """Return the authenticated actor, raise UnauthorizedException."""
        raise NotImplementedError()

    @abstractmethod
    async def variable_delete(self, resource, id):
        raise NotImplementedError()
