import asyncio
from http import HTTPStatus

import aiohttp
import structlog

from .abstract_api_backend import AbstractApiBackend
from .exceptions import (
    ApiException,
    NotFoundException,
    UnauthorizedException,
)

log = structlog.getLogger(__name__)


class ApiBackend(AbstractApiBackend):
    def __init__(self, config):
        super().__init__(config)

        self._config = config

        self._log = log.bind(
            url=self._config.url,
            api_version=self._config.api_version,
            timeout=self._config.timeout,
        )

        headers = {}
        if self._config.token:
            headers["Authorization"] = f"Bearer {self._config.token}"

        self._session = aiohttp.ClientSession(
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self._config.timeout),
        )

        self._log.debug("api_remote_session_created")

    async def close(self):
        await self._session.close()

    def _url(self, path):
        return f"{self._config.url}{path}"

    async def _request(self, method, path):
        if self._session.closed:
            raise RuntimeError("session closed")

        url = self._url(path)

        self._log.debug("api_remote_request", method=method, path=path)

        try:
            async with self._session.request(method, url) as response:
                body = await response.text()
        except aiohttp.ClientConnectorError as exc:
            err_msg = f"could not connect to server: {self._config.url}"
            raise ApiException(err_msg) from exc
        except aiohttp.ServerTimeoutError as exc:
            err_msg = "timeout while sending request to server"
            raise ApiException(err_msg) from exc
        except asyncio.TimeoutError as exc:
            err_msg = "unexpected timeout exception"
            raise ApiException(err_msg) from exc
        except aiohttp.ClientError as exc:
            err_msg = f"unexpected api exception: {exc}"
            raise ApiException(err_msg) from exc

        self._log.debug(
            "api_remote_response",
            method=method,
            path=path,
            status=response.status,
        )

        return response.status, body

    async def whoami(self):
        if not self._config.token:
            raise UnauthorizedException()

        status, body = await self._request(
            method="GET", path="/user/v1/whoami"
        )

        if status == HTTPStatus.UNAUTHORIZED:
            raise UnauthorizedException()
        elif status == HTTPStatus.OK:
            return body
        else:
            raise ApiException(f"Unexpected response: {status}")

    async def variable_delete(self, resource, id):
        status, body = await self._request(
            method="DELETE",
            path=f"/{self._config.api_version}/{resource}({id})",
        )

        if status == HTTPStatus.NOT_FOUND:
            raise NotFoundException(resource, id)
        elif status in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
            raise UnauthorizedException(HTTPStatus(status).phrase)
        elif status in (HTTPStatus.OK, HTTPStatus.NO_CONTENT):
            return
        else:
            raise ApiException(f"Unexpected response: {status}")
