from typing import Literal

import aiohttp

from recovery.health.interfaces import HealthCheck


def http_probe(
    url: str,
    timeout: float = 2.0,
    method: Literal["GET", "HEAD"] = "GET",
) -> HealthCheck:
    """
    Создает HTTP-проверку зависимости.

    Статусы ниже 400 считаются здоровыми, остальные поднимают
    aiohttp.ClientResponseError, чей status участвует в классификации.
    """

    async def probe() -> bool:
        client_timeout = aiohttp.ClientTimeout(total=timeout)
        async with (
            aiohttp.ClientSession(timeout=client_timeout) as session,
            session.request(method, url) as response,
        ):
            response.raise_for_status()
            return True

    return probe
