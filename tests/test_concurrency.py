import asyncio

import httpx
import pytest

from plataforma_cursos.main import create_app


@pytest.mark.asyncio
async def test_concurrent_requests_are_independent(settings):
    """
    Muchas peticiones simultáneas: cada una recibe su propia decisión
    y el mismo payload literal.
    """
    app = create_app(settings)
    transport = httpx.ASGITransport(app=app)

    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        paths = ["/api/v1/ping", "/api/v1/info", "/actuator/health"] * 20
        responses = await asyncio.gather(*(client.get(p) for p in paths))

    by_path = {}
    for path, resp in zip(paths, responses):
        by_path.setdefault(path, set()).add((resp.status_code, resp.text))

    assert by_path["/api/v1/ping"] == {(200, '{"status":"ok","message":"pong"}')}
    assert by_path["/api/v1/info"] == {(401, '{"detail":"Authentication required"}')}
    assert by_path["/actuator/health"] == {(200, '{"status":"UP"}')}
