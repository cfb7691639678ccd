"""
Imobras - API Backend
Cliente HTTP assíncrono da API (auth, papéis e coleções)
"""
from typing import Any, Dict, List, Optional, Tuple

import httpx

from imobras.core import settings
from imobras.core.exceptions import (
    AuthError,
    NotFoundError,
    PermissionDeniedError,
    StoreError,
    ValidationError
)


def _detail(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        return response.text or f"HTTP {response.status_code}"

    # Erros de validação do FastAPI vêm como lista
    if isinstance(detail, list) and detail:
        return detail[0].get("msg", str(detail[0]))
    return str(detail) if detail else f"HTTP {response.status_code}"


def raise_for_response(response: httpx.Response):
    """Mapeia o status HTTP para a exceção de domínio correspondente"""
    if response.is_success:
        return

    message = _detail(response)
    code = response.status_code

    if code == 401 or code == 409:
        raise AuthError(message, status_code=code)
    if code == 403:
        raise PermissionDeniedError(message)
    if code == 404:
        raise NotFoundError(message)
    if code in (400, 422):
        raise ValidationError(message, status_code=code)
    raise StoreError(message, status_code=code)


class ApiBackend:
    """
    Acesso à API via httpx. Falhas de rede e timeouts viram StoreError;
    não há retry automático.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.client = httpx.AsyncClient(
            base_url=(base_url or settings.API_URL).rstrip("/") + "/api",
            timeout=timeout or settings.REQUEST_TIMEOUT_SECONDS,
            transport=transport
        )

    async def aclose(self):
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def request(
        self,
        method: str,
        path: str,
        token: Optional[str] = None,
        **kwargs
    ) -> Any:
        headers = kwargs.pop("headers", {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self.client.request(method, path, headers=headers, **kwargs)
        except httpx.TimeoutException as e:
            raise StoreError(f"Tempo de resposta esgotado: {e}")
        except httpx.HTTPError as e:
            raise StoreError(f"Erro de conexão: {e}")

        raise_for_response(response)
        if not response.content:
            return None

        try:
            return response.json()
        except ValueError:
            raise StoreError(f"Resposta inválida do servidor (HTTP {response.status_code})")

    # Auth

    async def sign_in(self, email: str, password: str) -> Tuple[str, Dict]:
        data = await self.request("POST", "/auth/login", json={"email": email, "password": password})
        return data["access_token"], data["user"]

    async def sign_up(self, email: str, password: str, full_name: str) -> Dict:
        return await self.request(
            "POST",
            "/auth/signup",
            json={"email": email, "password": password, "full_name": full_name}
        )

    async def sign_out(self, token: str):
        await self.request("POST", "/auth/logout", token=token)

    async def me(self, token: str) -> Dict:
        return await self.request("GET", "/auth/me", token=token)

    async def list_roles(self, token: str, identity_id: str) -> List[Dict]:
        return await self.request("GET", "/user-roles", token=token, params={"user_id": identity_id})

    # Coleções

    async def list(self, token: str, collection: str, **params) -> List[Dict]:
        params = {k: v for k, v in params.items() if v is not None}
        return await self.request("GET", f"/{collection}", token=token, params=params)

    async def create(self, token: str, collection: str, fields: Dict) -> Dict:
        return await self.request("POST", f"/{collection}", token=token, json=fields)

    async def update(self, token: str, collection: str, row_id: str, fields: Dict) -> Dict:
        return await self.request("PUT", f"/{collection}/{row_id}", token=token, json=fields)

    async def delete(self, token: str, collection: str, row_id: str):
        await self.request("DELETE", f"/{collection}/{row_id}", token=token)
