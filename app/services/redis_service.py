# app/services/redis_service.py
import logging
import uuid
from typing import Optional, Union

import redis.asyncio as redis  # Using asyncio version for FastAPI
from redis.exceptions import ConnectionError as RedisConnectionError, RedisError

from app.core.config import settings

logger = logging.getLogger(__name__)


class KitchenQueue:
    """
    Fila FIFO (lista no Redis) com os ids dos pedidos enviados à cozinha.

    É apenas um aviso: a tela da cozinha relê os pedidos ativos do banco,
    então perder ou duplicar uma entrada aqui não afeta o que é exibido.
    """

    def __init__(
        self,
        url: Optional[str] = settings.REDIS_URL,
        host: str = settings.REDIS_HOST,
        port: int = settings.REDIS_PORT,
        key: str = settings.KDS_QUEUE_KEY,
    ):
        self.url = url
        self.host = host
        self.port = port
        self.key = key
        self._client: Optional[redis.Redis] = None

    async def connect(self):
        if not self._client:
            if self.url:
                client = redis.from_url(self.url, decode_responses=True)
            else:
                client = redis.Redis(host=self.host, port=self.port, decode_responses=True)
            try:
                await client.ping()
            except RedisError as e:
                logger.warning("Falha ao conectar ao Redis: %s", e)
                await client.aclose()
                return
            self._client = client
            logger.info("Conectado ao Redis (fila %s)", self.key)

    async def disconnect(self):
        if self._client:
            await self._client.aclose()
            self._client = None
            logger.info("Desconectado do Redis.")

    async def _get_client(self) -> redis.Redis:
        if not self._client:
            await self.connect()  # Attempt to connect if not already connected
        if not self._client:
            raise RedisConnectionError("Cliente Redis não conectado")
        return self._client

    async def push(self, order_id: Union[str, uuid.UUID]) -> None:
        client = await self._get_client()
        await client.rpush(self.key, str(order_id))

    async def remove(self, order_id: Union[str, uuid.UUID]) -> None:
        client = await self._get_client()
        await client.lrem(self.key, 0, str(order_id))

    async def ping(self) -> bool:
        try:
            client = await self._get_client()
            return await client.ping()
        except RedisError:
            return False


# Instância global para ser usada na aplicação
kitchen_queue = KitchenQueue()
