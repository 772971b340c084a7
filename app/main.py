from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import AppError
from app.core.logging import logger
from app.api.v1.router import api_router_v1
from app.database import engine
from app.db import base_class  # Import Base para criação de tabelas
from app.db import models  # noqa: F401  (registra os modelos na Base)
from app.services.asaas_service import asaas_client
from app.services.redis_service import kitchen_queue


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Opcional: Criar tabelas automaticamente (em desenvolvimento)
    # Em produção, use migrações com Alembic
    if settings.ENVIRONMENT == "development":
        async with engine.begin() as conn:
            await conn.run_sync(base_class.Base.metadata.create_all)
        logger.info("Tabelas criadas com sucesso (apenas em desenvolvimento)")

    await kitchen_queue.connect()
    yield
    await kitchen_queue.disconnect()
    await asaas_client.aclose()
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API do PDV e da tela da cozinha (KDS): pedidos, caixa, clientes e cobranças",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    version=settings.PROJECT_VERSION,
    contact={
        "name": "Suporte Técnico",
        "email": settings.SUPPORT_EMAIL,
    },
    license_info={
        "name": "MIT",
    },
    lifespan=lifespan,
)

# Configuração de CORS
if settings.BACKEND_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.BACKEND_CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Todas as respostas de erro seguem o formato {"error": <mensagem>}
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else first.get("msg")
    else:
        message = "Requisição inválida"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Erro inesperado em {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Erro interno do servidor"},
    )


# Inclui todas as rotas da API V1
app.include_router(api_router_v1, prefix=settings.API_V1_STR)


@app.get("/", tags=["Root"])
async def read_root():
    return {
        "message": f"Bem-vindo à API {settings.PROJECT_NAME} v{settings.PROJECT_VERSION}",
        "docs": "/docs",
        "status": "operacional",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health", tags=["Health Check"])
async def health_check():
    """Endpoint para verificação de saúde da API"""
    return {
        "status": "healthy",
        "redis": "connected" if await kitchen_queue.ping() else "disconnected",
        "environment": settings.ENVIRONMENT
    }
