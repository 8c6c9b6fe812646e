# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config

logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

# Importamos los routers de la capa de infraestructura
from app.infrastructure.api.routers import invoices_router
from app.infrastructure.persistence.database import Base, engine
from app.infrastructure.persistence import models  # noqa: F401  registra la tabla 'invoices'

if config.AUTO_CREATE_TABLES:
    Base.metadata.create_all(bind=engine)
    logging.info("Tablas creadas/verificadas en la base de datos.")

app = FastAPI(
    title="API de Facturas",
    description="Creación de facturas desde el formulario del dashboard.",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(invoices_router.router)


@app.get("/", tags=["Health Check"])
def read_root():
    return {"status": "ok", "message": "API de Facturas en línea"}
