# config.py
import os
from dotenv import load_dotenv

load_dotenv()

# --- CONFIGURACIÓN DE RUTAS ---
# Vista del listado de facturas: destino de la redirección y clave de caché
INVOICES_PATH = os.getenv("INVOICES_PATH", "/dashboard/invoices")

# --- CONFIGURACIÓN DE LA API ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

# --- CONFIGURACIÓN DE LOGS ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s - %(levelname)s - [%(funcName)s] - %(message)s'

# --- CONFIGURACIÓN DE BASE DE DATOS ---
# Crea la tabla 'invoices' al arrancar (útil en desarrollo local)
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "false").lower() in ("1", "true", "yes")
