"""
Portico

Contact network manager: clusters of contacts around a central hub,
served over a REST API and laid out as a force-directed graph.

Package Structure:
==================
    portico/
    ├── api/        ← FastAPI application
    ├── shared/     ← Store, models, schemas, services
    ├── graph/      ← Layout, interaction, filtering, rendering
    ├── client/     ← HTTP client, query cache, forms
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn portico.api.main:app --reload

    # Or with the configured host/port
    python -m portico
"""

__version__ = "1.0.0"
