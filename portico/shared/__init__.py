"""
Shared Module

Server-side core used by the API layer and the client:
- Models: In-memory entity records (dataclasses)
- Repositories: Per-entity in-memory collections
- Db: The NetworkStore (cascades, network projection) and its lifecycle
- Services: Business rules
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← NetworkStore and init/close helpers
    ├── models/         ← Cluster, Contact, Connection, network projection
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    └── schemas/        ← Pydantic schemas

Usage:
======
    from portico.shared.models import Cluster, Contact
    from portico.shared.db import init_store
    from portico.shared.services import ClusterService
    from portico.shared.schemas import ClusterCreate, ClusterResponse
    from portico.shared.core import logger, PorticoException
"""
