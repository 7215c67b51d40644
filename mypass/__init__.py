"""
MyPass Backend

Password and secret management API: folders of secrets, owned by one user
and optionally shared with others.

Package Structure:
==================
    mypass/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, services, cache, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn mypass.api.main:app --reload
"""
