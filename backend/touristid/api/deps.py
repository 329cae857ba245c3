from fastapi import Request
from touristid.services.store import SessionStore

def get_store(request: Request) -> SessionStore:
    """Dependency for getting the session store created at startup"""
    return request.app.state.store
