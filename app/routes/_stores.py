from fastapi import Request

from app.db.stores import CallStore, LoadStore


def get_load_store(request: Request) -> LoadStore:
    return request.app.state.load_store


def get_call_store(request: Request) -> CallStore:
    return request.app.state.call_store
