"""
FastAPI dependencies resolving services from the application container
"""
from fastapi import Depends, Request

from pickup_tracker.services.container import ServiceContainer


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_order_service(container: ServiceContainer = Depends(get_container)):
    return container.order_service


def get_lookup_service(container: ServiceContainer = Depends(get_container)):
    return container.lookup_service


def get_recycle_bin_service(container: ServiceContainer = Depends(get_container)):
    return container.recycle_bin_service


def get_cleanup_scheduler(container: ServiceContainer = Depends(get_container)):
    return container.cleanup_scheduler


def get_audit_log(container: ServiceContainer = Depends(get_container)):
    return container.audit_log


def get_auth_service(container: ServiceContainer = Depends(get_container)):
    return container.auth_service
