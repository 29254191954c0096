"""
Demo API Routes.
Expose the controller/service/repository triad and the container registry.
"""

from typing import Dict

from fastapi import APIRouter, HTTPException, status

from core import Container, logger
from internal.api.schemas import ComponentInfo, GreetingData, StandardResponse
from internal.api.utils import success_response
from internal.controllers import DemoController
from repositories import DemoRepository
from services import DemoService


LAYERS: Dict[str, type] = {
    "controller": DemoController,
    "service": DemoService,
    "repository": DemoRepository,
}


def create_demo_routes() -> APIRouter:
    """
    Factory function to create demo routes.
    Components are resolved from the container on every request.

    Returns:
        APIRouter: Configured router with demo endpoints
    """
    router = APIRouter(prefix="/api/v1", tags=["Demo"])

    @router.get(
        "/demo/{layer}",
        response_model=StandardResponse,
        summary="Layer Greeting",
        description="Resolve one layer of the demo triad and call hello()",
        responses={404: {"description": "Unknown layer"}},
    )
    async def greet(layer: str):
        interface = LAYERS.get(layer)
        if interface is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown layer: {layer}",
            )

        instance = Container.resolve(interface)
        greeting = GreetingData(
            layer=layer,
            component=type(instance).__name__,
            message=instance.hello(),
        )
        logger.debug(f"{layer} -> {greeting.message}")
        return success_response(data=greeting.model_dump())

    @router.get(
        "/components",
        response_model=StandardResponse,
        summary="List Components",
        description="List every registration held by the container",
    )
    async def list_components():
        components = [
            ComponentInfo(
                interface=r.interface,
                qualifier=r.qualifier,
                stereotype=r.stereotype,
                instantiated=r.instantiated,
            ).model_dump()
            for r in Container.registrations()
        ]
        return success_response(
            message=f"{len(components)} components registered", data=components
        )

    return router
