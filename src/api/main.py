"""FastAPI backend for family networks."""

import logging
import platform
from datetime import datetime
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from src.config import Settings, settings as default_settings
from src.graph.family import FamilyNetworkError, FamilyNetworkService
from src.graph.network_store import create_store

logger = logging.getLogger(__name__)


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateFamilyRequest(CamelModel):
    family_name: str
    creator_name: str


class AddMemberRequest(CamelModel):
    name: str
    relationship: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    birthdate: Optional[str] = None
    photo: Optional[str] = None
    related_member_id: Optional[str] = None
    relationship_type: Optional[str] = None


class AddRelationshipRequest(CamelModel):
    from_member_id: str
    to_member_id: str
    relationship_type: str


def create_app(settings: Optional[Settings] = None, service: Optional[FamilyNetworkService] = None) -> FastAPI:
    """Build the API with its own service and store."""
    settings = settings or default_settings
    started = datetime.now()

    app = FastAPI(title="Family Network API", version=settings.version)
    app.state.service = service or FamilyNetworkService(create_store(settings.storage))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger.info("Family Network API %s ready (storage=%s)", settings.version, settings.storage.backend)

    @app.exception_handler(FamilyNetworkError)
    async def not_found(request: Request, exc: FamilyNetworkError):
        return JSONResponse(status_code=404, content={"success": False, "message": str(exc)})

    @app.exception_handler(ValidationError)
    async def invalid_member(request: Request, exc: ValidationError):
        return JSONResponse(status_code=422, content={"success": False, "message": str(exc)})

    @app.get("/api/family")
    async def list_families():
        networks = app.state.service.list_networks()
        return {
            "success": True,
            "families": [{"id": n.id, "name": n.name, "creator": n.creator, "memberCount": len(n.members)} for n in networks],
        }

    @app.post("/api/family")
    async def create_family(req: CreateFamilyRequest):
        network = app.state.service.create_network(req.family_name, req.creator_name)
        return {"success": True, "familyId": network.id, "family": network.model_dump(mode="json")}

    @app.get("/api/family/{family_id}")
    async def get_family(family_id: str):
        network = app.state.service.get_network(family_id)
        return {"success": True, "family": network.model_dump(mode="json")}

    @app.post("/api/family/{family_id}/member")
    async def add_member(family_id: str, req: AddMemberRequest):
        service = app.state.service
        attributes = req.model_dump(exclude={"name", "related_member_id", "relationship_type"}, exclude_none=True)
        member = service.add_member(
            family_id,
            req.name,
            related_member_id=req.related_member_id,
            relationship_type=req.relationship_type,
            **attributes
        )
        return {
            "success": True,
            "member": member.model_dump(mode="json"),
            "family": service.get_network(family_id).model_dump(mode="json"),
        }

    @app.post("/api/family/{family_id}/relationship")
    async def add_relationship(family_id: str, req: AddRelationshipRequest):
        service = app.state.service
        service.add_relationship(family_id, req.from_member_id, req.to_member_id, req.relationship_type)
        return {
            "success": True,
            "relationship": req.model_dump(by_alias=True),
            "family": service.get_network(family_id).model_dump(mode="json"),
        }

    @app.get("/api/family/{family_id}/relationship-chain/{from_id}/{to_id}")
    async def relationship_chain(family_id: str, from_id: str, to_id: str):
        service = app.state.service
        # Unknown network is a 404; unknown members are just an empty chain.
        service.get_network(family_id)
        chain = service.find_relationship_chain(family_id, from_id, to_id)
        return {"success": True, **chain.to_dict()}

    @app.get("/api/family/{family_id}/members/{member_id}/relationships")
    async def member_relationships(family_id: str, member_id: str):
        service = app.state.service
        service.get_network(family_id)
        return {"success": True, "relationships": service.get_member_relationships(family_id, member_id)}

    @app.get("/api/health")
    async def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "uptime": (datetime.now() - started).total_seconds(),
        }

    @app.get("/api/info")
    async def info():
        return {
            "status": "success",
            "message": settings.app_name,
            "version": settings.version,
            "python_version": platform.python_version(),
            "environment": settings.environment,
            "timestamp": datetime.now().isoformat(),
            "features": ["Family Management", "Relationship Mapping"],
        }

    return app


app = create_app()
