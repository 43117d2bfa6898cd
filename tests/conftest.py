"""Shared fixtures: a small documented PHP code base."""

import pytest

from apilinks.api_urls import MultiPageUrls
from apilinks.entity import Entity
from apilinks.link_emitters import MarkdownLinkEmitter
from apilinks.member import Member
from apilinks.registry import Registry
from apilinks.type_linker import TypeLinker

API_URL = "https://api.example"

IDENTITY = "app\\contracts\\Identity"
COMPONENT = "app\\base\\Component"
BASE_MODEL = "app\\base\\BaseModel"
TIMESTAMPS = "app\\traits\\Timestamps"
USER = "app\\models\\User"
POST = "app\\models\\Post"

FIND_IDENTITY = Member("findIdentity", "method", IDENTITY, ("static", "null"))
CREATE = Member("create", "method", COMPONENT, ("static",))
TOUCH = Member("touch", "method", TIMESTAMPS, ("static[]",))
EMAIL = Member("email", "property", USER)
STATUS_ACTIVE = Member("STATUS_ACTIVE", "constant", USER)
EVENT_LOGIN = Member("EVENT_LOGIN", "event", USER)


def _members(*members: Member) -> dict[str, Member]:
    return {m.name: m for m in members}


@pytest.fixture
def registry() -> Registry:
    """Registry with an interface, a trait, a class hierarchy and a sibling."""
    return Registry(
        [
            Entity(
                IDENTITY,
                "interface",
                namespace="app\\contracts",
                members=_members(FIND_IDENTITY),
            ),
            Entity(
                TIMESTAMPS,
                "trait",
                namespace="app\\traits",
                members=_members(TOUCH),
            ),
            Entity(
                COMPONENT,
                "class",
                namespace="app\\base",
                members=_members(CREATE),
            ),
            Entity(
                BASE_MODEL,
                "class",
                namespace="app\\base",
                is_abstract=True,
                parent_class=COMPONENT,
                members=_members(CREATE),
            ),
            Entity(
                USER,
                "class",
                namespace="app\\models",
                parent_class=BASE_MODEL,
                interfaces=(IDENTITY,),
                traits=(TIMESTAMPS,),
                members=_members(
                    FIND_IDENTITY, CREATE, TOUCH, EMAIL, STATUS_ACTIVE, EVENT_LOGIN
                ),
            ),
            Entity(POST, "class", namespace="app\\models"),
        ]
    )


@pytest.fixture
def linker(registry: Registry) -> TypeLinker:
    """Type linker emitting Markdown links to multi-page API docs."""
    return TypeLinker(registry, MarkdownLinkEmitter(), MultiPageUrls(API_URL))
