"""Boilerplate component catalog.

Component metadata lives here; the long-form documentation bodies are markdown
files shipped under ``content/<component-id>/`` and loaded once, the first time
the catalog is accessed.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Optional

from docbuilder.catalog.models import (
    APIEndpoint,
    BoilerplateComponent,
    ComponentDocumentation,
)

_CONTENT_DIR = Path(__file__).parent / "content"


# ---------------------------------------------------------------------------
# Component metadata
# ---------------------------------------------------------------------------

# ``implementations`` lists the stack keys of the shipped code samples in the
# order they are offered; the first one is what the generator emits.
_COMPONENT_METADATA: list[dict[str, Any]] = [
    {
        "id": "basic-auth",
        "name": "Basic Login/Signup",
        "category": "authentication",
        "description": (
            "Email/password authentication with registration, login, "
            "password reset, and email verification"
        ),
        "icon": "🔐",
        "complexity": "beginner",
        "estimated_hours": 8,
        "tags": ["authentication", "login", "signup", "security", "email"],
        "dependencies": [],
        "recommended_with": ["user-dashboard", "rest-api"],
        "implementations": ["react-nodejs-postgresql"],
        "api_endpoints": [
            {
                "method": "POST",
                "endpoint": "/api/auth/register",
                "description": "Register a new user",
                "request": "{ email: string, password: string, name: string }",
                "response": "{ user: User, token: string }",
            },
            {
                "method": "POST",
                "endpoint": "/api/auth/login",
                "description": "Login with email and password",
                "request": "{ email: string, password: string }",
                "response": "{ user: User, token: string }",
            },
            {
                "method": "POST",
                "endpoint": "/api/auth/forgot-password",
                "description": "Request password reset email",
                "request": "{ email: string }",
                "response": "{ message: string }",
            },
            {
                "method": "POST",
                "endpoint": "/api/auth/reset-password",
                "description": "Reset password with token",
                "request": "{ token: string, newPassword: string }",
                "response": "{ message: string }",
            },
        ],
    },
    {
        "id": "user-dashboard",
        "name": "User Dashboard",
        "category": "dashboard",
        "description": (
            "User profile management dashboard with settings, preferences, "
            "and account information"
        ),
        "icon": "📊",
        "complexity": "beginner",
        "estimated_hours": 6,
        "tags": ["dashboard", "profile", "settings", "ui"],
        "dependencies": ["basic-auth"],
        "recommended_with": ["crud-operations"],
        "implementations": ["react-nodejs-postgresql"],
        "api_endpoints": [],
    },
    {
        "id": "crud-operations",
        "name": "CRUD Operations",
        "category": "data-management",
        "description": (
            "Complete Create, Read, Update, Delete operations with list views, "
            "forms, and validation"
        ),
        "icon": "📝",
        "complexity": "intermediate",
        "estimated_hours": 10,
        "tags": ["crud", "data", "forms", "validation"],
        "dependencies": ["basic-auth"],
        "recommended_with": ["rest-api", "user-dashboard"],
        "implementations": ["react-nodejs-postgresql"],
        "api_endpoints": [
            {
                "method": "GET",
                "endpoint": "/api/items",
                "description": "Get all items (paginated)",
                "request": "Query params: page, limit, search",
                "response": "Array<Item>",
            },
            {
                "method": "GET",
                "endpoint": "/api/items/:id",
                "description": "Get single item by ID",
                "response": "Item",
            },
            {
                "method": "POST",
                "endpoint": "/api/items",
                "description": "Create new item",
                "request": "{ name: string, description: string }",
                "response": "Item",
            },
            {
                "method": "PUT",
                "endpoint": "/api/items/:id",
                "description": "Update existing item",
                "request": "{ name: string, description: string }",
                "response": "Item",
            },
            {
                "method": "DELETE",
                "endpoint": "/api/items/:id",
                "description": "Delete item",
                "response": "{ message: string }",
            },
        ],
    },
    {
        "id": "stripe-integration",
        "name": "Stripe Integration",
        "category": "payments",
        "description": (
            "Complete Stripe payment processing with subscriptions, one-time "
            "payments, and webhook handling"
        ),
        "icon": "💳",
        "complexity": "advanced",
        "estimated_hours": 16,
        "tags": ["payments", "stripe", "subscriptions", "billing"],
        "dependencies": ["basic-auth"],
        "recommended_with": ["user-dashboard"],
        "implementations": ["react-nodejs-postgresql"],
        "api_endpoints": [
            {
                "method": "POST",
                "endpoint": "/api/payments/create-payment-intent",
                "description": "Create payment intent for one-time payment",
                "request": "{ amount: number, currency?: string }",
                "response": "{ clientSecret: string }",
            },
            {
                "method": "POST",
                "endpoint": "/api/payments/create-subscription",
                "description": "Create subscription",
                "request": "{ priceId: string }",
                "response": "{ subscriptionId: string, clientSecret: string }",
            },
            {
                "method": "POST",
                "endpoint": "/api/payments/webhook",
                "description": "Stripe webhook endpoint",
                "request": "Stripe event payload",
                "response": "{ received: true }",
            },
        ],
    },
    {
        "id": "rest-api",
        "name": "REST API",
        "category": "api",
        "description": (
            "RESTful API with proper routing, middleware, error handling, "
            "and documentation"
        ),
        "icon": "🔄",
        "complexity": "intermediate",
        "estimated_hours": 12,
        "tags": ["api", "rest", "endpoints", "http"],
        "dependencies": [],
        "recommended_with": ["basic-auth", "crud-operations"],
        "implementations": ["nodejs-express"],
        "api_endpoints": [
            {
                "method": "GET",
                "endpoint": "/api/v1/items",
                "description": "Get all items",
                "request": "Query: page, limit, sort",
                "response": "{ data: Item[], pagination: {...} }",
            },
            {
                "method": "GET",
                "endpoint": "/api/v1/items/:id",
                "description": "Get single item",
                "response": "{ data: Item }",
            },
            {
                "method": "POST",
                "endpoint": "/api/v1/items",
                "description": "Create item",
                "request": "{ name: string, description: string }",
                "response": "{ data: Item }",
            },
            {
                "method": "PUT",
                "endpoint": "/api/v1/items/:id",
                "description": "Update item",
                "request": "{ name: string, description: string }",
                "response": "{ data: Item }",
            },
            {
                "method": "DELETE",
                "endpoint": "/api/v1/items/:id",
                "description": "Delete item",
                "response": "204 No Content",
            },
        ],
    },
]


# ---------------------------------------------------------------------------
# Content loading
# ---------------------------------------------------------------------------


def _read_content(component_id: str, name: str) -> Optional[str]:
    """Read one packaged markdown body, or ``None`` when it is not shipped."""
    path = _CONTENT_DIR / component_id / name
    if not path.is_file():
        return None
    text = path.read_text(encoding="utf-8")
    # Files are stored with a trailing newline; the bodies themselves have none.
    return text[:-1] if text.endswith("\n") else text


def _build_component(meta: dict[str, Any]) -> BoilerplateComponent:
    component_id = meta["id"]
    implementations = {
        key: _read_content(component_id, f"implementation/{key}.md") or ""
        for key in meta["implementations"]
    }
    documentation = ComponentDocumentation(
        overview=_read_content(component_id, "overview.md") or "",
        technical_implementation=implementations,
        architecture=_read_content(component_id, "architecture.md") or "",
        api_endpoints=[APIEndpoint(**ep) for ep in meta["api_endpoints"]],
        database_schema=_read_content(component_id, "database-schema.md"),
        security=_read_content(component_id, "security.md") or "",
        testing=_read_content(component_id, "testing.md") or "",
        configuration=_read_content(component_id, "configuration.md") or "",
    )
    fields = {
        k: v for k, v in meta.items() if k not in ("implementations", "api_endpoints")
    }
    return BoilerplateComponent(documentation=documentation, **fields)


@lru_cache(maxsize=1)
def _catalog() -> tuple[BoilerplateComponent, ...]:
    return tuple(_build_component(meta) for meta in _COMPONENT_METADATA)


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


def get_all_components() -> list[BoilerplateComponent]:
    """Return every catalog component in catalog order."""
    return list(_catalog())


def get_component_by_id(component_id: str) -> Optional[BoilerplateComponent]:
    """Return the component with *component_id*, or ``None`` if absent."""
    for component in _catalog():
        if component.id == component_id:
            return component
    return None


def get_components_by_category(category: str) -> list[BoilerplateComponent]:
    """Return the components tagged with *category*, in catalog order."""
    return [c for c in _catalog() if c.category.value == category]


def get_all_categories() -> list[str]:
    """Return the distinct categories present in the catalog, sorted."""
    return sorted({c.category.value for c in _catalog()})


def resolve_components(component_ids: Iterable[str]) -> list[BoilerplateComponent]:
    """Look up *component_ids* in order, silently dropping unknown ids."""
    resolved: list[BoilerplateComponent] = []
    for component_id in component_ids:
        component = get_component_by_id(component_id)
        if component is not None:
            resolved.append(component)
    return resolved


def estimate_hours(components: Iterable[BoilerplateComponent]) -> int:
    """Sum the estimated implementation hours of *components*."""
    return sum(c.estimated_hours for c in components)


def missing_dependencies(component_ids: Iterable[str]) -> dict[str, list[str]]:
    """Map each selected component to the dependencies it lacks.

    Only components with at least one missing dependency appear in the result.
    """
    ids = list(component_ids)
    selected = set(ids)
    missing: dict[str, list[str]] = {}
    for component in resolve_components(ids):
        lacking = [dep for dep in component.dependencies if dep not in selected]
        if lacking:
            missing[component.id] = lacking
    return missing


def find_conflicts(component_ids: Iterable[str]) -> list[tuple[str, str]]:
    """Return pairs of selected components that declare a conflict.

    Conflicts are advisory; nothing in the generator enforces them.
    """
    ids = list(component_ids)
    selected = set(ids)
    pairs: list[tuple[str, str]] = []
    for component in resolve_components(ids):
        for other in component.conflicts:
            if other in selected and (other, component.id) not in pairs:
                pairs.append((component.id, other))
    return pairs
