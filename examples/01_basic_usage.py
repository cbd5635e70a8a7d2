"""
Basic usage example of fastapi-rest-context.

Demonstrates:
- Binding ?v=, ?limit= and ?startIndex= into a RequestContext
- Returning next/prev links that keep the rest of the query intact
- Overriding the default and absolute limits with LimitPolicy
"""

from fastapi import Depends, FastAPI

from fastapi_rest_context import (
    LimitPolicy,
    RefRepresentation,
    RequestContext,
    context_dependency,
    pagination_flow,
)

app = FastAPI(title="Basic REST Context Example")

PATIENTS = [{"uuid": f"p-{i}", "display": f"Patient {i}"} for i in range(240)]

# REST_DEFAULT_LIMIT / REST_ABSOLUTE_LIMIT are read from the environment
# when no policy is passed.
paging = context_dependency(pagination_flow())

# Smaller pages for a heavier resource, ref representation unless asked otherwise
encounter_paging = context_dependency(
    pagination_flow(default_representation=RefRepresentation()),
    policy=LimitPolicy(default_limit=10, absolute_limit=25),
)


def _page(ctx: RequestContext, items: list) -> dict:
    results = items[ctx.start_index : ctx.start_index + ctx.limit]
    body: dict = {"results": results}
    links = []
    if ctx.start_index > 0:
        links.append(ctx.previous_link().to_dict())
    if ctx.start_index + ctx.limit < len(items):
        links.append(ctx.next_link().to_dict())
    if links:
        body["links"] = links
    return body


@app.get("/ws/rest/v1/patient")
async def list_patients(ctx: RequestContext = Depends(paging)):
    """Paged patient search."""
    return _page(ctx, PATIENTS)


@app.get("/ws/rest/v1/encounter")
async def list_encounters(ctx: RequestContext = Depends(encounter_paging)):
    """Paged encounter search with a tighter policy."""
    return {"v": ctx.representation.name, **_page(ctx, PATIENTS)}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

    # Test with:
    # curl "http://localhost:8000/ws/rest/v1/patient?q=john&limit=20&startIndex=40"
    # curl "http://localhost:8000/ws/rest/v1/patient?limit=500"        -> 400
    # curl "http://localhost:8000/ws/rest/v1/encounter?v=full&startIndex=5"
