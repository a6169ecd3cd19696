"""Browser UI Routes — list, create, edit, detail and delete pages under /ui.

Invariants:
    - Pages reach data only through ChecklistApi; UI code branches on
      ApiClientError, never on transport exceptions
    - List page refetches on every load; filter/sort forms never submit offset
    - Create/edit failures re-render the form with the user's input intact
    - Detail page: a statistics failure hides the statistics panel only
    - Delete requires a confirmation step (GET shows it, POST performs it)
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from customer_health.client.api_client import ApiClientError
from customer_health.client.checklist_api import ChecklistApi
from customer_health.web.templating import templates
from customer_health.web.view_models import ChecklistForm, ListState

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/ui", tags=["ui"], include_in_schema=False)

SORT_OPTIONS = [
    ("createdAt", "Created Date"),
    ("updatedAt", "Updated Date"),
    ("score", "Score"),
]


def get_checklist_api(request: Request) -> ChecklistApi:
    api = getattr(request.app.state, "checklist_api", None)
    if api is None:
        raise RuntimeError("Checklist API client not initialized")
    return api


def _render(request: Request, name: str, status_code: int = 200, **context):
    return templates.TemplateResponse(
        request, name, context, status_code=status_code,
    )


def _error_page(request: Request, message: str, status_code: int):
    return _render(request, "error.html", status_code=status_code, error=message)


# ─── List ───────────────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse)
async def list_page(request: Request, api: ChecklistApi = Depends(get_checklist_api)):
    state = ListState.from_query(request.query_params)
    health = None
    try:
        health = await api.get_health()
    except ApiClientError as e:
        logger.warning(f"Health banner unavailable: {e.message}")

    try:
        page = await api.list(state.api_params())
    except ApiClientError as e:
        return _render(
            request, "list.html",
            state=state, page=None, error=e.message, health=health,
            sort_options=SORT_OPTIONS,
        )
    return _render(
        request, "list.html",
        state=state, page=page, error=None, health=health,
        sort_options=SORT_OPTIONS,
    )


# ─── Create ─────────────────────────────────────────────────────

@router.get("/create", response_class=HTMLResponse)
async def create_page(request: Request):
    return _render(request, "form.html", form=ChecklistForm(), checklist=None, error=None)


@router.post("/create", response_class=HTMLResponse)
async def create_submit(
    request: Request, api: ChecklistApi = Depends(get_checklist_api),
):
    form = ChecklistForm.from_form(await request.form())
    if not form.validate():
        return _render(
            request, "form.html", status.HTTP_400_BAD_REQUEST,
            form=form, checklist=None, error=None,
        )
    try:
        await api.create(form.payload())
    except ApiClientError as e:
        form.merge_api_errors(e.field_errors)
        return _render(
            request, "form.html", e.status or status.HTTP_502_BAD_GATEWAY,
            form=form, checklist=None, error=e.message,
        )
    return RedirectResponse("/ui/", status_code=status.HTTP_303_SEE_OTHER)


# ─── Edit ───────────────────────────────────────────────────────

@router.get("/edit/{checklist_id}", response_class=HTMLResponse)
async def edit_page(
    checklist_id: str,
    request: Request,
    api: ChecklistApi = Depends(get_checklist_api),
):
    try:
        checklist = await api.get_by_id(checklist_id)
    except ApiClientError as e:
        return _error_page(request, e.message, e.status or status.HTTP_502_BAD_GATEWAY)
    return _render(
        request, "form.html",
        form=ChecklistForm.from_checklist(checklist), checklist=checklist, error=None,
    )


@router.post("/edit/{checklist_id}", response_class=HTMLResponse)
async def edit_submit(
    checklist_id: str,
    request: Request,
    api: ChecklistApi = Depends(get_checklist_api),
):
    form = ChecklistForm.from_form(await request.form())
    editing = {"id": checklist_id}
    if not form.validate():
        return _render(
            request, "form.html", status.HTTP_400_BAD_REQUEST,
            form=form, checklist=editing, error=None,
        )
    try:
        await api.update(checklist_id, form.payload())
    except ApiClientError as e:
        form.merge_api_errors(e.field_errors)
        return _render(
            request, "form.html", e.status or status.HTTP_502_BAD_GATEWAY,
            form=form, checklist=editing, error=e.message,
        )
    return RedirectResponse(
        f"/ui/detail/{checklist_id}", status_code=status.HTTP_303_SEE_OTHER,
    )


# ─── Detail ─────────────────────────────────────────────────────

@router.get("/detail/{checklist_id}", response_class=HTMLResponse)
async def detail_page(
    checklist_id: str,
    request: Request,
    api: ChecklistApi = Depends(get_checklist_api),
):
    try:
        checklist = await api.get_by_id(checklist_id)
    except ApiClientError as e:
        return _error_page(request, e.message, e.status or status.HTTP_502_BAD_GATEWAY)

    stats = None
    try:
        stats = await api.get_customer_stats(checklist.customer_id)
    except ApiClientError as e:
        logger.warning(
            f"Statistics unavailable for customer: {e.message}",
            extra={"customer_id": checklist.customer_id},
        )
    return _render(request, "detail.html", checklist=checklist, stats=stats)


# ─── Delete ─────────────────────────────────────────────────────

@router.get("/delete/{checklist_id}", response_class=HTMLResponse)
async def delete_confirm_page(
    checklist_id: str,
    request: Request,
    api: ChecklistApi = Depends(get_checklist_api),
):
    try:
        checklist = await api.get_by_id(checklist_id)
    except ApiClientError as e:
        return _error_page(request, e.message, e.status or status.HTTP_502_BAD_GATEWAY)
    return _render(request, "confirm_delete.html", checklist=checklist, error=None)


@router.post("/delete/{checklist_id}", response_class=HTMLResponse)
async def delete_submit(
    checklist_id: str,
    request: Request,
    api: ChecklistApi = Depends(get_checklist_api),
):
    try:
        await api.delete(checklist_id)
    except ApiClientError as e:
        return _error_page(
            request, f"Failed to delete: {e.message}",
            e.status or status.HTTP_502_BAD_GATEWAY,
        )
    return RedirectResponse("/ui/", status_code=status.HTTP_303_SEE_OTHER)
