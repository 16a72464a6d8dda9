"""Bank Accounts — CRUD routes over the BankAccountRepository.

Invariants:
    - POST rejects bodies carrying any id, even "" (400 idexists); PUT/PATCH
      reject bodies without a non-empty one (400 idnull)
    - PATCH consumes application/merge-patch+json only (415 otherwise) and
      applies non-null fields onto the stored record
    - Every mutation response carries X-<app>-alert / X-<app>-params headers
    - DELETE is idempotent: 204 whether or not the id existed
    - Each handler makes exactly one repository call (PATCH: one lookup + one save)
    - balance is exact: parsed and rendered as Decimal, never float

Design Decisions:
    - Repository injected via Depends: routes never see SQLAlchemy, tests may
      swap the repository for a fake
    - Repository errors are not caught here: global handlers map them to 500
    - Handlers build DecimalJSONResponse themselves; response_model is kept
      for the OpenAPI schema only
"""

import logging

from fastapi import APIRouter, Body, Depends, Request, Response, status

from bankapi.api.decimal_json import DecimalJSONResponse, DecimalJSONRoute
from bankapi.config import Settings, get_settings
from bankapi.core.domain_types import (
    BANK_ACCOUNT_ENTITY_NAME, MERGE_PATCH_CONTENT_TYPE, BankAccountId, ErrorKey,
)
from bankapi.core.errors import (
    BadRequestAlertError, ResourceNotFoundError, UnsupportedMediaTypeError,
)
from bankapi.core.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from bankapi.core.merge_patch import merge_non_null_fields
from bankapi.core.repository_protocols import BankAccountRepository
from bankapi.infrastructure.bank_account_repository import get_bank_account_repository
from bankapi.schemas.bank_account import BankAccountPayload, BankAccountResponse

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/bank-accounts",
    tags=["bank-accounts"],
    route_class=DecimalJSONRoute,
    default_response_class=DecimalJSONResponse,
)


def require_merge_patch(request: Request) -> None:
    """Reject PATCH bodies not sent as application/merge-patch+json."""
    content_type = request.headers.get("content-type")
    media_type = (
        content_type.split(";", 1)[0].strip().lower() if content_type else None
    )
    if media_type != MERGE_PATCH_CONTENT_TYPE:
        raise UnsupportedMediaTypeError(content_type, MERGE_PATCH_CONTENT_TYPE)


def _require_id(body: BankAccountPayload) -> BankAccountId:
    if not body.id:
        raise BadRequestAlertError(
            "Invalid id", BANK_ACCOUNT_ENTITY_NAME, ErrorKey.ID_NULL.value,
        )
    return BankAccountId(body.id)


def _account_response(
    account: dict,
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> DecimalJSONResponse:
    return DecimalJSONResponse(
        BankAccountResponse.model_validate(account).model_dump(),
        status_code=status_code,
        headers=headers,
    )


@router.post(
    "", response_model=BankAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_bank_account(
    body: BankAccountPayload,
    repository: BankAccountRepository = Depends(get_bank_account_repository),
    settings: Settings = Depends(get_settings),
):
    """Create a new bank account. The repository assigns the id."""
    logger.debug(f"REST request to save BankAccount : {body}")
    if body.id is not None:
        raise BadRequestAlertError(
            f"A new {BANK_ACCOUNT_ENTITY_NAME} cannot already have an ID",
            BANK_ACCOUNT_ENTITY_NAME, ErrorKey.ID_EXISTS.value,
        )
    result = await repository.save(body.model_dump())
    return _account_response(
        result,
        status.HTTP_201_CREATED,
        {
            "Location": f"{router.prefix}/{result['id']}",
            **create_entity_creation_alert(
                settings.client_app_name, settings.header_translation_enabled,
                BANK_ACCOUNT_ENTITY_NAME, result["id"],
            ),
        },
    )


@router.put("", response_model=BankAccountResponse)
async def update_bank_account(
    body: BankAccountPayload,
    repository: BankAccountRepository = Depends(get_bank_account_repository),
    settings: Settings = Depends(get_settings),
):
    """Replace an existing bank account (every field overwritten)."""
    logger.debug(f"REST request to update BankAccount : {body}")
    account_id = _require_id(body)
    result = await repository.save(body.model_dump())
    return _account_response(result, headers=create_entity_update_alert(
        settings.client_app_name, settings.header_translation_enabled,
        BANK_ACCOUNT_ENTITY_NAME, account_id,
    ))


@router.patch(
    "", response_model=BankAccountResponse,
    dependencies=[Depends(require_merge_patch)],
)
async def partial_update_bank_account(
    body: BankAccountPayload = Body(media_type=MERGE_PATCH_CONTENT_TYPE),
    repository: BankAccountRepository = Depends(get_bank_account_repository),
    settings: Settings = Depends(get_settings),
):
    """Update the given (non-null) fields of an existing bank account."""
    logger.debug(f"REST request to update BankAccount partially : {body}")
    account_id = _require_id(body)
    existing = await repository.find_by_id(account_id)
    if existing is None:
        raise ResourceNotFoundError("BankAccount", account_id)
    result = await repository.save(
        merge_non_null_fields(existing, body.model_dump()),
    )
    return _account_response(result, headers=create_entity_update_alert(
        settings.client_app_name, settings.header_translation_enabled,
        BANK_ACCOUNT_ENTITY_NAME, account_id,
    ))


@router.get("", response_model=list[BankAccountResponse])
async def get_all_bank_accounts(
    repository: BankAccountRepository = Depends(get_bank_account_repository),
):
    """List every bank account (no pagination)."""
    logger.debug("REST request to get all BankAccounts")
    return DecimalJSONResponse([
        BankAccountResponse.model_validate(account).model_dump()
        for account in await repository.find_all()
    ])


@router.get("/{account_id}", response_model=BankAccountResponse)
async def get_bank_account(
    account_id: str,
    repository: BankAccountRepository = Depends(get_bank_account_repository),
):
    """Get one bank account or 404."""
    logger.debug(f"REST request to get BankAccount : {account_id}")
    account = await repository.find_by_id(BankAccountId(account_id))
    if account is None:
        raise ResourceNotFoundError("BankAccount", account_id)
    return _account_response(account)


@router.delete(
    "/{account_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_bank_account(
    account_id: str,
    repository: BankAccountRepository = Depends(get_bank_account_repository),
    settings: Settings = Depends(get_settings),
):
    """Delete a bank account. Unknown ids are not an error."""
    logger.debug(f"REST request to delete BankAccount : {account_id}")
    await repository.delete_by_id(BankAccountId(account_id))
    return Response(
        status_code=status.HTTP_204_NO_CONTENT,
        headers=create_entity_deletion_alert(
            settings.client_app_name, settings.header_translation_enabled,
            BANK_ACCOUNT_ENTITY_NAME, account_id,
        ),
    )
