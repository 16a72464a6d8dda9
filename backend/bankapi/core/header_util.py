"""Alert Headers — pure builders for the X-<app>-alert / -params / -error headers.

Invariants:
    - Header names are always "X-" + application name + suffix
    - Params are form-encoded (space as "+", header values stay latin-1 safe)
    - Translation-enabled messages are i18n keys ("<app>.<entity>.created"),
      otherwise a human-readable sentence

Design Decisions:
    - Plain functions returning dicts: routes merge them into Response.headers,
      error handlers pass them to JSONResponse(headers=...)
"""

from urllib.parse import quote_plus


def alert_header_names(application_name: str) -> list[str]:
    """All header names a browser client must be allowed to read (CORS expose)."""
    return [
        f"X-{application_name}-alert",
        f"X-{application_name}-error",
        f"X-{application_name}-params",
    ]


def create_alert(application_name: str, message: str, param: str) -> dict[str, str]:
    return {
        f"X-{application_name}-alert": message,
        f"X-{application_name}-params": quote_plus(param, safe="*"),
    }


def create_entity_creation_alert(
    application_name: str, translation_enabled: bool, entity_name: str, param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.created" if translation_enabled
        else f"A new {entity_name} is created with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_update_alert(
    application_name: str, translation_enabled: bool, entity_name: str, param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.updated" if translation_enabled
        else f"A {entity_name} is updated with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_entity_deletion_alert(
    application_name: str, translation_enabled: bool, entity_name: str, param: str,
) -> dict[str, str]:
    message = (
        f"{application_name}.{entity_name}.deleted" if translation_enabled
        else f"A {entity_name} is deleted with identifier {param}"
    )
    return create_alert(application_name, message, param)


def create_failure_alert(
    application_name: str,
    translation_enabled: bool,
    entity_name: str,
    error_key: str,
    default_message: str,
) -> dict[str, str]:
    """Failure alert for rejected requests. Params carry the entity name."""
    message = f"error.{error_key}" if translation_enabled else default_message
    return {
        f"X-{application_name}-error": message,
        f"X-{application_name}-params": quote_plus(entity_name, safe="*"),
    }
