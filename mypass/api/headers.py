"""
Alert Headers

Mutating endpoints tell the client what happened through two headers:

    X-mypassApp-alert:  mypassApp.folder.created
    X-mypassApp-params: 42

Rejected requests carry an error key instead:

    X-mypassApp-error:  error.idexists
    X-mypassApp-params: folder

The "mypassApp" prefix comes from settings.ALERT_APP_NAME.
"""

from mypass.config.settings import settings


def alert_header_name() -> str:
    return f"X-{settings.ALERT_APP_NAME}-alert"


def params_header_name() -> str:
    return f"X-{settings.ALERT_APP_NAME}-params"


def error_header_name() -> str:
    return f"X-{settings.ALERT_APP_NAME}-error"


def create_alert(message: str, param: str) -> dict[str, str]:
    """Headers carrying an alert message and its parameter."""
    return {
        alert_header_name(): message,
        params_header_name(): param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.ALERT_APP_NAME}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.ALERT_APP_NAME}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> dict[str, str]:
    return create_alert(f"{settings.ALERT_APP_NAME}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str) -> dict[str, str]:
    """Headers for a request rejected with a BadRequestAlertError."""
    return {
        error_header_name(): f"error.{error_key}",
        params_header_name(): entity_name,
    }
