"""Logfire setup.

Application code logs through logfire directly:

    logfire.info("Comment created", comment_id=str(comment.id))

    with logfire.span("ranking_service.thread", count=len(comments)):
        ...
"""

import logfire
from fastapi import FastAPI

from commentary.config import APP_VERSION, ObservabilitySettings, Settings


def should_send_to_logfire(observability: ObservabilitySettings) -> bool:
    """Decide whether telemetry leaves the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise telemetry is
    sent only when a token is configured.
    """
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once, before the app module is imported.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send_to_logfire = should_send_to_logfire(observability)

    logfire.configure(
        service_name="commentary",
        service_version=APP_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=send_to_logfire,
        console=logfire.ConsoleOptions(
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Tag request spans with the path and, for listings, the video ID."""
    result = {**attributes, "path": request.url.path}
    video_id = request.path_params.get("video_id")
    if video_id:
        result["video_id"] = video_id
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by `app`."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)
