"""Log relay endpoint.

Forwards structured log lines to the evaluation service, fetching a token
from the configured token relay for every entry.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger

from shorturls.api import schemas
from shorturls.api.dependencies import get_evaluation_client
from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.services.exceptions import ExternalServiceError

router = APIRouter(tags=["relay"])


@router.post(
    "/log",
    response_model=schemas.LogRelayResponse,
    responses={500: {"description": "Log could not be forwarded"}}
)
async def relay_log(
    entry: schemas.LogEntryRequest,
    client: EvaluationServiceClient = Depends(get_evaluation_client),
):
    try:
        token = await client.fetch_relayed_token()
        result = await client.send_log(
            access_token=token,
            stack=entry.stack,
            level=entry.level,
            package=entry.package,
            message=entry.message,
        )
    except ExternalServiceError as e:
        logger.error("Error relaying log entry", error=str(e))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to send log data", "details": str(e)}
        )
    return schemas.LogRelayResponse(success=True, data=result)
