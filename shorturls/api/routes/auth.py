"""Access token endpoint backed by the evaluation service."""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from shorturls.api import schemas
from shorturls.api.dependencies import get_evaluation_client
from shorturls.clients.evaluation import EvaluationServiceClient
from shorturls.services.exceptions import AccessTokenError

router = APIRouter(tags=["auth"])


@router.get(
    "/accessToken",
    response_model=schemas.AccessTokenResponse,
    responses={
        502: {"model": schemas.ErrorResponse, "description": "Token exchange failed"}
    }
)
async def get_access_token(
    client: EvaluationServiceClient = Depends(get_evaluation_client),
):
    """Exchange the configured credentials for an evaluation service token."""
    try:
        token = await client.fetch_access_token()
    except AccessTokenError as e:
        logger.error("Failed to retrieve access token", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Failed to retrieve access token"
        )
    return schemas.AccessTokenResponse(access_token=token)
