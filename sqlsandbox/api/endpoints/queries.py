import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from sqlsandbox.core import schemas
from sqlsandbox.core.config import settings
from sqlsandbox.core.database import Dataset, get_dataset
from sqlsandbox.core.engine import pipeline
from sqlsandbox.core.exceptions import (
    QueryExecutionError,
    QueryValidationError,
    SafetyRejection,
)

router = APIRouter(prefix="/api", tags=["Queries"])

dataset_dep = Annotated[Dataset, Depends(get_dataset)]


@router.post("/execute-sql", response_model=schemas.QueryResult)
async def execute_sql(
    dataset: dataset_dep, payload: Optional[schemas.QueryRequest] = None
):
    """
    Run a read-only query against the sample dataset.
    """
    try:
        return pipeline.run_query(
            payload.query if payload else None,
            dataset,
            default_limit=settings.DEFAULT_ROW_LIMIT,
        )
    except QueryValidationError as error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    except SafetyRejection as error:
        logging.warning(f"Blocked query containing {', '.join(error.matched)}")
        detail = schemas.SafetyRejectionDetail(
            message=str(error), disallowed_keywords=error.disallowed_keywords
        )
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail.model_dump(by_alias=True),
        )
    except QueryExecutionError as error:
        logging.error(f"Error executing query: {error}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
