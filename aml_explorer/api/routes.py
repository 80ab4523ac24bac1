"""API route definitions."""

import logging
import re
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.concurrency import run_in_threadpool

from aml_explorer.api.dependencies import (
    get_dataset_reader,
    get_feature_extractor,
    get_gateway_provider,
    get_graph_builder,
)
from aml_explorer.config import Settings, get_settings
from aml_explorer.constants import ADDRESS_CLASSES_FILE, TX_FEATURES_FILE
from aml_explorer.core.exceptions import (
    DecodeFailedError,
    FetchFailedError,
    GatewayUnavailableError,
    MalformedRecordError,
    MissingInputValueError,
    SourceNotFoundError,
)
from aml_explorer.core.explorer import GatewayProvider
from aml_explorer.datasets.reader import DatasetReader
from aml_explorer.models.api import GraphRequest, HealthResponse, RecordResponse
from aml_explorer.models.transaction import TransactionFeatures
from aml_explorer.services.features import TransactionFeatureExtractor
from aml_explorer.services.graph_builder import GraphBuilderService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])

TXID_PATTERN = r"^[0-9a-fA-F]{64}$"
FOLDER_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


def _validate_folder(folder: str, settings: Settings) -> None:
    """Reject folder names outside the allowed length or character set."""
    min_len = settings.folder_name_min_length
    max_len = settings.folder_name_max_length
    if not min_len <= len(folder) <= max_len:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Folder name must be between {min_len} and {max_len} characters",
        )
    # No path separators or traversal
    if not FOLDER_PATTERN.match(folder):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Invalid folder name",
        )


def _dataset_error(e: SourceNotFoundError | MalformedRecordError) -> HTTPException:
    if isinstance(e, SourceNotFoundError):
        logger.warning(f"Dataset file not found: {e.file_name}")
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Dataset file not found: {e.file_name}",
        )
    logger.warning(f"Malformed dataset file {e.file_name}: {e.reason}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=e.message,
    )


@router.get(
    "/transactions/{tx_id}/features",
    response_model=TransactionFeatures,
    summary="Transaction Features",
    description="Fetch a transaction from the block explorer and compute its features.",
)
async def transaction_features(
    tx_id: Annotated[str, Path(pattern=TXID_PATTERN, description="Transaction id")],
    extractor: Annotated[TransactionFeatureExtractor, Depends(get_feature_extractor)],
) -> TransactionFeatures:
    """Compute the feature vector of a transaction."""
    try:
        return await extractor.extract_features(tx_id)

    except GatewayUnavailableError as e:
        logger.error(f"Explorer gateway unavailable: {e.reason}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=e.message,
        )

    except (FetchFailedError, DecodeFailedError) as e:
        logger.warning(f"Explorer request failed for {tx_id}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=e.message,
        )

    except MissingInputValueError as e:
        logger.warning(f"Transaction {tx_id} has an input without value")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )


@router.post(
    "/graph",
    summary="Address Graph",
    description="Build the address-transaction graph of a dataset folder.",
)
async def build_graph(
    request: GraphRequest,
    builder: Annotated[GraphBuilderService, Depends(get_graph_builder)],
    settings: Annotated[Settings, Depends(get_settings)],
    output_format: Annotated[str, Query(alias="format", pattern="^(default|anychart)$")] = "default",
) -> dict[str, Any]:
    """Build the graph of a dataset folder."""
    _validate_folder(request.folder, settings)

    try:
        graph = await run_in_threadpool(builder.build_graph, request.folder)
    except (SourceNotFoundError, MalformedRecordError) as e:
        raise _dataset_error(e)

    logger.info(
        f"Graph built for {request.folder}: {len(graph.nodes)} nodes, {len(graph.edges)} edges"
    )
    if output_format == "anychart":
        return graph.to_anychart()
    return graph.model_dump(mode="json", by_alias=True)


async def _lookup(
    reader: DatasetReader, folder: str, file_name: str, key: str, kind: str
) -> RecordResponse:
    try:
        data = await run_in_threadpool(reader.find_record, folder, file_name, key)
    except (SourceNotFoundError, MalformedRecordError) as e:
        raise _dataset_error(e)

    if data is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{kind} not found: {key}",
        )
    return RecordResponse(folder=folder, file_name=file_name, key=key, data=data)


@router.get(
    "/dataset/transactions/{tx_id}",
    response_model=RecordResponse,
    summary="Dataset Transaction Record",
    description="Look up a transaction's feature row in a dataset folder.",
)
async def dataset_transaction(
    tx_id: str,
    reader: Annotated[DatasetReader, Depends(get_dataset_reader)],
    settings: Annotated[Settings, Depends(get_settings)],
    folder: str | None = None,
) -> RecordResponse:
    """Look up a transaction record."""
    folder = folder or settings.default_data_folder
    _validate_folder(folder, settings)
    return await _lookup(reader, folder, TX_FEATURES_FILE, tx_id, "Transaction")


@router.get(
    "/dataset/addresses/{address}",
    response_model=RecordResponse,
    summary="Dataset Address Record",
    description="Look up an address's feature row in a dataset folder.",
)
async def dataset_address(
    address: str,
    reader: Annotated[DatasetReader, Depends(get_dataset_reader)],
    settings: Annotated[Settings, Depends(get_settings)],
    folder: str | None = None,
) -> RecordResponse:
    """Look up an address record."""
    folder = folder or settings.default_data_folder
    _validate_folder(folder, settings)
    return await _lookup(reader, folder, ADDRESS_CLASSES_FILE, address, "Address")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Check API health and explorer gateway state.",
)
async def health_check(
    gateway_provider: Annotated[GatewayProvider, Depends(get_gateway_provider)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check API health."""
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        gateway_status="initialized" if gateway_provider.initialized else "idle",
    )
