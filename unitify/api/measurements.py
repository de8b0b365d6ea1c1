"""API endpoints for measurement evaluation and conversion."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from unitify.common.schemas import (
    BatchEvaluateRequest,
    BatchEvaluateResponse,
    BatchItem,
    ConvertRequest,
    ConvertResponse,
    EvaluateRequest,
    MeasurementResponse,
    StatisticsSchema,
    SupportedUnitsResponse,
)
from unitify.evaluation import ExpressionEvaluator
from unitify.measurement import Measurement, converter
from unitify.reporting import compute_statistics
from unitify.units import UnitifyError, UnitRegistry, get_registry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/measurements", tags=["measurements"])


def get_evaluator() -> ExpressionEvaluator:
    """Get expression evaluator instance."""
    return ExpressionEvaluator()


def to_response(measurement: Measurement) -> MeasurementResponse:
    base = measurement.to_base()
    return MeasurementResponse(
        magnitude=measurement.magnitude,
        unit=measurement.unit_name,
        kind=measurement.kind.value,
        base_magnitude=base.magnitude,
        base_unit=base.unit_name,
    )


def _error_detail(error: UnitifyError) -> dict:
    return {"error_type": type(error).__name__, "message": str(error)}


@router.post("/evaluate", response_model=MeasurementResponse)
def evaluate_expression(
    request: EvaluateRequest,
    evaluator: ExpressionEvaluator = Depends(get_evaluator)
) -> MeasurementResponse:
    """Evaluate a single measurement expression.

    Args:
        request: Expression such as "2 kg + 300 g"
        evaluator: ExpressionEvaluator instance

    Returns:
        Resulting measurement with its base-unit form
    """
    try:
        result = evaluator.evaluate_line(request.expression)
    except UnitifyError as e:
        logger.info(f"Rejected expression '{request.expression}': {e}")
        raise HTTPException(status_code=422, detail=_error_detail(e))

    return to_response(result)


@router.post("/evaluate/batch", response_model=BatchEvaluateResponse)
def evaluate_batch(
    request: BatchEvaluateRequest,
    evaluator: ExpressionEvaluator = Depends(get_evaluator)
) -> BatchEvaluateResponse:
    """Evaluate many expressions; failures are reported per expression.

    Args:
        request: List of expressions
        evaluator: ExpressionEvaluator instance

    Returns:
        Per-expression results and statistics of the successful magnitudes
    """
    items = []
    successes = []

    for index, expression in enumerate(request.expressions):
        try:
            result = evaluator.evaluate_line(expression)
        except UnitifyError as e:
            items.append(BatchItem(
                index=index,
                expression=expression,
                error=str(e),
                error_type=type(e).__name__,
            ))
            continue

        successes.append(result)
        items.append(BatchItem(index=index, expression=expression, result=to_response(result)))

    stats = StatisticsSchema()
    if successes:
        computed = compute_statistics(successes)
        stats = StatisticsSchema(
            count=computed.count,
            mean=computed.mean,
            mode=computed.mode,
            median=computed.median,
        )

    return BatchEvaluateResponse(
        total=len(items),
        evaluated=len(successes),
        failed=len(items) - len(successes),
        results=items,
        statistics=stats,
    )


@router.post("/convert", response_model=ConvertResponse)
def convert_measurement(
    request: ConvertRequest,
    registry: UnitRegistry = Depends(get_registry)
) -> ConvertResponse:
    """Convert a magnitude between two compatible units.

    Args:
        request: Magnitude and source / target units
        registry: UnitRegistry instance

    Returns:
        Converted magnitude and the factor used
    """
    try:
        from_unit = registry.resolve(request.from_unit)
        to_unit = registry.resolve(request.to_unit)
        converted = converter.convert(Measurement(request.magnitude, from_unit), to_unit)
        factor = converter.conversion_factor(from_unit, to_unit)
    except UnitifyError as e:
        raise HTTPException(status_code=422, detail=_error_detail(e))

    return ConvertResponse(
        magnitude=request.magnitude,
        from_unit=from_unit.name,
        converted_magnitude=converted.magnitude,
        to_unit=to_unit.name,
        conversion_factor=factor,
    )


@router.get("/units", response_model=SupportedUnitsResponse)
def get_supported_units(
    registry: UnitRegistry = Depends(get_registry)
) -> SupportedUnitsResponse:
    """List canonical unit names grouped by kind."""
    return SupportedUnitsResponse(units=registry.get_supported_units())
